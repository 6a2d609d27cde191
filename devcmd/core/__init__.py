"""Command cores (password generation, playground scaffolding)."""

from devcmd.core.password_generator import generate_password, validate_password_length

__all__ = ["generate_password", "validate_password_length"]
