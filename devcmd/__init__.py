"""
devcmd

Small developer commands: a password generator and an Xcode Swift
playground scaffolder.
"""

__version__ = "0.1.0"

from devcmd.core.password_generator import generate_password
from devcmd.core.playground import create_playground

__all__ = [
    "generate_password",
    "create_playground",
]
