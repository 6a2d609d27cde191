"""Random password generation.

Passwords are drawn character by character from a pool built from the
enabled character classes. Each position is an independent uniform draw,
so there is no guarantee that every enabled class shows up.

Usage:
    >>> length = validate_password_length("20")
    >>> password = generate_password(length, use_numbers=True, use_special_chars=False)
    >>> len(password)
    20
"""

from __future__ import annotations

import secrets
import string

from devcmd.core.errors import PasswordLengthError

MIN_PASSWORD_LENGTH = 5
MAX_PASSWORD_LENGTH = 64

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


def build_character_pool(use_numbers: bool, use_special_chars: bool) -> str:
    """Return the characters eligible for selection.

    Letters are always included; digits and special characters are
    appended when enabled.
    """
    pool = string.ascii_lowercase + string.ascii_uppercase
    if use_numbers:
        pool += string.digits
    if use_special_chars:
        pool += SPECIAL_CHARACTERS
    return pool


def generate_password(
    length: int,
    use_numbers: bool = True,
    use_special_chars: bool = True,
) -> str:
    """Generate a random password of exactly ``length`` characters.

    Args:
        length: Number of characters (must be >= 1)
        use_numbers: Include digits in the pool
        use_special_chars: Include SPECIAL_CHARACTERS in the pool

    Returns:
        The generated password

    Raises:
        ValueError: If length is less than 1
    """
    if length < 1:
        raise ValueError(f"Password length must be positive, got {length}")

    pool = build_character_pool(use_numbers, use_special_chars)
    return "".join(secrets.choice(pool) for _ in range(length))


def validate_password_length(raw: str | int) -> int:
    """Parse and range-check a user supplied password length.

    Raises:
        PasswordLengthError: If the value is not an integer or is outside
            MIN_PASSWORD_LENGTH..MAX_PASSWORD_LENGTH
    """
    if isinstance(raw, bool):
        raise PasswordLengthError("Password length must be a number")
    if isinstance(raw, int):
        length = raw
    else:
        try:
            length = int(str(raw).strip(), 10)
        except ValueError:
            raise PasswordLengthError("Password length must be a number") from None

    if length < MIN_PASSWORD_LENGTH:
        raise PasswordLengthError(
            f"Password length must be greater than {MIN_PASSWORD_LENGTH - 1}"
        )
    if length > MAX_PASSWORD_LENGTH:
        raise PasswordLengthError(
            f"Password length must be less than {MAX_PASSWORD_LENGTH + 1}"
        )
    return length
