"""Password strength requirements.

A strong password is within the length bounds and contains at least one
uppercase ASCII letter, one lowercase ASCII letter, one ASCII digit and
one character from the special set.
"""

from __future__ import annotations

from dataclasses import dataclass

SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class PasswordStrengthError(ValueError):
    """Raised when a password does not meet the strength policy."""


@dataclass(frozen=True)
class PasswordPolicy:
    """Length bounds and the special-character set."""

    min_length: int = 8
    max_length: int = 100
    special_chars: str = SPECIAL_CHARS


DEFAULT_POLICY = PasswordPolicy()


def missing_character_classes(password: str, special_chars: str = SPECIAL_CHARS) -> list[str]:
    """Return descriptions of the character classes *password* lacks."""
    has_upper = any("A" <= ch <= "Z" for ch in password)
    has_lower = any("a" <= ch <= "z" for ch in password)
    has_digit = any("0" <= ch <= "9" for ch in password)
    has_special = any(ch in special_chars for ch in password)

    missing: list[str] = []
    if not has_upper:
        missing.append("uppercase letter")
    if not has_lower:
        missing.append("lowercase letter")
    if not has_digit:
        missing.append("digit")
    if not has_special:
        missing.append(f"special character ({special_chars})")
    return missing


def validate_password_strength(password: str, policy: PasswordPolicy = DEFAULT_POLICY) -> None:
    """Check *password* against *policy*.

    Raises:
        PasswordStrengthError: with a message naming the first length
            violation, or every missing character class.
    """
    if len(password) < policy.min_length:
        msg = f"password must be at least {policy.min_length} characters long"
        raise PasswordStrengthError(msg)
    if len(password) > policy.max_length:
        msg = f"password must not exceed {policy.max_length} characters"
        raise PasswordStrengthError(msg)

    missing = missing_character_classes(password, policy.special_chars)
    if missing:
        msg = f"password must contain at least one: {', '.join(missing)}"
        raise PasswordStrengthError(msg)


def is_strong_password(password: object, policy: PasswordPolicy = DEFAULT_POLICY) -> bool:
    """Boolean form of :func:`validate_password_strength`."""
    if not isinstance(password, str):
        return False
    try:
        validate_password_strength(password, policy)
    except PasswordStrengthError:
        return False
    return True
