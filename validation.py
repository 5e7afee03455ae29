"""Input validation for values typed in by the user.

Every function here is stateless. Amount parsers raise ValidationError so the
calling command can report the problem; the account engine never sees text.
"""

import math
import re
from typing import List

from errors import ValidationError

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 20

_USERNAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*$")
_USERNAME_CHARS_PATTERN = re.compile(r"^[a-zA-Z0-9_]*$")


def _parse_number(text: str, label: str) -> float:
    value_str = str(text).strip().lstrip("$").replace(",", "")
    if not value_str:
        raise ValidationError(f"{label} cannot be empty")

    try:
        value = float(value_str)
    except ValueError:
        raise ValidationError(f"Invalid {label.lower()}: '{text}' is not a number")

    if math.isnan(value) or math.isinf(value):
        raise ValidationError(f"Invalid {label.lower()}: '{text}'")
    return value


def parse_amount(text: str) -> float:
    """Parse a money amount entered by the user.

    Accepts an optional leading "$" and thousands separators.

    Args:
        text: Raw user input, e.g. "75.50" or "$1,200".

    Returns:
        The amount as a float.

    Raises:
        ValidationError: If the input is not a finite number greater than zero.
    """
    amount = _parse_number(text, "Amount")
    if amount <= 0:
        raise ValidationError("Amount must be positive")
    return amount


def parse_limit(text: str) -> float:
    """Parse a limit or rate value. Zero is allowed, negatives are not.

    Raises:
        ValidationError: If the input is not a finite, non-negative number.
    """
    value = _parse_number(text, "Value")
    if value < 0:
        raise ValidationError("Value cannot be negative")
    return value


def is_valid_account_name(name: str) -> bool:
    """Account names end up in comma-separated files and history file names."""
    if name is None or not name.strip():
        return False
    return not any(ch in name for ch in (",", "\n", "\r", "/", "\\", "\x00"))


def is_valid_username(username: str) -> bool:
    if username is None:
        return False
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return False
    return bool(_USERNAME_PATTERN.match(username))


def username_errors(username: str) -> List[str]:
    """List every rule the username breaks (empty list when valid)."""
    if not username:
        return ["Username cannot be empty"]

    errors = []
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        errors.append(
            f"Username must be between {USERNAME_MIN_LENGTH} and "
            f"{USERNAME_MAX_LENGTH} characters long"
        )
    if not username[0].isalpha():
        errors.append("Username must start with a letter")
    if not _USERNAME_CHARS_PATTERN.match(username):
        errors.append("Username can only contain letters, numbers, and underscores")
    return errors
