"""
Input Validation Utilities - Currency Codes and Numeric Input

This module provides the validation and normalization helpers used at the
edges of the application: settings validation and the interactive shell.
The core assumes codes are already normalized and numbers are finite.

Files that USE this module:
- smartfx.config.settings (uses validate_currency_code in Settings field validators)
- smartfx.adapters.providers.static_table (normalize_code for table keys)
- smartfx.adapters.cli.shell (parse_number, normalize_code for user input)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Optional

_CODE_PATTERN = re.compile(r'^[A-Z0-9]{1,10}$')


def normalize_code(code: str) -> str:
    """
    Normalize a currency code for use as a table key.

    Args:
        code: Raw code as typed (e.g. " usd ")

    Returns:
        Stripped, uppercased code (e.g. "USD")
    """
    return (code or "").strip().upper()


def validate_currency_code(code: str) -> bool:
    """
    Validate currency code format.

    No ISO lookup is performed; any short alphanumeric code is accepted.

    Args:
        code: Code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(_CODE_PATTERN.match(normalize_code(code)))


def parse_number(value: str) -> Optional[float]:
    """
    Parse a user supplied number.

    Args:
        value: String value to parse (e.g. "100", " 0.95 ")

    Returns:
        The finite float value, or None if the text is not a finite number
    """
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_numeric_input(value: str, min_val: Optional[float] = None,
                           max_val: Optional[float] = None) -> bool:
    """
    Validate numeric input string.

    Args:
        value: String value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        True if valid, False otherwise
    """
    num_val = parse_number(value)
    if num_val is None:
        return False
    if min_val is not None and num_val < min_val:
        return False
    if max_val is not None and num_val > max_val:
        return False
    return True
