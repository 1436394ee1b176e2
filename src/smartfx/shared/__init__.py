"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from smartfx.shared.validators import (
    normalize_code,
    parse_number,
    validate_currency_code,
    validate_numeric_input,
)
from smartfx.shared.logging_conf import setup_logging

__all__ = [
    "normalize_code",
    "parse_number",
    "validate_currency_code",
    "validate_numeric_input",
    "setup_logging",
]
