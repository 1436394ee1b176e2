"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses providers through their interface.
"""

from smartfx.application.converter import CurrencyConverter

__all__ = [
    "CurrencyConverter",
]
