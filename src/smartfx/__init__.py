"""
SmartFX - Interactive Currency Converter

A terminal currency converter backed by an in-memory rate table quoted
against one base currency, with cross rates triangulated through the base
and per-pair custom rate overrides.
"""

__version__ = "1.0.0"
