"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rate sources)
- CLI (interactive shell)
- Formatting (output)
"""

__all__ = []
