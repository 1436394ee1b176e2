"""
CLI Adapters - Interactive Shell

This package contains the menu-driven terminal interface.
"""

from smartfx.adapters.cli.shell import ConverterShell

__all__ = ["ConverterShell"]
