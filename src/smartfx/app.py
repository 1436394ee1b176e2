"""
Application Entry Point - Wiring and Startup

This module serves as the composition root for SmartFX. It builds the rate
provider once, hands the same instance to the converter and the shell, and
starts the menu loop. There is no global provider.

Files that USE this module:
- python -m smartfx (module entry point)
- smartfx console script (pyproject entry point)

Files that this module USES:
- smartfx.shared.logging_conf (setup_logging for logging configuration)
- smartfx.config (settings for configuration management)
- smartfx.adapters.providers.static_table (StaticTableProvider)
- smartfx.application.converter (CurrencyConverter)
- smartfx.adapters.cli.shell (ConverterShell menu loop)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import Optional, TextIO  # Type hints for optional input streams

from rich.console import Console  # Terminal output for the shell

from smartfx.shared.logging_conf import setup_logging  # Configure logging with file rotation
from smartfx.config.settings import Settings  # Settings model
from smartfx.adapters.formatting.catalog import CurrencyCatalog  # Display metadata
from smartfx.adapters.providers.static_table import StaticTableProvider  # In-memory rate table
from smartfx.application.converter import CurrencyConverter  # Conversion use-case
from smartfx.adapters.cli.shell import ConverterShell  # Interactive menu loop
from smartfx.domain.errors import SmartFXError  # Startup failures from the provider

logger = logging.getLogger(__name__)


def build_shell(
    config: Settings,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
) -> ConverterShell:
    """
    Wire provider, converter, catalog and shell from settings.

    Args:
        config: Loaded settings
        console: Optional rich Console (defaults to stdout)
        stream: Optional input stream (defaults to stdin)

    Returns:
        Ready-to-run ConverterShell

    Raises:
        UnsupportedCurrencyError: If the configured base has no seed rate
    """
    provider = StaticTableProvider(base_currency=config.base_currency)
    converter = CurrencyConverter(provider)
    return ConverterShell(
        provider=provider,
        converter=converter,
        catalog=CurrencyCatalog(),
        console=console,
        stream=stream,
        decimals=config.display_decimals,
    )


def main() -> None:
    """
    Initialize and start the interactive converter.

    This function:
    1. Loads settings and sets up logging
    2. Builds the rate provider, converter and shell
    3. Runs the menu loop until the user exits
    """
    from smartfx.config import settings

    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    try:
        shell = build_shell(settings)
    except SmartFXError as e:
        logger.error("Startup failed: %s", e)
        sys.exit(1)

    logger.info("Starting SmartFX with base currency %s", settings.base_currency)
    shell.run()


if __name__ == "__main__":
    main()
