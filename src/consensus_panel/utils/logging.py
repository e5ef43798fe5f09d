"""Logging configuration for consensus-panel."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Global console for rich output
console = Console()

PACKAGE_LOGGER = "consensus_panel"

# Logger cache
_loggers: dict[str, logging.Logger] = {}


def setup_logging(level: Optional[str] = None) -> None:
    """
    Set up logging configuration with rich formatting.

    The package logger gets the level directly, so panel logging follows
    configuration even when the host application already configured the
    root logger and basicConfig() does nothing.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured log_level.
    """
    if level is None:
        from consensus_panel.config import get_settings

        level = get_settings().log_level

    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
            )
        ],
    )
    get_logger(PACKAGE_LOGGER).setLevel(log_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name. If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        name = PACKAGE_LOGGER

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]
