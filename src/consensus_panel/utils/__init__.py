"""Utility modules for consensus-panel."""

from consensus_panel.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
