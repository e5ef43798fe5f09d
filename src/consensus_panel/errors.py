"""Exceptions raised by panels."""


class PanelError(Exception):
    """Base class for panel errors."""


class InvalidConfigurationError(PanelError, ValueError):
    """A panel was sized with values it cannot work with."""


class EmptyTraitPoolError(PanelError):
    """An evaluation was requested before any trait was registered."""

    def __init__(self, message: str = "Panel has no traits registered; call add_trait() first"):
        super().__init__(message)
