"""
consensus-panel - Simulate collective opinions from randomly composed panels.

This package provides tools to:
- Register likeability functions as traits on a panel
- Recruit panelists holding random, duplicate-free subsets of those traits
- Aggregate panelist opinions into a collective score or majority verdict
"""

__version__ = "0.1.0"

from consensus_panel.config import Settings, get_settings
from consensus_panel.errors import EmptyTraitPoolError, InvalidConfigurationError, PanelError
from consensus_panel.panel import Deliberation, Panel, Panelist
from consensus_panel.traits import LikeabilityFunction, Trait

__all__ = [
    "Panel",
    "Panelist",
    "Trait",
    "LikeabilityFunction",
    "Deliberation",
    "PanelError",
    "InvalidConfigurationError",
    "EmptyTraitPoolError",
    "Settings",
    "get_settings",
    "__version__",
]
