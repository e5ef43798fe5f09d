"""Panels, panelists and their results."""

from consensus_panel.panel.models import Deliberation, OpinionSpread, PanelistVote
from consensus_panel.panel.panel import MAJORITY_THRESHOLD, Panel
from consensus_panel.panel.panelist import Panelist

__all__ = [
    "Panel",
    "Panelist",
    "Deliberation",
    "PanelistVote",
    "OpinionSpread",
    "MAJORITY_THRESHOLD",
]
