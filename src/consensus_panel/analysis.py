"""Statistics over repeated panel evaluations."""

from typing import Any

import numpy as np

from consensus_panel.errors import InvalidConfigurationError
from consensus_panel.panel import OpinionSpread, Panel
from consensus_panel.utils.logging import get_logger

logger = get_logger(__name__)


def opinion_spread(panel: Panel, obj: Any, rounds: int = 100) -> OpinionSpread:
    """
    Evaluate obj over independently recruited rounds and summarise the opinions.

    Each round recruits a fresh roster, so the spread shows how much the
    panel's opinion depends on which traits its members happened to draw.
    Larger panels should give a smaller spread.

    Args:
        panel: Panel to evaluate with
        obj: Object passed to every trait
        rounds: Number of opine() calls

    Returns:
        OpinionSpread over all rounds
    """
    if rounds < 1:
        raise InvalidConfigurationError(f"rounds must be a positive integer, got {rounds}")

    opinions = np.array([panel.opine(obj) for _ in range(rounds)], dtype=float)
    spread = OpinionSpread(
        panelist_count=panel.panelist_count,
        rounds=rounds,
        mean=float(opinions.mean()),
        std=float(opinions.std()),
        minimum=float(opinions.min()),
        maximum=float(opinions.max()),
    )
    logger.debug(
        f"{rounds} rounds with {panel.panelist_count} panelists: "
        f"mean={spread.mean:.2f} std={spread.std:.2f}"
    )
    return spread
