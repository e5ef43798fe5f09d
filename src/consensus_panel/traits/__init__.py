"""Trait definitions for panels."""

from consensus_panel.traits.trait import (
    MAX_SCORE,
    MIN_SCORE,
    NEUTRAL_SCORE,
    LikeabilityFunction,
    Trait,
    bound,
)

__all__ = [
    "LikeabilityFunction",
    "Trait",
    "bound",
    "MIN_SCORE",
    "MAX_SCORE",
    "NEUTRAL_SCORE",
]
