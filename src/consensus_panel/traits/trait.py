"""Traits: clamped likeability functions."""

import math
from typing import Any, Callable, Optional

from consensus_panel.utils.logging import get_logger

logger = get_logger(__name__)

# Functions that decide how much an object is liked take the object to look
# at and return a number, where -100 is extreme dislike and 100 is extreme
# like. Values outside that range are clamped by the Trait wrapping them.
LikeabilityFunction = Callable[[Any], float]

MIN_SCORE = -100.0
MAX_SCORE = 100.0
NEUTRAL_SCORE = 0.0


def bound(raw: float) -> float:
    """
    Clamp a raw score into [MIN_SCORE, MAX_SCORE].

    Comparison happens before conversion, so integers too large for a float
    clamp instead of overflowing. NaN has no position on the scale and is
    treated as neutral.
    """
    if raw < MIN_SCORE:
        return MIN_SCORE
    if raw > MAX_SCORE:
        return MAX_SCORE
    score = float(raw)
    if math.isnan(score):
        return NEUTRAL_SCORE
    return score


class Trait:
    """A single preference held by panelists."""

    __slots__ = ("_func", "_name")

    def __init__(self, func: LikeabilityFunction, name: Optional[str] = None):
        """
        Initialize trait.

        Args:
            func: Likeability function to run on inspected objects
            name: Display name (defaults to the function's __name__)
        """
        if not callable(func):
            raise TypeError(f"Trait needs a callable, got {type(func).__name__}")
        self._func = func
        self._name = name or getattr(func, "__name__", repr(func))

    @property
    def name(self) -> str:
        return self._name

    @property
    def func(self) -> LikeabilityFunction:
        return self._func

    def inspect(self, obj: Any) -> float:
        """Score obj with the wrapped function, clamped to [-100, 100]."""
        raw = self._func(obj)
        score = bound(raw)
        if score != raw:
            logger.debug(f"Trait {self._name} score {raw} bounded to {score}")
        return score

    def __repr__(self) -> str:
        return f"Trait(name={self._name!r})"
