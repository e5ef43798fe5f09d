"""Panelists: evaluators holding a random subset of a panel's traits."""

import random
from typing import TYPE_CHECKING, Any, List, Tuple

from consensus_panel.traits import NEUTRAL_SCORE, Trait
from consensus_panel.utils.logging import get_logger

if TYPE_CHECKING:
    from consensus_panel.panel.panel import Panel

logger = get_logger(__name__)


class Panelist:
    """
    A simulated evaluator.

    Each panelist is built from a random subset of the traits registered on
    its panel, so that no single trait can dominate every member's opinion.
    """

    def __init__(self, panel: "Panel", num_traits: int, rng: random.Random):
        """
        Initialize panelist by sampling traits from the panel's pool.

        Args:
            panel: Panel whose trait pool is sampled
            num_traits: Requested number of traits; at most pool size - 1 are taken
            rng: Random source used for sampling
        """
        self.panel = panel
        self._traits = self._sample_traits(panel.traits, num_traits, rng)

    @staticmethod
    def _sample_traits(
        pool: Tuple[Trait, ...], num_traits: int, rng: random.Random
    ) -> Tuple[Trait, ...]:
        """Draw traits without replacement, uniformly at each draw."""
        candidates: List[Trait] = list(pool)
        count = min(num_traits, len(candidates) - 1)

        chosen: List[Trait] = []
        for _ in range(count):
            index = rng.randrange(len(candidates))
            chosen.append(candidates.pop(index))

        return tuple(chosen)

    @property
    def traits(self) -> Tuple[Trait, ...]:
        return self._traits

    def opine(self, obj: Any) -> float:
        """
        Average likeability of obj across this panelist's traits.

        A panelist without traits has no preference and returns the neutral score.
        """
        if not self._traits:
            return NEUTRAL_SCORE
        return sum(trait.inspect(obj) for trait in self._traits) / len(self._traits)

    def verdict(self, obj: Any) -> bool:
        """Whether this panelist likes obj. A neutral opinion counts as dislike."""
        return self.opine(obj) > 0

    def __repr__(self) -> str:
        names = ", ".join(trait.name for trait in self._traits)
        return f"Panelist(traits=[{names}])"
