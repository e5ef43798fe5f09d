"""
Panels: groups of panelists that reach a collective decision.

A panel recruits panelists who each prefer a randomly assigned subset of
the registered traits. With enough panelists and enough traits, the
panel's opinion approximates what a population with those preferences
would think of an object.

Example:
    jury = Panel(13, 5)
    jury.add_trait(prefer_colors)
    jury.add_trait(prefer_monochrome)
    jury.add_trait(prefer_curved_lines)
    jury.add_trait(prefer_straight_lines)
    likeability = jury.opine(painting)
    liked = jury.verdict(painting)
"""

import random
from threading import RLock
from typing import Any, List, Optional, Tuple

from consensus_panel.config import Settings, get_settings
from consensus_panel.errors import EmptyTraitPoolError, InvalidConfigurationError
from consensus_panel.panel.models import Deliberation, PanelistVote
from consensus_panel.panel.panelist import Panelist
from consensus_panel.traits import LikeabilityFunction, Trait
from consensus_panel.utils.logging import get_logger

logger = get_logger(__name__)

# Share of positive votes a verdict must exceed
MAJORITY_THRESHOLD = 0.50


class Panel:
    """Owns a trait pool and recruits a fresh roster for every evaluation."""

    def __init__(
        self,
        panelist_count: int,
        traits_per_panelist: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize panel.

        Args:
            panelist_count: Number of panelists recruited per evaluation
            traits_per_panelist: Traits each panelist samples from the pool
            rng: Random source shared by all recruitments
            seed: Seed for a new random source (ignored if rng is given)
        """
        if panelist_count < 1:
            raise InvalidConfigurationError(
                f"panelist_count must be a positive integer, got {panelist_count}"
            )
        if traits_per_panelist < 0:
            raise InvalidConfigurationError(
                f"traits_per_panelist must be non-negative, got {traits_per_panelist}"
            )

        self._panelist_count = panelist_count
        self._traits_per_panelist = traits_per_panelist
        self._rng = rng if rng is not None else random.Random(seed)
        self._traits: List[Trait] = []
        self._panelists: Tuple[Panelist, ...] = ()
        # Reentrant so a trait may consult the panel it belongs to
        self._lock = RLock()
        self._warned_pool_size: Optional[int] = None

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, rng: Optional[random.Random] = None
    ) -> "Panel":
        """Create a panel sized by configuration."""
        settings = settings or get_settings()
        return cls(
            settings.panelist_count,
            settings.traits_per_panelist,
            rng=rng,
            seed=settings.seed,
        )

    @property
    def panelist_count(self) -> int:
        return self._panelist_count

    @property
    def traits_per_panelist(self) -> int:
        return self._traits_per_panelist

    @property
    def traits(self) -> Tuple[Trait, ...]:
        """Registered traits."""
        return tuple(self._traits)

    @property
    def panelists(self) -> Tuple[Panelist, ...]:
        """Roster recruited by the most recent evaluation."""
        return self._panelists

    def __len__(self) -> int:
        return len(self._traits)

    def add_trait(self, func: LikeabilityFunction, name: Optional[str] = None) -> Trait:
        """
        Register a trait that panelists may prefer.

        The same function may be added more than once; each registration is
        an independent trait.

        Args:
            func: Function scoring an object from -100 to 100
            name: Optional display name

        Returns:
            The new Trait
        """
        trait = Trait(func, name=name)
        self._traits.append(trait)
        logger.debug(f"Added trait {trait.name} (pool size {len(self._traits)})")
        return trait

    def recruit_panelists(self) -> Tuple[Panelist, ...]:
        """Build a new roster; nothing is reused from earlier rosters."""
        pool_size = len(self._traits)
        starved = pool_size <= 1 or self._traits_per_panelist == 0
        if starved and pool_size != self._warned_pool_size:
            logger.warning(
                f"Trait pool has {pool_size} trait(s) and panelists take "
                f"{self._traits_per_panelist}; panelists will hold no traits"
            )
            self._warned_pool_size = pool_size

        roster = tuple(
            Panelist(self, self._traits_per_panelist, self._rng)
            for _ in range(self._panelist_count)
        )
        self._panelists = roster
        logger.debug(
            f"Recruited {len(roster)} panelists with up to "
            f"{self._traits_per_panelist} traits each"
        )
        return roster

    def opine(self, obj: Any) -> float:
        """
        How much the panel likes obj, from -100 to 100.

        Every panelist shares their view, so the result is the average of
        the panelists' own averages.

        Traits may call back into this panel; a nested call recruits its
        own roster.
        """
        self._require_traits()
        with self._lock:
            roster = self.recruit_panelists()
            opinion = sum(panelist.opine(obj) for panelist in roster) / len(roster)

        logger.debug(f"Panel opinion: {opinion:.2f}")
        return opinion

    def verdict(self, obj: Any) -> bool:
        """Whether a strict majority of a fresh roster likes obj."""
        self._require_traits()
        with self._lock:
            roster = self.recruit_panelists()
            positive_votes = sum(1 for panelist in roster if panelist.verdict(obj))

        liked = positive_votes / len(roster) > MAJORITY_THRESHOLD
        logger.debug(f"Panel verdict: {positive_votes}/{len(roster)} positive -> {liked}")
        return liked

    def deliberate(self, obj: Any) -> Deliberation:
        """
        Opinion and verdict of a single roster, with every panelist's vote.

        Unlike calling opine() then verdict(), both results come from the
        same recruited panelists.
        """
        self._require_traits()
        with self._lock:
            roster = self.recruit_panelists()
            votes = []
            for panelist in roster:
                opinion = panelist.opine(obj)
                votes.append(
                    PanelistVote(
                        traits=[trait.name for trait in panelist.traits],
                        opinion=opinion,
                        liked=opinion > 0,
                    )
                )

        positive_votes = sum(1 for vote in votes if vote.liked)
        return Deliberation(
            votes=votes,
            opinion=sum(vote.opinion for vote in votes) / len(votes),
            positive_votes=positive_votes,
            verdict=positive_votes / len(votes) > MAJORITY_THRESHOLD,
        )

    def _require_traits(self) -> None:
        if not self._traits:
            raise EmptyTraitPoolError()

    def __repr__(self) -> str:
        return (
            f"Panel(panelist_count={self._panelist_count}, "
            f"traits_per_panelist={self._traits_per_panelist}, traits={len(self._traits)})"
        )
