"""
Example traits for judging whether a painting is pretty.

Some panelists prefer vibrant color, others black and white; some prefer
curved lines, others straight ones. None of these is right, which is the
point of asking a panel.
"""

import random
from typing import Optional

from pydantic import BaseModel, Field

from consensus_panel.panel import Panel


class Painting(BaseModel):
    """A painting reduced to the features the example traits look at."""

    title: str = "Untitled"
    colorfulness: float = Field(ge=0.0, le=1.0, description="0 = monochrome, 1 = vivid")
    curvature: float = Field(ge=0.0, le=1.0, description="0 = straight lines, 1 = curves")


def prefer_colors(painting: Painting) -> float:
    """Reward vibrant colors and penalize greys."""
    return (painting.colorfulness - 0.5) * 200


def prefer_monochrome(painting: Painting) -> float:
    """Reward black and white, penalize color."""
    return (0.5 - painting.colorfulness) * 200


def prefer_curved_lines(painting: Painting) -> float:
    """Reward curves over straight lines."""
    return (painting.curvature - 0.5) * 200


def prefer_straight_lines(painting: Painting) -> float:
    """Reward straight lines over curves."""
    return (0.5 - painting.curvature) * 200


def prefer_bold_contrast(painting: Painting) -> float:
    """Reward paintings that commit to an extreme on either axis."""
    # Deliberately overshoots; the trait clamps it.
    return (abs(painting.colorfulness - 0.5) + abs(painting.curvature - 0.5)) * 300 - 75


PAINTING_TRAITS = [
    prefer_colors,
    prefer_monochrome,
    prefer_curved_lines,
    prefer_straight_lines,
    prefer_bold_contrast,
]


def painting_panel(
    panelist_count: int = 13,
    traits_per_panelist: int = 3,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Panel:
    """Create a panel preloaded with the painting traits."""
    panel = Panel(panelist_count, traits_per_panelist, rng=rng, seed=seed)
    for func in PAINTING_TRAITS:
        panel.add_trait(func)
    return panel
