"""Pydantic models for panel results."""

from typing import List

from pydantic import BaseModel, Field


class PanelistVote(BaseModel):
    """One panelist's contribution to a deliberation."""

    traits: List[str] = Field(default_factory=list, description="Names of the panelist's traits")
    opinion: float = Field(ge=-100.0, le=100.0, description="Mean of the panelist's trait scores")
    liked: bool


class Deliberation(BaseModel):
    """Opinion and verdict of a single recruited roster."""

    votes: List[PanelistVote] = Field(default_factory=list)
    opinion: float = Field(ge=-100.0, le=100.0, description="Mean of panelist opinions")
    positive_votes: int = Field(ge=0)
    verdict: bool

    @property
    def panelist_count(self) -> int:
        return len(self.votes)

    @property
    def vote_share(self) -> float:
        """Fraction of panelists that liked the object."""
        if not self.votes:
            return 0.0
        return self.positive_votes / len(self.votes)


class OpinionSpread(BaseModel):
    """Summary of panel opinions over repeated, independently recruited rounds."""

    panelist_count: int
    rounds: int
    mean: float
    std: float = Field(ge=0.0)
    minimum: float
    maximum: float
