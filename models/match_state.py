from enum import Enum
from pydantic import Field
from typing import Dict, List, Optional

from .base import FrozenGolfModel
from .handicap_policy import MatchFormat
from .player import PlayerHandicap


class HoleResult(str, Enum):
    """Outcome of one hole between two sides."""
    SIDE1 = "SIDE1"
    SIDE2 = "SIDE2"
    HALVED = "HALVED"


class MatchStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    DORMIE = "DORMIE"            # still in progress; trailing side must win out to halve
    COMPLETE = "COMPLETE"        # closed out before the last hole
    COMPLETE_18 = "COMPLETE_18"  # decided on the last hole


class MatchState(FrozenGolfModel):
    """Derived state of a match, rebuilt from the full hole history.

    For stroke play ``side1_lead`` and ``leading_side`` stay ``None`` and the
    side totals are filled in once every hole has been played.
    """
    status: MatchStatus = MatchStatus.IN_PROGRESS
    holes_played: int = Field(0, ge=0, le=18)
    holes_remaining: int = Field(18, ge=0, le=18)
    side1_lead: Optional[int] = 0  # positive = side 1 up
    leading_side: Optional[int] = None
    is_complete: bool = False
    is_dormie: bool = False
    display_text: str = "AS"
    result_text: Optional[str] = None
    side1_points: float = 0
    side2_points: float = 0
    side1_total: Optional[int] = None
    side2_total: Optional[int] = None


class MatchResult(FrozenGolfModel):
    """Everything computed for one match from its gross scores."""
    format: MatchFormat
    state: MatchState
    handicaps: List[PlayerHandicap] = Field(default_factory=list)
    hole_results: List[Optional[HoleResult]] = Field(default_factory=list)
    net_scores: Dict[str, Dict[int, int]] = Field(default_factory=dict)  # player -> hole -> net
