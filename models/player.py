from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel, FrozenGolfModel
from .hole_score import HoleScore


class MatchPlayer(BaseGolfModel):
    """A trip player's seat in one match, with the gross scores entered so far."""
    player_id: str
    side: int = Field(..., ge=1, le=2)
    handicap_index: float = Field(0.0, ge=-10, le=54)
    match_id: Optional[str] = None
    scores: List[HoleScore] = Field(default_factory=list)
    skins_opt_in: bool = False
    tilt_opt_in: bool = False

    def get_score(self, hole_number: int) -> Optional[HoleScore]:
        """Get the score entered for a hole, if any."""
        for score in self.scores:
            if score.hole_number == hole_number:
                return score
        return None


class PlayerHandicap(FrozenGolfModel):
    """Handicap figures derived for one player in one match."""
    player_id: str
    side: int
    course_handicap: int
    adjusted_handicap: int  # after allowance percentage and cap
    playing_handicap: int   # strokes actually received
