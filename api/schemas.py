"""Request bodies for the scoring endpoints."""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from models import (
    DEFAULT_HANDICAP_POLICY,
    DEFAULT_TILT_CONFIG,
    HandicapPolicy,
    Hole,
    MatchFormat,
    MatchPlayer,
    Tee,
    TiltCarryover,
    TiltConfig,
)


class CourseHandicapRequest(BaseModel):
    handicap_index: float
    slope_rating: float
    course_rating: Optional[float] = None
    par: Optional[int] = None


class CourseHandicapResponse(BaseModel):
    course_handicap: int


class StrokeAllocationRequest(BaseModel):
    handicap: int
    holes: List[Hole]


class StrokeAllocationResponse(BaseModel):
    handicap: int
    holes: List[int]


class MatchRequest(BaseModel):
    """A match with every gross score entered so far."""
    format: MatchFormat
    tee: Tee
    players: List[MatchPlayer]
    policy: HandicapPolicy = DEFAULT_HANDICAP_POLICY
    max_score_over_par: Optional[int] = Field(None, ge=0)
    points_for_win: float = 1
    points_for_half: float = 0.5


class SkinsRequest(BaseModel):
    """All players in a round, across matches."""
    format: MatchFormat
    tee: Tee
    players: List[MatchPlayer]
    policy: HandicapPolicy = DEFAULT_HANDICAP_POLICY
    entry_fee: Decimal = Field(..., ge=0)
    carryover: bool = True
    max_score_over_par: Optional[int] = Field(None, ge=0)


class TiltRequest(BaseModel):
    tee: Tee
    players: List[MatchPlayer]
    policy: HandicapPolicy = DEFAULT_HANDICAP_POLICY
    entry_fee: Decimal = Field(..., ge=0)
    config: TiltConfig = DEFAULT_TILT_CONFIG
    carryover: Dict[str, TiltCarryover] = Field(default_factory=dict)
    max_score_over_par: Optional[int] = Field(None, ge=0)


class TiltPayoutRequest(BaseModel):
    grand_totals: Dict[str, int]
    pot: Decimal = Field(..., ge=0)
