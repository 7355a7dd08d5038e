from decimal import Decimal
from pydantic import Field, model_validator
from typing import Dict, List, Optional

from .base import FrozenGolfModel


class TiltPointTable(FrozenGolfModel):
    """Base points by net score relative to par."""
    albatross: int = 16   # -3 or better
    eagle: int = 8
    birdie: int = 4
    par: int = 2
    bogey: int = 0
    double_plus: int = -4  # +2 or worse

    @model_validator(mode='after')
    def validate_ordering(self):
        """A better score can never be worth fewer points."""
        ordered = [self.albatross, self.eagle, self.birdie, self.par, self.bogey, self.double_plus]
        for better, worse in zip(ordered, ordered[1:]):
            if better < worse:
                raise ValueError(f"Point table must not increase for worse scores: {ordered}")
        return self


class TiltConfig(FrozenGolfModel):
    """Point table and multiplier rules.

    Holes worth at least ``streak_threshold`` base points extend the streak by
    one, holes worth at least ``double_streak_threshold`` by two; any other
    hole breaks it. The multiplier for the next hole is
    ``1 + streak * multiplier_step``, capped at ``max_multiplier`` when set.
    """
    points: TiltPointTable = Field(default_factory=TiltPointTable)
    streak_threshold: int = 4
    double_streak_threshold: Optional[int] = 8
    multiplier_step: int = Field(1, ge=1)
    max_multiplier: Optional[int] = Field(None, ge=1)
    starting_multiplier: int = Field(1, ge=1)
    starting_streak: int = Field(0, ge=0)

    @model_validator(mode='after')
    def validate_thresholds(self):
        if self.double_streak_threshold is not None and self.double_streak_threshold < self.streak_threshold:
            raise ValueError("double_streak_threshold must not be below streak_threshold")
        if self.max_multiplier is not None and self.starting_multiplier > self.max_multiplier:
            raise ValueError("starting_multiplier exceeds max_multiplier")
        return self


DEFAULT_TILT_CONFIG = TiltConfig()


class TiltCarryover(FrozenGolfModel):
    """Multiplier state a player takes into the next round."""
    multiplier: int = Field(1, ge=1)
    streak: int = Field(0, ge=0)


class TiltHoleScore(FrozenGolfModel):
    hole_number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=5)
    scores: Dict[str, int] = Field(default_factory=dict)  # player -> net score


class TiltPlayerHole(FrozenGolfModel):
    hole_number: int
    net_vs_par: int
    base_points: int
    multiplier: int
    points: int  # base_points * multiplier
    running_total: int


class TiltPlayerResult(FrozenGolfModel):
    player_id: str
    total_points: int = 0
    holes: List[TiltPlayerHole] = Field(default_factory=list)
    final_multiplier: int = 1
    final_streak: int = 0


class TiltResult(FrozenGolfModel):
    players: List[TiltPlayerResult] = Field(default_factory=list)
    total_pot: Decimal = Decimal("0.00")
    entry_fee: Decimal = Decimal("0.00")
    player_count: int = 0


class RoundTilt(FrozenGolfModel):
    tilt: TiltResult
    player_count: int = 0
    carryover: Dict[str, TiltCarryover] = Field(default_factory=dict)
