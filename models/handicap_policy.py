from enum import Enum
from pydantic import Field
from typing import Dict, Optional

from .base import FrozenGolfModel

DEFAULT_SKINS_MAX_HANDICAP = 24


class MatchFormat(str, Enum):
    """Round formats a match can be played in."""
    FOURBALL = "FOURBALL"                    # 2v2, own ball, best net counts
    FOURSOMES = "FOURSOMES"                  # 2v2 alternate shot, one ball
    MODIFIED_ALT_SHOT = "MODIFIED_ALT_SHOT"  # both drive, pick one, alternate
    SCRAMBLE = "SCRAMBLE"                    # team plays best shot every time
    SHAMBLE = "SHAMBLE"                      # best drive, then own ball
    SINGLES = "SINGLES"                      # 1v1 match play
    STROKEPLAY = "STROKEPLAY"                # total net strokes


TEAM_FORMATS = frozenset({
    MatchFormat.FOURSOMES,
    MatchFormat.MODIFIED_ALT_SHOT,
    MatchFormat.SCRAMBLE,
})


class TeamCombo(FrozenGolfModel):
    """Percentages applied to the low and high handicap of a two-player side."""
    low_pct: float = Field(..., ge=0, le=100)
    high_pct: float = Field(..., ge=0, le=100)


class HandicapPolicy(FrozenGolfModel):
    """Trip-wide rules turning handicap indexes into strokes received.

    ``low_pct + high_pct`` is not required to be 100: foursomes conventionally
    plays 60/40 while a scramble plays far less (35/15).
    """
    percentage: float = Field(100, ge=0, le=100)
    off_the_low: bool = True
    max_handicap: Optional[int] = Field(None, ge=0, le=54)
    use_unified_formula: bool = False
    team_combos: Dict[MatchFormat, TeamCombo] = Field(default_factory=dict)
    skins_team_combos: Dict[MatchFormat, TeamCombo] = Field(default_factory=dict)
    skins_percentage: float = Field(80, ge=0, le=100)

    @property
    def skins_max_handicap(self) -> int:
        if self.max_handicap is not None:
            return self.max_handicap
        return DEFAULT_SKINS_MAX_HANDICAP

    def team_combo(self, format: MatchFormat, *, skins: bool = False) -> Optional[TeamCombo]:
        """Look up the combination pair for a format.

        Skins prefer ``skins_team_combos`` and fall back to ``team_combos``.
        """
        if skins and format in self.skins_team_combos:
            return self.skins_team_combos[format]
        return self.team_combos.get(format)


def is_team_format(format: MatchFormat) -> bool:
    """True for formats where a side plays a single ball."""
    return format in TEAM_FORMATS


DEFAULT_HANDICAP_POLICY = HandicapPolicy(
    percentage=80,
    off_the_low=True,
    max_handicap=24,
    team_combos={
        MatchFormat.FOURSOMES: TeamCombo(low_pct=60, high_pct=40),
        MatchFormat.SCRAMBLE: TeamCombo(low_pct=35, high_pct=15),
    },
    skins_team_combos={
        MatchFormat.FOURSOMES: TeamCombo(low_pct=50, high_pct=50),
    },
)
