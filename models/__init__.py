from .base import BaseGolfModel, FrozenGolfModel
from .handicap_policy import (
    DEFAULT_HANDICAP_POLICY,
    TEAM_FORMATS,
    HandicapPolicy,
    MatchFormat,
    TeamCombo,
    is_team_format,
)
from .hole import Hole
from .hole_score import HoleScore
from .match_state import HoleResult, MatchResult, MatchState, MatchStatus
from .player import MatchPlayer, PlayerHandicap
from .skins import EntrantSkins, HoleSkinScore, RoundSkins, SkinResult, SkinsResult
from .tee import Tee
from .tilt import (
    DEFAULT_TILT_CONFIG,
    RoundTilt,
    TiltCarryover,
    TiltConfig,
    TiltHoleScore,
    TiltPlayerHole,
    TiltPlayerResult,
    TiltPointTable,
    TiltResult,
)

__all__ = [
    "BaseGolfModel",
    "FrozenGolfModel",
    "DEFAULT_HANDICAP_POLICY",
    "TEAM_FORMATS",
    "HandicapPolicy",
    "MatchFormat",
    "TeamCombo",
    "is_team_format",
    "Hole",
    "HoleScore",
    "HoleResult",
    "MatchResult",
    "MatchState",
    "MatchStatus",
    "MatchPlayer",
    "PlayerHandicap",
    "EntrantSkins",
    "HoleSkinScore",
    "RoundSkins",
    "SkinResult",
    "SkinsResult",
    "Tee",
    "DEFAULT_TILT_CONFIG",
    "RoundTilt",
    "TiltCarryover",
    "TiltConfig",
    "TiltHoleScore",
    "TiltPlayerHole",
    "TiltPlayerResult",
    "TiltPointTable",
    "TiltResult",
]
