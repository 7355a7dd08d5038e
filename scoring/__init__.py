from .exceptions import (
    IncompleteHoleSequence,
    InvalidHoleSet,
    InvalidInput,
    ScoringError,
    UnsupportedFormatCombination,
)
from .handicap import (
    adjusted_handicap,
    check_allocatable,
    combine_team_handicap,
    compute_match_handicaps,
    course_handicap,
    playing_handicap,
    receives_double_stroke,
    receives_stroke,
    skins_handicap,
    stroke_allocation,
    strokes_received,
    team_handicap,
    validate_hole_set,
    whs_playing_handicap,
)
from .match_play import (
    best_ball,
    compute_match_state,
    compute_stroke_play_state,
    hole_winner,
    side_score,
)
from .net import apply_max_score, net_hole_score, net_score
from .rounds import (
    calculate_tilt_payouts,
    compute_match_result,
    compute_skins_for_round,
    compute_tilt_for_round,
)
from .skins import calculate_skins
from .tilt import calculate_tilt

__all__ = [
    "IncompleteHoleSequence",
    "InvalidHoleSet",
    "InvalidInput",
    "ScoringError",
    "UnsupportedFormatCombination",
    "adjusted_handicap",
    "check_allocatable",
    "combine_team_handicap",
    "compute_match_handicaps",
    "course_handicap",
    "playing_handicap",
    "receives_double_stroke",
    "receives_stroke",
    "skins_handicap",
    "stroke_allocation",
    "strokes_received",
    "team_handicap",
    "validate_hole_set",
    "whs_playing_handicap",
    "best_ball",
    "compute_match_state",
    "compute_stroke_play_state",
    "hole_winner",
    "side_score",
    "apply_max_score",
    "net_hole_score",
    "net_score",
    "calculate_tilt_payouts",
    "compute_match_result",
    "compute_skins_for_round",
    "compute_tilt_for_round",
    "calculate_skins",
    "calculate_tilt",
]
