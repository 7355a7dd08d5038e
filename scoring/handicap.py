"""Handicap math: course and playing handicaps, team combinations, strokes."""

from __future__ import annotations

import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Dict, List, Optional, Sequence, Union

from models.handicap_policy import HandicapPolicy, MatchFormat, TeamCombo, is_team_format
from models.hole import Hole
from models.player import MatchPlayer, PlayerHandicap
from models.tee import Tee

from .exceptions import InvalidHoleSet, InvalidInput, UnsupportedFormatCombination

logger = logging.getLogger(__name__)

HOLES_PER_ROUND = 18
MAX_ALLOCATED_STROKES = 36  # two strokes on every hole
SLOPE_RANGE = (55, 155)
INDEX_RANGE = (-10, 54)
STANDARD_SLOPE = 113

Number = Union[int, float, Decimal]


def _decimal(value: Number) -> Decimal:
    return Decimal(str(value))


def _round_half_up(value: Decimal) -> int:
    """Nearest integer, .5 always toward +infinity (-2.5 -> -2, 2.5 -> 3)."""
    return int((value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def _ceil(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def _check_index(index: Number) -> None:
    low, high = INDEX_RANGE
    if not low <= index <= high:
        raise InvalidInput(f"Handicap index {index} outside range ({low} to {high})")


def _check_slope(slope: Number) -> None:
    low, high = SLOPE_RANGE
    if not low <= slope <= high:
        raise InvalidInput(f"Slope {slope} outside USGA range ({low}-{high})")


def _check_percentage(percentage: Number) -> None:
    if not 0 <= percentage <= 100:
        raise InvalidInput(f"Percentage {percentage} outside range (0-100)")


def validate_hole_set(holes: Sequence[Hole]) -> List[Hole]:
    """Check an 18-hole table and return it ordered hardest hole first."""
    if len(holes) != HOLES_PER_ROUND:
        raise InvalidHoleSet(f"Expected {HOLES_PER_ROUND} holes, got {len(holes)}")
    expected = set(range(1, HOLES_PER_ROUND + 1))
    if {h.number for h in holes} != expected:
        raise InvalidHoleSet("Hole numbers must be 1-18 with no repeats")
    if {h.stroke_index for h in holes} != expected:
        raise InvalidHoleSet("Stroke indexes must be 1-18 with no repeats")
    return sorted(holes, key=lambda h: h.stroke_index)


# ----------------------------------------------------------------
# Individual handicaps
# ----------------------------------------------------------------

def course_handicap(
    index: Number,
    slope: Number,
    rating: Optional[Number] = None,
    par: Optional[int] = None,
) -> int:
    """Scale a handicap index to a tee.

    ``round(index * slope / 113)``; with both ``rating`` and ``par`` the WHS
    course-rating adjustment ``rating - par`` is added before rounding.
    Plus (negative) indexes scale the same way.
    """
    _check_index(index)
    _check_slope(slope)
    raw = _decimal(index) * _decimal(slope) / STANDARD_SLOPE
    if rating is not None and par is not None:
        raw += _decimal(rating) - _decimal(par)
    return _round_half_up(raw)


def playing_handicap(course_hdcp: int, lowest_in_group: int) -> int:
    """Strokes received relative to the lowest handicap in the group. Never negative."""
    return max(0, course_hdcp - lowest_in_group)


def check_allocatable(handicap: int, who: str) -> int:
    """Reject a handicap that cannot be spread over 18 holes at two strokes a hole."""
    if handicap > MAX_ALLOCATED_STROKES:
        raise InvalidInput(
            f"{who} would receive {handicap} strokes (max {MAX_ALLOCATED_STROKES}); set a max handicap"
        )
    return handicap


def apply_handicap_cap(handicap: int, max_handicap: Optional[int]) -> int:
    if max_handicap is not None and handicap > max_handicap:
        return max_handicap
    return handicap


def adjusted_handicap(course_hdcp: int, percentage: Number, max_handicap: Optional[int] = None) -> int:
    """Allowance for the legacy formula: ceil(course * pct / 100), then capped."""
    _check_percentage(percentage)
    return apply_handicap_cap(_ceil(_decimal(course_hdcp) * _decimal(percentage) / 100), max_handicap)


def whs_playing_handicap(course_hdcp: int, percentage: Number, max_handicap: Optional[int] = None) -> int:
    """Allowance for the unified WHS formula: round(course * pct / 100), then capped."""
    _check_percentage(percentage)
    return apply_handicap_cap(_round_half_up(_decimal(course_hdcp) * _decimal(percentage) / 100), max_handicap)


def skins_handicap(index: Number, tee: Tee, policy: HandicapPolicy) -> int:
    """Handicap used for skins and TILT, which are played off full-field strokes.

    Legacy: ``ceil((index * slope / 113 + rating - par) * pct / 100)`` in one
    step. Unified: WHS course handicap, then the rounded allowance. Both cap at
    the policy's skins maximum. A tee without a course rating is taken as
    rated at par.
    """
    par = tee.par
    rating = tee.course_rating if tee.course_rating is not None else par
    if policy.use_unified_formula:
        whs = course_handicap(index, tee.slope_rating, rating, par)
        return whs_playing_handicap(whs, policy.skins_percentage, policy.skins_max_handicap)

    _check_index(index)
    _check_slope(tee.slope_rating)
    raw = (
        _decimal(index) * _decimal(tee.slope_rating) / STANDARD_SLOPE
        + _decimal(rating) - _decimal(par)
    ) * _decimal(policy.skins_percentage) / 100
    return apply_handicap_cap(_ceil(raw), policy.skins_max_handicap)


# ----------------------------------------------------------------
# Team combinations
# ----------------------------------------------------------------

def combine_team_handicap(low: int, high: int, low_pct: Number, high_pct: Number) -> int:
    """round(low * low_pct / 100 + high * high_pct / 100)."""
    _check_percentage(low_pct)
    _check_percentage(high_pct)
    return _round_half_up(
        _decimal(low) * _decimal(low_pct) / 100 + _decimal(high) * _decimal(high_pct) / 100
    )


def _alternate_shot_handicap(handicaps: List[int], combo: TeamCombo) -> int:
    if len(handicaps) == 1:
        return combine_team_handicap(handicaps[0], 0, combo.low_pct, 0)
    if len(handicaps) != 2:
        raise InvalidInput(f"Alternate shot sides have 1-2 players, got {len(handicaps)}")
    return combine_team_handicap(handicaps[0], handicaps[1], combo.low_pct, combo.high_pct)


def _scramble_handicap(handicaps: List[int], combo: TeamCombo) -> int:
    # Larger scramble sides are still rated off their two lowest players.
    if len(handicaps) == 1:
        return combine_team_handicap(handicaps[0], 0, combo.low_pct, 0)
    if len(handicaps) > 4:
        raise InvalidInput(f"Scramble sides have 1-4 players, got {len(handicaps)}")
    return combine_team_handicap(handicaps[0], handicaps[1], combo.low_pct, combo.high_pct)


def team_handicap(
    handicaps: Sequence[int],
    format: MatchFormat,
    policy: HandicapPolicy,
    *,
    skins: bool = False,
) -> int:
    """Combine a side's individual handicaps into one team handicap."""
    if not handicaps:
        raise InvalidInput("A side needs at least one player")
    combo = policy.team_combo(format, skins=skins)
    if combo is None:
        table = "skins_team_combos/team_combos" if skins else "team_combos"
        raise UnsupportedFormatCombination(f"No {table} entry for {format.value}")

    ordered = sorted(handicaps)
    if format in (MatchFormat.FOURSOMES, MatchFormat.MODIFIED_ALT_SHOT):
        return _alternate_shot_handicap(ordered, combo)
    elif format == MatchFormat.SCRAMBLE:
        return _scramble_handicap(ordered, combo)
    raise UnsupportedFormatCombination(f"{format.value} is not played as a team ball")


def compute_match_handicaps(
    players: Sequence[MatchPlayer],
    format: MatchFormat,
    tee: Tee,
    policy: HandicapPolicy,
) -> List[PlayerHandicap]:
    """Derive every player's strokes for one match.

    Each course handicap gets the allowance and the cap first; team formats
    then combine each side into one handicap. With ``off_the_low`` the
    lowest figure present in this match plays off zero.
    """
    if not players:
        return []

    course: Dict[str, int] = {}
    adjusted: Dict[str, int] = {}
    for p in players:
        if policy.use_unified_formula:
            course[p.player_id] = course_handicap(p.handicap_index, tee.slope_rating, tee.course_rating, tee.par)
            adjusted[p.player_id] = whs_playing_handicap(course[p.player_id], policy.percentage, policy.max_handicap)
        else:
            course[p.player_id] = course_handicap(p.handicap_index, tee.slope_rating)
            adjusted[p.player_id] = adjusted_handicap(course[p.player_id], policy.percentage, policy.max_handicap)

    if is_team_format(format):
        sides: Dict[int, List[int]] = {}
        for p in players:
            sides.setdefault(p.side, []).append(adjusted[p.player_id])
        side_hdcps = {side: team_handicap(hdcps, format, policy) for side, hdcps in sides.items()}
        baseline = min(side_hdcps.values()) if policy.off_the_low else 0
        strokes = {p.player_id: playing_handicap(side_hdcps[p.side], baseline) for p in players}
    else:
        baseline = min(adjusted.values()) if policy.off_the_low else 0
        strokes = {p.player_id: playing_handicap(adjusted[p.player_id], baseline) for p in players}

    for player_id, hdcp in strokes.items():
        check_allocatable(hdcp, player_id)

    logger.debug("Match handicaps (%s, baseline %s): %s", format.value, baseline, strokes)
    return [
        PlayerHandicap(
            player_id=p.player_id,
            side=p.side,
            course_handicap=course[p.player_id],
            adjusted_handicap=adjusted[p.player_id],
            playing_handicap=strokes[p.player_id],
        )
        for p in players
    ]


# ----------------------------------------------------------------
# Stroke allocation
# ----------------------------------------------------------------

def stroke_allocation(handicap: int, holes: Sequence[Hole]) -> List[int]:
    """Hole numbers receiving a stroke, one entry per stroke, in hole order.

    The first 18 strokes go to the hardest holes by stroke index; strokes
    19-36 give the hardest ``handicap - 18`` holes a second entry.
    """
    ordered = validate_hole_set(holes)
    if handicap > MAX_ALLOCATED_STROKES:
        raise InvalidInput(f"Cannot allocate {handicap} strokes (max {MAX_ALLOCATED_STROKES})")
    if handicap <= 0:
        return []

    strokes = [h.number for h in ordered[:min(handicap, HOLES_PER_ROUND)]]
    if handicap > HOLES_PER_ROUND:
        strokes.extend(h.number for h in ordered[:handicap - HOLES_PER_ROUND])
    return sorted(strokes)


def receives_stroke(handicap: int, hole_stroke_index: int) -> bool:
    return handicap > 0 and hole_stroke_index <= handicap


def receives_double_stroke(handicap: int, hole_stroke_index: int) -> bool:
    return handicap > HOLES_PER_ROUND and hole_stroke_index <= handicap - HOLES_PER_ROUND


def strokes_received(handicap: int, hole_stroke_index: int) -> int:
    """0, 1 or 2 strokes on a hole."""
    if receives_double_stroke(handicap, hole_stroke_index):
        return 2
    if receives_stroke(handicap, hole_stroke_index):
        return 1
    return 0
