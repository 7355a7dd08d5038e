"""Match play state, rebuilt from the complete hole history on every call."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, TypeVar

from models.handicap_policy import MatchFormat
from models.match_state import HoleResult, MatchState, MatchStatus

from .exceptions import IncompleteHoleSequence, InvalidInput

logger = logging.getLogger(__name__)

TOTAL_HOLES = 18

T = TypeVar("T")


def best_ball(net_scores: Sequence[Optional[int]]) -> Optional[int]:
    """Lowest score on a side. Players without a score are skipped."""
    valid = [s for s in net_scores if s is not None]
    return min(valid) if valid else None


def hole_winner(side1_net: Optional[int], side2_net: Optional[int]) -> Optional[HoleResult]:
    """Lower net wins, equal halves. None until both sides have a score."""
    if side1_net is None or side2_net is None:
        return None
    if side1_net < side2_net:
        return HoleResult.SIDE1
    if side2_net < side1_net:
        return HoleResult.SIDE2
    return HoleResult.HALVED


def side_score(format: MatchFormat, net_scores: Sequence[Optional[int]]) -> Optional[int]:
    """The score a side puts up on a hole under the given format."""
    if format in (MatchFormat.FOURBALL, MatchFormat.SHAMBLE):
        return best_ball(net_scores)
    elif format == MatchFormat.STROKEPLAY:
        # Every member's score counts; incomplete until all are in.
        if not net_scores or any(s is None for s in net_scores):
            return None
        return sum(net_scores)
    elif format == MatchFormat.SINGLES:
        return net_scores[0] if net_scores else None
    elif format in (MatchFormat.FOURSOMES, MatchFormat.MODIFIED_ALT_SHOT, MatchFormat.SCRAMBLE):
        # One ball per side; whichever partner it was recorded under.
        return next((s for s in net_scores if s is not None), None)
    raise InvalidInput(f"Unknown format {format}")


def _check_length(entries: Sequence, total_holes: int) -> None:
    if len(entries) > total_holes:
        raise InvalidInput(f"{len(entries)} holes supplied for a {total_holes}-hole match")


def _check_nothing_after(entries: Sequence, number: int) -> None:
    """Hole ``number`` is unplayed, so no later hole may be decided."""
    later = [n for n, e in enumerate(entries[number:], start=number + 1) if e is not None]
    if later:
        raise IncompleteHoleSequence(f"Hole {later[0]} is scored but hole {number} is not")


def played_prefix(entries: Sequence[Optional[T]], total_holes: int = TOTAL_HOLES) -> List[T]:
    """Entries for holes 1..n with no gaps. Trailing unplayed holes are dropped.

    A hole that is decided while an earlier hole is not raises
    ``IncompleteHoleSequence``.
    """
    _check_length(entries, total_holes)
    played: List[T] = []
    for number, entry in enumerate(entries, start=1):
        if entry is None:
            _check_nothing_after(entries, number)
            break
        played.append(entry)
    return played


def _status_text(lead: int) -> str:
    return "AS" if lead == 0 else f"{abs(lead)} UP"


def compute_match_state(
    hole_results: Sequence[Optional[HoleResult]],
    total_holes: int = TOTAL_HOLES,
    points_for_win: float = 1,
    points_for_half: float = 0.5,
) -> MatchState:
    """Replay hole results in order and derive the match state.

    The match closes out as soon as the lead exceeds the holes left; results
    recorded after that are ignored, gaps among them included.
    """
    _check_length(hole_results, total_holes)

    side1_lead = 0
    holes_played = 0
    closed_out = False
    for number, result in enumerate(hole_results, start=1):
        if result is None:
            _check_nothing_after(hole_results, number)
            break
        holes_played += 1
        if result == HoleResult.SIDE1:
            side1_lead += 1
        elif result == HoleResult.SIDE2:
            side1_lead -= 1

        remaining = total_holes - holes_played
        if remaining > 0 and abs(side1_lead) > remaining:
            closed_out = True
            logger.debug("Match closed out %s&%s after hole %s", abs(side1_lead), remaining, holes_played)
            break

    holes_remaining = total_holes - holes_played
    if closed_out:
        status = MatchStatus.COMPLETE
    elif holes_played == total_holes:
        status = MatchStatus.COMPLETE_18
    elif side1_lead != 0 and abs(side1_lead) == holes_remaining:
        status = MatchStatus.DORMIE
    else:
        status = MatchStatus.IN_PROGRESS
    is_complete = status in (MatchStatus.COMPLETE, MatchStatus.COMPLETE_18)

    leading_side = None
    if side1_lead > 0:
        leading_side = 1
    elif side1_lead < 0:
        leading_side = 2

    result_text = None
    side1_points = side2_points = 0.0
    if is_complete:
        if closed_out:
            result_text = f"{abs(side1_lead)}&{holes_remaining}"
        else:
            result_text = _status_text(side1_lead)
        if leading_side == 1:
            side1_points = points_for_win
        elif leading_side == 2:
            side2_points = points_for_win
        else:
            side1_points = side2_points = points_for_half

    return MatchState(
        status=status,
        holes_played=holes_played,
        holes_remaining=holes_remaining,
        side1_lead=side1_lead,
        leading_side=leading_side,
        is_complete=is_complete,
        is_dormie=status == MatchStatus.DORMIE,
        display_text=_status_text(side1_lead),
        result_text=result_text,
        side1_points=side1_points,
        side2_points=side2_points,
    )


def compute_stroke_play_state(
    side1_hole_totals: Sequence[Optional[int]],
    side2_hole_totals: Sequence[Optional[int]],
    total_holes: int = TOTAL_HOLES,
    points_for_win: float = 1,
    points_for_half: float = 0.5,
) -> MatchState:
    """Stroke play has no running lead; totals are compared once every hole is in."""
    paired = [
        (s1, s2) if s1 is not None and s2 is not None else None
        for s1, s2 in zip(side1_hole_totals, side2_hole_totals)
    ]
    played = played_prefix(paired, total_holes)
    holes_played = len(played)
    holes_remaining = total_holes - holes_played

    if holes_played < total_holes:
        return MatchState(
            status=MatchStatus.IN_PROGRESS,
            holes_played=holes_played,
            holes_remaining=holes_remaining,
            side1_lead=None,
            display_text=f"Thru {holes_played}",
        )

    side1_total = sum(s1 for s1, _ in played)
    side2_total = sum(s2 for _, s2 in played)
    if side1_total < side2_total:
        result_text = f"Won by {side2_total - side1_total}"
        leading_side, side1_points, side2_points = 1, points_for_win, 0
    elif side2_total < side1_total:
        result_text = f"Won by {side1_total - side2_total}"
        leading_side, side1_points, side2_points = 2, 0, points_for_win
    else:
        result_text = "Tied"
        leading_side, side1_points, side2_points = None, points_for_half, points_for_half

    return MatchState(
        status=MatchStatus.COMPLETE_18,
        holes_played=holes_played,
        holes_remaining=0,
        side1_lead=None,
        leading_side=leading_side,
        is_complete=True,
        display_text=f"Thru {holes_played}",
        result_text=result_text,
        side1_points=side1_points,
        side2_points=side2_points,
        side1_total=side1_total,
        side2_total=side2_total,
    )
