"""TILT: modified Stableford with a streak multiplier."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from models.tilt import (
    DEFAULT_TILT_CONFIG,
    TiltCarryover,
    TiltConfig,
    TiltHoleScore,
    TiltPlayerHole,
    TiltPlayerResult,
    TiltPointTable,
    TiltResult,
)

from .exceptions import IncompleteHoleSequence, InvalidInput
from .money import Amount, to_money

logger = logging.getLogger(__name__)


def base_points(net_vs_par: int, table: TiltPointTable) -> int:
    """Map net score relative to par to base points."""
    if net_vs_par <= -3:
        return table.albatross
    if net_vs_par == -2:
        return table.eagle
    if net_vs_par == -1:
        return table.birdie
    if net_vs_par == 0:
        return table.par
    if net_vs_par == 1:
        return table.bogey
    return table.double_plus


def next_streak(streak: int, points: int, config: TiltConfig) -> int:
    if config.double_streak_threshold is not None and points >= config.double_streak_threshold:
        return streak + 2
    if points >= config.streak_threshold:
        return streak + 1
    return 0


def multiplier_for(streak: int, config: TiltConfig) -> int:
    multiplier = 1 + streak * config.multiplier_step
    if config.max_multiplier is not None:
        multiplier = min(multiplier, config.max_multiplier)
    return multiplier


def _player_ids(holes: Sequence[TiltHoleScore]) -> List[str]:
    seen: List[str] = []
    for hole in holes:
        for player_id in hole.scores:
            if player_id not in seen:
                seen.append(player_id)
    return seen


def _check_sequence(player_id: str, holes: Sequence[TiltHoleScore]) -> None:
    expected = 1
    for hole in holes:
        if player_id not in hole.scores:
            continue
        if hole.hole_number != expected:
            raise IncompleteHoleSequence(
                f"Player {player_id} has hole {hole.hole_number} scored but not hole {expected}"
            )
        expected += 1


def calculate_tilt(
    hole_scores: Sequence[TiltHoleScore],
    entry_fee: Amount,
    player_count: int,
    config: TiltConfig = DEFAULT_TILT_CONFIG,
    carryover: Optional[Mapping[str, TiltCarryover]] = None,
) -> TiltResult:
    """Calculate TILT standings.

    The multiplier in force on a hole applies to that hole's points, negative
    ones included, and is then updated for the next hole from the streak.
    ``carryover`` seeds individual players with the multiplier and streak they
    finished the previous round on.
    """
    ordered = sorted(hole_scores, key=lambda h: h.hole_number)
    numbers = [h.hole_number for h in ordered]
    if len(set(numbers)) != len(numbers):
        raise InvalidInput("Each hole may appear only once in a TILT calculation")
    carryover = carryover or {}

    players: List[TiltPlayerResult] = []
    for player_id in _player_ids(ordered):
        _check_sequence(player_id, ordered)
        start = carryover.get(player_id)
        multiplier = start.multiplier if start else config.starting_multiplier
        streak = start.streak if start else config.starting_streak
        if config.max_multiplier is not None:
            multiplier = min(multiplier, config.max_multiplier)

        running_total = 0
        holes: List[TiltPlayerHole] = []
        for hole in ordered:
            if player_id not in hole.scores:
                continue
            net_vs_par = hole.scores[player_id] - hole.par
            base = base_points(net_vs_par, config.points)
            points = base * multiplier
            running_total += points
            holes.append(
                TiltPlayerHole(
                    hole_number=hole.hole_number,
                    net_vs_par=net_vs_par,
                    base_points=base,
                    multiplier=multiplier,
                    points=points,
                    running_total=running_total,
                )
            )
            streak = next_streak(streak, base, config)
            multiplier = multiplier_for(streak, config)

        logger.debug("TILT %s: %s points, finishing at %sx", player_id, running_total, multiplier)
        players.append(
            TiltPlayerResult(
                player_id=player_id,
                total_points=running_total,
                holes=holes,
                final_multiplier=multiplier,
                final_streak=streak,
            )
        )

    players.sort(key=lambda p: p.total_points, reverse=True)
    fee = to_money(entry_fee)
    return TiltResult(
        players=players,
        total_pot=to_money(fee * player_count),
        entry_fee=fee,
        player_count=player_count,
    )
