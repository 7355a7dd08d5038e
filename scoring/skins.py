"""Skins: the unique low net score on a hole takes that hole's stake."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from models.skins import EntrantSkins, HoleSkinScore, SkinResult, SkinsResult

from .exceptions import InvalidInput
from .money import CENT, Amount, allocate, to_money

logger = logging.getLogger(__name__)


def hole_skin_winner(scores: Dict[str, int]) -> Tuple[Optional[str], Optional[int]]:
    """(winner_id, net) for a unique low score, else (None, None)."""
    if not scores:
        return None, None
    low = min(scores.values())
    at_low = [entrant for entrant, net in scores.items() if net == low]
    if len(at_low) != 1:
        return None, None
    return at_low[0], low


def calculate_skins(
    hole_scores: Sequence[HoleSkinScore],
    entry_fee: Amount,
    player_count: int,
    carryover: bool = True,
) -> SkinsResult:
    """Calculate skins for the holes played so far.

    - A hole is won only by a unique low net score.
    - A tied hole, or one with no qualifying scores, carries its stake to the
      next hole that has a winner (without ``carryover`` the stake is dropped).
    - Pot = entry_fee x player_count, split across all stakes that were won,
      so payouts always add up to the pot once any skin is awarded.
    """
    if player_count < 0:
        raise InvalidInput(f"Player count {player_count} cannot be negative")
    total_pot = to_money(Decimal(str(entry_fee)) * player_count)
    if total_pot < 0:
        raise InvalidInput(f"Entry fee {entry_fee} cannot be negative")

    ordered = sorted(hole_scores, key=lambda h: h.hole_number)
    numbers = [h.hole_number for h in ordered]
    if len(set(numbers)) != len(numbers):
        raise InvalidInput("Each hole may appear only once in a skins calculation")

    entrants: List[str] = []
    for hole in ordered:
        for entrant in hole.scores:
            if entrant not in entrants:
                entrants.append(entrant)

    # (hole position, winner, net, stakes riding on it)
    winners = []
    carried = 0
    carried_by_hole: Dict[int, int] = {}
    for position, hole in enumerate(ordered):
        carried_by_hole[position] = carried
        winner_id, low = hole_skin_winner(hole.scores)
        if winner_id is None:
            if carryover:
                carried += 1
                logger.debug("Hole %s carries (%s stakes riding)", hole.hole_number, carried)
            continue
        winners.append((position, winner_id, low, 1 + carried))
        carried = 0

    stakes = [units for _, _, _, units in winners]
    values = allocate(total_pot, stakes)
    total_stakes = sum(stakes)
    skin_value = (total_pot / total_stakes).quantize(CENT) if total_stakes else Decimal("0.00")

    by_position = {}
    totals = {entrant: {"skins_won": 0, "holes_won": 0, "money_won": Decimal("0.00")} for entrant in entrants}
    for (position, winner_id, low, units), value in zip(winners, values):
        by_position[position] = (winner_id, low, value)
        totals[winner_id]["skins_won"] += units
        totals[winner_id]["holes_won"] += 1
        totals[winner_id]["money_won"] += value

    holes: List[SkinResult] = []
    for position, hole in enumerate(ordered):
        winner_id, low, value = by_position.get(position, (None, None, Decimal("0.00")))
        holes.append(
            SkinResult(
                hole_number=hole.hole_number,
                winner_id=winner_id,
                winner_net_score=low,
                carried_in=carried_by_hole[position] if winner_id else 0,
                value=value,
            )
        )

    entrant_totals = [EntrantSkins(entrant_id=entrant, **row) for entrant, row in totals.items()]
    entrant_totals.sort(key=lambda t: t.money_won, reverse=True)

    return SkinsResult(
        total_pot=total_pot,
        skins_awarded=len(winners),
        skin_value=skin_value,
        holes=holes,
        entrant_totals=entrant_totals,
    )
