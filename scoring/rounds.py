"""Round-level computations: gross scores in, display-ready results out.

Every function here takes the complete score snapshot for a match or round
and recomputes from scratch, so callers can re-run them after any edit.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

from models.handicap_policy import HandicapPolicy, MatchFormat, is_team_format
from models.match_state import MatchResult
from models.player import MatchPlayer
from models.skins import EntrantSkins, HoleSkinScore, RoundSkins
from models.tee import Tee
from models.tilt import DEFAULT_TILT_CONFIG, RoundTilt, TiltCarryover, TiltConfig, TiltHoleScore

from .exceptions import IncompleteHoleSequence, InvalidInput
from .handicap import (
    check_allocatable,
    compute_match_handicaps,
    skins_handicap,
    team_handicap,
    validate_hole_set,
)
from .match_play import compute_match_state, compute_stroke_play_state, hole_winner, side_score
from .money import Amount, allocate, to_money
from .net import net_hole_score
from .skins import calculate_skins
from .tilt import calculate_tilt

logger = logging.getLogger(__name__)

TILT_PAYOUT_PERCENTAGES = (60, 30, 10)


def _check_unique_holes(player: MatchPlayer) -> None:
    numbers = [s.hole_number for s in player.scores]
    if len(set(numbers)) != len(numbers):
        raise InvalidInput(f"Player {player.player_id} has more than one score for a hole")


def _check_contiguous(entrant_id: str, hole_numbers) -> None:
    for expected, number in enumerate(sorted(hole_numbers), start=1):
        if number != expected:
            raise IncompleteHoleSequence(
                f"{entrant_id} has hole {number} scored but not hole {expected}"
            )


def _net_scores(
    players: Sequence[MatchPlayer],
    tee: Tee,
    handicaps: Mapping[str, int],
    max_score_over_par: Optional[int],
) -> Dict[str, Dict[int, int]]:
    net: Dict[str, Dict[int, int]] = {}
    for player in players:
        _check_unique_holes(player)
        net[player.player_id] = {
            s.hole_number: net_hole_score(
                s.gross_strokes,
                tee.get_hole(s.hole_number),
                handicaps[player.player_id],
                max_score_over_par,
            )
            for s in player.scores
        }
    return net


# ----------------------------------------------------------------
# Match
# ----------------------------------------------------------------

def compute_match_result(
    format: MatchFormat,
    tee: Tee,
    players: Sequence[MatchPlayer],
    policy: HandicapPolicy,
    *,
    max_score_over_par: Optional[int] = None,
    points_for_win: float = 1,
    points_for_half: float = 0.5,
) -> MatchResult:
    """Handicaps, net scores and match state for one match."""
    holes = sorted(validate_hole_set(tee.holes), key=lambda h: h.number)
    sides = {1: [p for p in players if p.side == 1], 2: [p for p in players if p.side == 2]}
    if not sides[1] or not sides[2]:
        raise InvalidInput("A match needs at least one player on each side")

    handicaps = compute_match_handicaps(players, format, tee, policy)
    strokes = {h.player_id: h.playing_handicap for h in handicaps}
    net = _net_scores(players, tee, strokes, max_score_over_par)

    if format == MatchFormat.STROKEPLAY:
        totals = {
            side: [side_score(format, [net[p.player_id].get(hole.number) for p in members]) for hole in holes]
            for side, members in sides.items()
        }
        state = compute_stroke_play_state(
            totals[1], totals[2],
            points_for_win=points_for_win, points_for_half=points_for_half,
        )
        hole_results = [hole_winner(s1, s2) for s1, s2 in zip(totals[1], totals[2])]
    else:
        hole_results = []
        for hole in holes:
            side1 = side_score(format, [net[p.player_id].get(hole.number) for p in sides[1]])
            side2 = side_score(format, [net[p.player_id].get(hole.number) for p in sides[2]])
            hole_results.append(hole_winner(side1, side2))
        state = compute_match_state(
            hole_results,
            points_for_win=points_for_win, points_for_half=points_for_half,
        )

    return MatchResult(
        format=format,
        state=state,
        handicaps=handicaps,
        hole_results=hole_results,
        net_scores=net,
    )


# ----------------------------------------------------------------
# Skins
# ----------------------------------------------------------------

def compute_skins_for_round(
    format: MatchFormat,
    tee: Tee,
    players: Sequence[MatchPlayer],
    policy: HandicapPolicy,
    entry_fee: Amount,
    *,
    carryover: bool = True,
    max_score_over_par: Optional[int] = None,
) -> RoundSkins:
    """Skins for every opted-in player across all matches of a round.

    - FOURBALL / SHAMBLE / SINGLES / STROKEPLAY: individual skins off each
      player's skins handicap.
    - SCRAMBLE: one entry per side, gross scores.
    - FOURSOMES / MODIFIED_ALT_SHOT: one entry per side off the team skins
      handicap.

    Holes are settled in order and stop at the first hole some entrant has
    not finished, so groups further back never change an earlier result.
    """
    holes = sorted(validate_hole_set(tee.holes), key=lambda h: h.number)
    team = is_team_format(format)
    scramble = format == MatchFormat.SCRAMBLE
    opted = [p for p in players if p.skins_opt_in]
    if team:
        # One ball per side, usually recorded under one partner only.
        scored_sides = {(p.match_id, p.side) for p in opted if p.scores}
        pool = [p for p in opted if (p.match_id, p.side) in scored_sides]
    else:
        pool = [p for p in opted if p.scores]

    hdcps = {p.player_id: 0 if scramble else skins_handicap(p.handicap_index, tee, policy) for p in pool}

    # entrant id -> members
    members: Dict[str, List[MatchPlayer]] = {}
    for p in pool:
        key = f"{p.match_id}:{p.side}" if team else p.player_id
        members.setdefault(key, []).append(p)

    entrant_hdcps: Dict[str, int] = {}
    for key, group in members.items():
        if team and not scramble:
            entrant_hdcps[key] = team_handicap([hdcps[p.player_id] for p in group], format, policy, skins=True)
        else:
            entrant_hdcps[key] = hdcps[group[0].player_id]
        check_allocatable(entrant_hdcps[key], key)

    entrant_scores: Dict[str, Dict[int, int]] = {}
    for key, group in members.items():
        scores: Dict[int, int] = {}
        for p in group:
            _check_unique_holes(p)
            for s in p.scores:
                # A team ball may be recorded under either partner; first one wins.
                if s.hole_number in scores:
                    continue
                scores[s.hole_number] = net_hole_score(
                    s.gross_strokes, tee.get_hole(s.hole_number), entrant_hdcps[key], max_score_over_par
                )
        _check_contiguous(key, scores)
        entrant_scores[key] = scores

    hole_scores: List[HoleSkinScore] = []
    for hole in holes:
        scored = {key: scores[hole.number] for key, scores in entrant_scores.items() if hole.number in scores}
        if not scored or len(scored) < len(entrant_scores):
            break
        hole_scores.append(HoleSkinScore(hole_number=hole.number, scores=scored))

    result = calculate_skins(hole_scores, entry_fee, len(pool), carryover)
    logger.debug("Skins through hole %s: %s awarded", len(hole_scores), result.skins_awarded)

    if team:
        payouts: Dict[str, dict] = {}
        for total in result.entrant_totals:
            group = members[total.entrant_id]
            shares = allocate(total.money_won, [1] * len(group))
            for p, share in zip(group, shares):
                row = payouts.setdefault(p.player_id, {"skins_won": 0, "holes_won": 0, "money_won": Decimal("0.00")})
                row["skins_won"] += total.skins_won
                row["holes_won"] += total.holes_won
                row["money_won"] += share
        player_payouts = [EntrantSkins(entrant_id=pid, **row) for pid, row in payouts.items()]
        player_payouts.sort(key=lambda t: t.money_won, reverse=True)
    else:
        player_payouts = list(result.entrant_totals)

    return RoundSkins(
        skins=result,
        player_payouts=player_payouts,
        player_count=len(pool),
        team_members={key: [p.player_id for p in group] for key, group in members.items()} if team else {},
    )


# ----------------------------------------------------------------
# TILT
# ----------------------------------------------------------------

def compute_tilt_for_round(
    tee: Tee,
    players: Sequence[MatchPlayer],
    policy: HandicapPolicy,
    entry_fee: Amount,
    *,
    config: TiltConfig = DEFAULT_TILT_CONFIG,
    carryover_in: Optional[Mapping[str, TiltCarryover]] = None,
    max_score_over_par: Optional[int] = None,
) -> RoundTilt:
    """TILT for a round. Always individual, off the same handicap as skins."""
    holes = sorted(validate_hole_set(tee.holes), key=lambda h: h.number)
    pool = [p for p in players if p.tilt_opt_in and p.scores]
    hdcps = {
        p.player_id: check_allocatable(skins_handicap(p.handicap_index, tee, policy), p.player_id)
        for p in pool
    }
    net = _net_scores(pool, tee, hdcps, max_score_over_par)

    hole_scores = [
        TiltHoleScore(
            hole_number=hole.number,
            par=hole.par,
            scores={pid: scores[hole.number] for pid, scores in net.items() if hole.number in scores},
        )
        for hole in holes
    ]
    result = calculate_tilt(hole_scores, entry_fee, len(pool), config, carryover_in)
    carryover_out = {
        p.player_id: TiltCarryover(multiplier=p.final_multiplier, streak=p.final_streak)
        for p in result.players
    }
    return RoundTilt(tilt=result, player_count=len(pool), carryover=carryover_out)


def calculate_tilt_payouts(grand_totals: Mapping[str, int], pot: Amount) -> Dict[str, Decimal]:
    """Top-three payout (60/30/10). Tied players split the places they occupy."""
    pot = to_money(pot)
    payouts: Dict[str, Decimal] = {}
    if not grand_totals or pot == 0:
        return payouts

    places = allocate(pot, list(TILT_PAYOUT_PERCENTAGES))
    standings = sorted(grand_totals.items(), key=lambda item: item[1], reverse=True)

    position = 0
    i = 0
    while i < len(standings) and position < len(places):
        score = standings[i][1]
        tied = []
        while i < len(standings) and standings[i][1] == score:
            tied.append(standings[i][0])
            i += 1
        prize = sum(places[position:position + len(tied)], Decimal("0.00"))
        for player_id, share in zip(tied, allocate(prize, [1] * len(tied))):
            payouts[player_id] = share
        position += len(tied)
    return payouts
