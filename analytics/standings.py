from __future__ import annotations

from pydantic import Field
from typing import Dict, Iterable, List, Optional

from models.base import FrozenGolfModel
from models.match_state import HoleResult, MatchState


class MatchOutcome(FrozenGolfModel):
    """A finished (or live) match tagged with the trip teams on each side."""
    round_id: str
    side1_team_id: Optional[str] = None
    side2_team_id: Optional[str] = None
    state: MatchState


class TeamStanding(FrozenGolfModel):
    team_id: str
    total_points: float = 0
    points_by_round: Dict[str, float] = Field(default_factory=dict)
    matches_won: int = 0
    matches_lost: int = 0
    matches_halved: int = 0


def team_standings(outcomes: Iterable[MatchOutcome], team_ids: Iterable[str] = ()) -> List[TeamStanding]:
    """
    Aggregate match points per trip team.

    Only completed matches count. Teams listed in ``team_ids`` appear even
    with no results yet. Output is sorted by total points, highest first.
    """
    rows: Dict[str, dict] = {}

    def _row(team_id: str) -> dict:
        return rows.setdefault(
            team_id,
            {"total_points": 0.0, "points_by_round": {}, "matches_won": 0, "matches_lost": 0, "matches_halved": 0},
        )

    for team_id in team_ids:
        _row(team_id)

    for outcome in outcomes:
        state = outcome.state
        if not state.is_complete:
            continue
        sides = (
            (outcome.side1_team_id, state.side1_points, 1),
            (outcome.side2_team_id, state.side2_points, 2),
        )
        for team_id, points, side in sides:
            if team_id is None:
                continue
            row = _row(team_id)
            row["total_points"] += points
            row["points_by_round"][outcome.round_id] = row["points_by_round"].get(outcome.round_id, 0.0) + points
            if state.leading_side is None:
                row["matches_halved"] += 1
            elif state.leading_side == side:
                row["matches_won"] += 1
            else:
                row["matches_lost"] += 1

    standings = [TeamStanding(team_id=team_id, **row) for team_id, row in rows.items()]
    standings.sort(key=lambda s: s.total_points, reverse=True)
    return standings


def lead_progression(hole_results) -> List[int]:
    """Side 1's lead after each hole played, e.g. [1, 1, 2, 1]."""
    lead = 0
    progression: List[int] = []
    for result in hole_results:
        if result is None:
            break
        if result == HoleResult.SIDE1:
            lead += 1
        elif result == HoleResult.SIDE2:
            lead -= 1
        progression.append(lead)
    return progression
