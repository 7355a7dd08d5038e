"""Match API endpoints."""

from fastapi import APIRouter

from api.schemas import MatchRequest
from models import MatchResult
from scoring.rounds import compute_match_result

router = APIRouter()


@router.post("/state", response_model=MatchResult)
async def get_match_state(body: MatchRequest):
    return compute_match_result(
        body.format,
        body.tee,
        body.players,
        body.policy,
        max_score_over_par=body.max_score_over_par,
        points_for_win=body.points_for_win,
        points_for_half=body.points_for_half,
    )
