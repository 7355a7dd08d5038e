"""Skins API endpoints."""

from fastapi import APIRouter

from api.schemas import SkinsRequest
from models import RoundSkins
from scoring.rounds import compute_skins_for_round

router = APIRouter()


@router.post("/round", response_model=RoundSkins)
async def get_round_skins(body: SkinsRequest):
    return compute_skins_for_round(
        body.format,
        body.tee,
        body.players,
        body.policy,
        body.entry_fee,
        carryover=body.carryover,
        max_score_over_par=body.max_score_over_par,
    )
