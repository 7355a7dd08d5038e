"""TILT API endpoints."""

from decimal import Decimal
from fastapi import APIRouter
from typing import Dict

from api.schemas import TiltPayoutRequest, TiltRequest
from models import RoundTilt
from scoring.rounds import calculate_tilt_payouts, compute_tilt_for_round

router = APIRouter()


@router.post("/round", response_model=RoundTilt)
async def get_round_tilt(body: TiltRequest):
    return compute_tilt_for_round(
        body.tee,
        body.players,
        body.policy,
        body.entry_fee,
        config=body.config,
        carryover_in=body.carryover,
        max_score_over_par=body.max_score_over_par,
    )


@router.post("/payouts", response_model=Dict[str, Decimal])
async def get_tilt_payouts(body: TiltPayoutRequest):
    return calculate_tilt_payouts(body.grand_totals, body.pot)
