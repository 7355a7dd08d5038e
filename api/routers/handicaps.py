"""Handicap API endpoints."""

from fastapi import APIRouter
from typing import List

from api.schemas import (
    CourseHandicapRequest,
    CourseHandicapResponse,
    MatchRequest,
    StrokeAllocationRequest,
    StrokeAllocationResponse,
)
from models import PlayerHandicap
from scoring.handicap import compute_match_handicaps, course_handicap, stroke_allocation

router = APIRouter()


@router.post("/course", response_model=CourseHandicapResponse)
async def get_course_handicap(body: CourseHandicapRequest):
    return CourseHandicapResponse(
        course_handicap=course_handicap(body.handicap_index, body.slope_rating, body.course_rating, body.par)
    )


@router.post("/allocation", response_model=StrokeAllocationResponse)
async def get_stroke_allocation(body: StrokeAllocationRequest):
    return StrokeAllocationResponse(handicap=body.handicap, holes=stroke_allocation(body.handicap, body.holes))


@router.post("/match", response_model=List[PlayerHandicap])
async def get_match_handicaps(body: MatchRequest):
    return compute_match_handicaps(body.players, body.format, body.tee, body.policy)
