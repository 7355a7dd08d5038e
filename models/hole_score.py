from pydantic import Field

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """A player's gross strokes on a single hole.

    Scores are the source of truth. A correction replaces the stroke count
    (``update_field``); net scores are always derived, never stored here.
    """
    hole_number: int = Field(..., ge=1, le=18)
    gross_strokes: int = Field(..., ge=1, le=20)
