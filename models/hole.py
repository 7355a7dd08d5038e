from pydantic import Field

from .base import FrozenGolfModel


class Hole(FrozenGolfModel):
    """Represents a single hole on a tee's scorecard."""
    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=5)
    stroke_index: int = Field(..., ge=1, le=18)  # 1 = hardest, 18 = easiest
