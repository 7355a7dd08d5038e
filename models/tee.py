from pydantic import Field
from typing import List, Optional

from .base import FrozenGolfModel
from .hole import Hole


class Tee(FrozenGolfModel):
    """Represents a tee box with its ratings and hole table."""
    name: Optional[str] = None  # "white", "blue", "Purple", ...
    slope_rating: float = Field(113, ge=55, le=155)
    course_rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    holes: List[Hole] = Field(default_factory=list)

    @property
    def par(self) -> int:
        """Total par across the hole table."""
        return sum(h.par for h in self.holes)

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None
