from typing import Optional

from models.hole import Hole

from .exceptions import InvalidInput
from .handicap import strokes_received


def apply_max_score(gross: int, par: int, max_score_over_par: Optional[int]) -> int:
    """Cap gross strokes at par + max_score_over_par (e.g. 3 = triple bogey).

    ``None`` means uncapped.
    """
    if gross < 1:
        raise InvalidInput(f"Gross score {gross} must be at least 1")
    if max_score_over_par is None:
        return gross
    if max_score_over_par < 0:
        raise InvalidInput(f"Max score over par {max_score_over_par} cannot be negative")
    return min(gross, par + max_score_over_par)


def net_score(gross: int, strokes: int) -> int:
    """Gross minus strokes received on the hole (0, 1 or 2)."""
    if strokes not in (0, 1, 2):
        raise InvalidInput(f"Strokes received on a hole must be 0-2, got {strokes}")
    return gross - strokes


def net_hole_score(
    gross: int,
    hole: Hole,
    handicap: int,
    max_score_over_par: Optional[int] = None,
) -> int:
    """Net score for one hole: the cap applies to gross before strokes come off."""
    capped = apply_max_score(gross, hole.par, max_score_over_par)
    return net_score(capped, strokes_received(handicap, hole.stroke_index))
