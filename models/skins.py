from decimal import Decimal
from pydantic import Field
from typing import Dict, List, Optional

from .base import FrozenGolfModel


class HoleSkinScore(FrozenGolfModel):
    """Net scores of every entrant (player or team) that qualified on a hole."""
    hole_number: int = Field(..., ge=1, le=18)
    scores: Dict[str, int] = Field(default_factory=dict)


class SkinResult(FrozenGolfModel):
    """Outcome of a single hole. ``winner_id`` is None when the hole carried."""
    hole_number: int
    winner_id: Optional[str] = None
    winner_net_score: Optional[int] = None
    carried_in: int = 0  # earlier stakes riding on this hole
    value: Decimal = Decimal("0.00")


class EntrantSkins(FrozenGolfModel):
    entrant_id: str
    skins_won: int = 0  # hole stakes won, carry-ins included
    holes_won: int = 0
    money_won: Decimal = Decimal("0.00")


class SkinsResult(FrozenGolfModel):
    """Pot totals for a skins game.

    ``skins_awarded`` counts payout events; a hole won after two carries is
    one award. ``skin_value`` is the value of one hole's stake: the pot
    divided by the stakes won (carried stakes included), not by
    ``skins_awarded``. A hole pays its stake count times that value, with
    cents settled so the holes sum exactly to the pot.
    """
    total_pot: Decimal
    skins_awarded: int
    skin_value: Decimal
    holes: List[SkinResult] = Field(default_factory=list)
    entrant_totals: List[EntrantSkins] = Field(default_factory=list)


class RoundSkins(FrozenGolfModel):
    """Skins for a round with team winnings split down to players."""
    skins: SkinsResult
    player_payouts: List[EntrantSkins] = Field(default_factory=list)
    player_count: int = 0
    team_members: Dict[str, List[str]] = Field(default_factory=dict)
