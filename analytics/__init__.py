from .standings import (
    MatchOutcome,
    TeamStanding,
    lead_progression,
    team_standings,
)
from .visualizations import (
    plot_match_progression,
    plot_team_standings,
    plot_tilt_running_totals,
)

__all__ = [
    "MatchOutcome",
    "TeamStanding",
    "lead_progression",
    "team_standings",
    "plot_match_progression",
    "plot_team_standings",
    "plot_tilt_running_totals",
]
