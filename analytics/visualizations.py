from __future__ import annotations

from typing import Optional, Sequence

from models.match_state import HoleResult
from models.tilt import TiltResult

from .standings import TeamStanding, lead_progression


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def plot_match_progression(
    hole_results: Sequence[Optional[HoleResult]],
    side_labels: Sequence[str] = ("Side 1", "Side 2"),
):
    """Step chart of the running match lead; above zero favors side 1."""
    plt = _load_plt()
    leads = lead_progression(hole_results)
    holes = list(range(1, len(leads) + 1))

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step([0] + holes, [0] + leads, where="post", linewidth=2)
    ax.axhline(0, color="black", linewidth=0.8)
    ax.set_title(f"{side_labels[0]} vs {side_labels[1]}")
    ax.set_xlabel("Hole")
    ax.set_ylabel(f"{side_labels[0]} lead")
    ax.set_xlim(0, 18)
    ax.set_xticks(range(0, 19))
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_tilt_running_totals(result: TiltResult):
    """Line chart: each player's running TILT total by hole."""
    plt = _load_plt()

    fig, ax = plt.subplots(figsize=(11, 5))
    for player in result.players:
        x = [h.hole_number for h in player.holes]
        y = [h.running_total for h in player.holes]
        ax.plot(x, y, marker="o", linewidth=1.5, label=f"{player.player_id} ({player.final_multiplier}x)")
    ax.axhline(0, color="black", linewidth=0.8)
    ax.set_title("TILT Running Totals")
    ax.set_xlabel("Hole")
    ax.set_ylabel("Points")
    ax.set_xticks(range(1, 19))
    ax.grid(axis="y", alpha=0.2)
    if result.players:
        ax.legend(loc="upper left")
    fig.tight_layout()
    return fig, ax


def plot_team_standings(standings: Sequence[TeamStanding]):
    """Bar chart: total trip points per team."""
    plt = _load_plt()
    labels = [s.team_id for s in standings]
    values = [s.total_points for s in standings]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(range(len(labels)), values)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels)
    ax.set_title("Team Standings")
    ax.set_ylabel("Points")
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax
