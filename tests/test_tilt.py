from decimal import Decimal

import pytest

from models import TiltCarryover, TiltConfig, TiltHoleScore, TiltPointTable
from scoring.exceptions import IncompleteHoleSequence
from scoring.tilt import base_points, calculate_tilt


def _hole(number, net, par=4, player_id="p1") -> TiltHoleScore:
    return TiltHoleScore(hole_number=number, par=par, scores={player_id: net})


def _single(nets, **kwargs):
    holes = [_hole(i, net) for i, net in enumerate(nets, start=1)]
    return calculate_tilt(holes, 0, 1, **kwargs).players[0]


# ================================================================
# Base points
# ================================================================

def test_base_points_by_score():
    p = _single([2, 3, 4, 5, 6])
    assert [h.base_points for h in p.holes] == [8, 4, 2, 0, -4]


def test_base_points_extremes():
    table = TiltPointTable()
    assert base_points(-3, table) == 16
    assert base_points(-4, table) == 16
    assert base_points(5, table) == -4


def test_custom_point_values():
    p = _single([3], config=TiltConfig(points=TiltPointTable(albatross=20, eagle=12, birdie=10)))
    assert p.holes[0].base_points == 10
    assert p.holes[0].points == 10


# ================================================================
# Multiplier
# ================================================================

def test_birdie_doubles_next_hole():
    p = _single([3, 4, 4])
    assert [h.multiplier for h in p.holes] == [1, 2, 1]
    assert [h.points for h in p.holes] == [4, 4, 2]
    assert p.total_points == 10


def test_two_birdies_reach_three_times():
    p = _single([3, 3, 4])
    assert [h.multiplier for h in p.holes] == [1, 2, 3]
    assert p.holes[1].points == 8
    assert p.holes[2].points == 6


def test_eagle_counts_double():
    p = _single([2, 4])
    assert p.holes[1].multiplier == 3
    assert p.holes[1].points == 6


def test_multiplier_applies_to_negative_points():
    p = _single([3, 6, 4])
    assert p.holes[1].multiplier == 2
    assert p.holes[1].points == -8
    assert p.holes[2].multiplier == 1
    assert p.total_points == -2


def test_multiplier_grows_without_cap():
    p = _single([3, 3, 3, 3])
    assert [h.multiplier for h in p.holes] == [1, 2, 3, 4]
    assert p.total_points == 40
    assert p.final_multiplier == 5
    assert p.final_streak == 4


def test_multiplier_cap():
    p = _single([3, 3, 3, 3], config=TiltConfig(max_multiplier=3))
    assert [h.multiplier for h in p.holes] == [1, 2, 3, 3]
    assert p.final_multiplier == 3


def test_running_total():
    p = _single([3, 4, 5, 6])
    assert [h.running_total for h in p.holes] == [4, 8, 8, 4]


# ================================================================
# Carryover between rounds
# ================================================================

def test_starting_multiplier_from_config():
    p = _single([4, 4], config=TiltConfig(starting_multiplier=3, starting_streak=2))
    assert p.holes[0].multiplier == 3
    assert p.holes[0].points == 6
    assert p.holes[1].multiplier == 1


def test_per_player_carryover():
    holes = [TiltHoleScore(hole_number=1, par=4, scores={"p1": 3, "p2": 3})]
    result = calculate_tilt(holes, 0, 2, carryover={"p2": TiltCarryover(multiplier=3, streak=2)})
    by_id = {p.player_id: p for p in result.players}

    assert by_id["p1"].holes[0].points == 4
    assert by_id["p2"].holes[0].points == 12
    assert by_id["p2"].final_streak == 3
    assert by_id["p2"].final_multiplier == 4


def test_final_state_for_next_round():
    p = _single([3, 3])
    assert p.final_multiplier == 3
    assert p.final_streak == 2


# ================================================================
# Field
# ================================================================

def test_pot_and_entry_fee():
    holes = [TiltHoleScore(hole_number=1, par=4, scores={f"p{i}": 4 for i in range(1, 5)})]
    result = calculate_tilt(holes, 20, 4)

    assert result.total_pot == Decimal("80.00")
    assert result.entry_fee == Decimal("20.00")
    assert result.player_count == 4
    assert len(result.players) == 4


def test_no_holes():
    result = calculate_tilt([], 20, 4)
    assert result.players == []
    assert result.total_pot == Decimal("80.00")


def test_full_round_ranking():
    holes = []
    for number in range(1, 19):
        p2 = {1: 3, 2: 6}.get(number, 4)
        holes.append(TiltHoleScore(hole_number=number, par=4, scores={"p1": 4, "p2": p2}))
    result = calculate_tilt(holes, 20, 2)
    by_id = {p.player_id: p for p in result.players}

    assert by_id["p1"].total_points == 36
    # birdie 4, double at 2x -8, sixteen pars 32
    assert by_id["p2"].total_points == 28
    assert result.players[0].player_id == "p1"


def test_gap_in_player_holes():
    holes = [_hole(1, 4), _hole(2, 4, player_id="p2"), _hole(3, 4)]
    with pytest.raises(IncompleteHoleSequence):
        calculate_tilt(holes, 0, 2)
