from decimal import Decimal

import pytest

from models import (
    DEFAULT_HANDICAP_POLICY,
    HandicapPolicy,
    Hole,
    HoleResult,
    HoleScore,
    MatchFormat,
    MatchPlayer,
    MatchStatus,
    Tee,
    TiltCarryover,
)
from scoring.exceptions import IncompleteHoleSequence, InvalidInput, UnsupportedFormatCombination
from scoring.rounds import (
    calculate_tilt_payouts,
    compute_match_result,
    compute_skins_for_round,
    compute_tilt_for_round,
)

PARS = [4, 5, 3, 4, 4, 3, 5, 4, 4, 4, 5, 3, 4, 4, 3, 5, 4, 4]
FULL_HANDICAP = HandicapPolicy(percentage=100, off_the_low=True)


def _build_tee() -> Tee:
    holes = [Hole(number=i, par=PARS[i - 1], stroke_index=i) for i in range(1, 19)]
    return Tee(name="White", slope_rating=113, holes=holes)


def _scores(grosses) -> list:
    """Gross strokes for holes 1..n; None leaves a hole unscored."""
    return [HoleScore(hole_number=i, gross_strokes=g) for i, g in enumerate(grosses, start=1) if g is not None]


def _over_par(n, holes=18):
    return [PARS[i] + n for i in range(holes)]


def _player(player_id, side, index=0.0, grosses=(), **kwargs) -> MatchPlayer:
    return MatchPlayer(player_id=player_id, side=side, handicap_index=index, scores=_scores(grosses), **kwargs)


# ================================================================
# Match result
# ================================================================

def test_singles_match_closes_out():
    players = [
        _player("a", 1, 0, _over_par(0)),
        _player("b", 2, 2, _over_par(1)),   # strokes on holes 1 and 2
    ]
    result = compute_match_result(MatchFormat.SINGLES, _build_tee(), players, FULL_HANDICAP)

    strokes = {h.player_id: h.playing_handicap for h in result.handicaps}
    assert strokes == {"a": 0, "b": 2}
    assert result.net_scores["b"][1] == PARS[0]
    assert result.hole_results[:3] == [HoleResult.HALVED, HoleResult.HALVED, HoleResult.SIDE1]
    assert result.state.holes_played == 11
    assert result.state.result_text == "9&7"
    assert result.state.status == MatchStatus.COMPLETE


def test_max_score_caps_gross_before_strokes():
    players = [
        _player("a", 1, 0, [4, 5, 10]),
        _player("b", 2, 0, [4, 5, 3]),
    ]
    result = compute_match_result(
        MatchFormat.SINGLES, _build_tee(), players, FULL_HANDICAP, max_score_over_par=3,
    )
    assert result.net_scores["a"][3] == 6
    assert result.state.display_text == "1 UP"
    assert result.state.leading_side == 2


def test_fourball_best_ball():
    players = [
        _player("a", 1, 0, [5, 5]),
        _player("b", 1, 0, [3, 6]),
        _player("c", 2, 0, [4, 5]),
        _player("d", 2, 0, [4, 5]),
    ]
    result = compute_match_result(MatchFormat.FOURBALL, _build_tee(), players, FULL_HANDICAP)
    assert result.hole_results[:2] == [HoleResult.SIDE1, HoleResult.HALVED]
    assert result.state.display_text == "1 UP"


def test_foursomes_ball_under_either_partner():
    players = [
        _player("a", 1, 10, [5]),
        MatchPlayer(player_id="b", side=1, handicap_index=20, scores=[HoleScore(hole_number=2, gross_strokes=5)]),
        _player("c", 2, 5, [4, 5]),
        _player("d", 2, 15),
    ]
    result = compute_match_result(MatchFormat.FOURSOMES, _build_tee(), players, DEFAULT_HANDICAP_POLICY)

    strokes = {h.player_id: h.playing_handicap for h in result.handicaps}
    assert strokes == {"a": 4, "b": 4, "c": 0, "d": 0}
    assert result.hole_results[:2] == [HoleResult.HALVED, HoleResult.SIDE1]
    assert result.state.side1_lead == 1
    assert result.state.holes_played == 2


def test_match_gap_raises():
    players = [
        _player("a", 1, 0, [4, None, 3]),
        _player("b", 2, 0, [4, None, 3]),
    ]
    with pytest.raises(IncompleteHoleSequence):
        compute_match_result(MatchFormat.SINGLES, _build_tee(), players, FULL_HANDICAP)


def test_match_needs_both_sides():
    with pytest.raises(InvalidInput):
        compute_match_result(MatchFormat.SINGLES, _build_tee(), [_player("a", 1)], FULL_HANDICAP)


def test_stroke_play_net_totals():
    players = [
        _player("a", 1, 0, _over_par(0)),
        _player("b", 2, 2, _over_par(0)),
    ]
    result = compute_match_result(MatchFormat.STROKEPLAY, _build_tee(), players, FULL_HANDICAP)

    assert result.state.side1_total == 72
    assert result.state.side2_total == 70
    assert result.state.result_text == "Won by 2"
    assert result.state.leading_side == 2


def test_stroke_play_in_progress():
    players = [
        _player("a", 1, 0, _over_par(0, holes=9)),
        _player("b", 2, 0, _over_par(0, holes=8)),
    ]
    result = compute_match_result(MatchFormat.STROKEPLAY, _build_tee(), players, FULL_HANDICAP)
    assert result.state.display_text == "Thru 8"
    assert not result.state.is_complete


def test_stroke_play_totals_every_member():
    players = [
        _player("a", 1, 0, _over_par(0)),
        _player("b", 1, 0, _over_par(0)),
        _player("c", 2, 2, _over_par(0)),
        _player("d", 2, 0, _over_par(0, holes=17)),
    ]
    result = compute_match_result(MatchFormat.STROKEPLAY, _build_tee(), players, FULL_HANDICAP)
    assert result.state.display_text == "Thru 17"

    players[3].scores.append(HoleScore(hole_number=18, gross_strokes=PARS[17]))
    result = compute_match_result(MatchFormat.STROKEPLAY, _build_tee(), players, FULL_HANDICAP)
    assert result.state.side1_total == 144
    assert result.state.side2_total == 142
    assert result.state.result_text == "Won by 2"


def test_handicap_beyond_two_strokes_a_hole_rejected():
    players = [_player("a", 1, 0, [4]), _player("b", 2, 54, [4])]
    with pytest.raises(InvalidInput):
        compute_match_result(MatchFormat.SINGLES, _build_tee(), players, FULL_HANDICAP)


def test_duplicate_score_rejected():
    players = [
        MatchPlayer(player_id="a", side=1, scores=[
            HoleScore(hole_number=1, gross_strokes=4), HoleScore(hole_number=1, gross_strokes=5),
        ]),
        _player("b", 2, 0, [4]),
    ]
    with pytest.raises(InvalidInput):
        compute_match_result(MatchFormat.SINGLES, _build_tee(), players, FULL_HANDICAP)


# ================================================================
# Skins
# ================================================================

def test_individual_skins_with_carryover():
    players = [
        _player("p1", 1, 0, [4, 5, 2], skins_opt_in=True),
        _player("p2", 1, 0, [4, 5, 3], skins_opt_in=True),
        _player("p3", 2, 0, [5, 6, 3], skins_opt_in=True),
        _player("p4", 2, 0, [5, 6, 3], skins_opt_in=True),
        _player("p5", 1, 0, [3, 3, 1]),   # not in the game
    ]
    result = compute_skins_for_round(MatchFormat.FOURBALL, _build_tee(), players, HandicapPolicy(), 20)

    assert result.player_count == 4
    assert result.skins.total_pot == Decimal("80.00")
    assert result.skins.skins_awarded == 1
    payouts = {p.entrant_id: p.money_won for p in result.player_payouts}
    assert payouts["p1"] == Decimal("80.00")
    assert "p5" not in payouts


def test_skins_stop_at_first_unfinished_hole():
    players = [
        _player("p1", 1, 0, [4, 5, 2], skins_opt_in=True),
        _player("p2", 2, 0, [4], skins_opt_in=True),
    ]
    result = compute_skins_for_round(MatchFormat.SINGLES, _build_tee(), players, HandicapPolicy(), 10)

    assert [h.hole_number for h in result.skins.holes] == [1]
    assert result.skins.skins_awarded == 0


def test_skins_use_skins_handicap():
    # 10 index -> 8 skins strokes, so p2 nets a 4 on hole 1 (stroke index 1)
    players = [
        _player("p1", 1, 0, [4], skins_opt_in=True),
        _player("p2", 2, 10, [5], skins_opt_in=True),
    ]
    result = compute_skins_for_round(MatchFormat.SINGLES, _build_tee(), players, HandicapPolicy(), 10)
    assert result.skins.holes[0].winner_id is None


def test_scramble_skins_split_between_partners():
    players = [
        _player("a", 1, 2, [3], match_id="m1", skins_opt_in=True),
        _player("b", 1, 20, match_id="m1", skins_opt_in=True),
        _player("c", 2, 0, [4], match_id="m1", skins_opt_in=True),
        _player("d", 2, 0, match_id="m1", skins_opt_in=True),
    ]
    result = compute_skins_for_round(MatchFormat.SCRAMBLE, _build_tee(), players, DEFAULT_HANDICAP_POLICY, 10)

    assert result.player_count == 4
    assert result.team_members == {"m1:1": ["a", "b"], "m1:2": ["c", "d"]}
    assert result.skins.holes[0].winner_id == "m1:1"
    payouts = {p.entrant_id: p for p in result.player_payouts}
    assert payouts["a"].money_won == Decimal("20.00")
    assert payouts["b"].money_won == Decimal("20.00")
    assert payouts["a"].skins_won == 1
    assert payouts["c"].money_won == Decimal("0.00")
    assert sum(p.money_won for p in result.player_payouts) == result.skins.total_pot


def test_foursomes_skins_without_combo():
    players = [
        _player("a", 1, 2, [4], match_id="m1", skins_opt_in=True),
        _player("c", 2, 0, [4], match_id="m1", skins_opt_in=True),
    ]
    with pytest.raises(UnsupportedFormatCombination):
        compute_skins_for_round(MatchFormat.FOURSOMES, _build_tee(), players, HandicapPolicy(), 10)


def test_skins_gap_raises():
    players = [
        _player("p1", 1, 0, [4, None, 3], skins_opt_in=True),
        _player("p2", 2, 0, [4, 4, 3], skins_opt_in=True),
    ]
    with pytest.raises(IncompleteHoleSequence):
        compute_skins_for_round(MatchFormat.SINGLES, _build_tee(), players, HandicapPolicy(), 10)


def test_skins_handicap_beyond_two_strokes_a_hole_rejected():
    policy = HandicapPolicy(max_handicap=54, skins_percentage=100)
    players = [
        _player("p1", 1, 0, [4], skins_opt_in=True),
        _player("p2", 2, 54, [4], skins_opt_in=True),
    ]
    with pytest.raises(InvalidInput):
        compute_skins_for_round(MatchFormat.SINGLES, _build_tee(), players, policy, 10)


def test_skins_recompute_after_correction():
    p1 = _player("p1", 1, 0, [3], skins_opt_in=True)
    p2 = _player("p2", 2, 0, [4], skins_opt_in=True)
    tee = _build_tee()

    before = compute_skins_for_round(MatchFormat.SINGLES, tee, [p1, p2], HandicapPolicy(), 10)
    assert before.skins.holes[0].winner_id == "p1"

    p1.scores[0].update_field("gross_strokes", 4)
    after = compute_skins_for_round(MatchFormat.SINGLES, tee, [p1, p2], HandicapPolicy(), 10)
    assert after.skins.holes[0].winner_id is None


# ================================================================
# TILT
# ================================================================

def test_tilt_round_with_carryover_out():
    players = [
        _player("a", 1, 0, [3, 5], tilt_opt_in=True),   # birdie, par
        _player("b", 2, 0, [4, 4], tilt_opt_in=True),   # par, birdie
        _player("c", 2, 0, [4, 5]),
    ]
    result = compute_tilt_for_round(_build_tee(), players, HandicapPolicy(), 10)

    assert result.player_count == 2
    assert result.tilt.total_pot == Decimal("20.00")
    totals = {p.player_id: p.total_points for p in result.tilt.players}
    assert totals == {"a": 8, "b": 6}
    assert result.carryover["a"] == TiltCarryover(multiplier=1, streak=0)
    assert result.carryover["b"] == TiltCarryover(multiplier=2, streak=1)


def test_tilt_handicap_beyond_two_strokes_a_hole_rejected():
    policy = HandicapPolicy(max_handicap=54, skins_percentage=100)
    players = [_player("a", 1, 54, [4], tilt_opt_in=True)]
    with pytest.raises(InvalidInput):
        compute_tilt_for_round(_build_tee(), players, policy, 10)


def test_tilt_round_seeded_from_previous_round():
    players = [_player("a", 1, 0, [4], tilt_opt_in=True)]
    result = compute_tilt_for_round(
        _build_tee(), players, HandicapPolicy(), 10,
        carryover_in={"a": TiltCarryover(multiplier=2, streak=1)},
    )
    assert result.tilt.players[0].holes[0].points == 4


# ================================================================
# TILT payouts
# ================================================================

def test_tilt_payouts_top_three():
    payouts = calculate_tilt_payouts({"p1": 200, "p2": 150, "p3": 100, "p4": 50}, 700)
    assert payouts == {"p1": Decimal("420.00"), "p2": Decimal("210.00"), "p3": Decimal("70.00")}


def test_tilt_payouts_tie_for_first():
    payouts = calculate_tilt_payouts({"p1": 200, "p2": 200, "p3": 100}, 1000)
    assert payouts["p1"] == Decimal("450.00")
    assert payouts["p2"] == Decimal("450.00")
    assert payouts["p3"] == Decimal("100.00")


def test_tilt_payouts_three_way_tie_takes_whole_pot():
    payouts = calculate_tilt_payouts({"p1": 100, "p2": 100, "p3": 100, "p4": 50}, 600)
    assert payouts == {"p1": Decimal("200.00"), "p2": Decimal("200.00"), "p3": Decimal("200.00")}


def test_tilt_payouts_tie_for_second_sums_to_pot():
    payouts = calculate_tilt_payouts({"a": 100, "b": 80, "c": 80, "d": 80}, 100)
    assert payouts["a"] == Decimal("60.00")
    assert payouts["b"] == Decimal("13.34")
    assert payouts["c"] == Decimal("13.33")
    assert sum(payouts.values()) == Decimal("100.00")


def test_tilt_payouts_empty():
    assert calculate_tilt_payouts({}, 700) == {}
