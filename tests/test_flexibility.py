import pytest

from pitchfit.config import build_tables
from pitchfit.models import Player
from pitchfit.scoring import (
    NO_POSITIONS_EXPLANATION,
    FlexibilityScorer,
    calculate_player_flexibility,
    explain_categories,
    percentage,
    rank_roster_flexibility,
)


def test_percentage_rounds_half_up():
    assert percentage(1, 8) == 13
    assert percentage(3, 8) == 38
    assert percentage(1, 11) == 9
    assert percentage(8, 15) == 53
    assert percentage(4, 0) == 0


def test_central_midfielder_scores_53():
    result = calculate_player_flexibility("Rice", ["CM"])
    assert result.flexibility_score == 53
    assert result.primary_positions == ["CM"]
    assert result.explanation == "Midfield specialist - naturally versatile with good tactical awareness"
    assert result.compatible_positions == ["CB", "LB", "RB", "CM", "AM", "DM", "LM", "RM"]
    assert len(result.breakdown) == 1
    assert result.breakdown[0].flexibility_score == 53


def test_goalkeeper_scores_7():
    result = calculate_player_flexibility("Keeper", ["Goalkeeper"])
    assert result.flexibility_score == 7
    assert result.primary_positions == ["GK"]
    assert result.explanation.startswith("Goalkeeper specialist")


def test_no_positions():
    result = calculate_player_flexibility("Nobody", [])
    assert result.flexibility_score == 0
    assert result.breakdown == []
    assert result.explanation == NO_POSITIONS_EXPLANATION


def test_union_of_compatible_sets():
    # LB {LB, LWB, LM, CB} + LM {LM, LW, CM, LB} -> six distinct positions.
    result = calculate_player_flexibility("Wide", ["LB", "LM"])
    assert result.flexibility_score == 40
    assert result.explanation.startswith("Versatile midfielder")


def test_flexibility_is_monotonic_in_positions():
    base = calculate_player_flexibility("A", ["CF"]).flexibility_score
    wider = calculate_player_flexibility("A", ["CF", "LW"]).flexibility_score
    widest = calculate_player_flexibility("A", ["CF", "LW", "CB"]).flexibility_score
    assert base <= wider <= widest
    assert (base, wider, widest) == (27, 33, 53)


def test_every_position_reaches_100(tables):
    every = [mapping.standard for mapping in tables.position_mappings]
    assert calculate_player_flexibility("Utility", every).flexibility_score == 100


def test_unknown_positions_do_not_count():
    result = calculate_player_flexibility("Old School", ["Sweeper"])
    assert result.flexibility_score == 0
    assert result.breakdown == []
    assert result.primary_positions == ["Sweeper"]
    assert result.explanation == "Multi-positional player - valuable tactical flexibility"


@pytest.mark.parametrize(
    "categories, prefix",
    [
        (["DF"], "Defensive specialist"),
        (["FW", "FW"], "Attacking specialist"),
        (["DF", "MF"], "Versatile midfielder"),
        (["MF", "FW"], "Versatile midfielder"),
        (["DF", "FW"], "Multi-positional player"),
        (["GK", "DF"], "Multi-positional player"),
    ],
)
def test_explanation_decision_table(categories, prefix):
    assert explain_categories(categories).startswith(prefix)


def test_rank_orders_by_score_then_name(squad):
    results = rank_roster_flexibility(squad)
    scores = [result.flexibility_score for result in results]
    assert scores == sorted(scores, reverse=True)
    assert results[-1].name == "Keeper"
    # CB+DM spans {CB, DM, CM}, the same as CB alone.
    libero = next(result for result in results if result.name == "Libero")
    assert libero.flexibility_score == 20


def test_score_player_uses_injected_tables():
    tables = build_tables()
    scorer = FlexibilityScorer(tables)
    result = scorer.score_player(Player(name="Nine", positions=("ST",)))
    assert result.flexibility_score == 27
    assert result.primary_positions == ["CF"]
