import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from dartmatch.exceptions import RosterError
from dartmatch.models import ClosingScore, Outcome, Throw
from dartmatch.schemas import ClassicCricketSettings
from dartmatch.scoring.classic_cricket import ClassicCricket

NO_BULL = (15, 16, 17, 18, 19, 20)


def test_two_players_only():
    with pytest.raises(RosterError):
        ClassicCricket().validate_participants(["a", "b", "c"])


def test_initial_score_is_blank():
    score = ClassicCricket().create_initial_score("p1")
    assert score == ClosingScore("p1")
    assert score.hits == (0,) * 7


@pytest.mark.parametrize("sector", [15, 16, 17, 18, 19, 20, 25])
def test_every_configured_sector_counts(closing_score, sector):
    variant = ClassicCricket()
    assert sector in variant.settings.scoring_sectors
    scores = {"p1": closing_score("p1"), "p2": closing_score("p2")}
    result = variant.evaluate_throw("p1", Throw(sector), scores)
    assert result.updated_score.hits_on(sector) == 1


def test_non_scoring_sector_just_uses_a_dart(closing_score):
    scores = {"p1": closing_score("p1", s20=2), "p2": closing_score("p2")}
    result = ClassicCricket().evaluate_throw("p1", Throw(14, 3), scores)
    assert result.outcome is Outcome.CONTINUE
    assert result.updated_score == scores["p1"]
    assert result.other_updated_scores is None


def test_triple_closes_a_sector_without_points(closing_score):
    scores = {"p1": closing_score("p1"), "p2": closing_score("p2")}
    result = ClassicCricket().evaluate_throw("p1", Throw(20, 3), scores)
    assert result.updated_score.hits_on(20) == 3
    assert result.updated_score.points == 0


def test_surplus_hits_score_while_opponent_is_open(closing_score):
    scores = {"p1": closing_score("p1", s20=2), "p2": closing_score("p2")}
    result = ClassicCricket().evaluate_throw("p1", Throw(20, 3), scores)
    assert result.updated_score.hits_on(20) == 3
    assert result.updated_score.points == 40
    assert result.other_updated_scores is None


def test_no_points_once_opponent_closed(closing_score):
    scores = {"p1": closing_score("p1", closed=[20]), "p2": closing_score("p2", closed=[20])}
    result = ClassicCricket().evaluate_throw("p1", Throw(20, 3), scores)
    assert result.outcome is Outcome.CONTINUE
    assert result.updated_score.points == 0


def test_multipliers_can_count_as_single_hits(closing_score):
    variant = ClassicCricket(ClassicCricketSettings(count_multipliers=False))
    scores = {"p1": closing_score("p1"), "p2": closing_score("p2")}
    result = variant.evaluate_throw("p1", Throw(19, 3), scores)
    assert result.updated_score.hits_on(19) == 1


def test_custom_hits_to_close(closing_score):
    variant = ClassicCricket(ClassicCricketSettings(hits_to_close_sector=5))
    scores = {"p1": closing_score("p1", s18=4), "p2": closing_score("p2")}
    result = variant.evaluate_throw("p1", Throw(18, 2), scores)
    assert result.updated_score.hits_on(18) == 5
    assert result.updated_score.points == 18


@pytest.mark.parametrize(
    "p1_points, p2, outcome",
    [
        (0, {"points": 0}, Outcome.WIN),
        (10, {"points": 5}, Outcome.WIN),
        (0, {"points": 30}, Outcome.CONTINUE),
        (20, {"points": 20, "closed": NO_BULL + (25,)}, Outcome.TIE),
        (20, {"points": 10, "closed": NO_BULL + (25,)}, Outcome.WIN),
    ],
    ids=["level-with-open", "ahead", "behind", "level-both-closed", "ahead-both-closed"],
)
def test_closing_the_last_sector(closing_score, p1_points, p2, outcome):
    scores = {
        "p1": closing_score("p1", points=p1_points, closed=NO_BULL, bull=2),
        "p2": closing_score("p2", **p2),
    }
    result = ClassicCricket().evaluate_throw("p1", Throw(25), scores)
    assert result.outcome is outcome
    assert result.updated_score.closed_all(3)


def test_points_from_closing_throw_count(closing_score):
    scores = {
        "p1": closing_score("p1", points=20, closed=NO_BULL, bull=2),
        "p2": closing_score("p2", points=40),
    }
    result = ClassicCricket().evaluate_throw("p1", Throw(25, 2), scores)
    assert result.updated_score.points == 45
    assert result.outcome is Outcome.WIN


def test_closed_player_keeps_scoring_until_ahead(closing_score):
    scores = {
        "p1": closing_score("p1", points=0, closed=NO_BULL + (25,)),
        "p2": closing_score("p2", points=30),
    }
    variant = ClassicCricket()
    result = variant.evaluate_throw("p1", Throw(20), scores)
    assert result.outcome is Outcome.CONTINUE
    assert result.updated_score.points == 20

    scores["p1"] = result.updated_score
    result = variant.evaluate_throw("p1", Throw(20), scores)
    assert result.outcome is Outcome.WIN
    assert result.updated_score.points == 40


def test_input_scores_are_not_mutated(closing_score):
    before = closing_score("p1", s20=2)
    scores = {"p1": before, "p2": closing_score("p2")}
    ClassicCricket().evaluate_throw("p1", Throw(20, 3), scores)
    assert scores["p1"] is before
    assert before.hits_on(20) == 2
