import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from dartmatch.models import Outcome, Throw
from dartmatch.schemas import CutThroatCricketSettings
from dartmatch.scoring import cut_throat_cricket
from dartmatch.scoring.cut_throat_cricket import CutThroatCricket

NO_BULL = (15, 16, 17, 18, 19, 20)
ALL = NO_BULL + (25,)


def test_supports_up_to_four_players():
    variant = CutThroatCricket()
    assert variant.validate_participants(["a", "b", "c", "d"]) == ["a", "b", "c", "d"]


def test_surplus_hits_penalise_open_opponents(closing_score):
    scores = {
        "p1": closing_score("p1", closed=[20]),
        "p2": closing_score("p2", points=5),
        "p3": closing_score("p3", closed=[20]),
    }
    result = CutThroatCricket().evaluate_throw("p1", Throw(20, 3), scores)
    assert result.outcome is Outcome.CONTINUE
    assert result.updated_score.points == 0
    assert dict(result.other_updated_scores) == {"p2": closing_score("p2", points=65)}


def test_no_penalty_when_everyone_closed(closing_score):
    scores = {
        "p1": closing_score("p1", closed=[19]),
        "p2": closing_score("p2", closed=[19]),
    }
    result = CutThroatCricket().evaluate_throw("p1", Throw(19, 2), scores)
    assert result.other_updated_scores is None
    assert result.updated_score.points == 0


def test_standard_scoring_can_be_selected(closing_score):
    variant = cut_throat_cricket.init_variant({"scoring": "standard"})
    scores = {
        "p1": closing_score("p1", closed=[20]),
        "p2": closing_score("p2"),
        "p3": closing_score("p3"),
    }
    result = variant.evaluate_throw("p1", Throw(20, 2), scores)
    assert result.updated_score.points == 40
    assert result.other_updated_scores is None


@pytest.mark.parametrize(
    "p1_points, others, outcome",
    [
        (0, [{"points": 0}, {"points": 10}], Outcome.WIN),
        (10, [{"points": 5}, {"points": 40}], Outcome.CONTINUE),
        (10, [{"points": 10, "closed": ALL}, {"points": 40}], Outcome.TIE),
        (10, [{"points": 10}, {"points": 40}], Outcome.WIN),
    ],
    ids=["lowest", "someone-lower", "level-closed", "level-open"],
)
def test_closing_the_last_sector(closing_score, p1_points, others, outcome):
    scores = {"p1": closing_score("p1", points=p1_points, closed=NO_BULL, bull=2)}
    for i, kwargs in enumerate(others, start=2):
        scores[f"p{i}"] = closing_score(f"p{i}", **kwargs)
    result = CutThroatCricket().evaluate_throw("p1", Throw(25), scores)
    assert result.outcome is outcome


def test_penalty_from_closing_throw_decides(closing_score):
    scores = {
        "p1": closing_score("p1", points=10, closed=(15, 16, 17, 18, 19, 25), s20=2),
        "p2": closing_score("p2", points=0),
    }
    result = CutThroatCricket().evaluate_throw("p1", Throw(20, 3), scores)
    assert result.outcome is Outcome.WIN
    assert dict(result.other_updated_scores) == {"p2": closing_score("p2", points=40)}


def test_single_hit_mode(closing_score):
    variant = CutThroatCricket(
        CutThroatCricketSettings(hits_to_close_sector=1, count_multipliers=False)
    )
    scores = {"p1": closing_score("p1"), "p2": closing_score("p2")}
    result = variant.evaluate_throw("p1", Throw(17, 3), scores)
    assert result.updated_score.hits_on(17) == 1
    assert result.other_updated_scores is None
