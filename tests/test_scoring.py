import random

import pytest

from hoopbracket.constants import OUTCOME_DECIDED, OUTCOME_FORFEIT, SCORE_FLOOR
from hoopbracket.exceptions import InvalidConfigurationException
from hoopbracket.models import ExhibitionResult
from hoopbracket.scoring import ScoringModel, score_pair, strength_factor


def _history(wins, losses):
    return [ExhibitionResult(90, 80)] * wins + [ExhibitionResult(70, 85)] * losses


def test_played_matches_never_tie_and_respect_floor(make_team):
    rng = random.Random(2024)
    model = ScoringModel(rng, forfeit_probability=0.0)

    for _ in range(500):
        team_a = make_team(
            "Alpha",
            ranking=rng.randint(1, 80),
            exhibitions=_history(rng.randint(0, 5), rng.randint(0, 5)),
        )
        team_b = make_team(
            "Bravo",
            ranking=rng.randint(1, 80),
            exhibitions=_history(rng.randint(0, 5), rng.randint(0, 5)),
        )
        outcome = model.simulate_match(team_a, team_b)

        assert outcome.outcome == OUTCOME_DECIDED
        assert outcome.score_a != outcome.score_b
        assert outcome.score_a >= SCORE_FLOOR
        assert outcome.score_b >= SCORE_FLOOR
        expected_winner = team_a if outcome.score_a > outcome.score_b else team_b
        assert outcome.winner is expected_winner
        assert {outcome.winner, outcome.loser} == {team_a, team_b}


def test_score_pair_breaks_tie_for_team_b():
    assert score_pair(70, 0.0, 0.0) == (70, 71)


def test_score_pair_applies_floor_to_both_sides():
    assert score_pair(-100, 0.0, 0.0) == (60, 240)
    assert score_pair(500, 0.0, 0.0) == (500, 60)


def test_score_pair_floors_fractional_scores():
    assert score_pair(70.9, 0.5, 0.5) == (71, 69)


def test_strength_factor_combines_ranking_and_form():
    assert strength_factor(3, 1) == pytest.approx(0.2)
    assert strength_factor(3, 1, 0.5, 0.0) == pytest.approx(0.7)
    assert strength_factor(1, 3, 0.0, 1.0) == pytest.approx(-1.2)


def test_draw_order_is_forfeits_then_noise(make_team, scripted_model):
    team_a = make_team("Alpha", ranking=5)
    team_b = make_team("Bravo", ranking=5)
    model = scripted_model([0.5, 0.5, 0.25, 0.75])

    outcome = model.simulate_match(team_a, team_b)

    # base score 70; noise 5 for A, 15 for B
    assert (outcome.score_a, outcome.score_b) == (75, 85)
    assert outcome.winner is team_b
    assert model.random.values == []


def test_team_a_forfeit_gives_win_to_team_b(make_team, scripted_model):
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")

    outcome = scripted_model([0.05, 0.9]).simulate_match(team_a, team_b)

    assert outcome.outcome == OUTCOME_FORFEIT
    assert outcome.winner is team_b
    assert outcome.loser is team_a
    assert outcome.score_a is None and outcome.score_b is None


def test_team_b_forfeit_gives_win_to_team_a(make_team, scripted_model):
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")

    outcome = scripted_model([0.9, 0.05]).simulate_match(team_a, team_b)

    assert outcome.is_forfeit
    assert outcome.winner is team_a
    assert outcome.score_a is None and outcome.score_b is None


def test_double_forfeit_is_resolved_by_team_a_forfeit(make_team, scripted_model):
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")

    for _ in range(10):
        outcome = scripted_model([0.0, 0.0]).simulate_match(team_a, team_b)
        assert outcome.is_forfeit
        assert outcome.winner is team_b
        assert outcome.loser is team_a
        assert outcome.score_a is None and outcome.score_b is None


def test_forfeit_probability_bounds(make_team):
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")

    never = ScoringModel(random.Random(1), forfeit_probability=0.0)
    always = ScoringModel(random.Random(1), forfeit_probability=1.0)
    for _ in range(50):
        assert not never.simulate_match(team_a, team_b).is_forfeit
        assert always.simulate_match(team_a, team_b).winner is team_b


@pytest.mark.parametrize("probability", [-0.1, 1.5, "often"])
def test_invalid_forfeit_probability_rejected(probability):
    with pytest.raises(InvalidConfigurationException):
        ScoringModel(random.Random(), forfeit_probability=probability)


def test_scoring_does_not_mutate_teams(make_team):
    team_a = make_team("Alpha", ranking=1)
    team_b = make_team("Bravo", ranking=9)
    model = ScoringModel(random.Random(3))

    for _ in range(20):
        model.simulate_match(team_a, team_b)

    for team in (team_a, team_b):
        assert (team.points, team.wins, team.losses) == (0, 0, 0)
        assert (team.score_for, team.score_against) == (0, 0)
