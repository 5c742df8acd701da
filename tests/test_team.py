from datetime import date

import pytest

from hoopbracket.constants import STAGE_QUARTERFINAL
from hoopbracket.events import EventLog
from hoopbracket.exceptions import ExhibitionFormatException, InvalidTeamDataException
from hoopbracket.models import ExhibitionResult, parse_exhibition_history
from hoopbracket.team import LOSER, WINNER, Team


def test_form_factor_without_history_is_zero(make_team):
    assert make_team("Alpha").form_factor() == 0.0


def test_form_factor_counts_first_score_wins():
    team = Team.from_dict(
        {"Team": "Srbija", "ISOCode": "SRB", "FIBARanking": 4},
        [{"Result": "90-80"}, {"Result": "70-75"}, {"Result": "100-99"}],
    )
    assert team.form_factor() == pytest.approx(2 / 3)


def test_malformed_exhibition_record_is_skipped():
    team = Team.from_dict(
        {"Team": "Srbija", "ISOCode": "SRB", "FIBARanking": 4},
        [{"Result": "abc-5"}, {"Result": "9²-80"}, {"Result": "80-70"}, {"Opponent": "GER"}],
    )
    assert len(team.exhibition_results) == 1
    assert team.form_factor() == 1.0


def test_malformed_exhibition_record_raises_in_strict_mode():
    with pytest.raises(ExhibitionFormatException):
        Team.from_dict(
            {"Team": "Srbija", "ISOCode": "SRB", "FIBARanking": 4},
            [{"Result": "80-70"}, {"Result": "abc-5"}],
            strict=True,
        )


def test_exhibition_record_keeps_opponent_and_date():
    (result,) = parse_exhibition_history(
        [{"Date": "06/07/24", "Opponent": "GER", "Result": "92-80"}]
    )
    assert result == ExhibitionResult(92, 80, "GER", date(2024, 7, 6))
    assert result.is_win


def test_unparseable_exhibition_date_keeps_the_score():
    (result,) = parse_exhibition_history(
        [{"Date": "sometime in July", "Result": "70-80"}]
    )
    assert result.played_on is None
    assert (result.score_for, result.score_against) == (70, 80)


def test_exhibition_history_is_loaded_once(make_team):
    team = make_team("Alpha", exhibitions=[ExhibitionResult(80, 70)])
    with pytest.raises(InvalidTeamDataException):
        team.set_exhibition_results([ExhibitionResult(60, 70)])
    assert team.form_factor() == 1.0


@pytest.mark.parametrize(
    "descriptor",
    [
        {"ISOCode": "SRB", "FIBARanking": 4},
        {"Team": "Srbija", "FIBARanking": 4},
        {"Team": "Srbija", "ISOCode": "SRB"},
        {"Team": "Srbija", "ISOCode": "SRB", "FIBARanking": "fourth"},
        {"Team": "Srbija", "ISOCode": "SRB", "FIBARanking": 0},
    ],
)
def test_invalid_roster_descriptor_rejected(descriptor):
    with pytest.raises(InvalidTeamDataException):
        Team.from_dict(descriptor)


def test_decided_match_updates_both_teams(make_team, scripted_model):
    team_a = make_team("Alpha", ranking=5)
    team_b = make_team("Bravo", ranking=5)
    event_log = EventLog()

    # no forfeits, base 70, A scores 70, B scores 70 and gets the tiebreak point
    result = team_a.play_match(
        team_b, scripted_model([0.5, 0.5, 0.0, 0.0]), event_sink=event_log
    )

    assert result == LOSER
    assert (team_b.points, team_b.wins, team_b.losses) == (2, 1, 0)
    assert (team_a.points, team_a.wins, team_a.losses) == (0, 0, 1)
    assert (team_a.score_for, team_a.score_against) == (70, 71)
    assert (team_b.score_for, team_b.score_against) == (71, 70)

    (event,) = event_log.events
    assert event.winner == "Bravo"
    assert (event.score_a, event.score_b) == (70, 71)
    assert event.forfeited_by is None
    assert team_a.match_history == [event]
    assert team_b.match_history == [event]


def test_forfeit_updates_counters_but_not_scores(make_team, scripted_model):
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")
    event_log = EventLog()

    result = team_a.play_match(
        team_b,
        scripted_model([0.9, 0.01]),
        event_sink=event_log,
        stage=STAGE_QUARTERFINAL,
    )

    assert result == WINNER
    assert (team_a.points, team_a.wins) == (2, 1)
    assert team_b.losses == 1
    for team in (team_a, team_b):
        assert (team.score_for, team.score_against) == (0, 0)

    (event,) = event_log.events
    assert event.is_forfeit
    assert event.stage == STAGE_QUARTERFINAL
    assert event.forfeited_by == "Bravo"
    assert event.score_a is None and event.score_b is None
    assert event.describe() == "Bravo gives up against Alpha."


def test_double_forfeit_match_is_lost_by_initiating_team(make_team, scripted_model):
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")

    result = team_a.play_match(team_b, scripted_model([0.0, 0.0]))

    assert result == LOSER
    assert team_b.wins == 1 and team_a.losses == 1
    assert team_a.match_history[0].forfeited_by == "Alpha"


def test_team_cannot_play_itself(make_team, scripted_model):
    team = make_team("Alpha")
    with pytest.raises(InvalidTeamDataException):
        team.play_match(team, scripted_model([]))


def test_standing_row_snapshot(make_team):
    team = make_team("Alpha")
    team.points, team.wins, team.losses = 4, 2, 1
    team.score_for, team.score_against = 250, 240

    row = team.standing_row(2)

    assert row.rank == 2
    assert row.point_differential == 10
    assert row.to_dict()["point_differential"] == 10
