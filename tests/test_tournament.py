import random

import pytest

from hoopbracket.constants import STAGE_GROUP
from hoopbracket.events import EventLog
from hoopbracket.exceptions import (
    ConfigurationException,
    DuplicateTeamException,
    ExhibitionFormatException,
    InsufficientTeamsException,
    InvalidConfigurationException,
    TeamNotFoundException,
    TournamentStateException,
)
from hoopbracket.models import TournamentConfig
from hoopbracket.tournament import Tournament


@pytest.mark.parametrize("seed", range(25))
def test_end_to_end_twelve_teams_without_exhibitions(twelve_team_roster, seed):
    tournament = Tournament.from_roster(
        twelve_team_roster, config=TournamentConfig(seed=seed)
    )

    result = tournament.simulate()

    assert [standing.label for standing in result.group_standings] == ["A", "B", "C"]
    for standing in result.group_standings:
        assert len(standing.rows) == 4
        for row in standing.rows:
            assert row.wins + row.losses == 3
        assert sum(row.points for row in standing.rows) == 12

    assert len(result.advancing) == 8
    assert len({team.iso_code for team in result.advancing}) == 8
    assert len(result.events_for_stage(STAGE_GROUP)) == 18
    assert len(result.events) == 18 + 8

    medals = result.medals
    assert medals is not None
    assert len({medals.gold.iso_code, medals.silver.iso_code, medals.bronze.iso_code}) == 3
    assert all(team in result.advancing for team in medals.podium)

    for team in tournament.teams.values():
        assert team.wins + team.losses == team.matches_played
        assert team.points == 2 * team.wins


def test_teams_are_shared_between_groups_bracket_and_registry(twelve_team_roster):
    tournament = Tournament.from_roster(
        twelve_team_roster, config=TournamentConfig(seed=3)
    )
    result = tournament.simulate()

    group_members = {id(team) for group in tournament.groups for team in group.teams}
    assert group_members == {id(team) for team in tournament.teams.values()}
    for team in result.advancing:
        assert tournament.get_team(team.iso_code) is team
        # group matches plus at least one knockout match
        assert team.matches_played >= 4
    assert tournament.get_team(result.medals.gold.iso_code).matches_played == 6


def test_same_seed_reproduces_the_run(twelve_team_roster):
    first = Tournament.from_roster(twelve_team_roster, config=TournamentConfig(seed=99))
    second = Tournament.from_roster(twelve_team_roster, config=TournamentConfig(seed=99))

    assert first.simulate().to_dict() == second.simulate().to_dict()


def test_injected_random_stream_overrides_config_seed(twelve_team_roster):
    first = Tournament.from_roster(
        twelve_team_roster, config=TournamentConfig(seed=1), rng=random.Random(42)
    )
    second = Tournament.from_roster(
        twelve_team_roster, config=TournamentConfig(seed=2), rng=random.Random(42)
    )

    assert first.simulate().to_dict() == second.simulate().to_dict()


def test_groups_are_built_from_roster_order(twelve_team_roster):
    tournament = Tournament.from_roster(twelve_team_roster)

    assert [group.label for group in tournament.groups] == ["A", "B", "C"]
    assert [team.iso_code for team in tournament.groups[1].teams] == [
        "T05",
        "T06",
        "T07",
        "T08",
    ]


def test_uneven_roster_groups_are_partitioned_in_order(twelve_team_roster):
    teams = [team for label in "ABC" for team in twelve_team_roster[label]]
    roster = {"X": teams[:5], "Y": teams[5:]}

    tournament = Tournament.from_roster(roster)

    assert [group.label for group in tournament.groups] == ["A", "B", "C"]
    assert [team.iso_code for team in tournament.groups[1].teams] == [
        "T05",
        "T06",
        "T07",
        "T08",
    ]


def test_too_few_teams_is_fatal(twelve_team_roster):
    twelve_team_roster["C"] = twelve_team_roster["C"][:3]
    with pytest.raises(InsufficientTeamsException):
        Tournament.from_roster(twelve_team_roster)


def test_too_many_teams_is_rejected(twelve_team_roster):
    twelve_team_roster["C"].append(
        {"Team": "Team 13", "ISOCode": "T13", "FIBARanking": 13}
    )
    with pytest.raises(InvalidConfigurationException):
        Tournament.from_roster(twelve_team_roster)


def test_duplicate_iso_code_is_rejected(twelve_team_roster):
    twelve_team_roster["C"][3]["ISOCode"] = "T01"
    with pytest.raises(DuplicateTeamException):
        Tournament.from_roster(twelve_team_roster)


def test_configuration_errors_share_a_base_class(twelve_team_roster):
    twelve_team_roster["A"] = []
    with pytest.raises(ConfigurationException):
        Tournament.from_roster(twelve_team_roster)


def test_tournament_is_simulated_once(twelve_team_roster):
    tournament = Tournament.from_roster(twelve_team_roster)
    tournament.simulate()

    assert tournament.is_completed
    with pytest.raises(TournamentStateException):
        tournament.simulate()


def test_unknown_team_lookup(twelve_team_roster):
    tournament = Tournament.from_roster(twelve_team_roster)
    with pytest.raises(TeamNotFoundException):
        tournament.get_team("XXX")


def test_malformed_exhibition_does_not_abort_run(twelve_team_roster):
    exhibitions = {
        "T01": [{"Result": "abc-5"}, {"Result": "80-70"}, {"Result": "60-75"}],
        "T02": [{"Result": "88-90"}, {"Result": "9²-80"}],
    }

    tournament = Tournament.from_roster(
        twelve_team_roster, exhibitions, config=TournamentConfig(seed=8)
    )
    result = tournament.simulate()

    assert tournament.get_team("T01").form_factor() == pytest.approx(0.5)
    assert tournament.get_team("T02").form_factor() == 0.0
    assert tournament.get_team("T03").form_factor() == 0.0
    assert result.medals is not None


def test_strict_mode_rejects_malformed_exhibition(twelve_team_roster):
    with pytest.raises(ExhibitionFormatException):
        Tournament.from_roster(
            twelve_team_roster,
            {"T01": [{"Result": "abc-5"}]},
            config=TournamentConfig(strict_exhibitions=True),
        )


def test_event_sink_receives_the_whole_run(twelve_team_roster):
    event_log = EventLog()
    tournament = Tournament.from_roster(
        twelve_team_roster, config=TournamentConfig(seed=4), event_sink=event_log
    )

    result = tournament.simulate()

    assert event_log.events == result.events
    assert [s.label for s in event_log.group_standings] == ["A", "B", "C"]
    assert event_log.advancing == result.advancing
    assert event_log.medals is result.medals


def test_result_serialises_to_plain_data(twelve_team_roster):
    result = Tournament.from_roster(
        twelve_team_roster, config=TournamentConfig(seed=12)
    ).simulate()

    data = result.to_dict()

    assert set(data) == {"group_standings", "advancing", "seed_pots", "events", "medals"}
    assert len(data["events"]) == 26
    assert set(data["medals"]) == {"gold", "silver", "bronze", "fourth"}
    assert all(len(pair) == 2 for pair in data["seed_pots"].values())
