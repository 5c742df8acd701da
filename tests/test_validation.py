import pytest

from hoopbracket.exceptions import (
    ExhibitionFormatException,
    InvalidConfigurationException,
    InvalidTeamDataException,
)
from hoopbracket.models import TournamentConfig
from hoopbracket.utils.validation import (
    parse_score_pair,
    parse_score_pair_strict,
    validate_probability,
    validate_roster_entry,
    validate_roster_entry_strict,
)


@pytest.mark.parametrize(
    "value, expected",
    [("83-90", (83, 90)), (" 101 - 100 ", (101, 100)), ("0-0", (0, 0))],
)
def test_parse_score_pair_valid(value, expected):
    result = parse_score_pair(value)
    assert result
    assert result.sanitized_value == expected


@pytest.mark.parametrize(
    "value",
    ["abc-5", "83", "83-90-1", "-5-3", "", None, 83, "8.5-3", "9²-80", "²-5"],
)
def test_parse_score_pair_invalid(value):
    result = parse_score_pair(value)
    assert not result
    assert result.error_message


def test_parse_score_pair_strict_raises():
    assert parse_score_pair_strict("90-80") == (90, 80)
    with pytest.raises(ExhibitionFormatException):
        parse_score_pair_strict("abc-5")


def test_roster_entry_is_normalised():
    result = validate_roster_entry({"Team": " Srbija ", "ISOCode": "srb", "FIBARanking": "4"})
    assert result.sanitized_value == ("Srbija", "SRB", 4)


def test_roster_entry_strict_raises():
    with pytest.raises(InvalidTeamDataException):
        validate_roster_entry_strict({"Team": "Srbija", "ISOCode": "", "FIBARanking": 4})
    with pytest.raises(InvalidTeamDataException):
        validate_roster_entry_strict(["Srbija", "SRB", 4])


def test_validate_probability():
    assert validate_probability("0.25") == 0.25
    with pytest.raises(InvalidConfigurationException):
        validate_probability(1.01)


def test_config_round_trip_and_validation():
    config = TournamentConfig(name="Paris", seed=7, forfeit_probability=0.2)
    assert TournamentConfig.from_dict(config.to_dict()) == config

    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(forfeit_probability=-1)
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(seed="seven")


def test_config_seed_gives_reproducible_stream():
    first = TournamentConfig(seed=5).create_random()
    second = TournamentConfig(seed=5).create_random()
    assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]
