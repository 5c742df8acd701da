import random

import pytest

from hoopbracket.scoring import ScoringModel
from hoopbracket.team import Team


class ScriptedRandom(random.Random):
    """Random stream that returns queued values from ``random()``."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        if not self.values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self.values.pop(0)


@pytest.fixture
def scripted_model():
    """Build a ScoringModel whose draws come from a fixed list."""

    def _build(values, forfeit_probability=0.1):
        return ScoringModel(ScriptedRandom(values), forfeit_probability)

    return _build


@pytest.fixture
def make_team():
    """Build a team; ISO codes default to a code derived from the name."""

    def _build(name, ranking=1, iso_code=None, exhibitions=None):
        team = Team(name, iso_code or name[:3].upper(), ranking)
        if exhibitions is not None:
            team.set_exhibition_results(exhibitions)
        return team

    return _build


@pytest.fixture
def twelve_team_roster():
    """Groups A, B, C of four teams, FIBA rankings 1 to 12, no exhibitions."""
    return {
        label: [
            {"Team": f"Team {i}", "ISOCode": f"T{i:02d}", "FIBARanking": i}
            for i in range(start, start + 4)
        ]
        for label, start in (("A", 1), ("B", 5), ("C", 9))
    }
