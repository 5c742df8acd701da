"""Round-robin group stage."""

# Hoop Bracket
# Copyright (C) 2025  Hoop Bracket developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from hoopbracket.constants import STAGE_GROUP
from hoopbracket.events import EventSink
from hoopbracket.exceptions import (
    DuplicateTeamException,
    InsufficientTeamsException,
    TournamentStateException,
)
from hoopbracket.models.results import GroupStanding
from hoopbracket.scoring import ScoringModel
from hoopbracket.team import Team
from hoopbracket.tournament.tiebreak_calculator import TiebreakCalculator
from hoopbracket.utils import setup_logger

logger = setup_logger(__name__)


class Group:
    """A fixed set of teams that play each other exactly once.

    Attributes:
        label: Group label ("A", "B", ...)
        teams: Teams in roster order
        is_completed: Whether the round robin has been played
    """

    def __init__(
        self,
        label: str,
        teams: Sequence[Team],
        tiebreak_calculator: Optional[TiebreakCalculator] = None,
    ) -> None:
        if len(teams) < 2:
            raise InsufficientTeamsException(
                f"Group {label} needs at least 2 teams, got {len(teams)}"
            )
        codes = [team.iso_code for team in teams]
        if len(set(codes)) != len(codes):
            raise DuplicateTeamException(f"Group {label} lists a team twice: {codes}")

        self.label: str = label
        self.teams: Tuple[Team, ...] = tuple(teams)
        self.tiebreak_calculator = tiebreak_calculator or TiebreakCalculator()
        self.is_completed: bool = False
        self.matches_played: int = 0

    @property
    def pairings(self) -> List[Tuple[Team, Team]]:
        """Every unordered pair of teams, in schedule order."""
        return list(combinations(self.teams, 2))

    def simulate(
        self, scoring_model: ScoringModel, event_sink: Optional[EventSink] = None
    ) -> None:
        """Play the round robin, ``n*(n-1)/2`` matches.

        Raises:
            TournamentStateException: If the group was already simulated
        """
        if self.is_completed:
            raise TournamentStateException(f"Group {self.label} was already simulated")

        logger.info("Group %s: playing %d matches", self.label, len(self.pairings))
        for team_a, team_b in self.pairings:
            team_a.play_match(
                team_b,
                scoring_model,
                event_sink=event_sink,
                stage=STAGE_GROUP,
                group=self.label,
            )
            self.matches_played += 1
        self.is_completed = True

    def get_ranked_teams(self) -> List[Team]:
        """Teams best first by points, differential, then points scored."""
        return self.tiebreak_calculator.rank_teams(self.teams)

    def standing(self) -> GroupStanding:
        """Snapshot of the current ranking."""
        return GroupStanding(
            label=self.label,
            rows=tuple(
                team.standing_row(rank)
                for rank, team in enumerate(self.get_ranked_teams(), start=1)
            ),
        )

    def __repr__(self) -> str:
        return f"Group({self.label!r}, {[team.name for team in self.teams]})"
