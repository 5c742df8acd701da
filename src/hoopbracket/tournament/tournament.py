"""Tournament orchestration: groups, bracket and the run's event log."""

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

import random
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from hoopbracket.constants import GROUP_COUNT, GROUP_LABELS, GROUP_SIZE
from hoopbracket.events import CompositeEventSink, EventLog, EventSink
from hoopbracket.exceptions import (
    DuplicateTeamException,
    InsufficientTeamsException,
    InvalidConfigurationException,
    TeamNotFoundException,
    TournamentStateException,
)
from hoopbracket.models.config import TournamentConfig
from hoopbracket.models.exhibition import parse_exhibition_history
from hoopbracket.models.results import TournamentResult
from hoopbracket.scoring import ScoringModel
from hoopbracket.team import Team
from hoopbracket.tournament.bracket import BracketEngine
from hoopbracket.tournament.group_stage import Group
from hoopbracket.tournament.tiebreak_calculator import TiebreakCalculator
from hoopbracket.utils import setup_logger

logger = setup_logger(__name__)

TOTAL_TEAMS = GROUP_SIZE * GROUP_COUNT


class Tournament:
    """Represents a complete tournament run.

    Teams live in a registry keyed by ISO code; groups and bracket matches
    share those instances. A tournament is simulated exactly once.

    Attributes:
        config: Run configuration
        teams: Team registry, ISO code -> Team, in roster order
        groups: The three groups in label order
        bracket: Knockout engine, available after the group stage
    """

    def __init__(
        self,
        teams: Sequence[Team],
        config: Optional[TournamentConfig] = None,
        event_sink: Optional[EventSink] = None,
        rng: Optional[random.Random] = None,
        group_labels: Optional[Sequence[str]] = None,
    ) -> None:
        """Build the groups from an ordered list of twelve teams.

        Teams are partitioned in order: the first four form group A, the next
        four group B, the last four group C.

        Args:
            teams: Exactly twelve teams
            config: Run configuration, defaults to ``TournamentConfig()``
            event_sink: Receives every event of the run
            rng: Random stream, overrides ``config.seed``
            group_labels: Labels for the three groups

        Raises:
            InsufficientTeamsException: If fewer than twelve teams are given
            InvalidConfigurationException: If more than twelve teams are given
            DuplicateTeamException: If two teams share an ISO code
        """
        self.config = config or TournamentConfig()
        self.random = rng if rng is not None else self.config.create_random()
        self.scoring_model = ScoringModel(
            self.random, forfeit_probability=self.config.forfeit_probability
        )
        self.tiebreak_calculator = TiebreakCalculator()

        self.event_log = EventLog()
        self.event_sink: EventSink = CompositeEventSink(self.event_log, event_sink)

        self.teams: Dict[str, Team] = {}
        for team in teams:
            self.add_team(team)
        self._validate_team_count()

        labels = list(group_labels) if group_labels is not None else list(GROUP_LABELS)
        if len(labels) != GROUP_COUNT:
            raise InvalidConfigurationException(
                f"Expected {GROUP_COUNT} group labels, got {labels}"
            )

        ordered = list(self.teams.values())
        self.groups: List[Group] = [
            Group(
                label,
                ordered[index * GROUP_SIZE : (index + 1) * GROUP_SIZE],
                self.tiebreak_calculator,
            )
            for index, label in enumerate(labels)
        ]
        self.bracket: Optional[BracketEngine] = None
        self.result: Optional[TournamentResult] = None

    @classmethod
    def from_roster(
        cls,
        roster: Mapping[str, Iterable[Mapping[str, Any]]],
        exhibitions: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None,
        config: Optional[TournamentConfig] = None,
        event_sink: Optional[EventSink] = None,
        rng: Optional[random.Random] = None,
    ) -> "Tournament":
        """Create a tournament from roster and exhibition data.

        Args:
            roster: Group label -> team descriptors
                ``{"Team": str, "ISOCode": str, "FIBARanking": int}``
            exhibitions: ISO code -> ``{"Result": "83-90", ...}`` records
            config: Run configuration
            event_sink: Receives every event of the run
            rng: Random stream, overrides ``config.seed``

        Raises:
            InvalidTeamDataException: If a descriptor is incomplete
            ExhibitionFormatException: In strict mode, for a malformed record
            ConfigurationException: If the roster does not fill three groups of four
        """
        config = config or TournamentConfig()
        exhibitions = exhibitions or {}
        groups = {label: list(descriptors) for label, descriptors in roster.items()}

        teams: List[Team] = []
        for descriptors in groups.values():
            for descriptor in descriptors:
                team = Team.from_dict(descriptor)
                records = exhibitions.get(team.iso_code)
                if records is None:
                    logger.debug("No exhibition results for %s", team.name)
                    records = []
                team.set_exhibition_results(
                    parse_exhibition_history(
                        records, strict=config.strict_exhibitions, owner=team.name
                    )
                )
                teams.append(team)

        return cls(
            teams,
            config=config,
            event_sink=event_sink,
            rng=rng,
            group_labels=_roster_group_labels(groups),
        )

    # ========== Team registry ==========

    def add_team(self, team: Team) -> None:
        """Register a team.

        Raises:
            DuplicateTeamException: If a team with the same ISO code exists
        """
        if team.iso_code in self.teams:
            raise DuplicateTeamException(
                f"Team {team.iso_code} ({team.name}) is already registered"
            )
        self.teams[team.iso_code] = team

    def get_team(self, iso_code: str) -> Team:
        """Look a team up by ISO code.

        Raises:
            TeamNotFoundException: If no such team is registered
        """
        try:
            return self.teams[iso_code]
        except KeyError:
            raise TeamNotFoundException(f"No team with ISO code {iso_code}") from None

    def _validate_team_count(self) -> None:
        if len(self.teams) < TOTAL_TEAMS:
            raise InsufficientTeamsException(
                f"{GROUP_COUNT} groups of {GROUP_SIZE} need {TOTAL_TEAMS} teams, "
                f"roster has {len(self.teams)}"
            )
        if len(self.teams) > TOTAL_TEAMS:
            raise InvalidConfigurationException(
                f"{GROUP_COUNT} groups of {GROUP_SIZE} hold {TOTAL_TEAMS} teams, "
                f"roster has {len(self.teams)}"
            )

    # ========== Simulation ==========

    @property
    def is_completed(self) -> bool:
        return self.result is not None

    def simulate(self) -> TournamentResult:
        """Run the group stage and the bracket.

        Returns:
            The complete result of the run

        Raises:
            TournamentStateException: If the tournament was already simulated
            ConfigurationException: If the bracket cannot be filled
        """
        if self.is_completed:
            raise TournamentStateException(f"{self.config.name} was already simulated")

        logger.info("Simulating %s", self.config.name)
        group_rankings = self.simulate_groups()

        self.bracket = BracketEngine(
            self.scoring_model, self.event_sink, self.tiebreak_calculator
        )
        self.bracket.run(group_rankings)

        self.result = TournamentResult(
            group_standings=list(self.event_log.group_standings),
            advancing=list(self.bracket.advancing),
            seed_pots=dict(self.bracket.seed_pots),
            events=list(self.event_log.events),
            medals=self.bracket.medals,
        )
        return self.result

    def simulate_groups(self) -> List[List[Team]]:
        """Play every group and return their rankings in group order."""
        rankings: List[List[Team]] = []
        for group in self.groups:
            group.simulate(self.scoring_model, self.event_sink)
            standing = group.standing()
            self.event_sink.group_completed(standing)
            rankings.append(group.get_ranked_teams())
        return rankings


def _roster_group_labels(roster: Mapping[str, List[Any]]) -> Optional[List[str]]:
    """Use the roster's own labels when they line up with the partition."""
    labels = list(roster.keys())
    if len(labels) != GROUP_COUNT:
        logger.warning(
            "Roster has %d groups, using default labels %s",
            len(labels),
            GROUP_LABELS,
        )
        return None
    sizes = [len(roster[label]) for label in labels]
    if any(size != GROUP_SIZE for size in sizes):
        logger.warning(
            "Roster group sizes %s do not match %d per group, using default labels",
            sizes,
            GROUP_SIZE,
        )
        return None
    return labels
