"""Knockout bracket: seeding, quarterfinals, semifinals, final and third place.

Seeds are mapped to quarterfinals positionally: advancing teams 0-1 meet in
the first quarterfinal, 2-3 in the second, and so on. This is not snake
seeding.
"""

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

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from hoopbracket.constants import (
    BRACKET_SIZE,
    SEED_POTS,
    STAGE_FINAL,
    STAGE_QUARTERFINAL,
    STAGE_SEMIFINAL,
    STAGE_THIRD_PLACE,
    TEAMS_PER_GROUP_ADVANCING,
    THIRD_PLACE_TEAMS_ADVANCING,
)
from hoopbracket.events import EventSink
from hoopbracket.exceptions import (
    DuplicateTeamException,
    InsufficientTeamsException,
    InvalidConfigurationException,
    TournamentStateException,
)
from hoopbracket.models.results import MedalResult
from hoopbracket.scoring import ScoringModel
from hoopbracket.team import WINNER, Team
from hoopbracket.tournament.tiebreak_calculator import TiebreakCalculator
from hoopbracket.utils import setup_logger

logger = setup_logger(__name__)

Pairing = Tuple[Team, Team]


class BracketStage(Enum):
    """Bracket progression, in order."""

    GROUPS_COMPLETE = "groups_complete"
    SEEDED = "seeded"
    QUARTERFINALS = "quarterfinals"
    SEMIFINALS = "semifinals"
    MEDALS = "medals"


class BracketEngine:
    """Runs the knockout phase from group rankings to medals.

    Each ``play_*`` method advances the engine by one stage and must be called
    in order; ``run`` does all of it.

    Attributes:
        stage: Current stage
        advancing: Teams entering the bracket, in seeding order
        seed_pots: Quarterfinal pairings keyed by pot label
        semifinalists: Quarterfinal winners
        finalists: Semifinal winners
        third_place_contestants: Semifinal losers
        eliminated: Quarterfinal losers
        medals: Final result once the bracket is complete
    """

    def __init__(
        self,
        scoring_model: ScoringModel,
        event_sink: Optional[EventSink] = None,
        tiebreak_calculator: Optional[TiebreakCalculator] = None,
    ) -> None:
        self.scoring_model = scoring_model
        self.event_sink = event_sink
        self.tiebreak_calculator = tiebreak_calculator or TiebreakCalculator()

        self.stage: BracketStage = BracketStage.GROUPS_COMPLETE
        self.advancing: List[Team] = []
        self.seed_pots: Dict[str, Pairing] = {}
        self.semifinalists: List[Team] = []
        self.finalists: List[Team] = []
        self.third_place_contestants: List[Team] = []
        self.eliminated: List[Team] = []
        self.medals: Optional[MedalResult] = None

    # ========== Seeding ==========

    def select_advancing(self, group_rankings: Sequence[Sequence[Team]]) -> List[Team]:
        """Pick the bracket entrants from ranked groups.

        The top two of every group advance in group order, followed by the
        best two third-placed teams ranked with the group tiebreak rules.

        Args:
            group_rankings: One ranked team list per group, best first

        Returns:
            The advancing teams in seeding order

        Raises:
            InsufficientTeamsException: If fewer than eight teams advance
            InvalidConfigurationException: If more than eight teams advance
        """
        advancing: List[Team] = []
        third_placed: List[Team] = []
        for ranked in group_rankings:
            advancing.extend(ranked[:TEAMS_PER_GROUP_ADVANCING])
            if len(ranked) > TEAMS_PER_GROUP_ADVANCING:
                third_placed.append(ranked[TEAMS_PER_GROUP_ADVANCING])

        ranked_third = self.tiebreak_calculator.rank_teams(third_placed)
        advancing.extend(ranked_third[:THIRD_PLACE_TEAMS_ADVANCING])
        for team in ranked_third[THIRD_PLACE_TEAMS_ADVANCING:]:
            logger.info("%s eliminated as third placed team", team.name)

        self._validate_entrants(advancing)
        return advancing

    def seed(self, advancing: Sequence[Team]) -> Dict[str, Pairing]:
        """Place the entrants into seed pots, one quarterfinal each.

        Raises:
            TournamentStateException: If the bracket was already seeded
            InsufficientTeamsException: If there are not exactly eight entrants
        """
        self._require_stage(BracketStage.GROUPS_COMPLETE)
        self._validate_entrants(advancing)

        self.advancing = list(advancing)
        self.seed_pots = {
            pot: (self.advancing[2 * index], self.advancing[2 * index + 1])
            for index, pot in enumerate(SEED_POTS)
        }
        self.stage = BracketStage.SEEDED
        logger.info("Bracket seeded with %d teams", len(self.advancing))
        if self.event_sink is not None:
            self.event_sink.advancement_decided(self.advancing)
            self.event_sink.bracket_seeded(self.seed_pots)
        return self.seed_pots

    # ========== Knockout rounds ==========

    def play_quarterfinals(self) -> List[Team]:
        """Play the four quarterfinals, returning the winners in bracket order."""
        self._require_stage(BracketStage.SEEDED)
        for team_a, team_b in self.seed_pots.values():
            winner, loser = self._play(team_a, team_b, STAGE_QUARTERFINAL)
            self.semifinalists.append(winner)
            self.eliminated.append(loser)
        self.stage = BracketStage.QUARTERFINALS
        return list(self.semifinalists)

    def play_semifinals(self) -> List[Team]:
        """Play both semifinals, returning the finalists.

        Winners of quarterfinals 1 and 2 meet, then winners of 3 and 4. Losers
        go to the third place match.
        """
        self._require_stage(BracketStage.QUARTERFINALS)
        for team_a, team_b in self._pair_off(self.semifinalists):
            winner, loser = self._play(team_a, team_b, STAGE_SEMIFINAL)
            self.finalists.append(winner)
            self.third_place_contestants.append(loser)
        self.stage = BracketStage.SEMIFINALS
        return list(self.finalists)

    def play_finals(self) -> MedalResult:
        """Play the final, then the third place match."""
        self._require_stage(BracketStage.SEMIFINALS)
        gold, silver = self._play(self.finalists[0], self.finalists[1], STAGE_FINAL)
        bronze, fourth = self._play(
            self.third_place_contestants[0],
            self.third_place_contestants[1],
            STAGE_THIRD_PLACE,
        )
        self.medals = MedalResult(gold=gold, silver=silver, bronze=bronze, fourth=fourth)
        self.stage = BracketStage.MEDALS

        logger.info(
            "Medals: 1st %s, 2nd %s, 3rd %s", gold.name, silver.name, bronze.name
        )
        if self.event_sink is not None:
            self.event_sink.medals_awarded(self.medals)
        return self.medals

    def run(self, group_rankings: Sequence[Sequence[Team]]) -> MedalResult:
        """Seed from group rankings and play the whole bracket."""
        self.seed(self.select_advancing(group_rankings))
        self.play_quarterfinals()
        self.play_semifinals()
        return self.play_finals()

    @property
    def final_standings(self) -> List[Team]:
        """First to fourth place, empty until the bracket is complete."""
        if self.medals is None:
            return []
        return [
            self.medals.gold,
            self.medals.silver,
            self.medals.bronze,
            self.medals.fourth,
        ]

    # ========== Helpers ==========

    def _play(self, team_a: Team, team_b: Team, stage: str) -> Pairing:
        """Play one knockout match, returning ``(winner, loser)``."""
        result = team_a.play_match(
            team_b, self.scoring_model, event_sink=self.event_sink, stage=stage
        )
        if result == WINNER:
            return team_a, team_b
        return team_b, team_a

    @staticmethod
    def _pair_off(teams: Sequence[Team]) -> List[Pairing]:
        return [(teams[i], teams[i + 1]) for i in range(0, len(teams), 2)]

    def _require_stage(self, expected: BracketStage) -> None:
        if self.stage is not expected:
            raise TournamentStateException(
                f"Bracket is at stage {self.stage.value}, expected {expected.value}"
            )

    @staticmethod
    def _validate_entrants(teams: Sequence[Team]) -> None:
        if len(teams) < BRACKET_SIZE:
            raise InsufficientTeamsException(
                f"Bracket needs {BRACKET_SIZE} teams, only {len(teams)} advanced"
            )
        if len(teams) > BRACKET_SIZE:
            raise InvalidConfigurationException(
                f"Bracket holds {BRACKET_SIZE} teams, {len(teams)} advanced"
            )
        codes = [team.iso_code for team in teams]
        if len(set(codes)) != len(codes):
            raise DuplicateTeamException(f"A team advanced twice: {codes}")
