"""A national team taking part in the tournament."""

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

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Tuple

from hoopbracket.constants import LOSS_POINTS, STAGE_GROUP, WIN_POINTS
from hoopbracket.exceptions import InvalidTeamDataException
from hoopbracket.models.exhibition import ExhibitionResult, parse_exhibition_history
from hoopbracket.models.match_event import MatchEvent
from hoopbracket.models.results import StandingRow
from hoopbracket.type_hints import MatchResultType
from hoopbracket.utils import setup_logger
from hoopbracket.utils.validation import validate_roster_entry_strict

if TYPE_CHECKING:
    from hoopbracket.events import EventSink
    from hoopbracket.scoring import ScoringModel

logger = setup_logger(__name__)

WINNER: MatchResultType = "winner"
LOSER: MatchResultType = "loser"


class Team:
    """Represents a team in the tournament.

    A single instance exists per team for the whole run; groups and bracket
    matches share it, so every standing update is visible everywhere.

    Attributes:
        name: Team name
        iso_code: ISO country code, used to join exhibition data
        ranking: FIBA ranking, lower is stronger
        points: Standing points, two per win
        wins: Matches won
        losses: Matches lost
        score_for: Points scored in decided matches
        score_against: Points conceded in decided matches
        exhibition_results: Prior exhibition matches, immutable once loaded
        match_history: Events of every match this team played, in order
    """

    def __init__(
        self,
        name: str,
        iso_code: str,
        ranking: int,
        exhibition_results: Optional[Iterable[ExhibitionResult]] = None,
    ) -> None:
        if not name or not iso_code:
            raise InvalidTeamDataException("Team name and ISO code are required")
        if isinstance(ranking, bool) or not isinstance(ranking, int) or ranking < 1:
            raise InvalidTeamDataException(
                f"Ranking for {name} must be a positive integer, got {ranking!r}"
            )

        self.name: str = name
        self.iso_code: str = iso_code
        self.ranking: int = ranking

        # Standing state
        self.points: int = 0
        self.wins: int = 0
        self.losses: int = 0
        self.score_for: int = 0
        self.score_against: int = 0
        self.match_history: List[MatchEvent] = []

        self._exhibition_results: Tuple[ExhibitionResult, ...] = ()
        self._exhibitions_loaded: bool = False
        if exhibition_results is not None:
            self.set_exhibition_results(exhibition_results)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        exhibitions: Optional[Iterable[Mapping[str, Any]]] = None,
        strict: bool = False,
    ) -> "Team":
        """Create a team from a roster descriptor and its raw exhibition records.

        Args:
            data: ``{"Team": ..., "ISOCode": ..., "FIBARanking": ...}``
            exhibitions: Raw exhibition records for this team's ISO code
            strict: Raise on malformed exhibition records instead of skipping them

        Raises:
            InvalidTeamDataException: If the descriptor is incomplete
            ExhibitionFormatException: In strict mode, for a malformed record
        """
        name, iso_code, ranking = validate_roster_entry_strict(data)
        team = cls(name, iso_code, ranking)
        if exhibitions is not None:
            team.set_exhibition_results(
                parse_exhibition_history(exhibitions, strict=strict, owner=name)
            )
        return team

    # ========== Exhibition history ==========

    @property
    def exhibition_results(self) -> Tuple[ExhibitionResult, ...]:
        return self._exhibition_results

    def set_exhibition_results(self, results: Iterable[ExhibitionResult]) -> None:
        """Attach the exhibition history. It can only be loaded once.

        Raises:
            InvalidTeamDataException: If a history was already loaded
        """
        if self._exhibitions_loaded:
            raise InvalidTeamDataException(
                f"Exhibition history for {self.name} is already loaded"
            )
        self._exhibition_results = tuple(results)
        self._exhibitions_loaded = True
        logger.debug(
            "Loaded %d exhibition results for %s",
            len(self._exhibition_results),
            self.name,
        )

    def form_factor(self) -> float:
        """Fraction of exhibition matches won, 0.0 without history."""
        if not self._exhibition_results:
            return 0.0
        wins = sum(1 for result in self._exhibition_results if result.is_win)
        return wins / len(self._exhibition_results)

    # ========== Standing state ==========

    @property
    def point_differential(self) -> int:
        return self.score_for - self.score_against

    @property
    def matches_played(self) -> int:
        return len(self.match_history)

    def play_match(
        self,
        opponent: "Team",
        scoring_model: "ScoringModel",
        event_sink: Optional["EventSink"] = None,
        stage: str = STAGE_GROUP,
        group: Optional[str] = None,
    ) -> MatchResultType:
        """Play a match against ``opponent`` and update both teams.

        The winner gains two points and a win, the loser a loss. Decided
        matches add the score pair to both teams' totals; forfeits do not.

        Args:
            opponent: The other team
            scoring_model: Decides the outcome
            event_sink: Receives the match event, if given
            stage: Stage key recorded on the event
            group: Group label for group stage matches

        Returns:
            ``"winner"`` or ``"loser"`` from this team's perspective
        """
        if opponent is self:
            raise InvalidTeamDataException(f"{self.name} cannot play against itself")

        outcome = scoring_model.simulate_match(self, opponent)

        if outcome.is_forfeit:
            event = MatchEvent(
                stage=stage,
                team_a=self.name,
                team_b=opponent.name,
                winner=outcome.winner.name,
                outcome=outcome.outcome,
                forfeited_by=outcome.loser.name,
                group=group,
            )
        else:
            self._record_score(outcome.score_a, outcome.score_b)
            opponent._record_score(outcome.score_b, outcome.score_a)
            event = MatchEvent(
                stage=stage,
                team_a=self.name,
                team_b=opponent.name,
                winner=outcome.winner.name,
                outcome=outcome.outcome,
                score_a=outcome.score_a,
                score_b=outcome.score_b,
                group=group,
            )

        outcome.winner._record_win()
        outcome.loser._record_loss()
        self.match_history.append(event)
        opponent.match_history.append(event)

        logger.debug(event.describe())
        if event_sink is not None:
            event_sink.emit(event)

        return WINNER if outcome.winner is self else LOSER

    def _record_score(self, scored: int, conceded: int) -> None:
        self.score_for += scored
        self.score_against += conceded

    def _record_win(self) -> None:
        self.points += WIN_POINTS
        self.wins += 1

    def _record_loss(self) -> None:
        self.points += LOSS_POINTS
        self.losses += 1

    def standing_row(self, rank: int) -> StandingRow:
        """Snapshot the current standing state."""
        return StandingRow(
            rank=rank,
            name=self.name,
            iso_code=self.iso_code,
            wins=self.wins,
            losses=self.losses,
            points=self.points,
            score_for=self.score_for,
            score_against=self.score_against,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team identity and standing state."""
        return {
            "name": self.name,
            "iso_code": self.iso_code,
            "ranking": self.ranking,
            "points": self.points,
            "wins": self.wins,
            "losses": self.losses,
            "score_for": self.score_for,
            "score_against": self.score_against,
            "exhibition_results": [r.to_dict() for r in self._exhibition_results],
        }

    def __repr__(self) -> str:
        return f"Team({self.name!r}, {self.iso_code!r}, ranking={self.ranking})"
