"""Match event records emitted while a tournament is simulated."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from hoopbracket.constants import OUTCOME_DECIDED, OUTCOME_FORFEIT
from hoopbracket.type_hints import OutcomeType, StageName


@dataclass(frozen=True)
class MatchEvent:
    """Represents the outcome of a single match.

    Attributes
    ----------
    stage : str
        Stage key the match was played in (``group``, ``quarterfinal``, ...)
    team_a : str
        Name of the team that initiated the match
    team_b : str
        Name of the opponent
    winner : str
        Name of the winning team
    outcome : str
        ``decided`` when played to a score, ``forfeit`` when one side gave up
    score_a : int, optional
        Team A's score, ``None`` for forfeits
    score_b : int, optional
        Team B's score, ``None`` for forfeits
    forfeited_by : str, optional
        Name of the team that gave up
    group : str, optional
        Group label for group stage matches
    """

    stage: StageName
    team_a: str
    team_b: str
    winner: str
    outcome: OutcomeType = OUTCOME_DECIDED
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    forfeited_by: Optional[str] = None
    group: Optional[str] = None

    @property
    def loser(self) -> str:
        return self.team_b if self.winner == self.team_a else self.team_a

    @property
    def is_forfeit(self) -> bool:
        return self.outcome == OUTCOME_FORFEIT

    def describe(self) -> str:
        """Human readable one-line summary, winner first."""
        if self.is_forfeit:
            return f"{self.forfeited_by} gives up against {self.winner}."
        if self.winner == self.team_a:
            return f"{self.team_a} wins against {self.team_b} ({self.score_a}:{self.score_b})"
        return f"{self.team_b} wins against {self.team_a} ({self.score_b}:{self.score_a})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match event to dictionary."""
        return {
            "stage": self.stage,
            "team_a": self.team_a,
            "team_b": self.team_b,
            "winner": self.winner,
            "outcome": self.outcome,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "forfeited_by": self.forfeited_by,
            "group": self.group,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchEvent":
        """Deserialize match event from dictionary."""
        return cls(
            stage=data["stage"],
            team_a=data["team_a"],
            team_b=data["team_b"],
            winner=data["winner"],
            outcome=data.get("outcome", OUTCOME_DECIDED),
            score_a=data.get("score_a"),
            score_b=data.get("score_b"),
            forfeited_by=data.get("forfeited_by"),
            group=data.get("group"),
        )
