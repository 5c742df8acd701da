"""Result structures handed to the presentation layer."""

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

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from hoopbracket.models.match_event import MatchEvent

if TYPE_CHECKING:
    from hoopbracket.team import Team


@dataclass(frozen=True)
class StandingRow:
    """Snapshot of one team's standing state."""

    rank: int
    name: str
    iso_code: str
    wins: int
    losses: int
    points: int
    score_for: int
    score_against: int

    @property
    def point_differential(self) -> int:
        return self.score_for - self.score_against

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "name": self.name,
            "iso_code": self.iso_code,
            "wins": self.wins,
            "losses": self.losses,
            "points": self.points,
            "score_for": self.score_for,
            "score_against": self.score_against,
            "point_differential": self.point_differential,
        }


@dataclass(frozen=True)
class GroupStanding:
    """Final ranking of one group, best team first."""

    label: str
    rows: Tuple[StandingRow, ...]

    @property
    def iso_codes(self) -> List[str]:
        return [row.iso_code for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "rows": [row.to_dict() for row in self.rows]}


@dataclass(frozen=True)
class MedalResult:
    """Final podium plus the fourth placed team.

    Attributes:
        gold: Final winner
        silver: Final loser
        bronze: Third place match winner
        fourth: Third place match loser
    """

    gold: "Team"
    silver: "Team"
    bronze: "Team"
    fourth: "Team"

    @property
    def podium(self) -> List["Team"]:
        return [self.gold, self.silver, self.bronze]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gold": self.gold.name,
            "silver": self.silver.name,
            "bronze": self.bronze.name,
            "fourth": self.fourth.name,
        }


@dataclass
class TournamentResult:
    """Everything a completed simulation produced, in chronological order."""

    group_standings: List[GroupStanding] = field(default_factory=list)
    advancing: List["Team"] = field(default_factory=list)
    seed_pots: Dict[str, Tuple["Team", "Team"]] = field(default_factory=dict)
    events: List[MatchEvent] = field(default_factory=list)
    medals: Optional[MedalResult] = None

    def events_for_stage(self, stage: str) -> List[MatchEvent]:
        return [event for event in self.events if event.stage == stage]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole run to plain data."""
        return {
            "group_standings": [standing.to_dict() for standing in self.group_standings],
            "advancing": [team.name for team in self.advancing],
            "seed_pots": {
                pot: [team.name for team in pair] for pot, pair in self.seed_pots.items()
            },
            "events": [event.to_dict() for event in self.events],
            "medals": self.medals.to_dict() if self.medals is not None else None,
        }
