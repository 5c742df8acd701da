"""Event sinks that receive the chronological record of a tournament run.

The simulation never prints. Everything observable about a run is pushed to
an ``EventSink``; presentation code decides what to do with it.
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

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from hoopbracket.models.match_event import MatchEvent
from hoopbracket.models.results import GroupStanding, MedalResult
from hoopbracket.utils import setup_logger

if TYPE_CHECKING:
    from hoopbracket.team import Team

logger = setup_logger(__name__)


class EventSink(ABC):
    """Receives match events and stage results as they happen."""

    @abstractmethod
    def emit(self, event: MatchEvent) -> None:
        """Receive one match event."""

    def group_completed(self, standing: GroupStanding) -> None:
        """Receive a group's final ranking."""

    def advancement_decided(self, teams: Sequence["Team"]) -> None:
        """Receive the ordered list of teams entering the bracket."""

    def bracket_seeded(self, pots: Dict[str, Tuple["Team", "Team"]]) -> None:
        """Receive the seed pots, one quarterfinal pairing each."""

    def medals_awarded(self, medals: MedalResult) -> None:
        """Receive the final podium."""


class EventLog(EventSink):
    """Collects everything it receives, in order."""

    def __init__(self) -> None:
        self.events: List[MatchEvent] = []
        self.group_standings: List[GroupStanding] = []
        self.advancing: List["Team"] = []
        self.seed_pots: Dict[str, Tuple["Team", "Team"]] = {}
        self.medals: Optional[MedalResult] = None

    def emit(self, event: MatchEvent) -> None:
        self.events.append(event)

    def group_completed(self, standing: GroupStanding) -> None:
        self.group_standings.append(standing)

    def advancement_decided(self, teams: Sequence["Team"]) -> None:
        self.advancing = list(teams)

    def bracket_seeded(self, pots: Dict[str, Tuple["Team", "Team"]]) -> None:
        self.seed_pots = dict(pots)

    def medals_awarded(self, medals: MedalResult) -> None:
        self.medals = medals

    def events_for_stage(self, stage: str) -> List[MatchEvent]:
        return [event for event in self.events if event.stage == stage]

    def __len__(self) -> int:
        return len(self.events)


class LoggingEventSink(EventSink):
    """Forwards everything to a logger."""

    def __init__(
        self, target: Optional[logging.Logger] = None, level: int = logging.INFO
    ) -> None:
        self.logger = target if target is not None else logger
        self.level = level

    def emit(self, event: MatchEvent) -> None:
        self.logger.log(self.level, "[%s] %s", event.stage, event.describe())

    def group_completed(self, standing: GroupStanding) -> None:
        self.logger.log(
            self.level,
            "Group %s final ranking: %s",
            standing.label,
            ", ".join(row.name for row in standing.rows),
        )

    def advancement_decided(self, teams: Sequence["Team"]) -> None:
        self.logger.log(
            self.level,
            "Teams advancing: %s",
            ", ".join(team.name for team in teams),
        )

    def bracket_seeded(self, pots: Dict[str, Tuple["Team", "Team"]]) -> None:
        for pot, (first, second) in pots.items():
            self.logger.log(self.level, "Seed %s: %s, %s", pot, first.name, second.name)

    def medals_awarded(self, medals: MedalResult) -> None:
        self.logger.log(
            self.level,
            "Medals: gold %s, silver %s, bronze %s",
            medals.gold.name,
            medals.silver.name,
            medals.bronze.name,
        )


class CompositeEventSink(EventSink):
    """Fans every call out to several sinks."""

    def __init__(self, *sinks: EventSink) -> None:
        self.sinks: List[EventSink] = [sink for sink in sinks if sink is not None]

    def emit(self, event: MatchEvent) -> None:
        for sink in self.sinks:
            sink.emit(event)

    def group_completed(self, standing: GroupStanding) -> None:
        for sink in self.sinks:
            sink.group_completed(standing)

    def advancement_decided(self, teams: Sequence["Team"]) -> None:
        for sink in self.sinks:
            sink.advancement_decided(teams)

    def bracket_seeded(self, pots: Dict[str, Tuple["Team", "Team"]]) -> None:
        for sink in self.sinks:
            sink.bracket_seeded(pots)

    def medals_awarded(self, medals: MedalResult) -> None:
        for sink in self.sinks:
            sink.medals_awarded(medals)
