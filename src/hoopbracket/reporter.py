"""
Plain-text rendering of a tournament result.
This module turns the structured result of a run into console output.
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

from typing import List

from hoopbracket.constants import (
    STAGE_FINAL,
    STAGE_GROUP,
    STAGE_NAMES,
    STAGE_QUARTERFINAL,
    STAGE_SEMIFINAL,
    STAGE_THIRD_PLACE,
)
from hoopbracket.models.match_event import MatchEvent
from hoopbracket.models.results import GroupStanding, MedalResult, TournamentResult

KNOCKOUT_STAGES = [STAGE_QUARTERFINAL, STAGE_SEMIFINAL, STAGE_FINAL, STAGE_THIRD_PLACE]


def format_standing(standing: GroupStanding) -> List[str]:
    """Ranking lines: rank, name, wins/losses, points, scored, conceded, differential."""
    lines = [f"Final ranking in group {standing.label}:"]
    for row in standing.rows:
        lines.append(
            f"{row.rank}. {row.name} {row.wins}/{row.losses} {row.points} "
            f"{row.score_for} {row.score_against} {row.point_differential}"
        )
    return lines


def format_matchup(event: MatchEvent) -> List[str]:
    return [f"{event.team_a} vs {event.team_b}", f"    {event.describe()}"]


def format_medals(medals: MedalResult) -> List[str]:
    return [
        "Medals:",
        f"1st place: {medals.gold.name}",
        f"2nd place: {medals.silver.name}",
        f"3rd place: {medals.bronze.name}",
    ]


def render_report(result: TournamentResult) -> str:
    """Render a whole run in chronological order."""
    lines: List[str] = []

    for standing in result.group_standings:
        lines.append(f"Group {standing.label}:")
        lines.append(f"{STAGE_NAMES[STAGE_GROUP]}:")
        for event in result.events_for_stage(STAGE_GROUP):
            if event.group == standing.label:
                lines.append(f"    {event.describe()}")
        lines.extend(format_standing(standing))
        lines.append("")

    if result.advancing:
        lines.append("Teams advancing to the next round:")
        lines.extend(team.name for team in result.advancing)
        lines.append("")

    if result.seed_pots:
        lines.append("Seeds:")
        for pot, pair in result.seed_pots.items():
            lines.append(f"Seed {pot}:")
            lines.extend(f"    {team.name}" for team in pair)
        lines.append("")

    for stage in KNOCKOUT_STAGES:
        events = result.events_for_stage(stage)
        if not events:
            continue
        lines.append(f"{STAGE_NAMES[stage]}:")
        for event in events:
            lines.extend(format_matchup(event))
        lines.append("")

    if result.medals is not None:
        lines.extend(format_medals(result.medals))

    return "\n".join(lines)
