"""Tiebreak calculation for group standings.

This module handles ranking teams by points, then point differential, then
points scored.
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

from functools import cmp_to_key
from typing import List, Sequence, Tuple

from hoopbracket.team import Team


class TiebreakCalculator:
    """Ranks teams by standing state.

    Criteria in priority order, all descending:

    1. Standing points
    2. Point differential (scored minus conceded)
    3. Points scored

    Teams equal on all three keep their relative input order. The input
    position breaks remaining ties, so this does not rely on the sort
    being stable.
    """

    @staticmethod
    def standing_key(team: Team) -> Tuple[int, int, int]:
        """The three ranking criteria for one team, higher is better."""
        return team.points, team.point_differential, team.score_for

    def compare(self, team_a: Team, team_b: Team) -> int:
        """Compare two teams on the ranking criteria only.

        Returns:
            Negative if ``team_a`` ranks ahead, positive if behind, 0 if tied
        """
        key_a = self.standing_key(team_a)
        key_b = self.standing_key(team_b)
        if key_a > key_b:
            return -1
        if key_a < key_b:
            return 1
        return 0

    def rank_teams(self, teams: Sequence[Team]) -> List[Team]:
        """Return a new list of ``teams``, best first.

        The input sequence is not modified.
        """
        indexed = sorted(
            enumerate(teams),
            key=cmp_to_key(
                lambda a, b: self.compare(a[1], b[1]) or a[0] - b[0]
            ),
        )
        return [team for _, team in indexed]
