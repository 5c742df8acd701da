"""Scoring model that decides a single match between two teams.

The model is a pure function of both teams' strength indicators and the
random stream it is given; it never mutates either team.
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

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from hoopbracket.constants import (
    BASE_SCORE,
    DEFAULT_FORFEIT_PROBABILITY,
    OUTCOME_DECIDED,
    OUTCOME_FORFEIT,
    RANDOM_SCORE_RANGE,
    RANKING_DIVISOR,
    SCORE_FLOOR,
    SCORE_SPREAD,
    SCORE_TOTAL,
)
from hoopbracket.type_hints import OutcomeType
from hoopbracket.utils import setup_logger
from hoopbracket.utils.validation import validate_probability

if TYPE_CHECKING:
    from hoopbracket.team import Team

logger = setup_logger(__name__)


@dataclass(frozen=True)
class MatchOutcome:
    """Outcome of one simulated match.

    Scores are ``None`` when the match was decided by a forfeit.
    """

    winner: "Team"
    loser: "Team"
    outcome: OutcomeType
    score_a: Optional[int] = None
    score_b: Optional[int] = None

    @property
    def is_forfeit(self) -> bool:
        return self.outcome == OUTCOME_FORFEIT


class ScoringModel:
    """Simulates match scores from FIBA rankings and exhibition form.

    Random draws happen in a fixed order per match: team A's forfeit check,
    team B's forfeit check, then (for played matches) team A's score noise and
    team B's score noise.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        forfeit_probability: float = DEFAULT_FORFEIT_PROBABILITY,
    ) -> None:
        self.random = rng if rng is not None else random.Random()
        self.forfeit_probability = validate_probability(
            forfeit_probability, "forfeit_probability"
        )

    def simulate_match(self, team_a: "Team", team_b: "Team") -> MatchOutcome:
        """Decide a match between two teams.

        Both forfeit flags are always sampled. If team A gives up, team B wins
        regardless of team B's own flag.

        Args:
            team_a: Team that initiated the match
            team_b: Opponent

        Returns:
            MatchOutcome, never a tie
        """
        team_a_forfeits = self._forfeit_occurs()
        team_b_forfeits = self._forfeit_occurs()

        if team_a_forfeits:
            logger.debug("%s gives up against %s", team_a.name, team_b.name)
            return MatchOutcome(winner=team_b, loser=team_a, outcome=OUTCOME_FORFEIT)
        if team_b_forfeits:
            logger.debug("%s gives up against %s", team_b.name, team_a.name)
            return MatchOutcome(winner=team_a, loser=team_b, outcome=OUTCOME_FORFEIT)

        score_a, score_b = self.calculate_score(team_a, team_b)
        if score_a > score_b:
            winner, loser = team_a, team_b
        else:
            winner, loser = team_b, team_a
        return MatchOutcome(
            winner=winner,
            loser=loser,
            outcome=OUTCOME_DECIDED,
            score_a=score_a,
            score_b=score_b,
        )

    def calculate_score(self, team_a: "Team", team_b: "Team") -> Tuple[int, int]:
        """Draw a final score pair for a played match.

        Returns:
            ``(score_a, score_b)``, both at least the score floor and never equal
        """
        factor = strength_factor(
            team_a.ranking,
            team_b.ranking,
            team_a.form_factor(),
            team_b.form_factor(),
        )
        base_score = BASE_SCORE + factor * SCORE_SPREAD

        noise_a = self.random.random() * RANDOM_SCORE_RANGE
        noise_b = self.random.random() * RANDOM_SCORE_RANGE
        return score_pair(base_score, noise_a, noise_b)

    def _forfeit_occurs(self) -> bool:
        return self.random.random() < self.forfeit_probability


def strength_factor(
    ranking_a: int, ranking_b: int, form_a: float = 0.0, form_b: float = 0.0
) -> float:
    """Combined strength factor from rankings and exhibition form."""
    return (ranking_a - ranking_b) / RANKING_DIVISOR + form_a - form_b


def score_pair(base_score: float, noise_a: float, noise_b: float) -> Tuple[int, int]:
    """Turn a base score and two noise draws into a decided score pair.

    Team B's score mirrors team A's around ``SCORE_TOTAL``. A tie is broken in
    team B's favour.
    """
    score_a = math.floor(max(SCORE_FLOOR, base_score + noise_a))
    score_b = math.floor(max(SCORE_FLOOR, SCORE_TOTAL - base_score + noise_b))
    if score_a == score_b:
        score_b += 1
    return score_a, score_b
