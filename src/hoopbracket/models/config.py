"""Tournament configuration."""

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
from dataclasses import dataclass
from typing import Any, Dict, Optional

from hoopbracket.constants import DEFAULT_FORFEIT_PROBABILITY
from hoopbracket.exceptions import InvalidConfigurationException
from hoopbracket.utils.validation import validate_probability


@dataclass
class TournamentConfig:
    """Configuration settings for a tournament run.

    Attributes:
        name: Tournament name
        seed: Seed for the run's random stream, None for system entropy
        forfeit_probability: Chance that each side gives up before a match
        strict_exhibitions: Raise on malformed exhibition records instead of skipping them
    """

    name: str = "Basketball Tournament"
    seed: Optional[int] = None
    forfeit_probability: float = DEFAULT_FORFEIT_PROBABILITY
    strict_exhibitions: bool = False

    def __post_init__(self) -> None:
        self.forfeit_probability = validate_probability(
            self.forfeit_probability, "forfeit_probability"
        )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise InvalidConfigurationException(
                f"seed must be an integer or None, got {self.seed!r}"
            )

    def create_random(self) -> random.Random:
        """Create the single random stream used for a whole run."""
        return random.Random(self.seed) if self.seed is not None else random.Random()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "seed": self.seed,
            "forfeit_probability": self.forfeit_probability,
            "strict_exhibitions": self.strict_exhibitions,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Basketball Tournament"),
            seed=data.get("seed"),
            forfeit_probability=data.get(
                "forfeit_probability", DEFAULT_FORFEIT_PROBABILITY
            ),
            strict_exhibitions=data.get("strict_exhibitions", False),
        )
