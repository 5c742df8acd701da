"""Exhibition match history kept on each team."""

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
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from dateutil import parser as date_parser

from hoopbracket.constants import (
    EXHIBITION_DATE_KEY,
    EXHIBITION_OPPONENT_KEY,
    EXHIBITION_RESULT_KEY,
)
from hoopbracket.exceptions import ExhibitionFormatException
from hoopbracket.utils import setup_logger
from hoopbracket.utils.validation import parse_score_pair

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ExhibitionResult:
    """One prior exhibition match, seen from the owning team's side.

    Attributes:
        score_for: First recorded score (the owning team)
        score_against: Second recorded score
        opponent: ISO code of the opponent, if recorded
        played_on: Match date, if recorded and parseable
    """

    score_for: int
    score_against: int
    opponent: Optional[str] = None
    played_on: Optional[date] = None

    @property
    def is_win(self) -> bool:
        """A prior match counts as won if the first score exceeds the second."""
        return self.score_for > self.score_against

    @property
    def result(self) -> str:
        return f"{self.score_for}-{self.score_against}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the exhibitions file record format."""
        data: Dict[str, Any] = {EXHIBITION_RESULT_KEY: self.result}
        if self.opponent is not None:
            data[EXHIBITION_OPPONENT_KEY] = self.opponent
        if self.played_on is not None:
            data[EXHIBITION_DATE_KEY] = self.played_on.strftime("%d/%m/%y")
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExhibitionResult":
        """Deserialize an exhibitions file record.

        Raises:
            ExhibitionFormatException: If the record has no parseable ``Result``
        """
        if not isinstance(data, Mapping):
            raise ExhibitionFormatException(f"Exhibition record is not a mapping: {data!r}")

        parsed = parse_score_pair(data.get(EXHIBITION_RESULT_KEY))
        if not parsed:
            raise ExhibitionFormatException(parsed.error_message)

        score_for, score_against = parsed.sanitized_value
        return cls(
            score_for=score_for,
            score_against=score_against,
            opponent=data.get(EXHIBITION_OPPONENT_KEY),
            played_on=_parse_date(data.get(EXHIBITION_DATE_KEY)),
        )


def _parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a day-first date such as ``06/07/24``; the date is informational only."""
    if not value:
        return None
    try:
        return date_parser.parse(str(value), dayfirst=True).date()
    except (ValueError, OverflowError):
        logger.warning("Ignoring unparseable exhibition date: %r", value)
        return None


def parse_exhibition_history(
    records: Optional[Iterable[Mapping[str, Any]]],
    strict: bool = False,
    owner: str = "",
) -> List[ExhibitionResult]:
    """Parse raw exhibition records, keeping their order.

    Malformed records are skipped with a warning unless ``strict`` is set.

    Args:
        records: Raw records, each with a ``Result`` string
        strict: Raise on the first malformed record instead of skipping it
        owner: Team name used in log messages

    Raises:
        ExhibitionFormatException: In strict mode, for a malformed record
    """
    history: List[ExhibitionResult] = []
    for index, record in enumerate(records or []):
        try:
            history.append(ExhibitionResult.from_dict(record))
        except ExhibitionFormatException as e:
            if strict:
                raise
            logger.warning(
                "Skipping exhibition record %d for %s: %s", index, owner or "?", e
            )
    return history
