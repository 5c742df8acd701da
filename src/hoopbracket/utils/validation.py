"""Validation utilities for Hoop Bracket.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Mapping, Optional, Tuple

from hoopbracket.constants import (
    EXHIBITION_SCORE_SEPARATOR,
    ROSTER_ISO_KEY,
    ROSTER_RANKING_KEY,
    ROSTER_TEAM_KEY,
)
from hoopbracket.exceptions import (
    ExhibitionFormatException,
    InvalidConfigurationException,
    InvalidTeamDataException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Score Validation ==========


def parse_score_pair(result: Optional[str]) -> ValidationResult:
    """Parse an exhibition result string such as ``"83-90"``.

    Args:
        result: Result string, two non-negative integers joined by ``-``

    Returns:
        ValidationResult whose sanitized value is a ``(score_a, score_b)`` tuple

    Example:
        >>> parse_score_pair("83-90").sanitized_value
        (83, 90)
        >>> bool(parse_score_pair("abc-5"))
        False
    """
    if not isinstance(result, str) or not result.strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"Result is empty or not a string: {result!r}",
        )

    parts = result.strip().split(EXHIBITION_SCORE_SEPARATOR)
    if len(parts) != 2:
        return ValidationResult(
            is_valid=False,
            error_message=f"Result must contain exactly two scores: {result!r}",
        )

    scores = []
    for part in parts:
        part = part.strip()
        if not part.isdecimal():
            return ValidationResult(
                is_valid=False,
                error_message=f"Score is not a non-negative integer: {part!r} in {result!r}",
            )
        scores.append(int(part))

    return ValidationResult(is_valid=True, sanitized_value=(scores[0], scores[1]))


def parse_score_pair_strict(result: Optional[str]) -> Tuple[int, int]:
    """Parse a result string and raise exception if invalid.

    Args:
        result: Result string to parse

    Raises:
        ExhibitionFormatException: If the string is not two integers joined by ``-``
    """
    parsed = parse_score_pair(result)
    if not parsed.is_valid:
        raise ExhibitionFormatException(parsed.error_message)
    return parsed.sanitized_value


# ========== Roster Validation ==========


def validate_roster_entry(entry: Mapping[str, Any]) -> ValidationResult:
    """Validate one team descriptor from the roster.

    Accepts ``{"Team": str, "ISOCode": str, "FIBARanking": int}``.

    Returns:
        ValidationResult whose sanitized value is ``(name, iso_code, ranking)``
    """
    if not isinstance(entry, Mapping):
        return ValidationResult(
            is_valid=False, error_message=f"Team descriptor is not a mapping: {entry!r}"
        )

    missing = [
        key
        for key in (ROSTER_TEAM_KEY, ROSTER_ISO_KEY, ROSTER_RANKING_KEY)
        if key not in entry
    ]
    if missing:
        return ValidationResult(
            is_valid=False,
            error_message=f"Team descriptor missing {', '.join(missing)}: {entry!r}",
        )

    name = str(entry[ROSTER_TEAM_KEY]).strip()
    iso_code = str(entry[ROSTER_ISO_KEY]).strip().upper()
    if not name or not iso_code:
        return ValidationResult(
            is_valid=False,
            error_message=f"Team name and ISO code must not be empty: {entry!r}",
        )

    ranking = entry[ROSTER_RANKING_KEY]
    # bool is an int subclass
    if isinstance(ranking, bool) or not isinstance(ranking, int):
        try:
            ranking = int(str(ranking).strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Ranking for {name} is not an integer: {ranking!r}",
            )
    if ranking < 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Ranking for {name} must be positive: {ranking}",
        )

    return ValidationResult(is_valid=True, sanitized_value=(name, iso_code, ranking))


def validate_roster_entry_strict(entry: Mapping[str, Any]) -> Tuple[str, str, int]:
    """Validate a team descriptor and raise exception if invalid.

    Raises:
        InvalidTeamDataException: If the descriptor is incomplete or malformed
    """
    result = validate_roster_entry(entry)
    if not result.is_valid:
        raise InvalidTeamDataException(result.error_message)
    return result.sanitized_value


# ========== Configuration Validation ==========


def validate_probability(value: Any, name: str = "probability") -> float:
    """Validate that a value is a probability in [0, 1].

    Raises:
        InvalidConfigurationException: If the value is outside [0, 1] or not numeric
    """
    try:
        probability = float(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationException(f"{name} must be a number, got {value!r}")

    if not 0.0 <= probability <= 1.0:
        raise InvalidConfigurationException(
            f"{name} must be between 0 and 1, got {probability}"
        )
    return probability
