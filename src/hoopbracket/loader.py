"""Loading roster and exhibition data from JSON files."""

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

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hoopbracket.events import EventSink
from hoopbracket.exceptions import FileLoadException
from hoopbracket.models.config import TournamentConfig
from hoopbracket.tournament import Tournament
from hoopbracket.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def load_json(path: PathLike) -> Any:
    """Read and decode a JSON file.

    Raises:
        FileLoadException: If the file cannot be read or is not valid JSON
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise FileLoadException(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Invalid JSON in {path}: {e}") from e


def load_groups(path: PathLike) -> Dict[str, List[Dict[str, Any]]]:
    """Load a groups file: group label -> list of team descriptors.

    Raises:
        FileLoadException: If the file is unreadable or not shaped as expected
    """
    data = load_json(path)
    if not isinstance(data, dict) or not all(
        isinstance(teams, list) for teams in data.values()
    ):
        raise FileLoadException(
            f"{path} must map group labels to lists of team descriptors"
        )
    logger.info(
        "Loaded %d groups with %d teams from %s",
        len(data),
        sum(len(teams) for teams in data.values()),
        path,
    )
    return data


def load_exhibitions(path: PathLike) -> Dict[str, List[Dict[str, Any]]]:
    """Load an exhibitions file: ISO code -> list of result records.

    Raises:
        FileLoadException: If the file is unreadable or not shaped as expected
    """
    data = load_json(path)
    if not isinstance(data, dict) or not all(
        isinstance(records, list) for records in data.values()
    ):
        raise FileLoadException(f"{path} must map ISO codes to lists of results")
    logger.info("Loaded exhibition results for %d teams from %s", len(data), path)
    return data


def load_tournament(
    groups_path: PathLike,
    exhibitions_path: Optional[PathLike] = None,
    config: Optional[TournamentConfig] = None,
    event_sink: Optional[EventSink] = None,
) -> Tournament:
    """Build a tournament from a groups file and an optional exhibitions file."""
    roster = load_groups(groups_path)
    exhibitions = load_exhibitions(exhibitions_path) if exhibitions_path else {}

    unknown = sorted(
        set(exhibitions)
        - {
            str(team.get("ISOCode", "")).strip().upper()
            for teams in roster.values()
            for team in teams
            if isinstance(team, dict)
        }
    )
    if unknown:
        logger.warning("Exhibition results for teams not in the roster: %s", unknown)

    return Tournament.from_roster(
        roster, exhibitions, config=config, event_sink=event_sink
    )
