"""Example script demonstrating the tournament simulation.

This script shows how to drive a run programmatically, both from the bundled
JSON data and from an in-memory roster, and how to collect its events.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hoopbracket.events import EventLog
from hoopbracket.loader import load_tournament
from hoopbracket.models import TournamentConfig
from hoopbracket.reporter import render_report
from hoopbracket.tournament import Tournament

DATA_DIR = Path(__file__).parent / "data"


def example_from_files():
    """Example: Simulating the bundled roster with exhibition form."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Simulation from JSON files")
    print("=" * 70 + "\n")

    tournament = load_tournament(
        DATA_DIR / "groups.json",
        DATA_DIR / "exhibitions.json",
        config=TournamentConfig(name="Olympic basketball", seed=2024),
    )
    result = tournament.simulate()
    print(render_report(result))


def example_in_memory_roster():
    """Example: Twelve teams without exhibition history, events collected."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: In-memory roster and event log")
    print("=" * 70 + "\n")

    roster = {
        label: [
            {
                "Team": f"Team {index}",
                "ISOCode": f"T{index:02d}",
                "FIBARanking": index,
            }
            for index in range(start, start + 4)
        ]
        for label, start in (("A", 1), ("B", 5), ("C", 9))
    }

    event_log = EventLog()
    tournament = Tournament.from_roster(
        roster, config=TournamentConfig(seed=7), event_sink=event_log
    )
    result = tournament.simulate()

    forfeits = [event for event in event_log.events if event.is_forfeit]
    print(f"Matches played: {len(event_log)}")
    print(f"Forfeits: {len(forfeits)}")
    print(f"Gold: {result.medals.gold.name}")
    print(f"Silver: {result.medals.silver.name}")
    print(f"Bronze: {result.medals.bronze.name}")


if __name__ == "__main__":
    example_from_files()
    example_in_memory_roster()
