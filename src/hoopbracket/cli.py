"""Command-line interface for running a tournament simulation."""

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

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from hoopbracket.constants import DEFAULT_FORFEIT_PROBABILITY
from hoopbracket.events import LoggingEventSink
from hoopbracket.exceptions import HoopBracketException
from hoopbracket.loader import load_tournament
from hoopbracket.models.config import TournamentConfig
from hoopbracket.reporter import render_report
from hoopbracket.utils import configure_logging, setup_logger
from hoopbracket.utils.validation import validate_probability

logger = setup_logger(__name__)


def parse_probability(value: str) -> float:
    """argparse type for a probability in [0, 1].

    Raises:
        argparse.ArgumentTypeError: If value is not a number in [0, 1]
    """
    try:
        return validate_probability(value, "forfeit probability")
    except HoopBracketException as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="hoop-bracket",
        description="Simulate a 12-team basketball tournament: "
        "three round-robin groups followed by an 8-team knockout bracket.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hoop-bracket groups.json
  hoop-bracket groups.json --exhibitions exhibitions.json --seed 42
  hoop-bracket groups.json --exhibitions exhibitions.json --json
        """,
    )
    parser.add_argument(
        "groups",
        type=Path,
        help="JSON file mapping group labels to team descriptors",
    )
    parser.add_argument(
        "--exhibitions",
        "-e",
        type=Path,
        default=None,
        help="JSON file mapping ISO codes to exhibition results",
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for a reproducible run",
    )
    parser.add_argument(
        "--forfeit-probability",
        type=parse_probability,
        default=DEFAULT_FORFEIT_PROBABILITY,
        help="Chance that each side gives up before a match (default: %(default)s)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed exhibition results instead of skipping them",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every match as it is played",
    )
    return parser


def run_simulation(args: argparse.Namespace) -> int:
    """Run one tournament according to parsed arguments.

    Returns:
        Exit code
    """
    config = TournamentConfig(
        seed=args.seed,
        forfeit_probability=args.forfeit_probability,
        strict_exhibitions=args.strict,
    )

    event_sink = LoggingEventSink() if args.verbose else None
    tournament = load_tournament(
        args.groups, args.exhibitions, config=config, event_sink=event_sink
    )
    result = tournament.simulate()

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render_report(result))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        return run_simulation(args)
    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user")
        return 130
    except HoopBracketException as e:
        logger.error("Simulation failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
