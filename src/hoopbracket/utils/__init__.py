"""Shared utilities for Hoop Bracket."""

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

import logging

PACKAGE_LOGGER_NAME = "hoopbracket"

# Library code never configures handlers; applications do.
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Names outside the package namespace are nested under it so that a single
    level set on ``hoopbracket`` controls every module.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command line use.

    Args:
        verbose: Log at DEBUG level instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


__all__ = ["setup_logger", "configure_logging"]
