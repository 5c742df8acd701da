"""Exceptions for use in Hoop Bracket"""

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


# ========== Base Application Exception ==========


class HoopBracketException(Exception):
    """Base exception for all Hoop Bracket errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(HoopBracketException):
    """Base exception for configuration errors.

    Configuration errors are fatal: the simulation cannot proceed and no
    partial result is returned.
    """

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class InsufficientTeamsException(ConfigurationException):
    """Raised when there are not enough teams to fill the groups or the bracket."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(HoopBracketException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class DuplicateTeamException(TournamentException):
    """Raised when attempting to add a team that already exists."""

    pass


# ========== Team Exceptions ==========


class TeamException(HoopBracketException):
    """Base exception for team-related errors."""

    pass


class TeamNotFoundException(TeamException):
    """Raised when a requested team cannot be found."""

    pass


class InvalidTeamDataException(TeamException):
    """Raised when team data is invalid or incomplete."""

    pass


# ========== Data Format Exceptions ==========


class DataFormatException(HoopBracketException):
    """Base exception for malformed input records.

    These are soft errors: callers skip the record unless running in strict mode.
    """

    pass


class ExhibitionFormatException(DataFormatException):
    """Raised when an exhibition result cannot be parsed into two integers."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(HoopBracketException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass
