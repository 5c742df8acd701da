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

# --- Constants ---

# Standing points
WIN_POINTS = 2
LOSS_POINTS = 0

# Scoring model
DEFAULT_FORFEIT_PROBABILITY = 0.1
BASE_SCORE = 70
SCORE_SPREAD = 5  # Points per unit of strength factor
RANKING_DIVISOR = 10
SCORE_FLOOR = 60
SCORE_TOTAL = 140  # Sum of both sides' base scores
RANDOM_SCORE_RANGE = 20

# Exhibition result separator ("83-90")
EXHIBITION_SCORE_SEPARATOR = "-"

# Outcome type categories
OUTCOME_DECIDED = "decided"  # Played to a final score
OUTCOME_FORFEIT = "forfeit"  # One side gave up, no score recorded

# Tournament shape
GROUP_SIZE = 4
GROUP_COUNT = 3
GROUP_LABELS = ["A", "B", "C"]
TEAMS_PER_GROUP_ADVANCING = 2
THIRD_PLACE_TEAMS_ADVANCING = 2
BRACKET_SIZE = 8

# Seed pots, each pot is one quarterfinal pairing
SEED_POTS = ["D", "E", "F", "G"]

# Stage names used in the event stream
STAGE_GROUP = "group"
STAGE_QUARTERFINAL = "quarterfinal"
STAGE_SEMIFINAL = "semifinal"
STAGE_FINAL = "final"
STAGE_THIRD_PLACE = "third_place"

STAGE_NAMES = {
    STAGE_GROUP: "Group stage",
    STAGE_QUARTERFINAL: "Quarterfinals",
    STAGE_SEMIFINAL: "Semifinals",
    STAGE_FINAL: "Final",
    STAGE_THIRD_PLACE: "Third place match",
}

# Roster descriptor keys (groups.json)
ROSTER_TEAM_KEY = "Team"
ROSTER_ISO_KEY = "ISOCode"
ROSTER_RANKING_KEY = "FIBARanking"

# Exhibition descriptor keys (exhibitions.json)
EXHIBITION_RESULT_KEY = "Result"
EXHIBITION_OPPONENT_KEY = "Opponent"
EXHIBITION_DATE_KEY = "Date"
