"""Type hints used in Hoop Bracket."""

from typing import Literal

# Outcome type literals
OutcomeType = Literal["decided", "forfeit"]

# Result from the perspective of the team that called play_match
MatchResultType = Literal["winner", "loser"]

StageName = Literal["group", "quarterfinal", "semifinal", "final", "third_place"]
