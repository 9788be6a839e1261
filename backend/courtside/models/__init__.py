from courtside.models.bracket import (
    Bracket,
    Done,
    InPlay,
    Match,
    MatchLogEntry,
    Pending,
    Round,
    TournamentFormat,
)
from courtside.models.player import Player
from courtside.models.signup import Signup, SignupDay
from courtside.models.tournament import Tournament

__all__ = [
    "Bracket",
    "Round",
    "Match",
    "Pending",
    "InPlay",
    "Done",
    "MatchLogEntry",
    "TournamentFormat",
    "Tournament",
    "Player",
    "Signup",
    "SignupDay",
]
