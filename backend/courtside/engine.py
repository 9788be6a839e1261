"""
Bracket generation and match progression, importable without the web app.

    from courtside.engine import generate_bracket, assign_to_court, end_match, advance_winner

    bracket = generate_bracket("single", ["A", "B", "C"])
    bracket = assign_to_court(bracket, 1, "Front Left")
    bracket = end_match(bracket, 1, "11-7", "A")
    bracket = advance_winner(bracket, 1, "A")

Every operation returns a new Bracket and leaves its input untouched.
"""
from courtside.models.bracket import Bracket, Match, Round, TournamentFormat
from courtside.services.advancement_service import advance_winner
from courtside.services.court_view import active_matches, assignable_matches, court_allocation
from courtside.services.runtime_service import assign_to_court, end_match, finish_match
from courtside.utils.match_generation import generate_bracket

__all__ = [
    "Bracket",
    "Round",
    "Match",
    "TournamentFormat",
    "generate_bracket",
    "assign_to_court",
    "end_match",
    "advance_winner",
    "finish_match",
    "court_allocation",
    "active_matches",
    "assignable_matches",
]
