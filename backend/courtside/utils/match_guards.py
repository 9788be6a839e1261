"""
Request guards for tournament and match mutations.

The bracket engine itself never rejects anything (unknown ids are no-ops,
replays overwrite). These guards run at the HTTP boundary and report the
named error kinds as HTTPException with a code-prefixed detail:

- UNKNOWN_FORMAT / NOT_ENOUGH_ENTRANTS / DUPLICATE_ENTRANTS on creation
- MATCH_NOT_FOUND, COURT_NOT_DECLARED, COURT_OCCUPIED
- INVALID_TRANSITION, INVALID_WINNER
- TOURNAMENT_COMPLETED
"""
import logging
from collections import Counter
from typing import Optional, Sequence

from fastapi import HTTPException
from sqlmodel import Session

from courtside.models.bracket import STATUS_DONE, STATUS_IN_PLAY, Bracket, Match
from courtside.models.tournament import Tournament

logger = logging.getLogger(__name__)

MIN_ENTRANTS = 2


def _reject(status_code: int, code: str, message: str) -> HTTPException:
    logger.warning("%s: %s", code, message)
    return HTTPException(status_code=status_code, detail=f"{code}: {message}")


def get_tournament_or_404(session: Session, tournament_id: int) -> Tournament:
    tournament = session.get(Tournament, tournament_id)
    if not tournament:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return tournament


def require_active_tournament(session: Session, tournament_id: int) -> Tournament:
    """
    Get a tournament that still accepts match updates.

    Raises:
        HTTPException 404: Tournament not found
        HTTPException 409: Tournament already completed
    """
    tournament = get_tournament_or_404(session, tournament_id)
    if tournament.status == "completed":
        raise _reject(409, "TOURNAMENT_COMPLETED", f"Tournament {tournament_id} is completed and read-only.")
    return tournament


def require_entrant_count(entrants: Sequence[str]) -> None:
    if len(entrants) < MIN_ENTRANTS:
        raise _reject(
            422,
            "NOT_ENOUGH_ENTRANTS",
            f"Need at least {MIN_ENTRANTS} checked-in players to create a tournament (got {len(entrants)}).",
        )


def require_unique_entrants(entrants: Sequence[str]) -> None:
    """Entrants are identified by label; two with the same name cannot be told apart."""
    duplicates = sorted(name for name, count in Counter(entrants).items() if count > 1)
    if duplicates:
        raise _reject(422, "DUPLICATE_ENTRANTS", f"Entrant names must be unique: {', '.join(duplicates)}.")


def require_bracket_generated(bracket: Bracket, fmt: str) -> None:
    """An empty bracket means the format was not recognised."""
    if bracket.is_empty:
        raise _reject(422, "UNKNOWN_FORMAT", f"Format {fmt!r} did not produce a bracket.")


def require_match(bracket: Bracket, match_id: int) -> Match:
    match = bracket.get_match(match_id)
    if match is None:
        raise _reject(404, "MATCH_NOT_FOUND", f"Match {match_id} is not in this bracket.")
    return match


def require_court_assignable(bracket: Bracket, match: Match, court: str, courts: Sequence[str]) -> None:
    """
    A match can go on court when:
    - the court is one of the tournament's courts
    - the match is not done and both opponents are known
    - no other match is in play on that court (moving a match to its own court is fine)
    """
    if court not in courts:
        raise _reject(422, "COURT_NOT_DECLARED", f"Court {court!r} is not one of this tournament's courts.")

    if match.status == STATUS_DONE:
        raise _reject(409, "INVALID_TRANSITION", f"Match {match.id} is already done.")

    if not match.has_opponents:
        raise _reject(409, "INVALID_TRANSITION", f"Match {match.id} does not have two opponents yet.")

    for other in bracket.iter_matches():
        if other.id != match.id and other.court == court:
            raise _reject(409, "COURT_OCCUPIED", f"Court {court!r} is in use by match {other.id}.")


def require_in_play(match: Match) -> None:
    if match.status != STATUS_IN_PLAY:
        raise _reject(
            409,
            "INVALID_TRANSITION",
            f"Match {match.id} is {match.status}; only in_play matches can be ended.",
        )


def require_valid_winner(match: Match, winner: Optional[str]) -> str:
    if not winner or winner not in (match.team1, match.team2):
        raise _reject(
            422,
            "INVALID_WINNER",
            f"Winner must be {match.team1!r} or {match.team2!r} for match {match.id}.",
        )
    return winner
