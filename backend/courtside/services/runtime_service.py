"""
Match runtime: court assignment and completion.

State machine per match:

    pending --assign_to_court--> in_play --end_match--> done

Operations are total: an unknown match id returns an equal copy of the
bracket. Nothing here rejects re-assignment, double completion, a match
missing an opponent, or two matches on one court; request-level checks live
in courtside.utils.match_guards.
"""
import logging
from typing import Optional, Tuple

from courtside.models.bracket import Bracket, Done, InPlay, MatchLogEntry
from courtside.services.advancement_service import advance_winner

logger = logging.getLogger(__name__)


def assign_to_court(bracket: Bracket, match_id: int, court: str) -> Bracket:
    """Put a match in play on court, whatever its prior status."""
    updated = bracket.model_copy(deep=True)
    match = updated.get_match(match_id)
    if match is None:
        logger.debug("assign_to_court: match %s not found", match_id)
        return updated

    match.state = InPlay(court=court)
    return updated


def end_match(bracket: Bracket, match_id: int, score: Optional[str], winner: str) -> Bracket:
    """Mark a match done with winner and score; its court is released. Does not advance."""
    updated = bracket.model_copy(deep=True)
    match = updated.get_match(match_id)
    if match is None:
        logger.debug("end_match: match %s not found", match_id)
        return updated

    if match.winner is not None and match.winner != winner:
        logger.info("Match %s result overwritten: %r -> %r", match_id, match.winner, winner)

    match.state = Done(winner=winner, score=score)
    return updated


def finish_match(
    bracket: Bracket,
    match_id: int,
    score: Optional[str],
    winner: str,
    advance: bool = True,
) -> Tuple[Bracket, MatchLogEntry]:
    """
    End a match and (optionally) advance its winner, as one step.

    Returns the new bracket and the log entry for the completion.
    """
    updated = end_match(bracket, match_id, score, winner)
    if advance:
        updated = advance_winner(updated, match_id, winner)
    return updated, MatchLogEntry(match_id=match_id, winner=winner, score=score)
