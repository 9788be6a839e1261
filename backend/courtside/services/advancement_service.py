"""
Winner advancement: when a match is finished, its winner fills a slot in the
next round.

Slot rule (elimination draws): match at index i of round r feeds match i // 2
of round r + 1, into team1 when i is even and team2 when i is odd.
"""
import logging

from courtside.models.bracket import Bracket

logger = logging.getLogger(__name__)


def advance_winner(bracket: Bracket, match_id: int, winner: str) -> Bracket:
    """
    Return a copy of bracket with winner written into the downstream slot.

    Identity (an equal copy) when match_id is unknown, the match is in the
    last round, or the next round has no match at i // 2.
    The source match's state is untouched; call end_match first.
    """
    updated = bracket.model_copy(deep=True)

    position = updated.locate(match_id)
    if position is None:
        logger.debug("advance_winner: match %s not found", match_id)
        return updated

    round_pos, idx = position
    if round_pos >= len(updated.rounds) - 1:
        return updated

    next_matches = updated.rounds[round_pos + 1].matches
    target_idx = idx // 2
    if target_idx >= len(next_matches):
        return updated

    target = next_matches[target_idx]
    if idx % 2 == 0:
        target.team1 = winner
    else:
        target.team2 = winner

    logger.debug("Advanced %r from match %s into match %s", winner, match_id, target.id)
    return updated
