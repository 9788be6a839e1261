"""
Bracket generation per tournament format.

    single       power-of-two elimination draw, byes padded after the entrants
    double       simplified: identical draw to single (no losers bracket)
    seeding      entrants arrive in seed order and go straight into single
    round_robin  see courtside.utils.rr_wiring

Unknown formats produce an empty Bracket (zero rounds) instead of raising;
callers treat that as "no bracket produced" (see match_guards).
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Union

from courtside.models.bracket import Bracket, Match, Round, TournamentFormat
from courtside.utils.rr_wiring import generate_round_robin

logger = logging.getLogger(__name__)


def next_power_of_two(n: int) -> int:
    p = 1
    while p < n:
        p <<= 1
    return p


def elimination_round_count(entrant_count: int) -> int:
    """ceil(log2(n)) rounds; a degenerate draw (0 or 1 entrants) still has one round."""
    return max(1, next_power_of_two(entrant_count).bit_length() - 1)


def generate_single_elimination(entrants: Sequence[Optional[str]]) -> Bracket:
    """
    Round 1 pairs entrants in input order (0v1, 2v3, ...) after padding with
    byes (None) up to the next power of two. Every later round is
    pre-allocated with empty matches, halving until a single final remains.

    Match ids are dense and follow creation order: round 1 left to right,
    then round 2, and so on.
    """
    slots: List[Optional[str]] = list(entrants)
    size = next_power_of_two(len(slots))
    slots.extend([None] * (size - len(slots)))

    next_id = 1
    first_round: List[Match] = []
    for i in range(0, size, 2):
        # size == 1 only for an empty entrant list: one match, both slots empty
        team2 = slots[i + 1] if i + 1 < size else None
        first_round.append(Match(id=next_id, team1=slots[i], team2=team2))
        next_id += 1

    rounds = [Round(round=1, matches=first_round)]
    previous_count = len(first_round)
    while previous_count > 1:
        count = (previous_count + 1) // 2
        rounds.append(
            Round(round=len(rounds) + 1, matches=[Match(id=next_id + k) for k in range(count)])
        )
        next_id += count
        previous_count = count

    return Bracket(rounds=rounds)


_GENERATORS: Dict[str, Callable[[Sequence[Optional[str]]], Bracket]] = {
    TournamentFormat.SINGLE.value: generate_single_elimination,
    TournamentFormat.DOUBLE.value: generate_single_elimination,
    TournamentFormat.SEEDING.value: generate_single_elimination,
    TournamentFormat.ROUND_ROBIN.value: generate_round_robin,
}


def generate_bracket(fmt: Union[TournamentFormat, str], entrants: Sequence[Optional[str]]) -> Bracket:
    """Build the initial bracket for a format. Never raises for short entrant lists."""
    key = fmt.value if isinstance(fmt, TournamentFormat) else str(fmt)
    generator = _GENERATORS.get(key)
    if generator is None:
        logger.warning("Unknown tournament format %r; returning empty bracket", fmt)
        return Bracket()

    bracket = generator(entrants)
    logger.debug(
        "Generated %s bracket: entrants=%d rounds=%d matches=%d",
        key,
        len(entrants),
        len(bracket.rounds),
        bracket.match_count,
    )
    return bracket
