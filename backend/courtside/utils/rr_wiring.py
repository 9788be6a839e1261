"""
Round Robin Wiring

Every unordered pair of entrants plays once. Pairs are produced in (i, j)
index order over the entrant list (i < j) and then cut into rounds of
ceil(n / 2) matches in that same order.

The round cut is a capacity cap, not a schedule: an entrant can appear in two
matches of the same round (with 4 entrants round 1 is A-B, A-C).
"""

import math
from typing import List, Optional, Sequence, Tuple

from courtside.models.bracket import Bracket, Match, Round


def rr_pairings(entrants: Sequence[str]) -> List[Tuple[str, str]]:
    """All (a, b) pairs, lexicographic by input index."""
    pairs: List[Tuple[str, str]] = []
    for i in range(len(entrants)):
        for j in range(i + 1, len(entrants)):
            pairs.append((entrants[i], entrants[j]))
    return pairs


def rr_matches_per_round(entrant_count: int) -> int:
    """Round capacity: ceil(n / 2)"""
    return math.ceil(entrant_count / 2)


def batch_pairings(pairs: List[Tuple[str, str]], per_round: int) -> List[List[Tuple[str, str]]]:
    """
    Split pairs into consecutive batches of at most per_round.

    Example (5 entrants, 10 pairs, per_round=3): sizes [3, 3, 3, 1]
    """
    if not pairs:
        return []
    if per_round < 1:
        raise ValueError(f"per_round must be >= 1, got {per_round}")
    return [pairs[i : i + per_round] for i in range(0, len(pairs), per_round)]


def generate_round_robin(entrants: Sequence[Optional[str]]) -> Bracket:
    """
    Round robin bracket. Byes (None / empty labels) are dropped entirely.
    Fewer than 2 entrants -> zero rounds.
    """
    valid = [e for e in entrants if e]
    batches = batch_pairings(rr_pairings(valid), rr_matches_per_round(len(valid)))

    rounds: List[Round] = []
    next_id = 1
    for batch in batches:
        matches = []
        for team1, team2 in batch:
            matches.append(Match(id=next_id, team1=team1, team2=team2))
            next_id += 1
        rounds.append(Round(round=len(rounds) + 1, matches=matches))

    return Bracket(rounds=rounds)
