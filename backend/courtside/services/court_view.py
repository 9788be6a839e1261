"""
Court allocation view: which match currently holds which court.

Derived on every read from the bracket; there is no stored court index.
"""
from typing import Any, Dict, List, Optional, Sequence

from courtside.models.bracket import STATUS_PENDING, Bracket, Match

COURT_AVAILABLE = "available"
COURT_IN_PLAY = "in_play"


def court_allocation(bracket: Bracket, courts: Sequence[str]) -> Dict[str, Optional[Match]]:
    """
    Map every declared court to the match on it, or None.

    Matches are scanned in bracket order; if two matches carry the same court
    label the later one wins. A court found on a match but missing from
    `courts` is still reported.
    """
    usage: Dict[str, Optional[Match]] = {c: None for c in courts}
    for m in bracket.iter_matches():
        if m.court is not None:
            usage[m.court] = m
    return usage


def active_matches(bracket: Bracket) -> List[Match]:
    return [m for m in bracket.iter_matches() if m.court is not None]


def assignable_matches(bracket: Bracket) -> List[Match]:
    """Pending matches with both opponents known."""
    return [m for m in bracket.iter_matches() if m.status == STATUS_PENDING and m.has_opponents]


def court_board(bracket: Bracket, courts: Sequence[str]) -> List[Dict[str, Any]]:
    """Serializable per-court rows for the court controls and public board."""
    rows = []
    for court, match in court_allocation(bracket, courts).items():
        rows.append(
            {
                "court": court,
                "status": COURT_IN_PLAY if match is not None else COURT_AVAILABLE,
                "match": match.to_dict() if match is not None else None,
            }
        )
    return rows
