"""
Minimal parser for free-text match scores.

Supports formats like:
  "11-7"             -> 1 game, points 11-7
  "11-7 9-11 11-5"   -> 3 games, points summed
  "11-7, 9-11, 11-5" -> comma-separated variant

Sides are read in team1-team2 order. Returns None on parse failure
(non-fatal); the raw score string is always kept as entered.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass
class ParsedScore:
    games: List[Tuple[int, int]]  # (team1_points, team2_points) per game
    team1_games_won: int
    team2_games_won: int
    team1_points: int
    team2_points: int


def parse_score(raw: Optional[str]) -> Optional[ParsedScore]:
    """Parse a score string into per-game points. Returns None if it cannot be parsed."""
    if not raw or not raw.strip():
        return None

    normalized = raw.replace(",", " ").strip()
    games: List[Tuple[int, int]] = []
    for part in normalized.split():
        pair = part.split("-")
        if len(pair) != 2:
            return None
        try:
            a = int(pair[0])
            b = int(pair[1])
        except ValueError:
            return None
        if a < 0 or b < 0:
            return None
        games.append((a, b))

    if not games:
        return None

    return ParsedScore(
        games=games,
        team1_games_won=sum(1 for a, b in games if a > b),
        team2_games_won=sum(1 for a, b in games if b > a),
        team1_points=sum(a for a, _ in games),
        team2_points=sum(b for _, b in games),
    )
