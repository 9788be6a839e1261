"""
Tournament summary: champion, per-entrant record and progress counts.

Champion:
  - elimination formats: winner of the last round's match, once it is done
  - round robin: most wins, then best point differential, then name;
    only once every match is done
Points come from score_parser and are credited in team1-team2 order;
unparseable scores count the result but no points.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from courtside.models.bracket import STATUS_DONE, Bracket, TournamentFormat
from courtside.services.score_parser import parse_score


class EntrantRecord(BaseModel):
    entrant: str
    wins: int = 0
    losses: int = 0
    points_for: int = 0
    points_against: int = 0

    @property
    def point_diff(self) -> int:
        return self.points_for - self.points_against


class TournamentSummary(BaseModel):
    format: str
    champion: Optional[str] = None
    total_matches: int
    completed_matches: int
    standings: List[EntrantRecord]


def _record(records: Dict[str, EntrantRecord], entrant: str) -> EntrantRecord:
    if entrant not in records:
        records[entrant] = EntrantRecord(entrant=entrant)
    return records[entrant]


def compute_standings(bracket: Bracket) -> List[EntrantRecord]:
    """Records for every entrant seen in the bracket, best first."""
    records: Dict[str, EntrantRecord] = {}
    for m in bracket.iter_matches():
        for team in (m.team1, m.team2):
            if team:
                _record(records, team)

        if m.status != STATUS_DONE:
            continue

        winner = m.winner
        _record(records, winner).wins += 1
        loser = m.opponent_of(winner)
        if loser:
            _record(records, loser).losses += 1

        parsed = parse_score(m.score)
        if parsed is not None and m.team1 and m.team2:
            team1 = _record(records, m.team1)
            team2 = _record(records, m.team2)
            team1.points_for += parsed.team1_points
            team1.points_against += parsed.team2_points
            team2.points_for += parsed.team2_points
            team2.points_against += parsed.team1_points

    return sorted(records.values(), key=lambda r: (-r.wins, -r.point_diff, r.entrant))


def find_champion(fmt: Union[TournamentFormat, str], bracket: Bracket) -> Optional[str]:
    if bracket.is_empty:
        return None

    key = fmt.value if isinstance(fmt, TournamentFormat) else str(fmt)
    if key == TournamentFormat.ROUND_ROBIN.value:
        if any(m.status != STATUS_DONE for m in bracket.iter_matches()):
            return None
        standings = compute_standings(bracket)
        return standings[0].entrant if standings else None

    final_round = bracket.rounds[-1].matches
    if len(final_round) != 1:
        return None
    return final_round[0].winner


def build_summary(fmt: Union[TournamentFormat, str], bracket: Bracket) -> TournamentSummary:
    matches = list(bracket.iter_matches())
    return TournamentSummary(
        format=fmt.value if isinstance(fmt, TournamentFormat) else str(fmt),
        champion=find_champion(fmt, bracket),
        total_matches=len(matches),
        completed_matches=sum(1 for m in matches if m.status == STATUS_DONE),
        standings=compute_standings(bracket),
    )
