"""
In-memory bracket values: Bracket -> Round -> Match.

These are plain pydantic models (not tables). A tournament row stores the
bracket as JSON in the flat wire shape produced by ``Bracket.to_dict()``:

    {"rounds": [{"round": 1, "matches": [
        {"id": 1, "team1": "A", "team2": "B", "court": null,
         "winner": null, "status": "pending", "score": null}
    ]}]}

Match status is a tagged variant (Pending | InPlay | Done) so that a court
only exists while a match is in play and a winner only exists once it is done.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field

STATUS_PENDING = "pending"
STATUS_IN_PLAY = "in_play"
STATUS_DONE = "done"


class TournamentFormat(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"  # simplified: same draw as SINGLE, no losers bracket
    ROUND_ROBIN = "round_robin"
    SEEDING = "seeding"  # entrants already in seed order, then SINGLE

    @property
    def is_elimination(self) -> bool:
        return self is not TournamentFormat.ROUND_ROBIN


class Pending(BaseModel):
    status: Literal["pending"] = STATUS_PENDING


class InPlay(BaseModel):
    status: Literal["in_play"] = STATUS_IN_PLAY
    court: str


class Done(BaseModel):
    status: Literal["done"] = STATUS_DONE
    winner: str
    score: Optional[str] = None


MatchState = Annotated[Union[Pending, InPlay, Done], Field(discriminator="status")]


class Match(BaseModel):
    id: int
    team1: Optional[str] = None
    team2: Optional[str] = None
    state: MatchState = Field(default_factory=Pending)

    @property
    def status(self) -> str:
        return self.state.status

    @property
    def court(self) -> Optional[str]:
        return self.state.court if isinstance(self.state, InPlay) else None

    @property
    def winner(self) -> Optional[str]:
        return self.state.winner if isinstance(self.state, Done) else None

    @property
    def score(self) -> Optional[str]:
        return self.state.score if isinstance(self.state, Done) else None

    @property
    def has_opponents(self) -> bool:
        """Both slots filled; a match with a bye or an undecided slot cannot be played."""
        return self.team1 is not None and self.team2 is not None

    def opponent_of(self, entrant: str) -> Optional[str]:
        if entrant == self.team1:
            return self.team2
        if entrant == self.team2:
            return self.team1
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "team1": self.team1,
            "team2": self.team2,
            "court": self.court,
            "winner": self.winner,
            "status": self.status,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Build a Match from the flat wire shape.

        Raises ValueError for combinations the state variant cannot hold,
        e.g. a court on a finished match or a winner on a pending one.
        """
        status = data.get("status") or STATUS_PENDING
        court = data.get("court")
        winner = data.get("winner")
        score = data.get("score")

        if status == STATUS_PENDING:
            if court is not None or winner is not None:
                raise ValueError(f"Match {data.get('id')}: pending match cannot have a court or winner")
            state: Union[Pending, InPlay, Done] = Pending()
        elif status == STATUS_IN_PLAY:
            if court is None:
                raise ValueError(f"Match {data.get('id')}: in_play match requires a court")
            if winner is not None:
                raise ValueError(f"Match {data.get('id')}: in_play match cannot have a winner")
            state = InPlay(court=court)
        elif status == STATUS_DONE:
            if winner is None:
                raise ValueError(f"Match {data.get('id')}: done match requires a winner")
            if court is not None:
                raise ValueError(f"Match {data.get('id')}: done match cannot hold a court")
            state = Done(winner=winner, score=score)
        else:
            raise ValueError(f"Match {data.get('id')}: unknown status {status!r}")

        if score is not None and status != STATUS_DONE:
            raise ValueError(f"Match {data.get('id')}: score is only recorded on done matches")

        return cls(id=int(data["id"]), team1=data.get("team1"), team2=data.get("team2"), state=state)


class Round(BaseModel):
    round: int
    matches: List[Match] = Field(default_factory=list)


class Bracket(BaseModel):
    rounds: List[Round] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rounds

    @property
    def match_count(self) -> int:
        return sum(len(r.matches) for r in self.rounds)

    def iter_matches(self) -> Iterator[Match]:
        """All matches, round 1 first, left to right."""
        for r in self.rounds:
            yield from r.matches

    def locate(self, match_id: int) -> Optional[Tuple[int, int]]:
        """Return (round position, index in round), both 0-based, or None."""
        for round_pos, r in enumerate(self.rounds):
            for idx, m in enumerate(r.matches):
                if m.id == match_id:
                    return round_pos, idx
        return None

    def get_match(self, match_id: int) -> Optional[Match]:
        position = self.locate(match_id)
        if position is None:
            return None
        round_pos, idx = position
        return self.rounds[round_pos].matches[idx]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rounds": [
                {"round": r.round, "matches": [m.to_dict() for m in r.matches]}
                for r in self.rounds
            ]
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Bracket":
        if not data:
            return cls()
        return cls(
            rounds=[
                Round(round=int(r["round"]), matches=[Match.from_dict(m) for m in r.get("matches", [])])
                for r in data.get("rounds", [])
            ]
        )


class MatchLogEntry(BaseModel):
    """One completed match, as shown in the match log (newest first)."""

    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    match_id: int
    winner: str
    score: Optional[str] = None
