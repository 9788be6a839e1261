"""
Match runtime: court assignment, completion and winner advancement.

Each request loads the tournament's bracket, checks the request with
match_guards, applies one engine operation and stores the returned bracket.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session

from courtside.database import get_session
from courtside.models.bracket import STATUS_DONE, Bracket, TournamentFormat
from courtside.models.tournament import Tournament
from courtside.services.advancement_service import advance_winner
from courtside.services.runtime_service import assign_to_court, end_match, finish_match
from courtside.utils.courts import parse_court_names
from courtside.utils.match_guards import (
    require_active_tournament,
    require_court_assignable,
    require_in_play,
    require_match,
    require_valid_winner,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class CourtAssignment(BaseModel):
    court: str


class MatchResult(BaseModel):
    winner: str
    score: Optional[str] = None


class AdvanceRequest(BaseModel):
    # Defaults to the winner already recorded on the match
    winner: Optional[str] = None


class MatchUpdateResponse(BaseModel):
    match: Dict[str, Any]
    rounds: List[Dict[str, Any]]
    log_entry: Optional[Dict[str, Any]] = None


def _save_bracket(session: Session, tournament: Tournament, bracket: Bracket) -> None:
    tournament.bracket_json = bracket.to_dict()
    tournament.updated_at = datetime.now(timezone.utc)
    session.add(tournament)
    session.commit()
    session.refresh(tournament)


def _response(bracket: Bracket, match_id: int, log_entry: Optional[Dict[str, Any]] = None) -> MatchUpdateResponse:
    return MatchUpdateResponse(
        match=bracket.get_match(match_id).to_dict(),
        rounds=bracket.to_dict()["rounds"],
        log_entry=log_entry,
    )


def _is_elimination(fmt: str) -> bool:
    try:
        return TournamentFormat(fmt).is_elimination
    except ValueError:
        return False


@router.post(
    "/tournaments/{tournament_id}/runtime/matches/{match_id}/assign",
    response_model=MatchUpdateResponse,
)
def assign_match(
    tournament_id: int,
    match_id: int,
    payload: CourtAssignment,
    session: Session = Depends(get_session),
) -> MatchUpdateResponse:
    """Put a pending match in play on a free court"""
    tournament = require_active_tournament(session, tournament_id)
    bracket = Bracket.from_dict(tournament.bracket_json)
    match = require_match(bracket, match_id)
    court = payload.court.strip()
    require_court_assignable(bracket, match, court, parse_court_names(tournament.court_names))

    bracket = assign_to_court(bracket, match_id, court)
    _save_bracket(session, tournament, bracket)
    logger.info("Tournament %s: match %s assigned to court %r", tournament_id, match_id, court)
    return _response(bracket, match_id)


@router.post(
    "/tournaments/{tournament_id}/runtime/matches/{match_id}/end",
    response_model=MatchUpdateResponse,
)
def end_match_route(
    tournament_id: int,
    match_id: int,
    payload: MatchResult,
    session: Session = Depends(get_session),
) -> MatchUpdateResponse:
    """Record a result and release the court. The winner is not advanced (see /advance, /finish)."""
    tournament = require_active_tournament(session, tournament_id)
    bracket = Bracket.from_dict(tournament.bracket_json)
    match = require_match(bracket, match_id)
    require_in_play(match)
    winner = require_valid_winner(match, payload.winner)

    bracket = end_match(bracket, match_id, payload.score, winner)
    _save_bracket(session, tournament, bracket)
    logger.info("Tournament %s: match %s ended, winner %r", tournament_id, match_id, winner)
    return _response(bracket, match_id)


@router.post(
    "/tournaments/{tournament_id}/runtime/matches/{match_id}/advance",
    response_model=MatchUpdateResponse,
)
def advance_match(
    tournament_id: int,
    match_id: int,
    payload: Optional[AdvanceRequest] = None,
    session: Session = Depends(get_session),
) -> MatchUpdateResponse:
    """Write a done match's winner into the next round (elimination formats only)"""
    tournament = require_active_tournament(session, tournament_id)
    if not _is_elimination(tournament.format):
        raise HTTPException(
            status_code=409,
            detail=f"INVALID_TRANSITION: {tournament.format} pairings are fixed; winners do not advance.",
        )
    bracket = Bracket.from_dict(tournament.bracket_json)
    match = require_match(bracket, match_id)
    if match.status != STATUS_DONE:
        raise HTTPException(
            status_code=409,
            detail=f"INVALID_TRANSITION: Match {match_id} must be done before its winner can advance.",
        )
    requested = payload.winner if payload is not None else None
    winner = require_valid_winner(match, requested or match.winner)

    bracket = advance_winner(bracket, match_id, winner)
    _save_bracket(session, tournament, bracket)
    return _response(bracket, match_id)


@router.post(
    "/tournaments/{tournament_id}/runtime/matches/{match_id}/finish",
    response_model=MatchUpdateResponse,
)
def finish_match_route(
    tournament_id: int,
    match_id: int,
    payload: MatchResult,
    session: Session = Depends(get_session),
) -> MatchUpdateResponse:
    """End an in-play match, advance its winner (elimination formats) and log the result"""
    tournament = require_active_tournament(session, tournament_id)
    bracket = Bracket.from_dict(tournament.bracket_json)
    match = require_match(bracket, match_id)
    require_in_play(match)
    winner = require_valid_winner(match, payload.winner)

    # Round robin pairings are fixed; there is no next-round slot to fill
    bracket, entry = finish_match(
        bracket, match_id, payload.score, winner, advance=_is_elimination(tournament.format)
    )
    entry_json = entry.model_dump(mode="json")
    tournament.log_json = [entry_json] + list(tournament.log_json or [])
    _save_bracket(session, tournament, bracket)

    logger.info("Tournament %s: match %s finished, winner %r (%s)", tournament_id, match_id, winner, payload.score)
    return _response(bracket, match_id, log_entry=entry_json)
