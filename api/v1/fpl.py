"""
FPL League API

Single read-only endpoint; the ``action`` query parameter selects the
operation.

Routes:
    GET /api/fpl?action=current-gameweek   : {"gameweek": int}
    GET /api/fpl?action=league-standings   : raw standings + current gameweek
    GET /api/fpl?action=period-scores      : period leaderboards and forfeits
"""

from typing import Awaitable, Callable, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from core.exceptions import FPLServiceError, InvalidActionError
from core.logging import get_logger
from core.settings import get_settings
from services.league_service import LeagueService

router = APIRouter(prefix="/fpl", tags=["fpl"])
log = get_logger("fpl_api")


def get_league_service() -> LeagueService:
    """Request-scoped service built from the current environment."""
    try:
        league_id = get_settings().fpl_league_id
    except ValidationError as e:
        log.exception("settings_invalid", errors=e.errors())
        raise FPLServiceError() from e
    return LeagueService(league_id=league_id)


ACTIONS: dict[str, Callable[[LeagueService], Awaitable[BaseModel]]] = {
    "current-gameweek": LeagueService.get_current_gameweek,
    "league-standings": LeagueService.get_league_standings,
    "period-scores": LeagueService.get_period_scores,
}


@router.get("")
async def get_fpl_data(
    action: Optional[str] = Query(None, description=f"One of: {', '.join(ACTIONS)}"),
    service: LeagueService = Depends(get_league_service),
) -> JSONResponse:
    """
    Dispatch to one of the league operations.

    FPLServiceError subclasses are rendered by the handler registered in
    core.middleware: 400 for an unknown action, 500 when the league is not
    configured, 502 when standings are unavailable for period-scores.
    Anything else is logged here and reported as the generic 500.
    """
    handler = ACTIONS.get(action or "")
    if handler is None:
        raise InvalidActionError()

    try:
        payload = await handler(service)
    except FPLServiceError:
        raise
    except Exception as e:
        log.exception("fpl_request_failed", action=action)
        raise FPLServiceError() from e

    return JSONResponse(content=payload.model_dump(mode="json", by_alias=True))
