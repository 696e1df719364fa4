"""
League Pages

Server-rendered leaderboard and forfeit pages. Both pages refresh
themselves on an interval and fall back to the sample league when live
data cannot be fetched.

Routes:
    GET /           : current and last period leaderboards
    GET /forfeits   : forfeit list and history
"""

from datetime import datetime
from typing import Optional

import pytz
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.v1.fpl import get_league_service
from core.logging import get_logger
from core.settings import settings
from schemas.fpl import FPLData
from services.league_service import LeagueService
from services.periods import FORFEITS
from services.sample_data import sample_fpl_data

router = APIRouter(tags=["pages"])
log = get_logger("pages")

DEGRADED_MESSAGE = "Unable to fetch live FPL data. The season may not have started yet."

# Lazy-initialized templates (set by main.py after app creation)
_templates: Optional[Jinja2Templates] = None


def set_templates(templates: Jinja2Templates) -> None:
    global _templates
    _templates = templates


async def _load_league(service: LeagueService) -> tuple[FPLData, bool]:
    """Live period scores, or the sample league and degraded=True."""
    try:
        return await service.get_period_scores(), False
    except Exception as e:
        log.warning("page_degraded", error=str(e), error_type=type(e).__name__)
        return sample_fpl_data(), True


def _render(request: Request, template: str, data: FPLData, degraded: bool) -> HTMLResponse:
    if _templates is None:
        return HTMLResponse("<h1>Templates not configured</h1>", status_code=500)

    refreshed_at = datetime.now(pytz.timezone(settings.timezone))
    return _templates.TemplateResponse(
        request,
        template,
        {
            "data": data,
            "degraded": degraded,
            "degraded_message": DEGRADED_MESSAGE,
            "forfeits": list(FORFEITS.values()),
            "refresh_seconds": settings.refresh_interval_seconds,
            "refreshed_at": refreshed_at.strftime("%H:%M %Z"),
        },
    )


@router.get("/", response_class=HTMLResponse)
async def leaderboard_page(
    request: Request,
    service: LeagueService = Depends(get_league_service),
) -> HTMLResponse:
    """Serve the period leaderboard."""
    data, degraded = await _load_league(service)
    return _render(request, "leaderboard.html", data, degraded)


@router.get("/forfeits", response_class=HTMLResponse)
async def forfeits_page(
    request: Request,
    service: LeagueService = Depends(get_league_service),
) -> HTMLResponse:
    """Serve the forfeit list and who has taken each one so far."""
    data, degraded = await _load_league(service)
    return _render(request, "forfeits.html", data, degraded)
