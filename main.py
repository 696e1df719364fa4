"""
FPL Forfeit Tracker

FastAPI server for a Fantasy Premier League mini-league's rotating forfeit:
the lowest scorer of every four-gameweek period takes the forfeit.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000

Environment Variables:
    FPL_LEAGUE_ID - Classic league id (required for standings and scores)
    LOG_LEVEL     - DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
    LOG_FORMAT    - json or console (default json)
"""

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

import pytz
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from api.v1 import fpl, pages
from core.correlation_middleware import CorrelationMiddleware
from core.logging import setup_logging, get_logger
from core.middleware import setup_middleware
from core.resilience import is_circuit_open
from core.settings import settings


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    league_configured: bool
    fpl_circuit_open: bool


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    log = get_logger()
    log.info(
        "server_starting",
        service=settings.service_name,
        league_configured=settings.fpl_league_id is not None,
    )
    if settings.fpl_league_id is None:
        log.warning("league_not_configured", hint="set FPL_LEAGUE_ID")

    yield

    log.info("server_stopped")


app = FastAPI(
    title="FPL Forfeit Tracker",
    description="Period leaderboards and forfeits for an FPL mini-league",
    version="1.0.0",
    lifespan=lifespan,
)

# Middlewares (order matters: first added is outermost)
app.add_middleware(CorrelationMiddleware)
setup_middleware(app)

# Templates
_templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
pages.set_templates(_templates)

app.include_router(fpl.router, prefix="/api")
app.include_router(pages.router)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint. Does not call FPL."""
    now = datetime.now(pytz.timezone(settings.timezone))
    return HealthResponse(
        status="healthy",
        timestamp=now.isoformat(),
        league_configured=settings.fpl_league_id is not None,
        fpl_circuit_open=is_circuit_open(),
    )


@app.get("/ping")
async def ping():
    return {"message": "Pong!"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
