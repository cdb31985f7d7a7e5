"""FastAPI application: health check and on-demand reminder trigger."""

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import Depends, FastAPI, HTTPException, Request

from review_reminder import __version__
from review_reminder.config import get_settings, load_config
from review_reminder.exceptions import ConfigurationError, DeliveryError, TransportError
from review_reminder.logging_config import configure_logging
from review_reminder.reminder import run_reminder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load settings on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Review Reminder",
    lifespan=lifespan,
)


async def verify_scheduler(request: Request) -> None:
    """Verify the scheduler secret header for protected endpoints.

    Raises HTTPException 403 if the header is missing, empty, or mismatched,
    or if no secret is configured at all.
    """
    settings = get_settings()
    secret = request.headers.get("X-Scheduler-Secret", "")
    if not settings.scheduler_secret or secret != settings.scheduler_secret:
        raise HTTPException(status_code=403, detail="Invalid scheduler secret")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "review-reminder",
        "version": __version__,
    }


@app.post("/remind")
async def remind_endpoint(_: None = Depends(verify_scheduler)):
    """Run one reminder pass and report what was sent."""
    try:
        config = load_config(get_settings())
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    try:
        result = await run_reminder(config)
    except (TransportError, DeliveryError) as exc:
        logger.error("Reminder run failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return {"status": "sent", **asdict(result)}
