"""API endpoints for parsing and previewing cron expressions."""

from fastapi import APIRouter, HTTPException
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from config import settings
from cronexpr import CronError, CronExpression, SearchExhausted, next_n_runs, parse_cron
from cronexpr.describe import describe, format_clock, format_run, humanize, random_cron, timezone_name
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


# Pydantic models for request/response
class ExpressionRequest(BaseModel):
    expression: str = Field(..., max_length=1000)


class PreviewRequest(ExpressionRequest):
    count: Optional[int] = Field(None, ge=1, le=settings.max_run_count)
    start: Optional[datetime] = None


class MatchRequest(ExpressionRequest):
    at: datetime


def _cron_error(error: CronError) -> HTTPException:
    """Translate an engine error into an HTTP error."""
    status_code = 422 if isinstance(error, SearchExhausted) else 400
    return HTTPException(status_code=status_code, detail=error.to_dict())


def _parse(expression: str) -> CronExpression:
    try:
        return parse_cron(expression)
    except CronError as e:
        logger.info(f"Rejected cron expression '{expression}': {e}")
        raise _cron_error(e)


@router.post("/cron/parse")
async def parse_expression(request: ExpressionRequest):
    """Parse an expression into the allowed values of each field."""
    cron = _parse(request.expression)
    return {
        "expression": cron.source,
        "fields": cron.to_dict(),
        "description": describe(cron.source)
    }


@router.post("/cron/preview")
async def preview_expression(request: PreviewRequest):
    """List the next runs of an expression."""
    count = request.count or settings.default_run_count

    cron = _parse(request.expression)
    start = request.start or datetime.now()

    try:
        runs = next_n_runs(cron, count, start, limit=settings.search_limit_minutes)
    except SearchExhausted as e:
        logger.info(f"No upcoming runs for '{cron.source}': {e}")
        raise _cron_error(e)

    return {
        "expression": cron.source,
        "runs": [run.isoformat() for run in runs],
        "formatted": [format_run(run) for run in runs],
        "next": format_run(runs[0]),
        "clock": format_clock(runs[0]),
        "summary": humanize(cron.source, runs),
        "timezone": timezone_name(runs[0])
    }


@router.post("/cron/match")
async def match_expression(request: MatchRequest):
    """Check whether an instant satisfies an expression."""
    cron = _parse(request.expression)
    return {
        "expression": cron.source,
        "at": request.at.isoformat(),
        "matches": cron.matches(request.at)
    }


@router.get("/cron/random")
async def random_expression():
    """Generate a random daily expression."""
    return {"expression": random_cron()}
