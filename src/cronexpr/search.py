"""Forward search for instants matching a cron expression."""

from datetime import datetime, timedelta
from typing import List, Optional
import logging

from .errors import SearchExhausted
from .expression import CronExpression

logger = logging.getLogger(__name__)

ONE_MINUTE = timedelta(minutes=1)

# About two years of minutes
SEARCH_LIMIT = 2 * 366 * 24 * 60


def round_up_to_next_minute(instant: datetime) -> datetime:
    return instant.replace(second=0, microsecond=0) + ONE_MINUTE


def _past_calendar_end(cron: CronExpression) -> SearchExhausted:
    logger.debug(f"Search for '{cron.source}' ran past {datetime.max}")
    return SearchExhausted(
        "Could not find the next run before the end of the calendar.", token=cron.source
    )


def next_run(
    cron: CronExpression,
    start: Optional[datetime] = None,
    limit: int = SEARCH_LIMIT,
) -> datetime:
    """Find the first matching instant after ``start``.

    The search begins at the minute following ``start`` and steps one
    minute at a time, so ``start`` itself is never returned.

    Args:
        cron: Parsed expression
        start: Instant to search from (default: now, local time)
        limit: Maximum number of candidate minutes to test

    Raises:
        SearchExhausted: If no candidate within ``limit`` minutes matches, or
            the search runs past the last representable datetime
    """
    if start is None:
        start = datetime.now()

    try:
        candidate = round_up_to_next_minute(start)
        for _ in range(limit):
            if cron.matches(candidate):
                return candidate
            candidate += ONE_MINUTE
    except OverflowError:
        raise _past_calendar_end(cron) from None

    logger.debug(f"No match for '{cron.source}' within {limit} minutes of {start}")
    if limit == SEARCH_LIMIT:
        message = "Could not find the next run within 2 years."
    else:
        message = f"Could not find the next run within {limit} minutes."
    raise SearchExhausted(message, token=cron.source)


def next_n_runs(
    cron: CronExpression,
    n: int = 5,
    start: Optional[datetime] = None,
    limit: int = SEARCH_LIMIT,
) -> List[datetime]:
    """Find the next ``n`` matching instants, in increasing order."""
    if n < 0:
        raise ValueError(f"Run count must not be negative, got {n}")
    if start is None:
        start = datetime.now()

    runs = []
    cursor = start
    for _ in range(n):
        run = next_run(cron, cursor, limit)
        runs.append(run)
        # the next search starts from one minute past this match
        try:
            cursor = run + ONE_MINUTE
        except OverflowError:
            raise _past_calendar_end(cron) from None
    return runs
