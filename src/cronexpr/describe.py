"""Human-readable rendering of cron expressions and their runs."""

import random
from datetime import datetime
from typing import Optional, Sequence
import logging

from .errors import CronParseError
from .expression import parse_cron
from .fields import MONTH, DAY_OF_WEEK, parse_field

logger = logging.getLogger(__name__)

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAY_LABELS = ["Sunday", "Monday", "Tuesday", "Wednesday",
                  "Thursday", "Friday", "Saturday"]

COMMON_PATTERNS = {
    "* * * * *": "Every minute",
    "*/5 * * * *": "Every 5 minutes",
    "*/10 * * * *": "Every 10 minutes",
    "*/15 * * * *": "Every 15 minutes",
    "*/30 * * * *": "Every 30 minutes",
    "0 * * * *": "Every hour",
    "0 */2 * * *": "Every 2 hours",
    "0 */6 * * *": "Every 6 hours",
    "0 */12 * * *": "Every 12 hours",
    "0 0 * * *": "Daily at midnight",
    "0 12 * * *": "Daily at noon",
    "0 0 * * 0": "Weekly on Sunday at midnight",
    "0 0 * * 1": "Weekly on Monday at midnight",
    "0 0 1 * *": "Monthly on the 1st at midnight",
    "0 0 1 1 *": "Yearly on January 1st at midnight",
}


def format_run(instant: datetime) -> str:
    """Format a run like ``Tue, Jan 02, 2024, 04:05``."""
    return instant.strftime("%a, %b %d, %Y, %H:%M")


def format_clock(instant: Optional[datetime]) -> str:
    if instant is None:
        return "--:--"
    return f"{instant.hour:02d}:{instant.minute:02d}"


def timezone_name(instant: Optional[datetime] = None) -> str:
    """Name of the zone ``instant`` is expressed in, local zone for naive values."""
    if instant is None or instant.tzinfo is None:
        instant = (instant or datetime.now()).astimezone()
    return instant.tzname() or "local"


def humanize(expression: str, runs: Sequence[datetime]) -> str:
    """Summarize when an expression fires next.

    Daily schedules (fixed minute and hour, every other field ``*``) read
    as ``At HH:MM every day.``; anything else names the first run.
    """
    parts = expression.split()
    if len(parts) != 5:
        return ""
    minute, hour, dom, month, dow = parts
    first = runs[0] if runs else None

    if dom == "*" and month == "*" and dow == "*" and hour != "*" and minute != "*":
        return f"At {format_clock(first)} every day."
    if first is None:
        return ""
    return f"Next run is {format_run(first)} ({timezone_name(first)})."


def _describe_step(field: str, unit: str) -> Optional[str]:
    if field.startswith("*/") and field[2:].isdigit():
        return f"every {field[2:]} {unit}"
    return None


def describe(expression: str) -> str:
    """Get human-readable description of cron expression.

    Args:
        expression: Cron expression string

    Returns:
        Human-readable description, or the expression itself when it does
        not parse
    """
    expression = " ".join(expression.split())
    if expression in COMMON_PATTERNS:
        return COMMON_PATTERNS[expression]

    try:
        parse_cron(expression)
    except CronParseError as e:
        logger.debug(f"Could not describe cron expression '{expression}': {e}")
        return expression

    minute, hour, day, month, weekday = expression.split()
    desc_parts = []

    if minute != "*":
        desc_parts.append(_describe_step(minute, "minutes") or f"at minute {minute}")
    if hour != "*":
        desc_parts.append(_describe_step(hour, "hours") or f"at hour {hour}")
    if day != "*":
        desc_parts.append(f"on day {day}")
    if month != "*":
        months = sorted(parse_field(month, MONTH))
        desc_parts.append("in " + ", ".join(MONTH_LABELS[m - 1] for m in months))
    if weekday != "*":
        days = sorted(parse_field(weekday, DAY_OF_WEEK))
        desc_parts.append("on " + ", ".join(WEEKDAY_LABELS[d] for d in days))

    if desc_parts:
        return "Runs " + ", ".join(desc_parts)
    return "Every minute"


def random_cron(rng: Optional[random.Random] = None) -> str:
    """Generate a random daily expression, ``<minute> <hour> * * *``."""
    rng = rng or random.Random()
    return f"{rng.randrange(60)} {rng.randrange(24)} * * *"
