"""Parsing of complete five-field cron expressions."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, List
import logging

from .errors import CronParseError, WrongFieldCount
from .fields import DAY_OF_MONTH, DAY_OF_WEEK, HOUR, MINUTE, MONTH, parse_field

logger = logging.getLogger(__name__)


def cron_weekday(instant: datetime) -> int:
    """Day of week with Sunday as 0."""
    return instant.isoweekday() % 7


@dataclass(frozen=True)
class CronExpression:
    """The allowed values of each field of a parsed expression."""
    minute: FrozenSet[int]
    hour: FrozenSet[int]
    day_of_month: FrozenSet[int]
    month: FrozenSet[int]
    day_of_week: FrozenSet[int]
    source: str = field(default="", compare=False)

    def matches(self, instant: datetime) -> bool:
        """Check whether every calendar field of ``instant`` is allowed."""
        return (
            instant.minute in self.minute
            and instant.hour in self.hour
            and instant.day in self.day_of_month
            and instant.month in self.month
            and cron_weekday(instant) in self.day_of_week
        )

    def to_dict(self) -> Dict[str, List[int]]:
        return {
            "minute": sorted(self.minute),
            "hour": sorted(self.hour),
            "day_of_month": sorted(self.day_of_month),
            "month": sorted(self.month),
            "day_of_week": sorted(self.day_of_week),
        }


def parse_cron(expression: str) -> CronExpression:
    """Parse a cron expression.

    Args:
        expression: Cron expression string (e.g., "*/15 9-17 * * mon-fri")

    Returns:
        The parsed expression

    Raises:
        CronParseError: On the first field that fails to parse
    """
    parts = expression.split()
    if len(parts) != 5:
        raise WrongFieldCount("Cron must have exactly 5 fields", token=expression)

    minute, hour, dom, month, dow = parts
    cron = CronExpression(
        minute=parse_field(minute, MINUTE),
        hour=parse_field(hour, HOUR),
        day_of_month=parse_field(dom, DAY_OF_MONTH),
        month=parse_field(month, MONTH),
        day_of_week=parse_field(dow, DAY_OF_WEEK),
        source=expression.strip(),
    )
    logger.debug(f"Parsed cron expression '{cron.source}'")
    return cron


def validate_cron(expression: str) -> bool:
    """Validate a cron expression.

    Args:
        expression: Cron expression string (e.g., "0 */2 * * *")

    Returns:
        True if valid, False otherwise
    """
    try:
        parse_cron(expression)
        return True
    except CronParseError as e:
        logger.error(f"Invalid cron expression '{expression}': {e}")
        return False
