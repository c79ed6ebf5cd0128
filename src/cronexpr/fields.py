"""Field domains and expansion of individual cron fields."""

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Optional, Tuple

from .errors import InvalidStep, InvalidToken, MissingField, OutOfRange
from .tokens import DAY_NAMES, MONTH_NAMES, resolve_token


@dataclass(frozen=True)
class FieldDomain:
    """Closed interval of values a field may hold."""
    name: str
    min: int
    max: int
    names: Optional[Mapping[str, int]] = None

    def values(self) -> range:
        return range(self.min, self.max + 1)


MINUTE = FieldDomain("minute", 0, 59)
HOUR = FieldDomain("hour", 0, 23)
DAY_OF_MONTH = FieldDomain("day_of_month", 1, 31)
MONTH = FieldDomain("month", 1, 12, MONTH_NAMES)
DAY_OF_WEEK = FieldDomain("day_of_week", 0, 6, DAY_NAMES)

FIELD_DOMAINS: Tuple[FieldDomain, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)

_DIGITS = re.compile(r"[0-9]+")


def _parse_step(part: str, step_part: str) -> int:
    if not _DIGITS.fullmatch(step_part) or int(step_part) <= 0:
        raise InvalidStep(f"Invalid step: {part}", token=part)
    return int(step_part)


def expand_part(part: str, domain: FieldDomain) -> List[int]:
    """Expand one comma-separated item of a field.

    Handles ``*``, ``*/n``, ``a``, ``a-b`` and ``a-b/n``. A range whose
    start is greater than its end wraps past ``domain.max`` back to
    ``domain.min``.

    Args:
        part: The item, already stripped of surrounding whitespace
        domain: Domain of the field the item belongs to

    Returns:
        Matching values, in generation order
    """
    range_part, has_step, step_part = part.partition("/")
    step = _parse_step(part, step_part) if has_step else 1

    if range_part == "*":
        return list(range(domain.min, domain.max + 1, step))

    try:
        if "-" in range_part:
            first, _, last = range_part.partition("-")
            start = resolve_token(first, domain.names, 0)
            end = resolve_token(last, domain.names, 0)
        else:
            start = end = resolve_token(range_part, domain.names, 0)
    except InvalidToken:
        raise InvalidToken(f"Invalid token: {part}", token=part) from None

    # 7 is Sunday as well as 0
    if domain.names is DAY_NAMES:
        if start == 7:
            start = 0
        if end == 7:
            end = 0

    if not (domain.min <= start <= domain.max and domain.min <= end <= domain.max):
        raise OutOfRange(f"Out of range: {part}", token=part)

    if end >= start:
        return [v for v in range(start, end + 1) if (v - start) % step == 0]

    values = [v for v in range(start, domain.max + 1) if (v - start) % step == 0]
    values.extend(
        v for v in range(domain.min, end + 1)
        if (v + (domain.max - start + 1)) % step == 0
    )
    return values


def parse_field(field: str, domain: FieldDomain) -> FrozenSet[int]:
    """Parse a whole field into the set of values it allows."""
    field = field.strip()
    if not field:
        raise MissingField("Missing field", token=domain.name)

    if field == "*":
        return frozenset(domain.values())

    values = set()
    for part in field.split(","):
        values.update(expand_part(part.strip(), domain))
    return frozenset(values)
