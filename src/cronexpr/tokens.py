"""Name tables and token resolution for cron fields."""

import re
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import InvalidToken

MONTH_NAMES: Mapping[str, int] = MappingProxyType({
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
})

# 0 = Sunday
DAY_NAMES: Mapping[str, int] = MappingProxyType({
    "sun": 0, "mon": 1, "tue": 2, "wed": 3, "thu": 4, "fri": 5, "sat": 6,
})

_NUMERAL = re.compile(r"-?[0-9]+")


def resolve_token(token: str, names: Optional[Mapping[str, int]] = None, offset: int = 0) -> int:
    """Resolve a numeral or a three-letter name to an integer.

    Args:
        token: Token text, e.g. ``"5"`` or ``"Mon"``
        names: Optional name table consulted before numerals
        offset: Added to name lookups only

    Raises:
        InvalidToken: If the token is neither a known name nor a numeral
    """
    lowered = token.lower()
    if names is not None and lowered in names:
        return names[lowered] + offset
    if not _NUMERAL.fullmatch(token):
        raise InvalidToken(f"Invalid token: {token}", token=token)
    return int(token)
