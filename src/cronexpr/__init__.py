"""Cron expression parsing and next-run search."""

from .errors import (
    CronError,
    CronErrorKind,
    CronParseError,
    InvalidStep,
    InvalidToken,
    MissingField,
    OutOfRange,
    SearchExhausted,
    WrongFieldCount,
)
from .expression import CronExpression, cron_weekday, parse_cron, validate_cron
from .fields import FIELD_DOMAINS, FieldDomain, expand_part, parse_field
from .search import SEARCH_LIMIT, next_n_runs, next_run
from .tokens import DAY_NAMES, MONTH_NAMES, resolve_token

__all__ = [
    "CronError",
    "CronErrorKind",
    "CronParseError",
    "InvalidStep",
    "InvalidToken",
    "MissingField",
    "OutOfRange",
    "SearchExhausted",
    "WrongFieldCount",
    "CronExpression",
    "cron_weekday",
    "parse_cron",
    "validate_cron",
    "FIELD_DOMAINS",
    "FieldDomain",
    "expand_part",
    "parse_field",
    "SEARCH_LIMIT",
    "next_n_runs",
    "next_run",
    "DAY_NAMES",
    "MONTH_NAMES",
    "resolve_token",
]
