"""Error types raised while parsing and evaluating cron expressions."""

from enum import Enum
from typing import Optional


class CronErrorKind(str, Enum):
    WRONG_FIELD_COUNT = "wrong_field_count"
    MISSING_FIELD = "missing_field"
    INVALID_STEP = "invalid_step"
    INVALID_TOKEN = "invalid_token"
    OUT_OF_RANGE = "out_of_range"
    SEARCH_EXHAUSTED = "search_exhausted"


class CronError(ValueError):
    """Base class for all cron errors.

    Every subclass sets ``kind`` so callers can branch on the failure
    without inspecting the message.
    """

    kind: CronErrorKind

    def __init__(self, message: str, token: Optional[str] = None):
        self.token = token
        super().__init__(message)

    def to_dict(self):
        return {"kind": self.kind.value, "message": str(self)}


class CronParseError(CronError):
    """Raised when expression text cannot be turned into a CronExpression."""


class WrongFieldCount(CronParseError):
    kind = CronErrorKind.WRONG_FIELD_COUNT


class MissingField(CronParseError):
    kind = CronErrorKind.MISSING_FIELD


class InvalidStep(CronParseError):
    kind = CronErrorKind.INVALID_STEP


class InvalidToken(CronParseError):
    kind = CronErrorKind.INVALID_TOKEN


class OutOfRange(CronParseError):
    kind = CronErrorKind.OUT_OF_RANGE


class SearchExhausted(CronError):
    """Raised when no matching instant exists within the search bound."""

    kind = CronErrorKind.SEARCH_EXHAUSTED
