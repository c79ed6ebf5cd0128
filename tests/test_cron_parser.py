"""Tests for cron expression parsing."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cronexpr import (
    CronErrorKind,
    CronParseError,
    InvalidStep,
    InvalidToken,
    MissingField,
    OutOfRange,
    WrongFieldCount,
    expand_part,
    parse_cron,
    parse_field,
    resolve_token,
    validate_cron,
    DAY_NAMES,
    MONTH_NAMES,
)
from cronexpr.fields import FieldDomain, DAY_OF_MONTH, DAY_OF_WEEK, HOUR, MINUTE, MONTH


class TestResolveToken:
    """Test token resolution."""

    def test_numeral(self):
        assert resolve_token("5") == 5
        assert resolve_token("05") == 5
        assert resolve_token("-3") == -3

    def test_name_is_case_insensitive(self):
        assert resolve_token("Mon", DAY_NAMES) == 1
        assert resolve_token("DEC", MONTH_NAMES) == 12

    def test_offset_applies_to_names_only(self):
        assert resolve_token("jan", MONTH_NAMES, offset=-1) == 0
        assert resolve_token("4", MONTH_NAMES, offset=-1) == 4

    def test_name_without_table(self):
        with pytest.raises(InvalidToken):
            resolve_token("mon")

    def test_garbage(self):
        for token in ["", "1a", "1.5", " 1", "--1", "monday"]:
            with pytest.raises(InvalidToken):
                resolve_token(token, DAY_NAMES)


class TestExpandPart:
    """Test expansion of a single field item."""

    def test_wildcard_step(self):
        assert expand_part("*/15", MINUTE) == [0, 15, 30, 45]
        assert expand_part("*/5", DAY_OF_MONTH) == [1, 6, 11, 16, 21, 26, 31]

    def test_single_value(self):
        assert expand_part("7", HOUR) == [7]

    def test_range(self):
        assert expand_part("1-5", DAY_OF_WEEK) == [1, 2, 3, 4, 5]
        assert expand_part("mon-fri", DAY_OF_WEEK) == [1, 2, 3, 4, 5]

    def test_range_with_step(self):
        assert expand_part("10-20/5", MINUTE) == [10, 15, 20]
        assert expand_part("1-12/4", MONTH) == [1, 5, 9]

    def test_value_with_step_is_just_the_value(self):
        assert expand_part("5/15", MINUTE) == [5]

    def test_wraparound(self):
        assert expand_part("fri-mon", DAY_OF_WEEK) == [5, 6, 0, 1]
        assert expand_part("5-1", DAY_OF_WEEK) == [5, 6, 0, 1]
        assert expand_part("nov-feb", MONTH) == [11, 12, 1, 2]
        assert expand_part("22-2", HOUR) == [22, 23, 0, 1, 2]

    def test_wraparound_with_step(self):
        assert expand_part("50-10/7", MINUTE) == [50, 57, 4]
        assert expand_part("5-1/2", DAY_OF_WEEK) == [5, 0]

    def test_sunday_alias(self):
        assert expand_part("7", DAY_OF_WEEK) == [0]
        assert expand_part("sun", DAY_OF_WEEK) == [0]
        assert expand_part("5-7", DAY_OF_WEEK) == [5, 6, 0]
        assert expand_part("7-2", DAY_OF_WEEK) == [0, 1, 2]

    def test_seven_only_aliased_for_weekdays(self):
        assert expand_part("7", MONTH) == [7]
        with pytest.raises(OutOfRange):
            expand_part("7", FieldDomain("weekday_number", 0, 6))

    def test_invalid_step(self):
        for part in ["*/0", "*/x", "5/", "1-5/-2", "*/1.5"]:
            with pytest.raises(InvalidStep) as exc:
                expand_part(part, MINUTE)
            assert exc.value.kind == CronErrorKind.INVALID_STEP

    def test_invalid_token(self):
        for part in ["", "a", "1-", "-1", "1-2-3", "jan"]:
            with pytest.raises(InvalidToken) as exc:
                expand_part(part, MINUTE)
            assert str(exc.value) == f"Invalid token: {part}"

    def test_out_of_range(self):
        with pytest.raises(OutOfRange):
            expand_part("60", MINUTE)
        with pytest.raises(OutOfRange):
            expand_part("0", DAY_OF_MONTH)
        with pytest.raises(OutOfRange):
            expand_part("1-13", MONTH)
        with pytest.raises(OutOfRange):
            expand_part("8", DAY_OF_WEEK)


class TestParseField:
    """Test parsing of whole fields."""

    def test_wildcard_is_full_domain(self):
        assert parse_field("*", MINUTE) == frozenset(range(60))
        assert parse_field(" * ", DAY_OF_MONTH) == frozenset(range(1, 32))

    def test_list(self):
        assert parse_field("1,15, 30", MINUTE) == {1, 15, 30}

    def test_list_mixes_forms(self):
        assert parse_field("jan,mar-may,*/6", MONTH) == {1, 3, 4, 5, 7}

    def test_duplicates_collapse(self):
        assert parse_field("0,7,sun", DAY_OF_WEEK) == {0}

    def test_empty(self):
        with pytest.raises(MissingField):
            parse_field("   ", HOUR)

    def test_empty_list_item(self):
        with pytest.raises(InvalidToken):
            parse_field("1,,2", HOUR)


class TestParseCron:
    """Test parsing of full expressions."""

    def test_simple(self):
        cron = parse_cron("5 4 * * *")
        assert cron.minute == {5}
        assert cron.hour == {4}
        assert cron.day_of_month == frozenset(range(1, 32))
        assert cron.month == frozenset(range(1, 13))
        assert cron.day_of_week == frozenset(range(7))

    def test_whitespace(self):
        cron = parse_cron("  */15\t9-17   *  *\n mon-fri ")
        assert cron.minute == {0, 15, 30, 45}
        assert cron.hour == set(range(9, 18))
        assert cron.day_of_week == {1, 2, 3, 4, 5}
        assert cron.source == "*/15\t9-17   *  *\n mon-fri"

    def test_idempotent(self):
        expression = "0,30 8-18/2 1,15 jan-jun 1-5"
        assert parse_cron(expression) == parse_cron(expression)

    def test_wrong_field_count(self):
        for expression in ["", "* * *", "* * * *", "* * * * * *"]:
            with pytest.raises(WrongFieldCount) as exc:
                parse_cron(expression)
            assert exc.value.kind == CronErrorKind.WRONG_FIELD_COUNT

    def test_first_error_wins(self):
        with pytest.raises(OutOfRange):
            parse_cron("60 * * * foo")

    def test_errors(self):
        with pytest.raises(OutOfRange):
            parse_cron("60 * * * *")
        with pytest.raises(InvalidStep):
            parse_cron("*/0 * * * *")
        with pytest.raises(InvalidToken):
            parse_cron("* * * foo *")
        with pytest.raises(InvalidToken):
            parse_cron("* * * * jan")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_cron("* * * * 8")

    def test_to_dict(self):
        fields = parse_cron("30 */8 1 jan,dec sun").to_dict()
        assert fields == {
            "minute": [30],
            "hour": [0, 8, 16],
            "day_of_month": [1],
            "month": [1, 12],
            "day_of_week": [0],
        }

    def test_error_to_dict(self):
        with pytest.raises(CronParseError) as exc:
            parse_cron("*/0 * * * *")
        assert exc.value.to_dict() == {"kind": "invalid_step", "message": "Invalid step: */0"}


class TestValidateCron:
    """Test cron expression validation."""

    def test_validate_cron_valid(self):
        """Test valid cron expressions."""
        assert validate_cron("* * * * *") is True
        assert validate_cron("0 */2 * * *") is True
        assert validate_cron("0 0 * * 7") is True
        assert validate_cron("15 14 1 * *") is True

    def test_validate_cron_invalid(self):
        """Test invalid cron expressions."""
        assert validate_cron("invalid") is False
        assert validate_cron("* * * *") is False  # Too few fields
        assert validate_cron("* * * * * *") is False  # Too many fields
        assert validate_cron("60 * * * *") is False  # Invalid minute
