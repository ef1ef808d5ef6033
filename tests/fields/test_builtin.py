"""Tests for the built-in field types and their coercion contracts."""

from datetime import datetime, timedelta, timezone

import pytest

from modelme import (
    UNDEFINED,
    ArrayFieldType,
    CoercionError,
    DatetimeFieldType,
    FieldOptions,
    IntFieldType,
    NumberFieldType,
    StringFieldType,
)

OPTIONS = FieldOptions()


class TestStringFieldType:
    def test_name(self) -> None:
        assert StringFieldType().name == "string"

    @pytest.mark.parametrize("value, expected", [(7, "7"), (2.5, "2.5"), (True, "True")])
    def test_non_strings_are_converted(self, value, expected) -> None:
        assert StringFieldType().coerce(value, OPTIONS) == expected

    @pytest.mark.parametrize("value", [None, UNDEFINED, "text"])
    def test_pass_through(self, value) -> None:
        assert StringFieldType().coerce(value, OPTIONS) is value

    def test_idempotent(self) -> None:
        field_type = StringFieldType()
        once = field_type.coerce(42, OPTIONS)
        assert field_type.coerce(once, OPTIONS) == once


class TestNumericFieldTypes:
    def test_int_does_not_coerce(self) -> None:
        assert IntFieldType().coerce("12", OPTIONS) == "12"

    def test_number_is_not_int(self) -> None:
        number = NumberFieldType()
        assert number.name == "number"
        messages = [rule(2.5, OPTIONS) for rule in number.rules]
        assert not any(messages)

    def test_int_rejects_fractions(self) -> None:
        messages = [rule(2.5, OPTIONS) for rule in IntFieldType().rules]
        assert [m for m in messages if m] == ["the number 2.5 is not an integer"]


class TestDatetimeFieldType:
    def test_parses_iso_text(self) -> None:
        value = DatetimeFieldType().coerce("2014-01-01 12:00", OPTIONS)
        assert value == datetime(2014, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_keeps_explicit_offset(self) -> None:
        value = DatetimeFieldType().coerce("2014-01-01T12:00:00+02:00", OPTIONS)
        assert value.utcoffset() == timedelta(hours=2)

    def test_result_is_absolute(self) -> None:
        value = DatetimeFieldType().coerce("2014-01-01", OPTIONS)
        assert value.tzinfo is not None

    def test_bad_text_fails_coercion(self) -> None:
        with pytest.raises(CoercionError, match="not a valid date string"):
            DatetimeFieldType().coerce("this is not a valid date string", OPTIONS)

    @pytest.mark.parametrize("value", [None, UNDEFINED, 12345])
    def test_non_strings_pass_through(self, value) -> None:
        assert DatetimeFieldType().coerce(value, OPTIONS) is value

    def test_idempotent(self) -> None:
        field_type = DatetimeFieldType()
        once = field_type.coerce("2014-01-01 12:00", OPTIONS)
        assert field_type.coerce(once, OPTIONS) == once

    def test_non_date_fails_rule(self) -> None:
        messages = [rule(12345, OPTIONS) for rule in DatetimeFieldType().rules]
        assert [m for m in messages if m] == ["value is not a date"]

    def test_default_timezone_setting(self, monkeypatch) -> None:
        monkeypatch.setenv("MODELME_DEFAULT_TIMEZONE", "utc")
        value = DatetimeFieldType().coerce("2014-01-01 12:00", OPTIONS)
        assert value.utcoffset() == timedelta(0)


class TestArrayFieldType:
    def test_copies_list(self) -> None:
        original = [1, 2, 3]
        coerced = ArrayFieldType().coerce(original, OPTIONS)
        assert coerced == original
        assert coerced is not original

    def test_tuple_becomes_list(self) -> None:
        assert ArrayFieldType().coerce((1, 2), OPTIONS) == [1, 2]

    @pytest.mark.parametrize("value", [None, UNDEFINED, "abc"])
    def test_non_arrays_pass_through(self, value) -> None:
        assert ArrayFieldType().coerce(value, OPTIONS) is value
