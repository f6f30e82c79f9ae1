"""
Tests for the wire value normalizers.

Tests cover:
1. Boolean spellings (literals, strings, numbers)
2. Timestamps as epoch milliseconds, numeric strings and ISO-8601 strings
3. Epoch/datetime conversion in both directions
4. Plain scalar coercion
5. Collections given as arrays, single objects or null
"""

import sys
from datetime import datetime, timezone

import pytest

from subsonic_api.exceptions import MalformedCollection, MalformedScalar
from subsonic_api.normalizers import (
    coerce_scalar,
    datetime_to_epoch_ms,
    epoch_ms_to_datetime,
    json_kind,
    normalize_boolean,
    normalize_collection,
    normalize_instant,
    normalize_timestamp,
)

NEW_YEAR_2021_MS = 1609459200000


class TestNormalizeBoolean:
    """Tests for normalize_boolean()."""

    @pytest.mark.parametrize("value", ["true", "True", "TRUE", "1", "yes", "Yes", " true ", True, 1, 7])
    def test_true_spellings(self, value):
        """Test every accepted spelling of true."""
        assert normalize_boolean(value) is True

    @pytest.mark.parametrize("value", ["false", "False", "0", "no", "NO", False, 0])
    def test_false_spellings(self, value):
        """Test every accepted spelling of false."""
        assert normalize_boolean(value) is False

    @pytest.mark.parametrize("value", ["maybe", "", "2", "on", 1.0, None, [], {}])
    def test_rejects_other_values(self, value):
        """Test that unknown strings and other kinds raise MalformedScalar."""
        with pytest.raises(MalformedScalar):
            normalize_boolean(value, "starred.song[0].isDir")

    def test_error_carries_field_and_value(self):
        """Test that the error names the field and keeps the raw value."""
        with pytest.raises(MalformedScalar) as exc_info:
            normalize_boolean("maybe", "playlist.public")

        assert exc_info.value.field == "playlist.public"
        assert exc_info.value.raw_value == "maybe"
        assert "playlist.public" in str(exc_info.value)


class TestNormalizeTimestamp:
    """Tests for normalize_timestamp()."""

    @pytest.mark.parametrize(
        "value",
        [
            NEW_YEAR_2021_MS,
            "1609459200000",
            " 1609459200000 ",
            "2021-01-01T00:00:00.000Z",
            "2021-01-01T00:00:00Z",
            "2021-01-01T10:00:00+10:00",
            "2021-01-01T00:00:00",
            "2021-01-01",
            1609459200000.0,
        ],
    )
    def test_all_encodings_give_same_instant(self, value):
        """Test that numbers, numeric strings and ISO strings agree."""
        assert normalize_timestamp(value) == NEW_YEAR_2021_MS

    def test_iso_milliseconds_are_exact(self):
        """Test that fractional seconds convert without rounding drift."""
        assert normalize_timestamp("2021-01-01T00:00:00.123Z") == NEW_YEAR_2021_MS + 123

    def test_negative_epoch(self):
        """Test that pre-1970 numeric strings are accepted."""
        assert normalize_timestamp("-1000") == -1000

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_values(self, value):
        """Test that null and empty strings mean no timestamp."""
        assert normalize_timestamp(value) is None

    @pytest.mark.parametrize("value", ["yesterday", "2021-13-45", True, [], {"ms": 1}, 1.5])
    def test_rejects_unparseable_values(self, value):
        """Test that anything else raises MalformedScalar."""
        with pytest.raises(MalformedScalar):
            normalize_timestamp(value, "album.created")


class TestEpochConversion:
    """Tests for the epoch/datetime helpers."""

    def test_epoch_to_datetime(self):
        """Test conversion to an aware UTC datetime."""
        assert epoch_ms_to_datetime(NEW_YEAR_2021_MS) == datetime(2021, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, 0])
    def test_zero_and_none_are_absent(self, value):
        """Test that the zero sentinel maps to None."""
        assert epoch_ms_to_datetime(value) is None

    def test_naive_datetime_taken_as_utc(self):
        """Test that naive datetimes are treated as UTC."""
        assert datetime_to_epoch_ms(datetime(2021, 1, 1)) == NEW_YEAR_2021_MS

    def test_normalize_instant(self):
        """Test ISO string to datetime in one step."""
        assert normalize_instant("2021-01-01T00:00:00.000Z") == datetime(2021, 1, 1, tzinfo=timezone.utc)
        assert normalize_instant(None) is None

    @pytest.mark.parametrize("value", [253402300800000, "99999999999999999999", -62135596800001, "9" * 5000])
    def test_instant_out_of_range(self, value):
        """Test that timestamps beyond the datetime range raise MalformedScalar."""
        with pytest.raises(MalformedScalar) as exc_info:
            normalize_instant(value, "album.starred")

        assert exc_info.value.field == "album.starred"
        assert exc_info.value.raw_value == value


class TestCoerceScalar:
    """Tests for coerce_scalar()."""

    def test_str_accepts_numbers(self):
        """Test that numeric IDs become strings."""
        assert coerce_scalar(42, str) == "42"
        assert coerce_scalar(42.0, str) == "42"
        assert coerce_scalar("al-1", str) == "al-1"

    def test_int_accepts_integer_strings(self):
        """Test that XML attribute strings become ints."""
        assert coerce_scalar("19", int) == 19
        assert coerce_scalar(19.0, int) == 19

    def test_float_accepts_numeric_strings(self):
        """Test float coercion from strings and ints."""
        assert coerce_scalar("0.5", float) == 0.5
        assert coerce_scalar(1, float) == 1.0

    @pytest.mark.parametrize(
        "value,target",
        [("7.5", int), ("abc", int), (True, int), (False, str), ("abc", float), ({"a": 1}, str), ([1], int)],
    )
    def test_rejects_mismatched_values(self, value, target):
        """Test that booleans, containers and non-numeric strings raise."""
        with pytest.raises(MalformedScalar):
            coerce_scalar(value, target, "field")

    def test_float_overflow(self):
        """Test that integers too large for a float raise MalformedScalar."""
        with pytest.raises(MalformedScalar):
            coerce_scalar(10 ** 400, float, "album.averageRating")

    @pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"), reason="no integer string limit")
    def test_integer_string_too_long(self):
        """Test that integer strings over the conversion limit raise MalformedScalar."""
        with pytest.raises(MalformedScalar, match="integer too large"):
            coerce_scalar("1" * 5000, int, "album.songCount")

        with pytest.raises(MalformedScalar, match="integer too large"):
            normalize_timestamp("1" * 5000, "album.created")


class TestNormalizeCollection:
    """Tests for normalize_collection()."""

    @staticmethod
    def _ids(item, path):
        return item["id"]

    def test_array(self):
        """Test that arrays keep their order."""
        assert normalize_collection([{"id": "a"}, {"id": "b"}], self._ids, "song") == ["a", "b"]

    def test_empty_array(self):
        """Test that an empty array gives an empty list."""
        assert normalize_collection([], self._ids, "song") == []

    def test_null(self):
        """Test that null gives an empty list."""
        assert normalize_collection(None, self._ids, "song") == []

    def test_single_object(self):
        """Test that a bare object becomes a one-element list."""
        assert normalize_collection({"id": "x"}, self._ids, "song") == ["x"]

    def test_null_elements_skipped(self):
        """Test that null array elements are dropped."""
        assert normalize_collection([{"id": "a"}, None, {"id": "b"}], self._ids, "song") == ["a", "b"]

    def test_element_paths(self):
        """Test that each element is decoded with its indexed path."""
        paths = []
        normalize_collection([{"id": "a"}, {"id": "b"}], lambda item, path: paths.append(path), "song")
        assert paths == ["song[0]", "song[1]"]

    def test_single_scalar_when_allowed(self):
        """Test scalar collections accepting a bare scalar."""
        result = normalize_collection(5, lambda item, path: item, "folder", single=(str, int, float))
        assert result == [5]

    @pytest.mark.parametrize(
        "value,kind",
        [("abc", "string"), (5, "number"), (True, "boolean")],
    )
    def test_rejects_other_kinds(self, value, kind):
        """Test that scalars in a record collection raise MalformedCollection."""
        with pytest.raises(MalformedCollection) as exc_info:
            normalize_collection(value, self._ids, "starred.song")

        assert exc_info.value.raw_kind == kind
        assert exc_info.value.field == "starred.song"


class TestJsonKind:
    """Tests for json_kind()."""

    @pytest.mark.parametrize(
        "value,kind",
        [(None, "null"), (True, "boolean"), (1, "number"), (1.5, "number"), ("x", "string"),
         ({}, "object"), ([], "array")],
    )
    def test_kinds(self, value, kind):
        """Test JSON kind names."""
        assert json_kind(value) == kind
