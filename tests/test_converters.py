"""Timestamp converter and album name sanitizer tests."""

from datetime import datetime, timezone
import math

import pytest

from core.converters import filter_album_name, time_interval_to_timestamp
from core.errors import TypeMismatchError, ValueOverflowError
from core.models import FORMAT_EPOCH_OFFSET, Timestamp


class TestTimeIntervalToTimestamp:
    def test_format_epoch(self):
        ts = time_interval_to_timestamp(0.0)
        assert ts == Timestamp(seconds=978307200, nanoseconds=0)
        assert ts.to_datetime() == datetime(2001, 1, 1, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        ts = time_interval_to_timestamp(10.5)
        assert ts.seconds == FORMAT_EPOCH_OFFSET + 10
        assert ts.nanoseconds == 500_000_000

    def test_integer_input(self):
        assert time_interval_to_timestamp(60) == Timestamp(FORMAT_EPOCH_OFFSET + 60, 0)

    def test_negative_floors_toward_negative_infinity(self):
        ts = time_interval_to_timestamp(-0.25)
        assert ts.seconds == 978307199
        assert ts.nanoseconds == 750_000_000

    def test_negative_whole_seconds(self):
        assert time_interval_to_timestamp(-86400.0) == Timestamp(FORMAT_EPOCH_OFFSET - 86400, 0)

    def test_fraction_is_truncated_not_rounded(self):
        ts = time_interval_to_timestamp(0.9999999999)
        assert ts.seconds == FORMAT_EPOCH_OFFSET
        assert ts.nanoseconds == 999_999_999

    def test_tiny_negative_carries_into_seconds(self):
        # -1e-17 + 1 == 1.0 in float arithmetic
        ts = time_interval_to_timestamp(-1e-17)
        assert ts == Timestamp(FORMAT_EPOCH_OFFSET, 0)

    @pytest.mark.parametrize(
        "value",
        [0.0, 0.1, 1.1, 123456789.987654321, 5e-10, 1e12 + 0.75, -0.1, -1.5, -3e8 - 0.999, -1e-17],
    )
    def test_nanoseconds_in_range_and_seconds_floor(self, value):
        ts = time_interval_to_timestamp(value)
        assert 0 <= ts.nanoseconds < 1_000_000_000
        expected = math.floor(value) + FORMAT_EPOCH_OFFSET
        # a fraction that rounds up to a full second carries over
        assert ts.seconds in (expected, expected + 1)

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.25, 350000000.125, 1e9])
    def test_seconds_match_floor_for_non_negative(self, value):
        assert time_interval_to_timestamp(value).seconds == math.floor(value) + FORMAT_EPOCH_OFFSET

    def test_total_nanoseconds(self):
        ts = time_interval_to_timestamp(1.5)
        assert ts.total_nanoseconds == (FORMAT_EPOCH_OFFSET + 1) * 1_000_000_000 + 500_000_000

    @pytest.mark.parametrize("value", ["0.0", None, True, [1.0], {"a": 1}])
    def test_non_numeric_is_type_mismatch(self, value):
        with pytest.raises(TypeMismatchError):
            time_interval_to_timestamp(value)

    def test_nan_is_type_mismatch(self):
        with pytest.raises(TypeMismatchError, match="finite"):
            time_interval_to_timestamp(float("nan"))

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), 1e300, -1e300, 9.3e18])
    def test_unrepresentable_is_overflow(self, value):
        with pytest.raises(ValueOverflowError):
            time_interval_to_timestamp(value)

    def test_error_carries_path(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            time_interval_to_timestamp("x", ("Master Image List", "k1", "Caption"))
        assert exc_info.value.location == "Master Image List.k1.Caption"


SANITIZER_INPUTS = [
    "",
    "plain",
    "  My/Album/Name  ",
    "/",
    "//leading",
    "trailing//",
    "a /",
    "/ a",
    " / / ",
    "back\\slash",
    "\tTabbed/Name\n",
    "Ünïcødé / Ålbum",
]


class TestFilterAlbumName:
    def test_trims_and_deletes_separators(self):
        assert filter_album_name("  My/Album/Name  ") == "MyAlbumName"

    def test_separator_deleted_not_replaced(self):
        assert filter_album_name("Trip/2020") == "Trip2020"

    def test_backslash_untouched(self):
        assert filter_album_name(" a\\b ") == "a\\b"

    def test_inner_whitespace_kept(self):
        assert filter_album_name(" Summer  Holiday ") == "Summer  Holiday"

    @pytest.mark.parametrize("value", SANITIZER_INPUTS)
    def test_idempotent(self, value):
        once = filter_album_name(value)
        assert filter_album_name(once) == once

    @pytest.mark.parametrize("value", SANITIZER_INPUTS)
    def test_no_separator_or_edge_whitespace(self, value):
        out = filter_album_name(value)
        assert "/" not in out
        assert out == out.strip()

    @pytest.mark.parametrize("value", [1, 1.0, None, b"bytes", ["a"]])
    def test_non_text_is_type_mismatch(self, value):
        with pytest.raises(TypeMismatchError, match="expected text"):
            filter_album_name(value)
