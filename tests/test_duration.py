"""Tests for duration formatting."""

import pytest

from tubesearch.youtube.duration import (
    MILLISECOND,
    SECOND,
    format_duration,
    parse_nanoseconds,
)


class TestFormatDuration:
    """Tests for format_duration."""

    def test_minutes_and_seconds(self):
        """Durations under an hour use M:SS with padded seconds."""
        assert format_duration("PT2M5S") == "2:05"

    def test_hours_minutes_seconds(self):
        """Durations of an hour or more use H:MM:SS."""
        assert format_duration("PT1H2M3S") == "1:02:03"

    def test_minutes_not_padded(self):
        """Minutes are not zero-padded when there are no hours."""
        assert format_duration("PT12M0S") == "12:00"

    def test_seconds_only(self):
        assert format_duration("PT15S") == "0:15"

    def test_hours_only(self):
        """Missing minute and second components are zero."""
        assert format_duration("PT10H") == "10:00:00"

    def test_minutes_carry_into_hours(self):
        """Overflowing minutes are folded into hours."""
        assert format_duration("PT90M") == "1:30:00"

    def test_lowercase_prefix(self):
        """The PT prefix is matched case-insensitively."""
        assert format_duration("pt4m20s") == "4:20"

    def test_fractional_seconds_truncated(self):
        assert format_duration("PT1M1.9S") == "1:01"

    @pytest.mark.parametrize(
        "raw",
        ["", "PT", "garbage", "P1D", "P1DT2H", "PT-1M", "PT5X", "1:02:03"],
    )
    def test_malformed_is_zero(self, raw):
        """Anything that cannot be parsed is shown as a zero duration."""
        assert format_duration(raw) == "0:00"

    def test_zero(self):
        assert format_duration("PT0S") == "0:00"

    @pytest.mark.parametrize(
        "raw, expected",
        [("PT2.05M", "2:03"), ("PT1.5H", "1:30:00"), ("PT.5M", "0:30")],
    )
    def test_fractional_terms_are_exact(self, raw, expected):
        """Fractional minutes and hours do not lose a second to rounding."""
        assert format_duration(raw) == expected

    def test_longest_representable_duration(self):
        assert format_duration("PT2562047H") == "2562047:00:00"

    def test_out_of_range_is_zero(self):
        """Durations beyond the int64 nanosecond range are treated as zero."""
        assert format_duration("PT9999999H") == "0:00"


class TestParseNanoseconds:
    """Tests for parse_nanoseconds."""

    def test_total_nanoseconds(self):
        assert parse_nanoseconds("PT1H2M3S") == 3723 * SECOND

    def test_bare_zero(self):
        assert parse_nanoseconds("PT0") == 0

    def test_sub_second_units(self):
        assert parse_nanoseconds("PT1S500MS") == 1500 * MILLISECOND

    def test_fraction(self):
        assert parse_nanoseconds("PT2.05M") == 123 * SECOND

    def test_overflow_raises(self):
        with pytest.raises(ValueError):
            parse_nanoseconds("PT9999999H")

    def test_overflow_across_terms_raises(self):
        """The bound applies to the sum, not just to each term."""
        with pytest.raises(ValueError):
            parse_nanoseconds("PT2000000H2000000H")

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            parse_nanoseconds("P1D")
