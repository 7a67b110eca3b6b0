"""
Tests for duration parsing and formatting.
Run with: pytest tests/
"""
import pytest

from core.time_format import aggregate_duration, format_clock, parse_duration, track_time

from conftest import make_track


class TestParseDuration:
    def test_minutes_seconds(self):
        assert parse_duration("4:28") == 268

    def test_hours_minutes_seconds(self):
        assert parse_duration("1:02:03") == 3723

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_is_zero(self, value):
        assert parse_duration(value) == 0

    def test_garbage_part_counts_as_zero(self):
        assert parse_duration("x:30") == 30

    def test_negative_part_counts_as_zero(self):
        assert parse_duration("-5:00") == 0
        assert aggregate_duration([{"time": "-5:00"}, {"time": "60:00"}]) == "1 hora"


class TestTrackTime:
    def test_mapping_time_key(self):
        assert track_time({"time": "4:28"}) == "4:28"

    def test_mapping_without_time(self):
        assert track_time({"title": "no time"}) is None

    def test_track_duration_attribute(self):
        assert track_time(make_track("a", "3:45")) == "3:45"


class TestAggregateDuration:
    def test_empty(self):
        assert aggregate_duration([]) == "0 min"

    def test_none(self):
        assert aggregate_duration(None) == "0 min"

    def test_floors_to_minutes(self):
        tracks = [{"time": "4:28"}, {"time": "4:06"}, {"time": "4:36"}]
        assert aggregate_duration(tracks) == "13 min"

    def test_skips_entries_without_time(self):
        tracks = [{"time": "4:28"}, {"title": "no time"}, {"time": "4:36"}]
        assert aggregate_duration(tracks) == "9 min"

    def test_zero_duration_tracks(self):
        assert aggregate_duration([{"time": "0:00"}, {"time": "0:59"}]) == "0 min"

    def test_exactly_one_hour(self):
        assert aggregate_duration([{"time": "30:00"}, {"time": "30:00"}]) == "1 hora"

    def test_hour_and_minutes(self):
        assert aggregate_duration([{"time": "45:00"}, {"time": "40:30"}]) == "1 hora 25 min"

    def test_plural_hours(self):
        assert aggregate_duration([{"time": "60:00"}, {"time": "65:00"}]) == "2 horas 5 min"

    def test_catalog_tracks(self, tracks):
        assert aggregate_duration(tracks) == "13 min"


class TestFormatClock:
    def test_pads_seconds(self):
        assert format_clock(65) == "1:05"

    def test_drops_fraction(self):
        assert format_clock(59.9) == "0:59"

    @pytest.mark.parametrize("value", [None, -3, float("nan"), float("inf")])
    def test_invalid_is_zero(self, value):
        assert format_clock(value) == "0:00"
