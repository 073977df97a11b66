"""Tests for time span extraction and title derivation."""

import pytest

from nlcal.time_span import TimeSpan, extract_time_span, to_24h
from nlcal.title_extractor import derive_title


class TestTo24h:

    @pytest.mark.parametrize(
        "hour, minute, meridiem, expected",
        [
            ("3", None, "pm", "15:00"),
            ("12", None, "pm", "12:00"),
            ("12", None, "am", "00:00"),
            ("9", "05", "AM", "09:05"),
            ("11", "59", "pm", "23:59"),
            ("14", "00", None, "14:00"),
            ("14", None, "pm", "14:00"),
            ("0", "30", None, "00:30"),
        ],
    )
    def test_normalization(self, hour, minute, meridiem, expected):
        assert to_24h(hour, minute, meridiem) == expected

    @pytest.mark.parametrize("hour, minute", [("24", None), ("25", "00"), ("10", "60")])
    def test_out_of_range(self, hour, minute):
        assert to_24h(hour, minute, None) is None


class TestExtractTimeSpan:

    def test_no_time(self):
        assert extract_time_span("Gym tomorrow") == TimeSpan(None, None)

    def test_at(self):
        assert extract_time_span("Meeting tomorrow at 3pm") == TimeSpan("15:00", None)

    def test_from(self):
        assert extract_time_span("Workshop today from 9am") == TimeSpan("09:00", None)

    def test_spaced_meridiem(self):
        assert extract_time_span("Call at 4 PM") == TimeSpan("16:00", None)

    def test_range(self):
        assert extract_time_span("at 4pm to 5pm") == TimeSpan("16:00", "17:00")

    def test_range_with_minutes(self):
        assert extract_time_span("from 9:15am to 10:45am") == TimeSpan("09:15", "10:45")

    def test_end_does_not_inherit_meridiem(self):
        assert extract_time_span("at 4pm to 5") == TimeSpan("16:00", "05:00")

    def test_end_without_start_keyword_is_ignored(self):
        assert extract_time_span("Meeting to 5pm") == TimeSpan(None, None)

    def test_invalid_start_discards_span(self):
        assert extract_time_span("at 25:00 to 26:00") == TimeSpan(None, None)

    def test_invalid_end_is_dropped(self):
        assert extract_time_span("at 9am to 10:75") == TimeSpan("09:00", None)

    def test_first_time_wins(self):
        assert extract_time_span("at 8am and at 9am") == TimeSpan("08:00", None)

    def test_after_is_not_at(self):
        assert extract_time_span("Call after 3 days") == TimeSpan(None, None)

    @pytest.mark.parametrize("text", ["Meeting at 06/20", "Meeting at 6/20/2025", "Meeting at 06-20"])
    def test_date_after_at_is_not_a_clock(self, text):
        assert extract_time_span(text) == TimeSpan(None, None)

    def test_clock_before_date(self):
        assert extract_time_span("Meeting at 9am 06/20") == TimeSpan("09:00", None)


class TestDeriveTitle:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Book meeting tomorrow at 10am", "Book meeting"),
            ("Call after 3 days at 4pm to 5pm", "Call"),
            ("Doctor appointment in 5 days", "Doctor appointment"),
            ("Event before 2 days", "Event"),
            ("Review next month", "Review"),
            ("Conference next year", "Conference"),
            ("Team sync next Friday at 3pm", "Team sync"),
            ("Yoga Saturday", "Yoga"),
            ("Dentist March 15 2025 at 9:30am", "Dentist"),
            ("Review 15 April at 11am", "Review"),
            ("Flight 2025-06-20", "Flight"),
            ("Conference 06/20/2025", "Conference"),
            ("Pay   rent   7/1", "Pay rent"),
            ("Pay\trent tomorrow", "Pay rent"),
            ("Dentist\nappointment at 9am tomorrow", "Dentist appointment"),
        ],
    )
    def test_strips_date_and_time_tokens(self, text, expected):
        assert derive_title(text) == expected

    def test_falls_back_to_trimmed_input(self):
        assert derive_title("  tomorrow at 10am  ") == "tomorrow at 10am"

    def test_keeps_unrelated_words(self):
        assert derive_title("Meet Anna at the cafe tomorrow") == "Meet Anna at the cafe"
