"""Tests for the headless date picker and plain-text display."""

import pytest

from nlcal import DateRange, parse_natural_language
from nlcal.date_picker import PickerState, RangeSelection, format_date_str, month_grid
from nlcal.display import EMPTY_STATE, render_result


class TestMonthGrid:

    def test_month_starting_on_sunday(self):
        grid = month_grid(2025, 6)

        assert grid[0] == [1, 2, 3, 4, 5, 6, 7]
        assert grid[-1] == [29, 30, 0, 0, 0, 0, 0]
        assert len(grid) == 5

    def test_month_starting_on_saturday(self):
        grid = month_grid(2025, 3)

        assert grid[0] == [0, 0, 0, 0, 0, 0, 1]
        assert grid[-1] == [30, 31, 0, 0, 0, 0, 0]
        assert all(len(week) == 7 for week in grid)

    def test_format_date_str(self):
        assert format_date_str(2025, 3, 7) == "2025-03-07"


class TestRangeSelection:

    def test_first_press_starts_selection(self):
        assert RangeSelection().press("2025-06-10") == RangeSelection(start="2025-06-10")

    def test_later_press_completes_range(self):
        selection = RangeSelection().press("2025-06-10").press("2025-06-14")
        assert selection == RangeSelection(start="2025-06-10", end="2025-06-14")

    def test_earlier_press_swaps(self):
        selection = RangeSelection().press("2025-06-10").press("2025-06-03")
        assert selection == RangeSelection(start="2025-06-03", end="2025-06-10")

    def test_same_day_clears(self):
        assert RangeSelection().press("2025-06-10").press("2025-06-10") == RangeSelection()

    def test_press_after_complete_range_restarts(self):
        selection = RangeSelection(start="2025-06-03", end="2025-06-10").press("2025-06-20")
        assert selection == RangeSelection(start="2025-06-20")

    def test_in_range_is_strict(self):
        selection = RangeSelection(start="2025-06-03", end="2025-06-10")

        assert selection.in_range("2025-06-05")
        assert not selection.in_range("2025-06-03")
        assert not selection.in_range("2025-06-10")
        assert selection.is_selected("2025-06-10")

    def test_confirm(self):
        assert RangeSelection().confirm() is None
        assert RangeSelection(start="2025-06-03").confirm() == "2025-06-03"
        assert RangeSelection(start="2025-06-03", end="2025-06-10").confirm() == DateRange(
            start="2025-06-03", end="2025-06-10"
        )

    def test_date_range_rejects_reversed(self):
        with pytest.raises(ValueError):
            DateRange(start="2025-06-10", end="2025-06-03")


class TestPickerState:

    def test_open_for_parsed_event(self, today):
        state = PickerState.open_for(parse_natural_language("Dentist March 15", today=today), today)

        assert (state.year, state.month) == (2025, 3)
        assert state.selection == RangeSelection(start="2025-03-15")
        assert state.title == "March 2025"

    def test_open_without_event(self, today):
        state = PickerState.open_for(parse_natural_language("", today=today), today)

        assert (state.year, state.month) == (2025, 6)
        assert state.selection == RangeSelection()

    def test_month_navigation_wraps_year(self):
        assert PickerState(2025, 1).prev_month() == PickerState(2024, 12)
        assert PickerState(2025, 12).next_month() == PickerState(2026, 1)
        assert PickerState(2025, 6).next_month().prev_month() == PickerState(2025, 6)

    def test_press_day(self):
        state = PickerState(2025, 6).press(3).press(10)

        assert state.selection.confirm() == DateRange(start="2025-06-03", end="2025-06-10")
        assert state.weeks() == month_grid(2025, 6)


class TestRenderResult:

    def test_event_with_range(self, today):
        result = parse_natural_language("Call after 3 days at 4pm to 5pm", today=today)
        assert render_result(result) == ["Call", "2025-06-14 · 16:00–17:00"]

    def test_event_without_time(self, today):
        result = parse_natural_language("Flight 2025-06-20", today=today)
        assert render_result(result) == ["Flight", "2025-06-20"]

    def test_warning(self, today):
        result = parse_natural_language("no date here", today=today)
        assert render_result(result) == [result.warning]

    def test_empty_state(self, today):
        assert render_result(parse_natural_language("  ", today=today)) == [EMPTY_STATE]
