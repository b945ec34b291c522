"""Tests for schedule rendering and display-line formatting."""

from __future__ import annotations

from datetime import date, timedelta

from training_plan.exceptions import InsufficientWeeksError
from training_plan.math.sequencer import sequence_phases
from training_plan.models.enums import PhaseLabel
from training_plan.models.schedule import PlanResult, ScheduleEntry
from training_plan.rendering.renderer import (
    format_day_month,
    format_entry,
    format_error,
    format_result,
    format_schedule,
    render_schedule,
)


class TestRenderSchedule:
    def test_empty_sequence(self) -> None:
        assert render_schedule(date(2021, 6, 6), []) == ()

    def test_week_indices_are_one_based(self) -> None:
        entries = render_schedule(date(2021, 6, 6), sequence_phases(12))
        assert [e.week_index for e in entries] == list(range(1, 13))

    def test_ranges_are_consecutive_weeks(self) -> None:
        start = date(2021, 6, 6)
        entries = render_schedule(start, sequence_phases(16))
        for i, entry in enumerate(entries):
            assert entry.range_start == start + timedelta(days=7 * i)
            assert entry.range_end == entry.range_start + timedelta(days=6)

    def test_phases_preserved_in_order(self) -> None:
        phases = sequence_phases(10)
        entries = render_schedule(date(2021, 6, 6), phases)
        assert tuple(e.phase for e in entries) == phases

    def test_crosses_year_boundary(self) -> None:
        entries = render_schedule(date(2021, 12, 26), [PhaseLabel.TEST, PhaseLabel.TEST])
        assert entries[0].range_end == date(2022, 1, 1)
        assert entries[1].range_start == date(2022, 1, 2)

    def test_idempotent(self) -> None:
        phases = sequence_phases(9)
        assert render_schedule(date(2021, 6, 6), phases) == render_schedule(
            date(2021, 6, 6), phases
        )


class TestFormatting:
    def test_day_month(self) -> None:
        assert format_day_month(date(2021, 6, 6)) == "6 June"
        assert format_day_month(date(2021, 8, 31)) == "31 August"
        assert format_day_month(date(2022, 1, 1)) == "1 January"

    def test_entry(self) -> None:
        entry = ScheduleEntry(4, PhaseLabel.BUILD_1, date(2021, 6, 27), date(2021, 7, 3))
        assert format_entry(entry) == "Week #4 - Build 1 - from 27 June to 3 July"

    def test_schedule_one_line_per_week(self) -> None:
        entries = render_schedule(date(2021, 6, 6), sequence_phases(9))
        lines = format_schedule(entries)
        assert len(lines) == 9
        assert lines[0] == "Week #1 - Test - from 6 June to 12 June"
        assert lines[-1] == "Week #9 - Race - from 1 August to 7 August"

    def test_error_line(self) -> None:
        error = InsufficientWeeksError(total_weeks=3, minimum_weeks=8)
        assert format_error(error) == "Error: The total number of weeks must be at least 8."


class TestFormatResult:
    def test_plan_lines(self, nine_week_plan: PlanResult) -> None:
        lines = format_result(nine_week_plan)
        assert lines == format_schedule(nine_week_plan.entries)
        assert lines[-1] == "Week #9 - Race - from 1 August to 7 August"

    def test_error_plan_single_line(self, short_plan: PlanResult) -> None:
        assert format_result(short_plan) == [
            "Error: The total number of weeks must be at least 8."
        ]
