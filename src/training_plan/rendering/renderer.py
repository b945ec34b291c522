"""Attach calendar dates to a phase sequence and format display lines.

All functions are pure (no I/O).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from training_plan.exceptions import TrainingPlanError
from training_plan.models.enums import DAYS_PER_WEEK, PhaseLabel
from training_plan.models.schedule import PlanResult, ScheduleEntry

# Fixed English month names; strftime("%B") would follow the process locale.
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def render_schedule(
    start_date: date, phases: Sequence[PhaseLabel]
) -> tuple[ScheduleEntry, ...]:
    """Lay *phases* out on consecutive weeks starting at *start_date*.

    Args:
        start_date: First day of week 1.
        phases: Phase per week in chronological order (may be empty).

    Returns:
        One ScheduleEntry per phase, week_index starting at 1.
    """
    entries = []
    for i, phase in enumerate(phases):
        range_start = start_date + timedelta(days=DAYS_PER_WEEK * i)
        entries.append(
            ScheduleEntry(
                week_index=i + 1,
                phase=phase,
                range_start=range_start,
                range_end=range_start + timedelta(days=DAYS_PER_WEEK - 1),
            )
        )
    return tuple(entries)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_day_month(d: date) -> str:
    """Format a date as day and full month name. e.g. 2021-06-06 -> '6 June'."""
    return f"{d.day} {_MONTH_NAMES[d.month - 1]}"


def format_entry(entry: ScheduleEntry) -> str:
    """'Week #1 - Test - from 6 June to 12 June'."""
    return (
        f"Week #{entry.week_index} - {entry.phase.label} - "
        f"from {format_day_month(entry.range_start)} "
        f"to {format_day_month(entry.range_end)}"
    )


def format_schedule(entries: Iterable[ScheduleEntry]) -> list[str]:
    """Format every entry, one line per week."""
    return [format_entry(entry) for entry in entries]


def format_error(error: TrainingPlanError) -> str:
    """Single display line for a failed plan."""
    return f"Error: {error}"


def format_result(result: PlanResult) -> list[str]:
    """Display lines for a plan: one per week, or a single error line."""
    if result.error is not None:
        return [format_error(result.error)]
    return format_schedule(result.entries)
