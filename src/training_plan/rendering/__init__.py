"""Rendering: calendar dates and display lines for a phase sequence."""

from training_plan.rendering.renderer import (
    format_day_month,
    format_entry,
    format_error,
    format_result,
    format_schedule,
    render_schedule,
)

__all__ = [
    "format_day_month",
    "format_entry",
    "format_error",
    "format_result",
    "format_schedule",
    "render_schedule",
]
