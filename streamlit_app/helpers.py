"""Utility helpers bridging the Streamlit UI and the plan generator.

Pure functions for colors, table styling and summary text.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from training_plan.models.enums import PhaseLabel
from training_plan.models.schedule import PlanResult
from training_plan.rendering.renderer import format_day_month
from training_plan.serialization import to_dataframe

PHASE_COLORS: dict[PhaseLabel, str] = {
    PhaseLabel.TEST: "#D7BDE2",      # lavender
    PhaseLabel.FILLER: "#D5DBDB",    # grey
    PhaseLabel.RECOVERY: "#AED6F1",  # pastel blue
    PhaseLabel.BUILD_1: "#82E0AA",   # green
    PhaseLabel.BUILD_2: "#F9E79F",   # yellow
    PhaseLabel.KEY: "#F5B041",       # orange
    PhaseLabel.TAPER: "#85C1E9",     # blue
    PhaseLabel.RACE: "#1ABC9C",      # teal
}


def phase_color(label: str) -> str:
    """Background color for a phase display label, grey for unknown text."""
    try:
        return PHASE_COLORS[PhaseLabel.from_label(label)]
    except ValueError:
        return "#CCCCCC"


def build_plan_table(result: PlanResult) -> pd.DataFrame:
    """Plan rows with start/end shown as '6 June'."""
    frame = to_dataframe(result)
    for column in ("start", "end"):
        frame[column] = [format_day_month(d) for d in frame[column]]
    return frame


def style_plan_table(frame: pd.DataFrame):
    """Color each row of :func:`build_plan_table` by its phase."""

    def _row_style(row: pd.Series) -> list[str]:
        css = f"background-color: {phase_color(row['phase'])}"
        return [css] * len(row)

    return frame.style.apply(_row_style, axis=1)


def current_week_caption(result: PlanResult, today: date) -> str:
    """Short text describing where *today* sits in the plan."""
    entry = result.entry_for_date(today)
    if entry is None:
        if result.entries and today < result.entries[0].range_start:
            days = (result.entries[0].range_start - today).days
            return f"Plan starts in {days} days"
        return "Today is outside the plan"
    return f"This week: #{entry.week_index} ({entry.phase.label})"


def phase_summary_frame(result: PlanResult) -> pd.DataFrame:
    """Weeks per phase, indexed by phase label in progression order."""
    counts = result.phase_counts()
    return pd.DataFrame(
        {"weeks": list(counts.values())},
        index=[phase.label for phase in counts],
    )
