"""Export a PlanResult to JSON-ready dicts and pandas tables.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

import pandas as pd

from training_plan.models.schedule import PlanResult, ScheduleEntry

# Column order for tabular exports
COLUMNS = ("week", "phase", "start", "end")


def _entry_to_row(entry: ScheduleEntry, iso_dates: bool = True) -> dict:
    """One export row; dates as ISO strings, or as date objects for pandas."""
    start, end = entry.range_start, entry.range_end
    if iso_dates:
        start, end = start.isoformat(), end.isoformat()
    return {"week": entry.week_index, "phase": entry.phase.label, "start": start, "end": end}


def to_plan_dict(result: PlanResult) -> dict:
    """Convert a PlanResult to a JSON-serializable dict.

    Failed plans keep the dates and week count, an empty ``weeks`` list and
    the error message.
    """
    return {
        "start_date": result.start_date.isoformat(),
        "race_date": result.race_date.isoformat(),
        "total_weeks": result.total_weeks,
        "weeks": [_entry_to_row(entry) for entry in result.entries],
        "error": str(result.error) if result.error is not None else None,
    }


def to_json_string(result: PlanResult, indent: int = 2) -> str:
    """Serialize a PlanResult to a JSON string."""
    return json.dumps(to_plan_dict(result), indent=indent)


def to_dataframe(result: PlanResult) -> pd.DataFrame:
    """One row per week with columns week, phase, start, end.

    ``start``/``end`` are ``datetime.date`` objects; an error result gives an
    empty frame with the same columns.
    """
    rows = [_entry_to_row(entry, iso_dates=False) for entry in result.entries]
    return pd.DataFrame(rows, columns=list(COLUMNS))


def to_csv_string(result: PlanResult) -> str:
    """CSV export of :func:`to_dataframe` without the index column."""
    return to_dataframe(result).to_csv(index=False)
