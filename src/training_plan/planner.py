"""Plan generation entry point: dates in, dated phase schedule out.

Usage:
    result = generate_training_plan(date(2021, 6, 6), date(2021, 8, 7))
    if result.ok:
        ...
    lines = generate_plan_lines(date(2021, 6, 6), date(2021, 8, 7))
"""

from __future__ import annotations

import logging
from datetime import date

from training_plan.exceptions import InsufficientWeeksError
from training_plan.math.sequencer import compute_plan_weeks, sequence_phases
from training_plan.models.schedule import PlanResult
from training_plan.rendering.renderer import format_result, render_schedule

logger = logging.getLogger(__name__)


def generate_training_plan(start_date: date, race_date: date) -> PlanResult:
    """Build the week-by-week plan between *start_date* and *race_date*.

    Too short a span is not raised: it comes back as ``PlanResult.error``
    with no entries.
    """
    total_weeks = compute_plan_weeks(start_date, race_date)

    try:
        phases = sequence_phases(total_weeks)
    except InsufficientWeeksError as exc:
        logger.warning(
            "Cannot build plan from %s to %s: %d complete weeks, need %d",
            start_date.isoformat(),
            race_date.isoformat(),
            exc.total_weeks,
            exc.minimum_weeks,
        )
        return PlanResult(
            start_date=start_date,
            race_date=race_date,
            total_weeks=total_weeks,
            error=exc,
        )

    entries = render_schedule(start_date, phases)
    logger.info(
        "Generated %d-week plan from %s to %s",
        total_weeks,
        start_date.isoformat(),
        race_date.isoformat(),
    )
    return PlanResult(
        start_date=start_date,
        race_date=race_date,
        total_weeks=total_weeks,
        entries=entries,
    )


def generate_plan_lines(start_date: date, race_date: date) -> list[str]:
    """Display lines for the plan, or a single ``"Error: ..."`` line."""
    return format_result(generate_training_plan(start_date, race_date))
