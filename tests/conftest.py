"""Shared test fixtures: reference plan dates and generated plans."""

from __future__ import annotations

from datetime import date

import pytest

from training_plan.models.schedule import PlanResult
from training_plan.planner import generate_training_plan


@pytest.fixture
def reference_start() -> date:
    """Sunday 6 June 2021, the reference plan start."""
    return date(2021, 6, 6)


@pytest.fixture
def reference_race() -> date:
    """Saturday 7 August 2021: 63 inclusive days, 9 weeks after the start."""
    return date(2021, 8, 7)


@pytest.fixture
def nine_week_plan(reference_start: date, reference_race: date) -> PlanResult:
    return generate_training_plan(reference_start, reference_race)


@pytest.fixture
def short_plan(reference_start: date) -> PlanResult:
    """Seven complete weeks: one short of the minimum."""
    return generate_training_plan(reference_start, date(2021, 7, 24))
