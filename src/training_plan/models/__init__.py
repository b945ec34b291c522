"""Data models for training plan generation."""

from training_plan.models.enums import (
    DAYS_PER_WEEK,
    FIXED_WEEKS,
    MAIN_BLOCK_WEEKS,
    MIN_PLAN_WEEKS,
    RACE_WEEKS,
    SUPER_CYCLE_WEEKS,
    TAPER_WEEKS,
    TEST_WEEKS,
    PhaseLabel,
)
from training_plan.models.schedule import PlanResult, ScheduleEntry

__all__ = [
    "DAYS_PER_WEEK",
    "FIXED_WEEKS",
    "MAIN_BLOCK_WEEKS",
    "MIN_PLAN_WEEKS",
    "PhaseLabel",
    "PlanResult",
    "RACE_WEEKS",
    "SUPER_CYCLE_WEEKS",
    "ScheduleEntry",
    "TAPER_WEEKS",
    "TEST_WEEKS",
]
