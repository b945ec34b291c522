"""Periodized training plan generation between a start date and a race date."""

from training_plan.exceptions import InsufficientWeeksError, TrainingPlanError
from training_plan.math.sequencer import compute_plan_weeks, sequence_phases
from training_plan.models.enums import MIN_PLAN_WEEKS, PhaseLabel
from training_plan.models.schedule import PlanResult, ScheduleEntry
from training_plan.planner import generate_plan_lines, generate_training_plan
from training_plan.rendering.renderer import format_entry, render_schedule

__all__ = [
    "InsufficientWeeksError",
    "MIN_PLAN_WEEKS",
    "PhaseLabel",
    "PlanResult",
    "ScheduleEntry",
    "TrainingPlanError",
    "compute_plan_weeks",
    "format_entry",
    "generate_plan_lines",
    "generate_training_plan",
    "render_schedule",
    "sequence_phases",
]
