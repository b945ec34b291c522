"""Exception hierarchy for training plan generation."""

from __future__ import annotations


class TrainingPlanError(Exception):
    """Base exception for all training_plan errors."""


class InsufficientWeeksError(TrainingPlanError):
    """The span between start and race date holds too few complete weeks."""

    def __init__(self, total_weeks: int, minimum_weeks: int) -> None:
        super().__init__(
            f"The total number of weeks must be at least {minimum_weeks}."
        )
        self.total_weeks = total_weeks
        self.minimum_weeks = minimum_weeks
