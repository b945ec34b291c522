"""Schedule models: one entry per calendar week and the overall plan result."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date

from training_plan.exceptions import InsufficientWeeksError
from training_plan.models.enums import PhaseLabel


@dataclass(frozen=True)
class ScheduleEntry:
    """A single labeled training week."""

    week_index: int  # 1-indexed
    phase: PhaseLabel
    range_start: date
    range_end: date  # inclusive, range_start + 6 days

    def contains(self, on_date: date) -> bool:
        """True if *on_date* falls inside this week."""
        return self.range_start <= on_date <= self.range_end


@dataclass(frozen=True)
class PlanResult:
    """Outcome of plan generation: either dated entries or a named error.

    ``entries`` is empty exactly when ``error`` is set.
    """

    start_date: date
    race_date: date
    total_weeks: int
    entries: tuple[ScheduleEntry, ...] = field(default_factory=tuple)
    error: InsufficientWeeksError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def phases(self) -> tuple[PhaseLabel, ...]:
        return tuple(entry.phase for entry in self.entries)

    # -- Query helpers ----------------------------------------------------

    def entry_for_date(self, on_date: date) -> ScheduleEntry | None:
        """Return the week containing *on_date*, or None if outside the plan."""
        for entry in self.entries:
            if entry.contains(on_date):
                return entry
        return None

    def phase_counts(self) -> dict[PhaseLabel, int]:
        """Number of weeks per phase, in progression order."""
        counts = Counter(self.phases)
        return {phase: counts[phase] for phase in PhaseLabel if counts[phase]}
