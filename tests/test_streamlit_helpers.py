"""Tests for the pure helpers behind the Streamlit dashboard."""

from __future__ import annotations

from datetime import date

from streamlit_app.helpers import (
    PHASE_COLORS,
    build_plan_table,
    current_week_caption,
    phase_color,
    phase_summary_frame,
)
from training_plan.models.enums import PhaseLabel
from training_plan.models.schedule import PlanResult


class TestPhaseColor:
    def test_every_phase_has_a_color(self) -> None:
        assert set(PHASE_COLORS) == set(PhaseLabel)

    def test_lookup_by_label(self) -> None:
        assert phase_color("Key") == PHASE_COLORS[PhaseLabel.KEY]

    def test_unknown_label_is_grey(self) -> None:
        assert phase_color("Rest") == "#CCCCCC"


class TestPlanTable:
    def test_dates_formatted(self, nine_week_plan: PlanResult) -> None:
        table = build_plan_table(nine_week_plan)
        assert table["start"].iloc[0] == "6 June"
        assert table["end"].iloc[-1] == "7 August"

    def test_summary_frame(self, nine_week_plan: PlanResult) -> None:
        frame = phase_summary_frame(nine_week_plan)
        assert frame.loc["Test", "weeks"] == 2
        assert list(frame.index)[-1] == "Race"


class TestCurrentWeekCaption:
    def test_inside_plan(self, nine_week_plan: PlanResult) -> None:
        caption = current_week_caption(nine_week_plan, date(2021, 6, 21))
        assert caption == "This week: #3 (Filler)"

    def test_before_plan(self, nine_week_plan: PlanResult) -> None:
        assert current_week_caption(nine_week_plan, date(2021, 6, 1)) == "Plan starts in 5 days"

    def test_after_plan(self, nine_week_plan: PlanResult) -> None:
        assert current_week_caption(nine_week_plan, date(2021, 9, 1)) == "Today is outside the plan"
