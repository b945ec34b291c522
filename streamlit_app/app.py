"""Training Plan Periodizer: Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

from datetime import date, timedelta

import streamlit as st

from training_plan.models.enums import PhaseLabel
from training_plan.planner import generate_training_plan
from training_plan.rendering.renderer import format_result
from training_plan.serialization import to_csv_string, to_json_string

from helpers import (
    build_plan_table,
    current_week_caption,
    phase_summary_frame,
    style_plan_table,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Training Plan Periodizer",
    page_icon="🏃",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Sidebar: Dates
# ---------------------------------------------------------------------------

st.sidebar.title("Plan Dates")

start_date = st.sidebar.date_input("Start date", value=date.today())
race_date = st.sidebar.date_input(
    "Race date", value=date.today() + timedelta(weeks=16)
)

# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

st.title("Training Plan")
st.caption("Test, main blocks, taper and race laid out week by week")

result = generate_training_plan(start_date, race_date)

if not result.ok:
    st.error(format_result(result)[0])
    st.stop()

mc1, mc2, mc3 = st.columns(3)
mc1.metric("Weeks", str(result.total_weeks))
mc2.metric("Key Weeks", str(result.phase_counts().get(PhaseLabel.KEY, 0)))
mc3.metric("Race Week", result.entries[-1].range_start.isoformat())

st.caption(current_week_caption(result, date.today()))

st.subheader("Week by Week")
st.dataframe(
    style_plan_table(build_plan_table(result)),
    hide_index=True,
    use_container_width=True,
)

st.subheader("Phase Summary")
st.bar_chart(phase_summary_frame(result))

dl_csv, dl_json = st.columns(2)
with dl_csv:
    st.download_button(
        "Download Plan (.csv)",
        data=to_csv_string(result),
        file_name=f"plan_{race_date.isoformat()}.csv",
        mime="text/csv",
    )
with dl_json:
    st.download_button(
        "Download Plan (.json)",
        data=to_json_string(result),
        file_name=f"plan_{race_date.isoformat()}.json",
        mime="application/json",
    )
