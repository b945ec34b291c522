"""Environment-variable-based configuration for the plan CLI."""

from __future__ import annotations

import os

PLAN_START_DATE: str = os.environ.get("PLAN_START_DATE", "2021-06-06")
PLAN_RACE_DATE: str = os.environ.get("PLAN_RACE_DATE", "2021-08-07")
PLAN_OUTPUT_FORMAT: str = os.environ.get("PLAN_OUTPUT_FORMAT", "text")
PLAN_LOG_LEVEL: str = os.environ.get("PLAN_LOG_LEVEL", "INFO")
