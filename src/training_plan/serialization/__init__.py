"""Serialization module: export plans to JSON and tabular formats."""

from training_plan.serialization.tabular import (
    to_csv_string,
    to_dataframe,
    to_json_string,
    to_plan_dict,
)

__all__ = ["to_csv_string", "to_dataframe", "to_json_string", "to_plan_dict"]
