"""
Summary statistics shown beside the scatter plot
"""

from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from analytics.fields import Field


@dataclass(frozen=True)
class SummaryStats:
    total_records: int
    mean_bmi: Optional[float]
    mean_physical_health: Optional[float]
    mean_mental_health: Optional[float]

    def as_display(self) -> Dict[str, str]:
        return {
            "Total Records": f"{self.total_records:,}",
            "Avg BMI": format_mean(self.mean_bmi),
            "Avg Physical Health Days": format_mean(self.mean_physical_health),
            "Avg Mental Health Days": format_mean(self.mean_mental_health),
        }


def format_mean(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{value:.1f}"


def field_mean(df: pd.DataFrame, field: Field) -> Optional[float]:
    """Mean over the rows where this one field is present (None if there are none)"""
    values = df[field.value].dropna()
    if values.empty:
        return None
    return float(values.mean())


def summary_statistics(filtered: pd.DataFrame, full: pd.DataFrame) -> SummaryStats:
    """
    Count the plotted records and average three health measures.

    Each mean filters on its own field only, so a record missing its mental
    health days still counts toward the BMI average and vice versa.
    """
    return SummaryStats(
        total_records=int(len(filtered)),
        mean_bmi=field_mean(full, Field.BMI),
        mean_physical_health=field_mean(full, Field.PHYSICAL_HEALTH),
        mean_mental_health=field_mean(full, Field.MENTAL_HEALTH),
    )
