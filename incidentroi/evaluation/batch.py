"""Batch evaluation of many metric records against one scenario profile."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np
import pandas as pd

from backend.engine.metrics import metrics_from_form
from backend.engine.profiles import STANDARD, ScenarioProfile
from backend.engine.roi import ROIResult, calculate_roi


def summary_row(result: ROIResult) -> dict[str, float]:
    """Flatten the headline figures of one result into a table row."""
    return {
        "current_total_cost": result.current_cost.total_cost,
        "improved_total_cost": result.with_incident_management.total_cost,
        "platform_fee": result.with_incident_management.platform_fee,
        "monthly_savings": result.savings.monthly_savings,
        "annual_savings": result.savings.annual_savings,
        "percentage_reduction": result.savings.percentage_reduction,
        "payback_period_months": result.roi.payback_period_months,
        "three_year_roi": result.roi.three_year_roi,
    }


@dataclass
class BatchReport:
    """Aggregate figures for one batch run."""

    profile: str
    records: int
    positive_savings: int
    median_monthly_savings: float
    median_payback_months: float
    mean_three_year_roi: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize batch report."""
        return asdict(self)


class BatchRunner:
    """Evaluates a DataFrame of metric records row by row."""

    def __init__(self, profile: ScenarioProfile = STANDARD) -> None:
        self.profile = profile

    def evaluate(self, df: pd.DataFrame) -> pd.DataFrame:
        """Return the input metric columns joined with one result row each."""
        if df.empty:
            raise ValueError("No metric records to evaluate")

        rows = []
        for record in df.to_dict(orient="records"):
            metrics = metrics_from_form(record)
            rows.append({**metrics.to_dict(), **summary_row(calculate_roi(metrics, self.profile))})
        return pd.DataFrame(rows, index=df.index)

    def run(self, df: pd.DataFrame) -> BatchReport:
        """Evaluate all records and aggregate the outcome."""
        results = self.evaluate(df)
        payback = results["payback_period_months"].to_numpy(dtype=float)
        finite_payback = payback[np.isfinite(payback)]

        return BatchReport(
            profile=self.profile.name,
            records=len(results),
            positive_savings=int((results["monthly_savings"] > 0).sum()),
            median_monthly_savings=round(float(results["monthly_savings"].median()), 2),
            median_payback_months=round(float(np.median(finite_payback)), 2) if finite_payback.size else math.inf,
            mean_three_year_roi=round(float(results["three_year_roi"].mean()), 2),
        )
