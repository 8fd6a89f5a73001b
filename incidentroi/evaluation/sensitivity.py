"""Single-metric sweeps and side-by-side profile comparison."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

import numpy as np
import pandas as pd

from backend.engine.metrics import METRIC_FIELDS, IncidentMetrics
from backend.engine.profiles import STANDARD, ScenarioProfile, get_profile
from backend.engine.roi import calculate_roi
from evaluation.batch import summary_row


def sweep(
    metrics: IncidentMetrics,
    metric: str,
    start: float,
    stop: float,
    steps: int = 11,
    profile: ScenarioProfile = STANDARD,
) -> pd.DataFrame:
    """Recalculate ROI while ``metric`` varies linearly from ``start`` to ``stop``."""
    if metric not in METRIC_FIELDS:
        raise ValueError(f"Unknown metric field: {metric}")
    if steps < 1:
        raise ValueError("steps must be at least 1")

    rows = []
    for value in np.linspace(start, stop, steps):
        varied = replace(metrics, **{metric: float(value)})
        rows.append({"value": float(value), **summary_row(calculate_roi(varied, profile))})
    return pd.DataFrame(rows)


def compare_profiles(metrics: IncidentMetrics, names: Iterable[str]) -> pd.DataFrame:
    """Evaluate the same metrics under several named profiles."""
    rows = []
    for name in names:
        profile = get_profile(name)
        rows.append({"profile": profile.name, **summary_row(calculate_roi(metrics, profile))})
    return pd.DataFrame(rows)


def break_even_value(frame: pd.DataFrame) -> float | None:
    """Smallest swept value with positive monthly savings, if any."""
    positive = frame[frame["monthly_savings"] > 0]
    if positive.empty:
        return None
    return float(positive["value"].min())
