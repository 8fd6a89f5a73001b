"""Dataset loading utilities for batch ROI evaluation."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from backend.engine.metrics import METRIC_FIELDS, coerce_number


def load_csv(path: str | Path) -> pd.DataFrame:
    """Load a CSV of metric records, coercing every metric column to float.

    Missing metric columns are added as zeros; extra columns are kept.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    for name in METRIC_FIELDS:
        if name not in df.columns:
            df[name] = 0.0
        else:
            df[name] = df[name].map(coerce_number).astype(float)
    return df
