"""Synthetic incident metric records for demos and batch evaluation."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from backend.engine.metrics import METRIC_FIELDS

ORG_SEGMENTS = ("startup", "scaleup", "enterprise")


def _segment_scale(segment: str) -> float:
    """Translate organization segment into a revenue-at-risk multiplier."""
    if segment == "startup":
        return 0.2
    if segment == "scaleup":
        return 1.0
    return 4.0


def generate_synthetic_metrics(n_records: int = 50, seed: int = 7) -> pd.DataFrame:
    """Generate plausible calculator submissions.

    Returns a DataFrame with a ``segment`` column followed by every
    incident metric field.
    """
    rng = np.random.default_rng(seed)

    records: list[dict] = []
    for _ in range(n_records):
        segment = str(rng.choice(ORG_SEGMENTS, p=[0.45, 0.35, 0.20]))
        scale = _segment_scale(segment)

        incidents = max(1.0, rng.poisson(6 * (1 + scale)))
        downtime = float(np.clip(rng.lognormal(mean=4.0, sigma=0.6), 5, 720))
        engineers = float(max(1, rng.poisson(2 + scale)))
        customers = float(rng.integers(50, 5000)) * scale
        hourly_rate = float(np.clip(rng.normal(130, 25), 60, 250))
        revenue = float(np.clip(rng.lognormal(mean=4.5, sigma=0.9), 5, 20000)) * scale

        records.append(
            {
                "segment": segment,
                "average_incidents_per_month": float(incidents),
                "average_downtime_per_incident": round(downtime, 1),
                "average_engineers_per_incident": engineers,
                "average_customer_impact": round(customers, 0),
                "engineer_hourly_rate": round(hourly_rate, 2),
                "revenue_per_minute": round(revenue, 2),
            }
        )

    return pd.DataFrame.from_records(records, columns=["segment", *METRIC_FIELDS])


def save_dataset(df: pd.DataFrame, output_path: str | Path) -> Path:
    """Persist generated metric records to CSV."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False)
    return output


if __name__ == "__main__":
    generated = generate_synthetic_metrics(n_records=200)
    path = save_dataset(generated, Path(__file__).resolve().parent / "synthetic_metrics.csv")
    print(f"Synthetic metrics saved to {path}")
