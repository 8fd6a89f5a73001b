import pandas as pd

from backend.engine.metrics import METRIC_FIELDS
from data.loader import load_csv
from data.samples import generate_synthetic_metrics, save_dataset


def test_generate_synthetic_metrics_shape_and_columns() -> None:
    df = generate_synthetic_metrics(n_records=30, seed=42)
    assert len(df) == 30
    assert list(df.columns) == ["segment", *METRIC_FIELDS]
    assert set(df["segment"]).issubset({"startup", "scaleup", "enterprise"})


def test_generate_synthetic_metrics_values_are_positive_and_seeded() -> None:
    first = generate_synthetic_metrics(n_records=20, seed=99)
    second = generate_synthetic_metrics(n_records=20, seed=99)
    pd.testing.assert_frame_equal(first, second)
    assert (first[list(METRIC_FIELDS)] >= 0).all().all()
    assert (first["average_engineers_per_incident"] >= 1).all()


def test_load_csv_round_trip(tmp_path) -> None:
    df = generate_synthetic_metrics(n_records=5, seed=3)
    path = save_dataset(df, tmp_path / "nested" / "metrics.csv")
    loaded = load_csv(path)
    assert len(loaded) == 5
    pd.testing.assert_series_equal(loaded["engineer_hourly_rate"], df["engineer_hourly_rate"])


def test_load_csv_coerces_bad_values_and_missing_columns(tmp_path) -> None:
    path = tmp_path / "form.csv"
    path.write_text("average_incidents_per_month,revenue_per_minute\n12abc,\nn/a,250\n")
    loaded = load_csv(path)
    assert loaded["average_incidents_per_month"].tolist() == [12.0, 0.0]
    assert loaded["revenue_per_minute"].tolist() == [0.0, 250.0]
    assert loaded["engineer_hourly_rate"].tolist() == [0.0, 0.0]
