import math

import pytest

from backend.engine.metrics import DEFAULT_METRICS, METRIC_FIELDS, coerce_number, metrics_from_form


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (7, 7.0),
        (2.5, 2.5),
        ("12abc", 12.0),
        ("  3.5 ", 3.5),
        (".5", 0.5),
        ("-4", -4.0),
        ("1e3", 1000.0),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (True, 0.0),
        (float("nan"), 0.0),
    ],
)
def test_coerce_number(raw: object, expected: float) -> None:
    assert coerce_number(raw) == expected


def test_coerce_number_reads_infinity() -> None:
    assert coerce_number("Infinity") == math.inf
    assert coerce_number("-Infinity") == -math.inf


def test_metrics_from_form_accepts_camel_case_and_fills_zeros() -> None:
    metrics = metrics_from_form({"averageIncidentsPerMonth": "8", "revenue_per_minute": 100, "engineerHourlyRate": "x"})
    assert metrics.average_incidents_per_month == 8
    assert metrics.revenue_per_minute == 100
    assert metrics.engineer_hourly_rate == 0
    assert metrics.average_downtime_per_incident == 0


def test_default_metrics_round_trip_through_form() -> None:
    assert metrics_from_form(DEFAULT_METRICS.to_dict()) == DEFAULT_METRICS
    assert set(DEFAULT_METRICS.to_dict()) == set(METRIC_FIELDS)
    assert DEFAULT_METRICS.monthly_incident_minutes == 1200


def test_coerce_number_overflows_to_infinity() -> None:
    assert coerce_number(10**400) == math.inf
    assert coerce_number(-(10**400)) == -math.inf


def test_metrics_from_form_accepts_huge_integers() -> None:
    metrics = metrics_from_form({"average_incidents_per_month": 10**400})
    assert metrics.average_incidents_per_month == math.inf
