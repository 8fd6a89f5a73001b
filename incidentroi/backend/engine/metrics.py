"""Incident metrics record and form-input coercion."""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PREFIX = re.compile(r"^([+-]?)Infinity")


@dataclass(frozen=True)
class IncidentMetrics:
    """Monthly incident profile entered on the calculator form."""

    average_incidents_per_month: float
    average_downtime_per_incident: float
    average_engineers_per_incident: float
    average_customer_impact: float
    engineer_hourly_rate: float
    revenue_per_minute: float

    @property
    def monthly_incident_minutes(self) -> float:
        return self.average_incidents_per_month * self.average_downtime_per_incident

    def to_dict(self) -> dict[str, float]:
        """Serialize metrics payload."""
        return asdict(self)


METRIC_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(IncidentMetrics))

DEFAULT_METRICS = IncidentMetrics(
    average_incidents_per_month=10,
    average_downtime_per_incident=120,
    average_engineers_per_incident=3,
    average_customer_impact=1000,
    engineer_hourly_rate=150,
    revenue_per_minute=500,
)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def coerce_number(value: Any) -> float:
    """Coerce raw form input to a float, falling back to 0.

    Strings are read by their leading numeric prefix, so ``"12abc"`` is 12
    and ``"abc"`` is 0. ``None``, empty strings, booleans and NaN become 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return math.copysign(math.inf, value)
        return 0.0 if math.isnan(number) else number

    text = str(value).strip()
    infinity = _INFINITY_PREFIX.match(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf

    match = _NUMERIC_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


def metrics_from_form(form: Mapping[str, Any]) -> IncidentMetrics:
    """Build metrics from a form mapping keyed by snake_case or camelCase names."""
    values: dict[str, float] = {}
    for name in METRIC_FIELDS:
        raw = form.get(name, form.get(_camel_case(name)))
        values[name] = coerce_number(raw)
    return IncidentMetrics(**values)
