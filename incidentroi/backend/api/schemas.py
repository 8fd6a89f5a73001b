"""Pydantic schemas for the ROI calculator API."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from backend.engine.metrics import IncidentMetrics, coerce_number

MetricName = Literal[
    "average_incidents_per_month",
    "average_downtime_per_incident",
    "average_engineers_per_incident",
    "average_customer_impact",
    "engineer_hourly_rate",
    "revenue_per_minute",
]


class MetricsPayload(BaseModel):
    """Calculator form fields; non-numeric or missing values become 0."""

    average_incidents_per_month: float = 0.0
    average_downtime_per_incident: float = Field(0.0, description="Minutes of downtime per incident")
    average_engineers_per_incident: float = 0.0
    average_customer_impact: float = Field(0.0, description="Customers affected per incident")
    engineer_hourly_rate: float = 0.0
    revenue_per_minute: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> float:
        return coerce_number(value)

    def to_metrics(self) -> IncidentMetrics:
        return IncidentMetrics(**self.model_dump())


class ROIRequest(BaseModel):
    """ROI calculation request payload."""

    metrics: MetricsPayload
    profile: str | None = Field(None, description="Scenario profile name; server default when omitted")
    clamp_negative_roi: bool | None = None


class ROIResponse(BaseModel):
    """ROI calculation response schema."""

    profile: str
    result: dict[str, Any]
    display: dict[str, Any]


class CompareRequest(BaseModel):
    """Side-by-side profile comparison request."""

    metrics: MetricsPayload
    profiles: list[str] = Field(default_factory=lambda: ["standard", "lean", "enterprise"], min_length=1)


class CompareResponse(BaseModel):
    rows: list[dict[str, Any]]


class SensitivityRequest(BaseModel):
    """Sweep one metric across a range."""

    metrics: MetricsPayload
    metric: MetricName
    start: float
    stop: float
    steps: int = Field(11, ge=2, le=200)
    profile: str | None = None


class SensitivityResponse(BaseModel):
    profile: str
    metric: str
    break_even: float | None
    points: list[dict[str, Any]]


class ProfileResponse(BaseModel):
    """Scenario profile description."""

    name: str
    description: str
    improvements: dict[str, float]
    pricing: dict[str, Any]
    surcharges: list[dict[str, Any]]
    clamp_negative_roi: bool
