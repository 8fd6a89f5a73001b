"""ROI engine comparing current incident cost against a managed scenario."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from backend.engine.metrics import IncidentMetrics
from backend.engine.profiles import STANDARD, IndirectCost, ScenarioProfile

MONTHS_PER_YEAR = 12
ROI_HORIZON_MONTHS = 36


@dataclass(frozen=True)
class CostBreakdown:
    """Monthly cost for one scenario."""

    engineering_cost: float
    revenue_loss: float
    indirect_cost: float
    platform_fee: float
    total_cost: float


@dataclass(frozen=True)
class Savings:
    monthly_savings: float
    annual_savings: float
    percentage_reduction: float


@dataclass(frozen=True)
class ROIFigures:
    payback_period_months: float
    three_year_roi: float


@dataclass(frozen=True)
class Improvements:
    """Improvement percentages applied by the profile, for display."""

    mttr_reduction: float
    incident_reduction: float
    automation_savings: float
    mttr_improvement: float


@dataclass(frozen=True)
class ROIResult:
    """Complete output of one ROI calculation."""

    profile: str
    current_cost: CostBreakdown
    with_incident_management: CostBreakdown
    savings: Savings
    roi: ROIFigures
    improvements: Improvements
    indirect_costs: dict[str, float]
    indirect_benefits: dict[str, float]

    def to_dict(self) -> dict[str, Any]:
        """Serialize result payload."""
        return asdict(self)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics: x/0 is +/-inf and 0/0 is nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _direct_costs(
    incidents: float, downtime: float, engineers: float, metrics: IncidentMetrics
) -> tuple[float, float]:
    minutes = incidents * downtime
    engineering = (minutes * engineers / 60) * metrics.engineer_hourly_rate
    revenue = minutes * metrics.revenue_per_minute
    return engineering, revenue


def _surcharge(cost: IndirectCost, metrics: IncidentMetrics, engineering: float, revenue: float) -> float:
    if cost.basis == "engineering":
        return engineering * cost.rate
    if cost.basis == "revenue":
        return revenue * cost.rate
    return metrics.average_incidents_per_month * cost.rate * metrics.engineer_hourly_rate


def three_year_roi(monthly_savings: float, platform_fee: float, clamp_negative: bool) -> float:
    """Net three-year savings relative to three years of platform cost, in percent."""
    platform_cost = platform_fee * ROI_HORIZON_MONTHS
    net = monthly_savings * ROI_HORIZON_MONTHS - platform_cost
    if clamp_negative and net < 0:
        return -100.0
    return safe_divide(net, platform_cost) * 100


def calculate_roi(metrics: IncidentMetrics, profile: ScenarioProfile = STANDARD) -> ROIResult:
    """Compute current cost, projected cost and ROI for ``metrics``.

    The function is pure and never raises for numeric input: zero
    denominators produce ``inf``/``nan`` which callers guard before display.
    """
    factors = profile.improvements

    current_engineering, current_revenue = _direct_costs(
        metrics.average_incidents_per_month,
        metrics.average_downtime_per_incident,
        metrics.average_engineers_per_incident,
        metrics,
    )
    current_indirect = {
        s.name: _surcharge(s, metrics, current_engineering, current_revenue) for s in profile.surcharges
    }
    current_indirect_total = sum(current_indirect.values(), 0.0)
    current_total = current_engineering + current_revenue + current_indirect_total

    improved_downtime = metrics.average_downtime_per_incident * (1 - factors.mttr_reduction)
    improved_engineering, improved_revenue = _direct_costs(
        metrics.average_incidents_per_month * (1 - factors.incident_reduction),
        improved_downtime,
        metrics.average_engineers_per_incident * (1 - factors.automation_factor),
        metrics,
    )
    improved_indirect = {s.name: current_indirect[s.name] * (1 - s.improvement) for s in profile.surcharges}
    improved_indirect_total = sum(improved_indirect.values(), 0.0)

    platform_fee = float(profile.pricing.monthly_fee(metrics))
    improved_total = improved_engineering + improved_revenue + improved_indirect_total + platform_fee

    monthly_savings = current_total - improved_total
    payback = safe_divide(platform_fee, monthly_savings) if monthly_savings > 0 else math.inf

    return ROIResult(
        profile=profile.name,
        current_cost=CostBreakdown(
            engineering_cost=current_engineering,
            revenue_loss=current_revenue,
            indirect_cost=current_indirect_total,
            platform_fee=0.0,
            total_cost=current_total,
        ),
        with_incident_management=CostBreakdown(
            engineering_cost=improved_engineering,
            revenue_loss=improved_revenue,
            indirect_cost=improved_indirect_total,
            platform_fee=platform_fee,
            total_cost=improved_total,
        ),
        savings=Savings(
            monthly_savings=monthly_savings,
            annual_savings=monthly_savings * MONTHS_PER_YEAR,
            percentage_reduction=safe_divide(current_total - improved_total, current_total) * 100,
        ),
        roi=ROIFigures(
            payback_period_months=payback,
            three_year_roi=three_year_roi(monthly_savings, platform_fee, profile.clamp_negative_roi),
        ),
        improvements=Improvements(
            mttr_reduction=factors.mttr_reduction * 100,
            incident_reduction=factors.incident_reduction * 100,
            automation_savings=factors.automation_factor * 100,
            mttr_improvement=metrics.average_downtime_per_incident - improved_downtime,
        ),
        indirect_costs=current_indirect,
        indirect_benefits={name: current_indirect[name] - improved_indirect[name] for name in current_indirect},
    )
