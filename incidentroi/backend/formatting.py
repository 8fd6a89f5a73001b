"""Display formatting shared by the API, dashboard skins and terminal report."""

from __future__ import annotations

import math
from typing import Any

from backend.engine.roi import ROIResult

NOT_AVAILABLE = "N/A"


def finite_or_none(value: float) -> float | None:
    """Map non-finite numbers to ``None`` so payloads stay JSON-safe."""
    return value if math.isfinite(value) else None


def format_currency(value: float) -> str:
    """Format as whole US dollars with thousands separators."""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    rounded = round(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def format_percent(value: float, decimals: int = 1) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}%"


def format_payback(months: float) -> str:
    """Render payback period; infinite payback has no numeric label."""
    if not math.isfinite(months):
        return NOT_AVAILABLE
    return f"{months:.1f} months"


def format_result(result: ROIResult) -> dict[str, Any]:
    """Build the display record every skin renders."""
    current = result.current_cost
    improved = result.with_incident_management
    return {
        "current_cost": {
            "engineering_cost": format_currency(current.engineering_cost),
            "revenue_loss": format_currency(current.revenue_loss),
            "indirect_cost": format_currency(current.indirect_cost),
            "total_cost": format_currency(current.total_cost),
        },
        "with_incident_management": {
            "engineering_cost": format_currency(improved.engineering_cost),
            "revenue_loss": format_currency(improved.revenue_loss),
            "indirect_cost": format_currency(improved.indirect_cost),
            "platform_fee": format_currency(improved.platform_fee),
            "total_cost": format_currency(improved.total_cost),
        },
        "savings": {
            "monthly_savings": format_currency(result.savings.monthly_savings),
            "annual_savings": format_currency(result.savings.annual_savings),
            "percentage_reduction": format_percent(result.savings.percentage_reduction, 1),
        },
        "roi": {
            "payback_period": format_payback(result.roi.payback_period_months),
            "three_year_roi": format_percent(result.roi.three_year_roi, 0),
        },
        "indirect_benefits": {name: format_currency(v) for name, v in result.indirect_benefits.items()},
    }


def json_safe(payload: Any) -> Any:
    """Recursively replace non-finite floats with ``None``."""
    if isinstance(payload, float):
        return finite_or_none(payload)
    if isinstance(payload, dict):
        return {k: json_safe(v) for k, v in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [json_safe(v) for v in payload]
    return payload
