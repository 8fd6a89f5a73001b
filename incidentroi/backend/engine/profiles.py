"""Scenario profiles: improvement factors, indirect surcharges and pricing."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Literal

from backend.engine.pricing import ENTERPRISE_PRICING, STANDARD_PRICING, PricingTable

SurchargeBasis = Literal["engineering", "revenue", "incident_hours"]


class UnknownProfileError(KeyError):
    """Raised when a scenario profile name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown scenario profile: {self.name}"


def _check_fraction(label: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{label} must be within [0, 1], got {value}")


@dataclass(frozen=True)
class IndirectCost:
    """Indirect cost carried on top of direct engineering and revenue cost.

    ``engineering`` and ``revenue`` surcharges are ``rate`` times that direct
    cost; ``incident_hours`` charges ``rate`` engineer-hours per incident.
    """

    name: str
    basis: SurchargeBasis
    rate: float
    improvement: float = 0.0

    def __post_init__(self) -> None:
        if self.basis not in ("engineering", "revenue", "incident_hours"):
            raise ValueError(f"Unsupported surcharge basis: {self.basis}")
        if self.rate < 0:
            raise ValueError(f"Surcharge rate for {self.name} must be non-negative")
        _check_fraction(f"{self.name} improvement", self.improvement)


@dataclass(frozen=True)
class ImprovementFactors:
    """Fractional reductions expected once incident management is in place."""

    incident_reduction: float = 0.0
    mttr_reduction: float = 0.0
    automation_factor: float = 0.0

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            _check_fraction(name, value)


@dataclass(frozen=True)
class ScenarioProfile:
    """Configuration object passed to the ROI engine."""

    name: str
    description: str
    improvements: ImprovementFactors
    pricing: PricingTable
    surcharges: tuple[IndirectCost, ...] = field(default_factory=tuple)
    clamp_negative_roi: bool = True

    def __post_init__(self) -> None:
        names = [s.name for s in self.surcharges]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate surcharge names in profile {self.name}")

    def with_overrides(self, **changes: Any) -> "ScenarioProfile":
        """Return a copy with selected fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "improvements": asdict(self.improvements),
            "pricing": self.pricing.to_dict(),
            "surcharges": [asdict(s) for s in self.surcharges],
            "clamp_negative_roi": self.clamp_negative_roi,
        }


STANDARD_SURCHARGES = (
    IndirectCost("documentation", basis="incident_hours", rate=2.0, improvement=0.6),
    IndirectCost("communication", basis="engineering", rate=0.3, improvement=0.7),
    IndirectCost("cognitive_load", basis="engineering", rate=0.2, improvement=0.5),
    IndirectCost("customer_retention", basis="revenue", rate=0.05, improvement=0.05),
)

STANDARD = ScenarioProfile(
    name="standard",
    description="Canonical profile: tiered pricing, four indirect surcharges, ROI floored at -100%.",
    improvements=ImprovementFactors(incident_reduction=0.3, mttr_reduction=0.5, automation_factor=0.4),
    pricing=STANDARD_PRICING,
    surcharges=STANDARD_SURCHARGES,
    clamp_negative_roi=True,
)

LEAN = ScenarioProfile(
    name="lean",
    description="Direct costs only with a flat platform fee.",
    improvements=ImprovementFactors(incident_reduction=0.4, mttr_reduction=0.5, automation_factor=0.25),
    pricing=PricingTable.flat(2500),
    surcharges=(),
    clamp_negative_roi=True,
)

ENTERPRISE = ScenarioProfile(
    name="enterprise",
    description="Larger-organization pricing with unclamped three-year ROI.",
    improvements=ImprovementFactors(incident_reduction=0.3, mttr_reduction=0.5, automation_factor=0.4),
    pricing=ENTERPRISE_PRICING,
    surcharges=STANDARD_SURCHARGES,
    clamp_negative_roi=False,
)

_REGISTRY: dict[str, ScenarioProfile] = {p.name: p for p in (STANDARD, LEAN, ENTERPRISE)}


def get_profile(name: str) -> ScenarioProfile:
    """Look up a registered profile by name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownProfileError(name) from None


def list_profiles() -> list[ScenarioProfile]:
    """Return registered profiles in registration order."""
    return list(_REGISTRY.values())
