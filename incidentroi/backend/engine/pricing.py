"""Tiered platform pricing keyed on estimated organization size."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.engine.metrics import IncidentMetrics


@dataclass(frozen=True)
class PricingTier:
    """Flat monthly fee for teams up to ``max_team_size`` engineers."""

    max_team_size: float
    monthly_fee: float


@dataclass(frozen=True)
class PricingTable:
    """Step function from estimated team size to monthly platform fee."""

    team_size_multiplier: float
    tiers: tuple[PricingTier, ...] = field(default_factory=tuple)
    overflow_fee: float = 0.0

    def __post_init__(self) -> None:
        sizes = [tier.max_team_size for tier in self.tiers]
        if sizes != sorted(sizes):
            raise ValueError("Pricing tiers must be ordered by max_team_size")
        if any(tier.monthly_fee < 0 for tier in self.tiers) or self.overflow_fee < 0:
            raise ValueError("Pricing fees must be non-negative")

    @classmethod
    def flat(cls, monthly_fee: float) -> "PricingTable":
        """Single fee regardless of team size."""
        return cls(team_size_multiplier=0.0, tiers=(), overflow_fee=monthly_fee)

    def estimated_team_size(self, metrics: IncidentMetrics) -> float:
        return metrics.average_engineers_per_incident * self.team_size_multiplier

    def fee_for_team_size(self, team_size: float) -> float:
        for tier in self.tiers:
            if team_size <= tier.max_team_size:
                return tier.monthly_fee
        return self.overflow_fee

    def monthly_fee(self, metrics: IncidentMetrics) -> float:
        """Return the monthly platform fee for the organization behind ``metrics``."""
        return self.fee_for_team_size(self.estimated_team_size(metrics))

    def to_dict(self) -> dict[str, object]:
        return {
            "team_size_multiplier": self.team_size_multiplier,
            "tiers": [{"max_team_size": t.max_team_size, "monthly_fee": t.monthly_fee} for t in self.tiers],
            "overflow_fee": self.overflow_fee,
        }


STANDARD_PRICING = PricingTable(
    team_size_multiplier=3,
    tiers=(
        PricingTier(max_team_size=10, monthly_fee=500),
        PricingTier(max_team_size=25, monthly_fee=1500),
        PricingTier(max_team_size=50, monthly_fee=3500),
    ),
    overflow_fee=8000,
)

ENTERPRISE_PRICING = PricingTable(
    team_size_multiplier=5,
    tiers=(
        PricingTier(max_team_size=20, monthly_fee=1000),
        PricingTier(max_team_size=50, monthly_fee=2500),
        PricingTier(max_team_size=100, monthly_fee=5000),
    ),
    overflow_fee=12000,
)
