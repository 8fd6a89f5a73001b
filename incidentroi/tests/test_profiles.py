import pytest

from backend.engine.profiles import (
    LEAN,
    STANDARD,
    ImprovementFactors,
    IndirectCost,
    ScenarioProfile,
    UnknownProfileError,
    get_profile,
    list_profiles,
)


def test_registry_lists_presets_in_order() -> None:
    assert [p.name for p in list_profiles()] == ["standard", "lean", "enterprise"]
    assert get_profile("lean") is LEAN


def test_unknown_profile_is_a_key_error() -> None:
    with pytest.raises(UnknownProfileError) as exc_info:
        get_profile("platinum")
    assert isinstance(exc_info.value, KeyError)
    assert "platinum" in str(exc_info.value)


@pytest.mark.parametrize("value", [-0.1, 1.5, float("nan")])
def test_improvement_factors_are_fractions(value: float) -> None:
    with pytest.raises(ValueError):
        ImprovementFactors(mttr_reduction=value)


def test_indirect_cost_validation() -> None:
    with pytest.raises(ValueError):
        IndirectCost("bad", basis="headcount", rate=0.1)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        IndirectCost("bad", basis="engineering", rate=-0.1)
    with pytest.raises(ValueError):
        IndirectCost("bad", basis="engineering", rate=0.1, improvement=2)


def test_duplicate_surcharge_names_rejected() -> None:
    surcharge = IndirectCost("communication", basis="engineering", rate=0.3)
    with pytest.raises(ValueError):
        ScenarioProfile(
            name="dup",
            description="",
            improvements=ImprovementFactors(),
            pricing=STANDARD.pricing,
            surcharges=(surcharge, surcharge),
        )


def test_with_overrides_leaves_original_untouched() -> None:
    unclamped = STANDARD.with_overrides(clamp_negative_roi=False)
    assert unclamped.clamp_negative_roi is False
    assert STANDARD.clamp_negative_roi is True
    assert unclamped.pricing is STANDARD.pricing


def test_profile_serializes_configuration() -> None:
    payload = STANDARD.to_dict()
    assert payload["improvements"]["automation_factor"] == 0.4
    assert payload["pricing"]["overflow_fee"] == 8000
    assert [s["name"] for s in payload["surcharges"]] == [
        "documentation",
        "communication",
        "cognitive_load",
        "customer_retention",
    ]
