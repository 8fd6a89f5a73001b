"""Application API router for the ROI calculator."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from backend.api.schemas import (
    CompareRequest,
    CompareResponse,
    MetricsPayload,
    ProfileResponse,
    ROIRequest,
    ROIResponse,
    SensitivityRequest,
    SensitivityResponse,
)
from backend.config import load_settings
from backend.engine.metrics import DEFAULT_METRICS
from backend.engine.profiles import ScenarioProfile, UnknownProfileError, get_profile, list_profiles
from backend.engine.roi import calculate_roi
from backend.formatting import format_result, json_safe
from evaluation.sensitivity import break_even_value, compare_profiles, sweep

router = APIRouter()
logger = logging.getLogger("incidentroi.roi")

_settings = load_settings()


def _resolve_profile(name: str | None) -> ScenarioProfile:
    try:
        return get_profile(name or _settings.default_profile)
    except UnknownProfileError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/profiles", response_model=list[ProfileResponse])
async def profiles() -> list[ProfileResponse]:
    """List registered scenario profiles."""
    return [ProfileResponse(**p.to_dict()) for p in list_profiles()]


@router.get("/profiles/{name}", response_model=ProfileResponse)
async def profile_detail(name: str) -> ProfileResponse:
    """Describe one scenario profile."""
    return ProfileResponse(**_resolve_profile(name).to_dict())


@router.get("/roi/defaults", response_model=MetricsPayload)
async def defaults() -> MetricsPayload:
    """Default calculator form values."""
    return MetricsPayload(**DEFAULT_METRICS.to_dict())


@router.post("/roi", response_model=ROIResponse)
async def roi(payload: ROIRequest) -> ROIResponse:
    """POST /roi endpoint computing the cost comparison for one profile."""
    profile = _resolve_profile(payload.profile)
    if payload.clamp_negative_roi is not None:
        profile = profile.with_overrides(clamp_negative_roi=payload.clamp_negative_roi)

    result = calculate_roi(payload.metrics.to_metrics(), profile)
    logger.info(
        "profile=%s monthly_savings=%.2f three_year_roi=%.2f",
        profile.name,
        result.savings.monthly_savings,
        result.roi.three_year_roi,
    )
    return ROIResponse(profile=profile.name, result=json_safe(result.to_dict()), display=format_result(result))


@router.post("/roi/compare", response_model=CompareResponse)
async def compare(payload: CompareRequest) -> CompareResponse:
    """Evaluate the same metrics under several profiles."""
    try:
        frame = compare_profiles(payload.metrics.to_metrics(), payload.profiles)
    except UnknownProfileError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return CompareResponse(rows=json_safe(frame.to_dict(orient="records")))


@router.post("/roi/sensitivity", response_model=SensitivityResponse)
async def sensitivity(payload: SensitivityRequest) -> SensitivityResponse:
    """Sweep one metric and report savings across the range."""
    profile = _resolve_profile(payload.profile)
    frame = sweep(
        payload.metrics.to_metrics(),
        payload.metric,
        start=payload.start,
        stop=payload.stop,
        steps=payload.steps,
        profile=profile,
    )
    return SensitivityResponse(
        profile=profile.name,
        metric=payload.metric,
        break_even=break_even_value(frame),
        points=json_safe(frame.to_dict(orient="records")),
    )
