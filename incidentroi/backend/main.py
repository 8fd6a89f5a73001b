"""FastAPI application entrypoint for the ROI calculator."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from backend.api.routes import router
from backend.config import load_settings
from backend.observability import RequestTraceMiddleware, configure_logging

settings = load_settings()

app = FastAPI(title="Incident ROI Calculator", version="1.0.0")
app.include_router(router)
configure_logging(settings.log_level)
app.add_middleware(RequestTraceMiddleware)
ui_dir = Path(__file__).resolve().parents[1] / "dashboard_web"
if ui_dir.exists():
    app.mount("/ui", StaticFiles(directory=str(ui_dir), html=True), name="ui")


@app.get("/")
async def root() -> dict[str, str]:
    """Health route."""
    return {"status": "Incident ROI API online", "docs": "/docs", "ui": "/ui"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Lightweight liveness check."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> dict[str, str]:
    """Readiness endpoint for deployments/load balancers."""
    return {"status": "ready", "default_profile": settings.default_profile}
