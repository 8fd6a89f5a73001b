"""Streamlit dashboard for the incident management ROI calculator."""

from __future__ import annotations

from typing import Any

import pandas as pd
import requests
import streamlit as st

from backend.config import load_settings
from dashboard.components.skins import SKINS, get_skin
from dashboard.components.widgets import apply_skin, result_panels, section_header

try:
    API_BASE = st.secrets.get("api_base", load_settings().api_base)
except Exception:
    API_BASE = load_settings().api_base

FORM_FIELDS = (
    ("average_incidents_per_month", "Average Incidents Per Month"),
    ("average_downtime_per_incident", "Average Downtime Per Incident (minutes)"),
    ("average_engineers_per_incident", "Average Engineers Per Incident"),
    ("average_customer_impact", "Average Customer Impact"),
    ("engineer_hourly_rate", "Engineer Hourly Rate ($)"),
    ("revenue_per_minute", "Revenue Per Minute ($)"),
)

st.set_page_config(page_title="Incident ROI Calculator", layout="wide")

if "roi_payload" not in st.session_state:
    st.session_state.roi_payload = None
if "compare_payload" not in st.session_state:
    st.session_state.compare_payload = None
if "sweep_payload" not in st.session_state:
    st.session_state.sweep_payload = None


def _request(method: str, path: str, **kwargs: Any) -> dict[str, Any] | list[Any] | None:
    """Perform API request and return parsed payload when successful."""
    url = f"{API_BASE}{path}"
    try:
        resp = requests.request(method=method, url=url, timeout=30, **kwargs)
    except requests.RequestException as exc:
        st.error(f"Connection error: {exc}")
        return None

    if not resp.ok:
        st.error(f"API error {resp.status_code}: {resp.text}")
        return None

    return resp.json()


@st.cache_data(ttl=300)
def _fetch_reference(path: str) -> Any:
    """GET a slow-changing payload; failures raise so they are never cached."""
    resp = requests.get(f"{API_BASE}{path}", timeout=30)
    resp.raise_for_status()
    return resp.json()


def _reference(path: str) -> Any:
    try:
        return _fetch_reference(path)
    except requests.RequestException as exc:
        st.error(f"Connection error: {exc}")
        return None


def _load_defaults() -> dict[str, Any]:
    return _reference("/roi/defaults") or {name: 0 for name, _ in FORM_FIELDS}


def _load_profiles() -> list[str]:
    payload = _reference("/profiles") or []
    return [p["name"] for p in payload] or ["standard"]


st.sidebar.header("Appearance")
skin_name = st.sidebar.selectbox("Skin", options=list(SKINS), format_func=lambda n: SKINS[n].label)
skin = get_skin(skin_name)
apply_skin(skin)

st.sidebar.header("Scenario")
profile_names = _load_profiles()
profile = st.sidebar.selectbox("Profile", options=profile_names)
clamp = st.sidebar.checkbox("Floor 3-year ROI at -100%", value=True)
st.sidebar.caption(f"Backend: {API_BASE}")

st.title("Incident Management ROI Calculator")

defaults = _load_defaults()
form_col, result_col = st.columns([1, 2])

with form_col:
    section_header("Your Metrics")
    form = {name: st.text_input(label, value=str(defaults.get(name, 0))) for name, label in FORM_FIELDS}
    if st.button("Calculate ROI", type="primary", width="stretch"):
        payload = _request("POST", "/roi", json={"metrics": form, "profile": profile, "clamp_negative_roi": clamp})
        if payload:
            st.session_state.roi_payload = payload

with result_col:
    roi_payload = st.session_state.roi_payload
    if roi_payload:
        st.caption(f"Profile: {roi_payload['profile']}")
        result_panels(roi_payload["display"], skin)
    else:
        st.info("Enter your metrics and calculate to see projected savings.")

tab_compare, tab_sweep, tab_raw = st.tabs(["Compare Profiles", "Sensitivity", "Payload"])

with tab_compare:
    chosen = st.multiselect("Profiles", options=profile_names, default=profile_names)
    if st.button("Compare", disabled=not chosen):
        payload = _request("POST", "/roi/compare", json={"metrics": form, "profiles": chosen})
        if payload:
            st.session_state.compare_payload = payload
    compare_payload = st.session_state.compare_payload
    if compare_payload and compare_payload.get("rows"):
        table = pd.DataFrame(compare_payload["rows"]).set_index("profile")
        st.dataframe(table, width="stretch")
        st.bar_chart(table["monthly_savings"], height=250)

with tab_sweep:
    metric = st.selectbox("Metric", options=[name for name, _ in FORM_FIELDS], index=0)
    c1, c2, c3 = st.columns(3)
    start = c1.number_input("From", value=0.0)
    stop = c2.number_input("To", value=float(defaults.get(metric, 10) or 10) * 2)
    steps = c3.slider("Steps", min_value=2, max_value=50, value=11)
    if st.button("Run sweep"):
        payload = _request(
            "POST",
            "/roi/sensitivity",
            json={"metrics": form, "metric": metric, "start": start, "stop": stop, "steps": steps, "profile": profile},
        )
        if payload:
            st.session_state.sweep_payload = payload
    sweep_payload = st.session_state.sweep_payload
    if sweep_payload and sweep_payload.get("points"):
        points = pd.DataFrame(sweep_payload["points"]).set_index("value")
        st.line_chart(points[["current_total_cost", "improved_total_cost"]], height=260)
        break_even = sweep_payload.get("break_even")
        st.caption("No break-even in range." if break_even is None else f"Savings turn positive at {break_even:,.2f}.")

with tab_raw:
    st.json({"roi": st.session_state.roi_payload, "compare": st.session_state.compare_payload})

st.caption("Estimates are illustrative; calibrate the scenario profile with your own incident data.")
