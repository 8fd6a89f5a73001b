"""Reusable Streamlit UI components."""

from __future__ import annotations

from typing import Any

import streamlit as st

from dashboard.components.skins import Skin, render_section

RESULT_SECTIONS = (
    ("current_cost", "Current Monthly Cost", "total_cost"),
    ("with_incident_management", "With Incident Management", "total_cost"),
    ("savings", "Savings", "monthly_savings"),
    ("roi", "Return on Investment", "three_year_roi"),
)


def section_header(title: str) -> None:
    """Render a standard section header."""
    st.markdown(f"## {title}")


def apply_skin(skin: Skin) -> None:
    st.markdown(skin.css(), unsafe_allow_html=True)


def result_panels(display: dict[str, Any], skin: Skin) -> None:
    """Render the formatted result record in two columns."""
    left, right = st.columns(2)
    for index, (key, title, total_key) in enumerate(RESULT_SECTIONS):
        column = left if index % 2 == 0 else right
        with column:
            st.markdown(render_section(skin, title, display.get(key, {}), total_key), unsafe_allow_html=True)
