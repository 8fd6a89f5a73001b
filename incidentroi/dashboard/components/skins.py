"""Interchangeable visual skins for the calculator dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Literal

Layout = Literal["cards", "table"]

_BASE_CSS = """
<style>
.block-container {{padding-top: 1.5rem;}}
.roi-card {{
  background: {card};
  color: {ink};
  border: 1px solid {border};
  border-radius: {radius};
  padding: 1rem;
  margin-bottom: 0.8rem;
}}
.roi-card-title {{font-weight: 700; margin-bottom: 0.5rem;}}
.roi-row {{display: flex; justify-content: space-between; padding: 0.15rem 0; color: {muted};}}
.roi-row .v {{color: {ink}; font-weight: 600;}}
.roi-row.total .v {{color: {accent}; font-weight: 800;}}
.roi-table {{width: 100%; border-collapse: collapse; color: {ink};}}
.roi-table td {{border-bottom: 1px solid {border}; padding: 0.3rem 0.4rem;}}
.roi-table td.v {{text-align: right; font-variant-numeric: tabular-nums;}}
</style>
"""


@dataclass(frozen=True)
class Skin:
    """Palette and layout for rendering results."""

    name: str
    label: str
    layout: Layout
    card: str
    ink: str
    muted: str
    border: str
    accent: str
    radius: str = "14px"

    def css(self) -> str:
        return _BASE_CSS.format(
            card=self.card,
            ink=self.ink,
            muted=self.muted,
            border=self.border,
            accent=self.accent,
            radius=self.radius,
        )


SKINS: dict[str, Skin] = {
    skin.name: skin
    for skin in (
        Skin("classic", "Classic", "cards", card="#ffffff", ink="#0f172a", muted="#475569", border="#dbe3ea", accent="#16a34a"),
        Skin("midnight", "Midnight", "cards", card="#0f172a", ink="#e2e8f0", muted="#94a3b8", border="#1e293b", accent="#38bdf8"),
        Skin("compact", "Compact", "table", card="#f8fafc", ink="#111827", muted="#6b7280", border="#e5e7eb", accent="#0b84ff", radius="4px"),
    )
}


def get_skin(name: str) -> Skin:
    """Return the named skin, falling back to ``classic``."""
    return SKINS.get(name, SKINS["classic"])


def render_section(skin: Skin, title: str, rows: dict[str, str], total_key: str | None = None) -> str:
    """Render one block of label/value rows as HTML for ``skin``."""
    if skin.layout == "table":
        body = "".join(
            f'<tr><td>{escape(_label(k))}</td><td class="v">{escape(v)}</td></tr>' for k, v in rows.items()
        )
        return f'<div class="roi-card"><div class="roi-card-title">{escape(title)}</div><table class="roi-table">{body}</table></div>'

    body = "".join(
        f'<div class="roi-row{" total" if k == total_key else ""}"><span>{escape(_label(k))}</span>'
        f'<span class="v">{escape(v)}</span></div>'
        for k, v in rows.items()
    )
    return f'<div class="roi-card"><div class="roi-card-title">{escape(title)}</div>{body}</div>'


def _label(key: str) -> str:
    return key.replace("_", " ").capitalize()
