from dashboard.components.skins import SKINS, get_skin, render_section


def test_skin_registry_and_fallback() -> None:
    assert set(SKINS) == {"classic", "midnight", "compact"}
    assert get_skin("missing").name == "classic"
    assert "#0f172a" in get_skin("midnight").css()


def test_card_layout_marks_total_row() -> None:
    html = render_section(get_skin("classic"), "Savings", {"monthly_savings": "$1,000", "annual_savings": "$12,000"}, "monthly_savings")
    assert 'class="roi-row total"' in html
    assert "Monthly savings" in html


def test_table_layout_escapes_values() -> None:
    html = render_section(get_skin("compact"), "<Costs>", {"total_cost": "<b>$5</b>"})
    assert "<table" in html
    assert "&lt;Costs&gt;" in html
    assert "&lt;b&gt;$5&lt;/b&gt;" in html
