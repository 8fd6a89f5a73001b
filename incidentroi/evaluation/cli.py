"""Terminal report for the ROI calculator."""

from __future__ import annotations

import argparse
from typing import Sequence

from backend.engine.metrics import DEFAULT_METRICS, METRIC_FIELDS, metrics_from_form
from backend.engine.profiles import UnknownProfileError, get_profile, list_profiles
from backend.engine.roi import ROIResult, calculate_roi
from backend.formatting import format_currency, format_payback, format_percent, format_result
from data.loader import load_csv
from evaluation.batch import BatchRunner
from evaluation.sensitivity import compare_profiles


def render_summary(result: ROIResult) -> str:
    """Render one result as aligned text lines."""
    display = format_result(result)
    lines = [f"Profile: {result.profile}"]
    for section, title in (
        ("current_cost", "Current monthly cost"),
        ("with_incident_management", "With incident management"),
        ("savings", "Savings"),
        ("roi", "Return on investment"),
    ):
        lines.append(title)
        for key, value in display[section].items():
            lines.append(f"  {key.replace('_', ' '):<24}{value:>16}")
    return "\n".join(lines)


def render_comparison(names: Sequence[str], form: dict[str, float]) -> str:
    frame = compare_profiles(metrics_from_form(form), names)
    lines = [f"{'profile':<12}{'monthly savings':>18}{'payback':>16}{'3y ROI':>10}"]
    for row in frame.to_dict(orient="records"):
        lines.append(
            f"{row['profile']:<12}"
            f"{format_currency(row['monthly_savings']):>18}"
            f"{format_payback(row['payback_period_months']):>16}"
            f"{format_percent(row['three_year_roi'], 0):>10}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Incident management ROI report")
    parser.add_argument("--profile", default="standard", choices=[p.name for p in list_profiles()])
    parser.add_argument("--compare", nargs="+", metavar="PROFILE", help="Compare several profiles side by side")
    parser.add_argument("--csv", help="Evaluate every record of a metrics CSV")
    for name in METRIC_FIELDS:
        parser.add_argument(f"--{name.replace('_', '-')}", dest=name, default=getattr(DEFAULT_METRICS, name))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    form = {name: getattr(args, name) for name in METRIC_FIELDS}

    if args.csv:
        report = BatchRunner(get_profile(args.profile)).run(load_csv(args.csv))
        for key, value in report.to_dict().items():
            print(f"{key}: {value}")
    elif args.compare:
        try:
            print(render_comparison(args.compare, form))
        except UnknownProfileError as exc:
            print(f"error: {exc}")
            return 2
    else:
        print(render_summary(calculate_roi(metrics_from_form(form), get_profile(args.profile))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
