"""Contrast check CLI.

Evaluates WCAG contrast from the command line:

 - ``pair FG BG``: two hex colors.
 - ``luminance LA LB``: two relative luminance values in [0, 1].
 - ``theme``: every role pair of a theme file (all schemes unless --scheme).
 - ``dashboard``: open the Qt dashboard panel for a theme.

Emits human-readable lines or JSON (via ``--json``). Exit code 0 when every
evaluated pair passes, 1 when at least one fails, 2 on invalid input.

Example:
  contrast-check pair "#FFFFFF" "#6750A4" --large-text --json
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Any, Dict, List

from contrast import settings
from contrast.design.evaluator import ContrastError, ContrastResult, evaluate
from contrast.design.luminance import relative_luminance
from contrast.design.pair_audit import AuditReport, PairSample, analyze_pairs
from contrast.design.theme_pairs import ThemeValidationError, load_theme
from contrast.viewmodels.contrast_dashboard_viewmodel import format_verdict

_logger = logging.getLogger(__name__)


def _threshold_arg(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
    if not math.isfinite(value) or value < 1.0:
        raise argparse.ArgumentTypeError(f"must be a finite ratio >= 1.0, got {raw!r}")
    return value


def _output_args(default: object) -> argparse.ArgumentParser:
    # shared by the top-level parser and every subcommand; subcommands
    # suppress their defaults so a flag given before the subcommand survives
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument(
        "-v", "--verbose", action="store_true", default=default, help="Enable debug logging"
    )
    p.add_argument(
        "--json",
        action="store_true",
        default=default,
        help="Emit JSON instead of human-readable text",
    )
    return p


def _add_threshold_args(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument(
        "--threshold",
        type=_threshold_arg,
        default=None,
        help=f"Minimum acceptable ratio (default: {settings.DEFAULT_THRESHOLD})",
    )
    group.add_argument(
        "--large-text",
        action="store_true",
        help=f"Use the large text minimum ({settings.WCAG_AA_LARGE})",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="contrast-check",
        description="Check WCAG contrast ratios of color pairs",
        parents=[_output_args(False)],
    )
    sub = p.add_subparsers(dest="command", required=True)
    common = [_output_args(argparse.SUPPRESS)]

    pair = sub.add_parser("pair", help="Evaluate two hex colors", parents=common)
    pair.add_argument("foreground", help="Foreground color (#RRGGBB or #RGB)")
    pair.add_argument("background", help="Background color (#RRGGBB or #RGB)")
    _add_threshold_args(pair)

    lum = sub.add_parser(
        "luminance", help="Evaluate two relative luminance values", parents=common
    )
    lum.add_argument("luminance_a", type=float, help="Relative luminance in [0, 1]")
    lum.add_argument("luminance_b", type=float, help="Relative luminance in [0, 1]")
    _add_threshold_args(lum)

    theme = sub.add_parser("theme", help="Audit every role pair of a theme file", parents=common)
    theme.add_argument("--theme", default=None, help="Theme JSON path (default: bundled baseline)")
    theme.add_argument("--scheme", default=None, help="Only audit this scheme")
    _add_threshold_args(theme)

    dash = sub.add_parser("dashboard", help="Open the contrast dashboard window", parents=common)
    dash.add_argument("--theme", default=None, help="Theme JSON path (default: bundled baseline)")
    dash.add_argument("--scheme", default=None, help="Initial scheme")
    return p.parse_args(argv)


def _threshold(args: argparse.Namespace) -> float:
    if args.large_text:
        return settings.WCAG_AA_LARGE
    if args.threshold is not None:
        return args.threshold
    return settings.DEFAULT_THRESHOLD


def _result_to_dict(result: ContrastResult, **extra: Any) -> Dict[str, Any]:
    return {
        **extra,
        "ratio": round(result.ratio, 3),
        "threshold": result.threshold,
        "passes": result.passes,
        "verdict": format_verdict(result),
    }


def _emit_single(payload: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps({"results": [payload], "summary": _summary([payload])}, indent=2))
    else:
        print(f"Ratio {payload['ratio']:.2f}:1 (min {payload['threshold']}) -> {payload['verdict']}")


def _summary(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    failing = sum(1 for r in results if not r["passes"])
    return {"total": len(results), "failing": failing, "passing": len(results) - failing}


def run_pair(args: argparse.Namespace) -> int:
    threshold = _threshold(args)
    result = evaluate(
        relative_luminance(args.foreground), relative_luminance(args.background), threshold
    )
    _emit_single(
        _result_to_dict(result, foreground=args.foreground, background=args.background), args.json
    )
    return 0 if result.passes else 1


def run_luminance(args: argparse.Namespace) -> int:
    result = evaluate(args.luminance_a, args.luminance_b, _threshold(args))
    _emit_single(
        _result_to_dict(result, luminance_a=args.luminance_a, luminance_b=args.luminance_b),
        args.json,
    )
    return 0 if result.passes else 1


def run_theme(args: argparse.Namespace) -> int:
    theme = load_theme(args.theme)
    threshold = _threshold(args)
    schemes = [args.scheme] if args.scheme else theme.scheme_names()
    samples = []
    for scheme in schemes:
        for fg, bg, label in theme.resolved_pairs(scheme):
            samples.append(PairSample(id=f"{scheme}:{label}", fg=fg, bg=bg))
    report = analyze_pairs(samples, min_normal=threshold)
    _emit_report(theme.name, report, args.json)
    return 0 if report.ok() else 1


def _emit_report(theme_name: str, report: AuditReport, as_json: bool) -> None:
    if as_json:
        payload = {
            "theme": theme_name,
            "results": [
                {
                    "id": v.id,
                    "foreground": v.fg,
                    "background": v.bg,
                    "ratio": round(v.ratio, 3),
                    "threshold": v.required,
                    "passes": v.passes,
                    "error": v.error,
                }
                for v in report.verdicts
            ],
            "summary": report.summary,
        }
        print(json.dumps(payload, indent=2))
        return
    print(f"Theme: {theme_name}")
    for v in report.verdicts:
        if v.error:
            print(f"  {v.id:<56} ERROR {v.error}")
            continue
        verdict = f"PASS ({v.ratio:.2f})" if v.passes else "FAIL"
        print(f"  {v.id:<56} {v.ratio:>6.2f}:1  {verdict}")
    s = report.summary
    print(f"Summary: {s['total'] - s['failing']}/{s['total']} pass (min {s['threshold_normal']})")


def run_dashboard(args: argparse.Namespace) -> int:  # pragma: no cover - opens a window
    from PyQt6.QtWidgets import QApplication

    from contrast.views.contrast_dashboard_panel import ContrastDashboardPanel

    theme = load_theme(args.theme)
    app = QApplication.instance() or QApplication(sys.argv)
    panel = ContrastDashboardPanel(theme, scheme=args.scheme)
    panel.resize(720, 560)
    panel.show()
    return app.exec()


_COMMANDS = {
    "pair": run_pair,
    "luminance": run_luminance,
    "theme": run_theme,
    "dashboard": run_dashboard,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return _COMMANDS[args.command](args)
    except (ContrastError, ThemeValidationError, FileNotFoundError, KeyError) as exc:
        _logger.debug("contrast-check %s failed", args.command, exc_info=True)
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"contrast-check: {message}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
