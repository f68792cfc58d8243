"""ViewModel for the theme contrast dashboard.

Separates the headless row computation from the Qt panel. Each row pairs a
foreground role with its background role for one color scheme and carries
the evaluated `ContrastResult` plus its two presentation consumers:

 - verdict text: ``"PASS (4.53)"`` or ``"FAIL"``
 - label color: white badge text when passing, yellow when failing

Both are derived from the same result independently; neither feeds the other.

The view model is immutable. Switching scheme or threshold returns a new
instance so tests can assert deterministic outputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List

from contrast import settings
from contrast.design.evaluator import ContrastResult, evaluate
from contrast.design.luminance import relative_luminance
from contrast.design.theme_pairs import ThemeColors

_logger = logging.getLogger(__name__)

__all__ = [
    "DashboardRow",
    "ContrastDashboardViewModel",
    "format_verdict",
    "label_color",
]


def format_verdict(result: ContrastResult) -> str:
    if result.passes:
        return f"PASS ({result.ratio:.2f})"
    return "FAIL"


def label_color(result: ContrastResult) -> str:
    return settings.PASS_LABEL_COLOR if result.passes else settings.FAIL_LABEL_COLOR


@dataclass(frozen=True)
class DashboardRow:
    label: str
    foreground: str
    background: str
    result: ContrastResult

    @property
    def verdict_text(self) -> str:
        return format_verdict(self.result)

    @property
    def label_color(self) -> str:
        return label_color(self.result)


@dataclass(frozen=True)
class ContrastDashboardViewModel:
    """Evaluate every role pair of one theme scheme."""

    theme: ThemeColors
    scheme: str = "light"
    threshold: float = settings.DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        # fail fast on unknown scheme instead of at first render
        self.theme.scheme(self.scheme)

    def with_scheme(self, scheme: str) -> "ContrastDashboardViewModel":
        return replace(self, scheme=scheme)

    def with_threshold(self, threshold: float) -> "ContrastDashboardViewModel":
        return replace(self, threshold=threshold)

    def rows(self) -> List[DashboardRow]:
        out: List[DashboardRow] = []
        for fg, bg, label in self.theme.resolved_pairs(self.scheme):
            result = evaluate(relative_luminance(fg), relative_luminance(bg), self.threshold)
            out.append(DashboardRow(label=label, foreground=fg, background=bg, result=result))
        _logger.debug(
            "Dashboard %s/%s: %d rows at threshold %s",
            self.theme.name,
            self.scheme,
            len(out),
            self.threshold,
        )
        return out

    def summary(self) -> Dict[str, Any]:
        rows = self.rows()
        failing = sum(1 for r in rows if not r.result.passes)
        return {
            "theme": self.theme.name,
            "scheme": self.scheme,
            "threshold": self.threshold,
            "total": len(rows),
            "failing": failing,
            "passing": len(rows) - failing,
        }
