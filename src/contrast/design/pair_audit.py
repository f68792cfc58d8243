"""Batch contrast audit for foreground/background samples.

Evaluates each sample independently (one pairwise ratio per sample) and
collects a summary suitable for CI gates or the CLI.

Exports:
 - PairSample dataclass (id, fg, bg, large_text)
 - PairVerdict dataclass (id, ratio, required, passes, fg, bg, error)
 - AuditReport dataclass (verdicts, summary dict)
 - analyze_pairs(samples, min_normal=4.5, min_large=3.0)

Large text samples are judged against ``min_large``; everything else against
``min_normal``. A sample whose colors cannot be parsed is reported as failing
with ratio 0.0 rather than aborting the whole audit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .evaluator import WCAG_AA_LARGE, WCAG_AA_NORMAL, ContrastError
from .luminance import contrast_ratio

_logger = logging.getLogger(__name__)

__all__ = [
    "PairSample",
    "PairVerdict",
    "AuditReport",
    "analyze_pairs",
]


@dataclass(frozen=True)
class PairSample:
    id: str
    fg: str
    bg: str
    large_text: bool = False


@dataclass(frozen=True)
class PairVerdict:
    id: str
    ratio: float
    required: float
    passes: bool
    fg: str
    bg: str
    error: str | None = None


@dataclass(frozen=True)
class AuditReport:
    verdicts: List[PairVerdict]
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def failing(self) -> List[PairVerdict]:  # noqa: D401 - simple delegator
        return [v for v in self.verdicts if not v.passes]

    def ok(self) -> bool:
        return not self.failing


def analyze_pairs(
    samples: Iterable[PairSample],
    *,
    min_normal: float = WCAG_AA_NORMAL,
    min_large: float = WCAG_AA_LARGE,
) -> AuditReport:
    verdicts: List[PairVerdict] = []
    failing = 0
    for sample in samples:
        required = min_large if sample.large_text else min_normal
        error = None
        try:
            ratio = contrast_ratio(sample.fg, sample.bg)
        except ContrastError as exc:
            _logger.warning("Contrast sample %s not evaluated: %s", sample.id, exc)
            ratio = 0.0
            error = str(exc)
        passes = error is None and ratio >= required
        if not passes:
            failing += 1
        verdicts.append(
            PairVerdict(
                id=sample.id,
                ratio=ratio,
                required=required,
                passes=passes,
                fg=sample.fg,
                bg=sample.bg,
                error=error,
            )
        )
    total = len(verdicts)
    summary = {
        "total": total,
        "failing": failing,
        "pass_rate": 0.0 if total == 0 else round((total - failing) / total, 3),
        "threshold_normal": min_normal,
        "threshold_large": min_large,
    }
    return AuditReport(verdicts=verdicts, summary=summary)
