"""WCAG contrast ratio evaluation.

Operates purely on relative luminance values in the closed range [0, 1].
How a luminance is obtained (hex parsing, theme lookup, platform color
objects) is the caller's concern; see `contrast.design.luminance` for the
hex adapter used by the dashboard.

Public API:
- compute_ratio(luminance_a, luminance_b) -> float
- is_accessible(luminance_a, luminance_b, threshold=4.5) -> bool
- evaluate(luminance_a, luminance_b, threshold=4.5) -> ContrastResult

Ratio = (L_brightest + 0.05) / (L_darkest + 0.05), range [1.0, 21.0].
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from contrast.settings import WCAG_AA_LARGE, WCAG_AA_NORMAL, WCAG_AAA_NORMAL

__all__ = [
    "ContrastError",
    "LuminanceDomainError",
    "ContrastResult",
    "compute_ratio",
    "is_accessible",
    "evaluate",
    "MIN_RATIO",
    "MAX_RATIO",
    "WCAG_AA_NORMAL",
    "WCAG_AA_LARGE",
    "WCAG_AAA_NORMAL",
]

MIN_RATIO = 1.0
MAX_RATIO = 21.0
_FLARE = 0.05


class ContrastError(ValueError):
    """Base class for contrast evaluation input errors."""


class LuminanceDomainError(ContrastError):
    """Raised when a luminance value is not a real number in [0, 1]."""


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of a single pairwise evaluation."""

    ratio: float
    passes: bool
    threshold: float = WCAG_AA_NORMAL


def _check_luminance(name: str, value: object) -> float:
    # bool is a Real subclass but never a meaningful luminance
    if isinstance(value, bool) or not isinstance(value, Real):
        raise LuminanceDomainError(f"{name} must be a real number, got {type(value).__name__}")
    value = float(value)
    if math.isnan(value) or value < 0.0 or value > 1.0:
        raise LuminanceDomainError(f"{name} must be within [0, 1], got {value!r}")
    return value


def compute_ratio(luminance_a: float, luminance_b: float) -> float:
    """Return the WCAG contrast ratio between two relative luminances.

    Argument order does not matter. Out-of-range input is rejected with
    `LuminanceDomainError`; values are never clamped.
    """
    a = _check_luminance("luminance_a", luminance_a)
    b = _check_luminance("luminance_b", luminance_b)
    brightest = max(a, b)
    darkest = min(a, b)
    return (brightest + _FLARE) / (darkest + _FLARE)


def is_accessible(
    luminance_a: float, luminance_b: float, threshold: float = WCAG_AA_NORMAL
) -> bool:
    """Return True when the pair's ratio meets ``threshold`` (inclusive)."""
    return compute_ratio(luminance_a, luminance_b) >= threshold


def evaluate(
    luminance_a: float, luminance_b: float, threshold: float = WCAG_AA_NORMAL
) -> ContrastResult:
    ratio = compute_ratio(luminance_a, luminance_b)
    return ContrastResult(ratio=ratio, passes=ratio >= threshold, threshold=threshold)
