"""Global configuration and constants for contrast evaluation."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Final

_logger = logging.getLogger(__name__)

# WCAG 2.x minimum ratios
WCAG_AA_NORMAL: Final = 4.5
WCAG_AA_LARGE: Final = 3.0
WCAG_AAA_NORMAL: Final = 7.0

# Label colors used by the dashboard verdict badge
PASS_LABEL_COLOR: Final = "#FFFFFF"
FAIL_LABEL_COLOR: Final = "#FFEB3B"

BUNDLED_THEME_FILE: Final = Path(__file__).parent / "design" / "themes" / "baseline.json"
THEME_FILE: Final = os.environ.get("CONTRAST_THEME_FILE") or str(BUNDLED_THEME_FILE)


def _threshold_from_env(raw: str | None, fallback: float) -> float:
    if raw is None or not raw.strip():
        return fallback
    try:
        value = float(raw)
    except ValueError:
        _logger.warning(
            "Ignoring CONTRAST_DEFAULT_THRESHOLD=%r (not a number); using %s", raw, fallback
        )
        return fallback
    if not math.isfinite(value) or value < 1.0:
        _logger.warning(
            "Ignoring CONTRAST_DEFAULT_THRESHOLD=%r (not a finite ratio >= 1.0); using %s",
            raw,
            fallback,
        )
        return fallback
    return value


DEFAULT_THRESHOLD: Final = _threshold_from_env(
    os.environ.get("CONTRAST_DEFAULT_THRESHOLD"), WCAG_AA_NORMAL
)
