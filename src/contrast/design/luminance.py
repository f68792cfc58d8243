"""Relative luminance for hex color strings.

Adapter between theme color tables (hex strings) and the luminance-only
evaluator. Implements the WCAG 2.1 relative luminance definition.

Public API:
- parse_hex(color: str) -> (r, g, b)
- relative_luminance(color: str) -> float
- contrast_ratio(fg: str, bg: str) -> float
"""

from __future__ import annotations

from typing import Tuple

from .evaluator import ContrastError, compute_ratio

__all__ = [
    "ColorFormatError",
    "parse_hex",
    "relative_luminance",
    "contrast_ratio",
]

RGB = Tuple[int, int, int]

_HEX_ERR = "Color must be a #RRGGBB or #RGB hex string: {value!r}"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ColorFormatError(ContrastError):
    """Raised when a color string cannot be parsed as hex."""


def parse_hex(color: str) -> RGB:
    if not isinstance(color, str):
        raise ColorFormatError(_HEX_ERR.format(value=color))
    c = color.strip()
    if not c.startswith("#") or not set(c[1:]) <= _HEX_DIGITS:
        raise ColorFormatError(_HEX_ERR.format(value=color))
    c = c[1:]
    if len(c) == 3:
        c = "".join(ch * 2 for ch in c)
    if len(c) != 6:
        raise ColorFormatError(_HEX_ERR.format(value=color))
    return int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)


def _linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    r, g, b = parse_hex(color)
    # Rec. 709 coefficients used by WCAG
    lum = 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)
    # rounding can push pure white a hair above 1.0
    return min(lum, 1.0)


def contrast_ratio(fg: str, bg: str) -> float:
    return compute_ratio(relative_luminance(fg), relative_luminance(bg))
