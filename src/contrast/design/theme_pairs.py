"""Theme color-role tables and their foreground/background pairs.

Responsibilities:
- Load a theme (one or more color schemes) from JSON into a typed structure.
- Validate the structure before anything downstream touches it.
- Resolve semantic role pairs (e.g. ``onPrimary`` on ``primary``) into hex
  colors for a given scheme.

File format::

    {
      "name": "baseline",
      "schemes": {"light": {"primary": "#6750A4", ...}, "dark": {...}},
      "pairs": [["onPrimary", "primary", "On Primary / Primary"], ...]
    }

``pairs`` is optional and defaults to `DEFAULT_ROLE_PAIRS`.

Usage:
    from contrast.design.theme_pairs import load_theme
    theme = load_theme()
    for fg, bg, label in theme.resolved_pairs("dark"):
        ...
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, NamedTuple, Tuple

from contrast import settings

from .luminance import ColorFormatError, parse_hex

_logger = logging.getLogger(__name__)

__all__ = [
    "RolePair",
    "ThemeColors",
    "ThemeValidationError",
    "DEFAULT_ROLE_PAIRS",
    "load_theme",
    "theme_from_mapping",
]


class ThemeValidationError(RuntimeError):
    """Raised when a theme file is missing required fields or is malformed."""


class RolePair(NamedTuple):
    foreground: str
    background: str
    label: str


DEFAULT_ROLE_PAIRS: Tuple[RolePair, ...] = (
    RolePair("onPrimary", "primary", "On Primary / Primary"),
    RolePair("onPrimaryContainer", "primaryContainer", "On Primary Container / Primary Container"),
    RolePair("onSecondary", "secondary", "On Secondary / Secondary"),
    RolePair(
        "onSecondaryContainer", "secondaryContainer", "On Secondary Container / Secondary Container"
    ),
    RolePair("onTertiary", "tertiary", "On Tertiary / Tertiary"),
    RolePair(
        "onTertiaryContainer", "tertiaryContainer", "On Tertiary Container / Tertiary Container"
    ),
    RolePair("onError", "error", "On Error / Error"),
    RolePair("onErrorContainer", "errorContainer", "On Error Container / Error Container"),
    RolePair("onBackground", "background", "On Background / Background"),
    RolePair("onSurface", "surface", "On Surface / Surface"),
    RolePair("onSurfaceVariant", "surfaceVariant", "On Surface Variant / Surface Variant"),
    RolePair("inverseOnSurface", "inverseSurface", "Inverse On Surface / Inverse Surface"),
    RolePair("inversePrimary", "inverseSurface", "Inverse Primary / Inverse Surface"),
)


@dataclass
class ThemeColors:
    name: str
    schemes: Mapping[str, Mapping[str, str]]
    pairs: Tuple[RolePair, ...] = field(default=DEFAULT_ROLE_PAIRS)

    def scheme_names(self) -> List[str]:
        return list(self.schemes.keys())

    def scheme(self, scheme: str) -> Mapping[str, str]:
        try:
            return self.schemes[scheme]
        except KeyError:
            raise KeyError(f"Unknown color scheme: {scheme}") from None

    def color(self, scheme: str, role: str) -> str:
        roles = self.scheme(scheme)
        if role not in roles:
            raise KeyError(f"Missing color role: {scheme}/{role}")
        return roles[role]

    def resolved_pairs(self, scheme: str) -> Iterator[Tuple[str, str, str]]:
        """Yield (foreground_hex, background_hex, label) for the scheme.

        Pairs referencing a role the scheme does not define are skipped.
        """
        roles = self.scheme(scheme)
        for pair in self.pairs:
            fg = roles.get(pair.foreground)
            bg = roles.get(pair.background)
            if fg is None or bg is None:
                _logger.debug(
                    "Skipping pair %r in scheme %r: role not defined", pair.label, scheme
                )
                continue
            yield fg, bg, pair.label


def load_theme(path: str | Path | None = None) -> ThemeColors:
    """Load a theme from JSON.

    Parameters
    ----------
    path: optional explicit path override; defaults to ``settings.THEME_FILE``.
    """
    theme_path = Path(path) if path else Path(settings.THEME_FILE)
    if not theme_path.exists():
        raise FileNotFoundError(f"Theme file not found: {theme_path}")
    with theme_path.open("r", encoding="utf-8") as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as exc:
            raise ThemeValidationError(f"Theme file {theme_path} is not valid JSON: {exc}") from exc
    theme = theme_from_mapping(data, default_name=theme_path.stem)
    _logger.debug(
        "Loaded theme %r from %s (%d schemes, %d pairs)",
        theme.name,
        theme_path,
        len(theme.schemes),
        len(theme.pairs),
    )
    return theme


def theme_from_mapping(data: Mapping[str, Any], default_name: str = "custom") -> ThemeColors:
    if not isinstance(data, Mapping):
        raise ThemeValidationError("Theme must be a JSON object")
    schemes = _validate_schemes(data.get("schemes"))
    pairs = _validate_pairs(data["pairs"]) if "pairs" in data else DEFAULT_ROLE_PAIRS
    name = data.get("name", default_name)
    if not isinstance(name, str):
        raise ThemeValidationError("name must be a string")
    return ThemeColors(name=name, schemes=schemes, pairs=pairs)


def _validate_schemes(raw: Any) -> Dict[str, Dict[str, str]]:
    if raw is None:
        raise ThemeValidationError("Missing top-level group: schemes")
    if not isinstance(raw, Mapping) or not raw:
        raise ThemeValidationError("schemes must be a non-empty mapping")
    schemes: Dict[str, Dict[str, str]] = {}
    for scheme_name, roles in raw.items():
        if not isinstance(roles, Mapping):
            raise ThemeValidationError(f"Scheme {scheme_name} must be a mapping of role -> color")
        for role, value in roles.items():
            if not isinstance(value, str):
                raise ThemeValidationError(f"Color role {scheme_name}/{role} must be a string")
            try:
                parse_hex(value)
            except ColorFormatError as exc:
                raise ThemeValidationError(f"Color role {scheme_name}/{role}: {exc}") from exc
        schemes[scheme_name] = dict(roles)
    return schemes


def _validate_pairs(raw: Any) -> Tuple[RolePair, ...]:
    if not isinstance(raw, list):
        raise ThemeValidationError("pairs must be a list")
    pairs: List[RolePair] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, (list, tuple)) or len(entry) not in (2, 3):
            raise ThemeValidationError(f"pairs[{idx}] must be [foreground, background, label?]")
        if not all(isinstance(part, str) for part in entry):
            raise ThemeValidationError(f"pairs[{idx}] entries must be strings")
        fg, bg = entry[0], entry[1]
        label = entry[2] if len(entry) == 3 else f"{fg} / {bg}"
        pairs.append(RolePair(fg, bg, label))
    return tuple(pairs)
