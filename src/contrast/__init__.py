"""Theme contrast dashboard.

WCAG contrast-ratio evaluation for pairs of theme color roles, plus a
headless dashboard view model and a Qt panel that renders it.
"""

from .design.evaluator import (  # noqa: F401
    ContrastResult,
    compute_ratio,
    evaluate,
    is_accessible,
)

__version__ = "0.1.0"
