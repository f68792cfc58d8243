"""Design package.

Contrast evaluation, the hex luminance adapter, theme role tables and the
batch pair audit. Nothing here depends on Qt.
"""

from .evaluator import (  # noqa: F401
    ContrastError,
    ContrastResult,
    LuminanceDomainError,
    compute_ratio,
    evaluate,
    is_accessible,
)
from .luminance import ColorFormatError, contrast_ratio, relative_luminance  # noqa: F401
from .theme_pairs import (  # noqa: F401
    DEFAULT_ROLE_PAIRS,
    RolePair,
    ThemeColors,
    ThemeValidationError,
    load_theme,
)
from .pair_audit import AuditReport, PairSample, PairVerdict, analyze_pairs  # noqa: F401
