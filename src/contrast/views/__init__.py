"""Qt view layer.

Exports:
 - ContrastDashboardPanel
"""

from .contrast_dashboard_panel import ContrastDashboardPanel  # noqa: F401
