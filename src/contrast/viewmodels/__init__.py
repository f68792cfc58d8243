"""Headless view models for the contrast dashboard."""

from .contrast_dashboard_viewmodel import (  # noqa: F401
    ContrastDashboardViewModel,
    DashboardRow,
    format_verdict,
    label_color,
)
