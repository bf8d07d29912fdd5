"""Dashboard screen module exports."""

from esdash.screens.dashboard.dashboard_screen import DashboardScreen
from esdash.screens.dashboard.presenter import DashboardPresenter, FetchCompleted

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "FetchCompleted",
]
