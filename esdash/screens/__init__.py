"""Screens for esdash."""

from esdash.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
