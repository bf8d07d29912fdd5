"""esdash - terminal dashboard for a search cluster."""

__version__ = "0.1.0"
