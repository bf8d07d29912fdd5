"""Data models for esdash."""
