"""Allow running esdash with ``python -m esdash``."""

from esdash.main import run

run()
