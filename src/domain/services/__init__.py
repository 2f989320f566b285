"""Domain services package."""

from .health_rollup import rollup, worst

__all__ = ["rollup", "worst"]
