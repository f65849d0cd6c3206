"""
Infrastructure layer - collaborator integrations.

- memory: in-memory performance source for development and tests

Production shells provide their own PerformanceSource backed by the
document store.
"""

from .memory import InMemoryPerformanceSource

__all__ = ["InMemoryPerformanceSource"]
