"""
Public interface for the application shell.

The service composes the engine over a performance source; the schemas
define what goes in and what comes out.
"""

from .service import PerformanceService, PerformanceSource, RecordNotFoundError

__all__ = ["PerformanceService", "PerformanceSource", "RecordNotFoundError"]
