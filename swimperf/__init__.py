"""
swimperf - swim performance normalization and prediction.

This package contains:
- core: Framework-agnostic engine (course conversion, personal bests,
  event estimates, catalog, time formatting)
- infrastructure: Performance sources
- api: Boundary schemas and the performance service
- config: Settings and logging setup
"""

__version__ = "0.1.0"
