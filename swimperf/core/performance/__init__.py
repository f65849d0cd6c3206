"""
Swim performance engine.

Course conversion, personal best detection, event estimates, time
predictions and the event catalog, all pure functions over an athlete's
list of results.
"""

from .catalog import EVENT_CATALOG, events_without_results
from .conversion import convert
from .estimation import DEFAULT_EXTRAPOLATION_EXPONENT, EventEstimator, estimate
from .formatting import format_time, parse_time
from .history import ImprovementSummary, filter_results, summarize_improvement
from .models import (
    ConvertedResult,
    Course,
    CourseTime,
    EventCatalogEntry,
    EventKey,
    InvalidEventKeyError,
    InvalidPerformanceError,
    PBAnnotation,
    PerformanceError,
    PerformanceRecord,
    ResultType,
    Stroke,
)
from .personal_bests import find_pbs
from .prediction import PLATEAU_FACTOR, predict_time

__all__ = [
    "ConvertedResult",
    "Course",
    "CourseTime",
    "DEFAULT_EXTRAPOLATION_EXPONENT",
    "EVENT_CATALOG",
    "EventCatalogEntry",
    "EventEstimator",
    "EventKey",
    "ImprovementSummary",
    "InvalidEventKeyError",
    "InvalidPerformanceError",
    "PBAnnotation",
    "PLATEAU_FACTOR",
    "PerformanceError",
    "PerformanceRecord",
    "ResultType",
    "Stroke",
    "convert",
    "estimate",
    "events_without_results",
    "filter_results",
    "find_pbs",
    "format_time",
    "parse_time",
    "predict_time",
    "summarize_improvement",
]
