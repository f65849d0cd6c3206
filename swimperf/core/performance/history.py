"""
Result history views: filtering an athlete's results by where they were
swum, and summarizing how an event's times have moved over a season.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .models import PerformanceRecord, ResultType
from .personal_bests import group_by_event


RESULT_FILTERS = ("all", ResultType.PRACTICE.value, ResultType.COMPETITION.value)


def filter_results(
    records: Iterable[PerformanceRecord],
    result_type: str = "all",
) -> list[PerformanceRecord]:
    """Results of the given type (or all of them), newest first."""
    if result_type not in RESULT_FILTERS:
        raise ValueError(
            f"Unknown result filter {result_type!r}, expected one of {', '.join(RESULT_FILTERS)}"
        )

    selected = [
        r for r in records
        if result_type == "all" or r.result_type == result_type
    ]
    return sorted(selected, key=lambda r: r.date, reverse=True)


@dataclass(frozen=True)
class ImprovementSummary:
    """How an event's times changed from the first result to now."""
    event_type: str
    result_count: int
    first_time: float
    latest_time: float
    best_time: float

    @property
    def total_improvement(self) -> float:
        """Seconds dropped from the first result to the latest one."""
        return self.first_time - self.latest_time

    @property
    def total_percent(self) -> float:
        if self.first_time == 0:
            return 0.0
        return self.total_improvement / self.first_time * 100

    @property
    def improvement_to_best(self) -> float:
        return self.first_time - self.best_time

    @property
    def percent_to_best(self) -> float:
        if self.first_time == 0:
            return 0.0
        return self.improvement_to_best / self.first_time * 100


def summarize_improvement(
    records: Iterable[PerformanceRecord],
    event_type: str,
) -> Optional[ImprovementSummary]:
    """Summarize one event's progression, or None if it has no results."""
    event_records = group_by_event(
        r for r in records if r.event_type == event_type
    ).get(event_type)
    if not event_records:
        return None

    return ImprovementSummary(
        event_type=event_type,
        result_count=len(event_records),
        first_time=event_records[0].time,
        latest_time=event_records[-1].time,
        best_time=min(r.time for r in event_records),
    )
