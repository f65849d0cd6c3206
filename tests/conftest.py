"""Shared test fixtures and sample performance documents."""

import copy
from datetime import date, timedelta
from typing import Callable, Optional

import pytest

from swimperf.core.performance.models import PerformanceRecord


SEASON_START = date(2024, 9, 1)


SAMPLE_RAW_RECORDS = [
    {
        "id": "r1",
        "userId": "athlete-1",
        "athleteName": "Sam Rivera",
        "eventType": "500-fr-scy",
        "distance": "500",
        "stroke": "fr",
        "courseType": "scy",
        "time": 300.0,
        "date": date(2024, 9, 1),
        "type": "practice",
        "notes": "First test set",
    },
    {
        "id": "r2",
        "eventType": "500-fr-scy",
        "distance": "500",
        "stroke": "fr",
        "courseType": "scy",
        "time": 290.0,
        "date": date(2024, 10, 1),
        "type": "competition",
        "notes": "",
    },
    {
        "id": "r3",
        "eventType": "100-fr-scy",
        "distance": "100",
        "stroke": "fr",
        "courseType": "scy",
        "time": 50.0,
        "date": date(2024, 9, 15),
        "type": "competition",
    },
    {
        "id": "r4",
        "eventType": "400-fr-scm",
        "distance": "400",
        "stroke": "fr",
        "courseType": "scm",
        "time": 260.0,
        "date": date(2024, 11, 2),
        "type": "practice",
    },
]


@pytest.fixture
def raw_records() -> list[dict]:
    """Raw performance documents as the store returns them."""
    return copy.deepcopy(SAMPLE_RAW_RECORDS)


@pytest.fixture
def make_record() -> Callable[..., PerformanceRecord]:
    """
    Factory for domain records.

    ``day`` is an offset from the start of the season so tests can
    express ordering without spelling out dates.
    """
    counter = {"n": 0}

    def _make(
        distance: int = 100,
        stroke: str = "fr",
        course: str = "scy",
        time: float = 60.0,
        day: int = 0,
        record_id: Optional[str] = None,
        result_type: str = "practice",
        event_type: Optional[str] = None,
    ) -> PerformanceRecord:
        counter["n"] += 1
        return PerformanceRecord(
            id=record_id or f"rec-{counter['n']}",
            event_type=event_type or f"{distance}-{stroke}-{course}",
            distance=distance,
            stroke=stroke,
            course_type=course,
            time=time,
            date=SEASON_START + timedelta(days=day),
            result_type=result_type,
        )

    return _make
