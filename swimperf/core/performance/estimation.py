"""
Time estimates for events an athlete hasn't swum.

Two strategies, tried in order:

1. Same distance, different course: convert the athlete's results at the
   target distance into the target course and take the fastest.
2. Different distance: take the result whose distance is closest to the
   target, convert it to the target course, and scale it with a power
   law. Pace slows as races get longer, so the exponent is a little
   above 1.

Known issue, kept pending product review: in the same-distance strategy
the original results screen compared the second converted time against
the course label instead of a time, so that conversion never won. We
reproduce that here: only the primary conversion slot is considered.
For example an LCM estimate from SCY or SCM results at the same distance
finds no candidate and returns None.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .conversion import convert
from .models import EventKey, PerformanceRecord


logger = logging.getLogger(__name__)


DEFAULT_EXTRAPOLATION_EXPONENT = 1.06


@dataclass(frozen=True)
class _Candidate:
    distance: float
    time: float


def _same_distance_estimate(
    records: list[PerformanceRecord],
    target: EventKey,
) -> Optional[float]:
    best: Optional[float] = None
    for record in records:
        primary = convert(record).primary
        # secondary slot intentionally skipped, see module docstring
        if primary is None or primary.course.value != target.course:
            continue
        if best is None or primary.time < best:
            best = primary.time
    return best


def _extrapolated_estimate(
    records: list[PerformanceRecord],
    target: EventKey,
    exponent: float,
) -> float:
    candidates = []
    for record in records:
        converted_time = convert(record).time_for(target.course)
        candidates.append(_Candidate(
            distance=record.distance,
            time=record.time if converted_time is None else converted_time,
        ))

    nearest = min(
        candidates,
        key=lambda c: (abs(c.distance - target.distance), c.time),
    )

    return nearest.time * (target.distance / nearest.distance) ** exponent


def estimate(
    event_key: str,
    records: Iterable[PerformanceRecord],
    exponent: float = DEFAULT_EXTRAPOLATION_EXPONENT,
) -> Optional[float]:
    """
    Estimate a time in seconds for ``event_key`` from other results.

    Returns None when the athlete has no results for the stroke, or none
    that can be converted into the target course. Callers should show
    None as "not enough data", never as a zero time.

    Raises InvalidEventKeyError if ``event_key`` is malformed.
    """
    target = EventKey.parse(event_key)

    same_stroke = [r for r in records if r.stroke == target.stroke]
    if not same_stroke:
        logger.debug(
            "No results for stroke, cannot estimate",
            extra={"event_key": event_key, "stroke": target.stroke},
        )
        return None

    same_distance = [r for r in same_stroke if r.distance == target.distance]
    other_distances = [r for r in same_stroke if r.distance != target.distance]

    if same_distance:
        result = _same_distance_estimate(same_distance, target)
        strategy = "same_distance"
    else:
        result = _extrapolated_estimate(other_distances, target, exponent)
        strategy = "extrapolated"

    logger.debug(
        "Estimated event time",
        extra={"event_key": event_key, "strategy": strategy, "estimate": result},
    )

    return result


class EventEstimator:
    """
    Estimator bound to a configured extrapolation exponent.

    Stateless beyond the exponent; the same instance can be reused for
    any athlete's records.
    """

    def __init__(self, exponent: float = DEFAULT_EXTRAPOLATION_EXPONENT) -> None:
        if exponent <= 0:
            raise ValueError("Extrapolation exponent must be positive")
        self.exponent = exponent

    def estimate(
        self,
        event_key: str,
        records: Iterable[PerformanceRecord],
    ) -> Optional[float]:
        return estimate(event_key, records, exponent=self.exponent)
