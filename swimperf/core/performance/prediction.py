"""
Time prediction for a future date.

Fits an exponential-plateau curve to an event's history: times fall
from the first result towards a floor set a little under the latest
result, quickly at first and then levelling off. The decay rate is
chosen so the curve passes through the latest result on its date.

    floor     = latest * PLATEAU_FACTOR
    k         = -ln(1 - (first - latest) / (first - floor)) / days_swum
    predicted = floor + (first - floor) * exp(-k * days_since_first)

The prediction never goes below the floor.
"""

import logging
import math
from datetime import date, datetime, time as clock_time, timezone
from typing import Iterable, Optional, Union

from .models import PerformanceRecord
from .personal_bests import group_by_event


logger = logging.getLogger(__name__)


# Fraction of the latest time the curve levels off at
PLATEAU_FACTOR = 0.97

# Lower bound on the decay rate, per day
MIN_DECAY_RATE = 0.0001

# Lower bound on the share of the drop still to come, keeps the log finite
MIN_REMAINING_FRACTION = 0.01

SECONDS_PER_DAY = 86400


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime.combine(value, clock_time.min)


def _days_between(start: Union[date, datetime], end: Union[date, datetime]) -> float:
    return (_as_datetime(end) - _as_datetime(start)).total_seconds() / SECONDS_PER_DAY


def predict_time(
    records: Iterable[PerformanceRecord],
    event_type: str,
    on_date: Union[date, datetime],
) -> Optional[float]:
    """
    Predict the event's time on ``on_date``.

    Returns None when the event has fewer than two results, since one
    point doesn't give a trend.
    """
    history = group_by_event(
        r for r in records if r.event_type == event_type
    ).get(event_type, [])
    if len(history) < 2:
        logger.debug(
            "Not enough results to predict",
            extra={"event_type": event_type, "count": len(history)},
        )
        return None

    first, latest = history[0], history[-1]
    start_time = first.time
    floor = latest.time * PLATEAU_FACTOR

    headroom = start_time - floor
    improvement_fraction = (start_time - latest.time) / headroom if headroom != 0 else 0.0
    remaining = max(MIN_REMAINING_FRACTION, 1 - improvement_fraction)
    days_swum = max(1.0, _days_between(first.date, latest.date))
    decay_rate = max(MIN_DECAY_RATE, -math.log(remaining) / days_swum)

    # the curve only runs forward; earlier dates get the first result's time
    days_ahead = max(0.0, _days_between(first.date, on_date))
    predicted = floor + headroom * math.exp(-decay_rate * days_ahead)

    logger.debug(
        "Predicted event time",
        extra={
            "event_type": event_type,
            "decay_rate": decay_rate,
            "floor": floor,
            "predicted": predicted,
        },
    )
    return max(predicted, floor)
