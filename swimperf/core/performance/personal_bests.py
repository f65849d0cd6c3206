"""
Personal best detection.

Walks each event's results in date order and marks every improvement.
The comparison is strict: matching your best time again is not a new
personal best, and the record that first reached the best time keeps
the current-PB flag.
"""

import logging
import math
from collections import defaultdict
from typing import Iterable

from .models import PBAnnotation, PerformanceRecord


logger = logging.getLogger(__name__)


def group_by_event(records: Iterable[PerformanceRecord]) -> dict[str, list[PerformanceRecord]]:
    """Partition records by event type, each list sorted oldest first."""
    grouped: dict[str, list[PerformanceRecord]] = defaultdict(list)
    for record in records:
        grouped[record.event_type].append(record)

    # sort is stable: same-day results keep their input order
    return {
        event_type: sorted(event_records, key=lambda r: r.date)
        for event_type, event_records in grouped.items()
    }


def find_pbs(records: Iterable[PerformanceRecord]) -> dict[str, PBAnnotation]:
    """
    Classify every record as a historical and/or current personal best.

    Returns a mapping of record id to its flags. Every input record gets
    an entry; records that never improved on the event's best are
    ``PBAnnotation(is_pb=False, curr_pb=False)``.
    """
    records = list(records)
    annotations: dict[str, PBAnnotation] = {r.id: PBAnnotation() for r in records}

    for event_type, event_records in group_by_event(records).items():
        best_so_far = math.inf
        pb_sequence: list[PerformanceRecord] = []

        for record in event_records:
            if record.time < best_so_far:
                best_so_far = record.time
                pb_sequence.append(record)
                annotations[record.id] = PBAnnotation(is_pb=True)

        if pb_sequence:
            current = pb_sequence[-1]
            annotations[current.id] = PBAnnotation(is_pb=True, curr_pb=True)

        logger.debug(
            "Computed personal bests for event",
            extra={
                "event_type": event_type,
                "results": len(event_records),
                "improvements": len(pb_sequence),
            },
        )

    return annotations
