"""
The events the application recognizes, and which of them an athlete
has no results for yet.
"""

from typing import Iterable, Mapping

from .models import Course, EventCatalogEntry, PerformanceRecord, Stroke


def _entries(course: Course, freestyle: tuple[int, ...], with_strokes: bool) -> list[EventCatalogEntry]:
    entries = [EventCatalogEntry(d, Stroke.FREESTYLE, course) for d in freestyle]
    if with_strokes:
        for stroke in (Stroke.BUTTERFLY, Stroke.BACKSTROKE, Stroke.BREASTSTROKE):
            entries.extend(EventCatalogEntry(d, stroke, course) for d in (50, 100, 200))
        entries.extend(EventCatalogEntry(d, Stroke.IM, course) for d in (200, 400))
    return entries


def _build_catalog() -> dict[str, EventCatalogEntry]:
    entries = (
        _entries(Course.SCY, (50, 100, 200, 500, 1000, 1650), with_strokes=True)
        + _entries(Course.LCM, (50, 100, 200, 400, 800, 1500), with_strokes=True)
        + _entries(Course.SCM, (50, 100, 200, 400, 800, 1500), with_strokes=False)
    )
    return {entry.key: entry for entry in entries}


EVENT_CATALOG: dict[str, EventCatalogEntry] = _build_catalog()


def events_without_results(
    catalog: Mapping[str, EventCatalogEntry],
    records: Iterable[PerformanceRecord],
) -> dict[str, EventCatalogEntry]:
    """Catalog entries whose key matches no record's event type, in catalog order."""
    swum = {record.event_type for record in records}
    return {key: entry for key, entry in catalog.items() if key not in swum}
