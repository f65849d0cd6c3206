"""
Performance service: the engine's public entry point for the app shell.

The service fetches an athlete's raw records from a PerformanceSource,
validates them at the boundary, runs the pure engine functions, and
returns view models ready for rendering. Every call recomputes from
scratch; nothing is cached between calls.
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional, Protocol

from pydantic import ValidationError

from ..config.settings import Settings, get_settings
from ..core.performance import (
    EVENT_CATALOG,
    EventEstimator,
    EventKey,
    InvalidPerformanceError,
    PerformanceError,
    PerformanceRecord,
    ResultType,
    convert,
    events_without_results,
    filter_results,
    find_pbs,
    format_time,
    predict_time,
    summarize_improvement,
)
from .schemas import (
    CatalogEventView,
    ConvertedResultView,
    CourseTimeView,
    EstimateView,
    ImprovementView,
    PerformanceRecordIn,
    PredictionView,
    ResultRow,
    ResultsView,
)


logger = logging.getLogger(__name__)


class PerformanceSource(Protocol):
    """
    Interface for the store that holds athletes' results.

    Using a Protocol here means the service doesn't know or care whether
    records come from the document store or from memory in a test.
    """

    async def fetch_performances(self, athlete_id: str) -> list[Mapping[str, Any]]:
        """Return every raw performance record for the athlete."""
        ...


class RecordNotFoundError(PerformanceError):
    """Raised when a requested record doesn't exist for the athlete."""
    pass


class PerformanceService:
    """
    Orchestrates fetching and the engine computations.

    This is a service, not a data container. It holds its dependencies
    and nothing else; selection and filter state belong to the caller.
    """

    def __init__(
        self,
        source: PerformanceSource,
        settings: Optional[Settings] = None,
    ) -> None:
        self._source = source
        self._settings = settings or get_settings()
        self._estimator = EventEstimator(exponent=self._settings.extrapolation_exponent)

    async def load_records(self, athlete_id: str) -> list[PerformanceRecord]:
        """
        Fetch and validate an athlete's records.

        Raises InvalidPerformanceError for the first record that fails
        validation; a malformed record is never silently dropped.
        """
        raw_records = await self._source.fetch_performances(athlete_id)

        records = []
        for raw in raw_records:
            try:
                records.append(PerformanceRecordIn.model_validate(raw).to_domain())
            except ValidationError as e:
                record_id = raw.get("id") if isinstance(raw, Mapping) else None
                logger.error(
                    "Invalid performance record",
                    extra={"athlete_id": athlete_id, "record_id": record_id, "error": str(e)},
                )
                raise InvalidPerformanceError(
                    f"Record {record_id!r} for athlete {athlete_id!r} is invalid: {e}"
                ) from e

        logger.debug(
            "Loaded performance records",
            extra={"athlete_id": athlete_id, "count": len(records)},
        )
        return records

    async def results_view(
        self,
        athlete_id: str,
        result_type: Optional[str] = None,
    ) -> ResultsView:
        """
        Results table for an athlete, newest first.

        PB flags are computed over the full history, so filtering to
        practice or competition results doesn't change which swims are
        personal bests.
        """
        result_type = result_type or self._settings.default_result_filter
        records = await self.load_records(athlete_id)
        annotations = find_pbs(records)
        shown = filter_results(records, result_type)

        rows = [
            ResultRow(
                id=r.id,
                date=r.date,
                result_type=r.result_type,
                event_type=r.event_type,
                time=r.time,
                time_display=format_time(r.time),
                notes=r.notes,
                is_pb=annotations[r.id].is_pb,
                curr_pb=annotations[r.id].curr_pb,
            )
            for r in shown
        ]

        return ResultsView(
            athlete_id=athlete_id,
            result_type=result_type,
            total=len(records),
            practice_count=sum(1 for r in records if r.result_type == ResultType.PRACTICE.value),
            competition_count=sum(1 for r in records if r.result_type == ResultType.COMPETITION.value),
            results=rows,
        )

    async def convert_result(self, athlete_id: str, record_id: str) -> ConvertedResultView:
        """Show one of the athlete's results in the other two courses."""
        records = await self.load_records(athlete_id)
        record = next((r for r in records if r.id == record_id), None)
        if record is None:
            raise RecordNotFoundError(f"Record {record_id!r} not found for athlete {athlete_id!r}")

        converted = convert(record)
        return ConvertedResultView(
            record_id=record.id,
            source_course=converted.source_course,
            original_time=converted.original_time,
            original_display=format_time(converted.original_time),
            convertible=converted.is_convertible,
            conversions=[
                CourseTimeView(
                    course=c.course.value,
                    label=c.label,
                    time=c.time,
                    time_display=format_time(c.time),
                )
                for c in converted.conversions
            ],
        )

    async def missing_events(self, athlete_id: str) -> list[CatalogEventView]:
        """Recognized events the athlete has no results for."""
        records = await self.load_records(athlete_id)
        missing = events_without_results(EVENT_CATALOG, records)
        return [
            CatalogEventView(
                key=key,
                label=entry.label,
                distance=entry.distance,
                stroke=entry.stroke.value,
                course=entry.course.value,
            )
            for key, entry in missing.items()
        ]

    async def estimate_event(self, athlete_id: str, event_key: str) -> EstimateView:
        """
        Estimate a time for an event.

        ``enough_data`` is False when the engine had nothing to work
        from; the UI should say so rather than show a time.
        """
        key = str(EventKey.parse(event_key))
        records = await self.load_records(athlete_id)
        estimated = self._estimator.estimate(key, records)

        entry = EVENT_CATALOG.get(key)
        if estimated is None:
            logger.info(
                "Not enough data to estimate event",
                extra={"athlete_id": athlete_id, "event_key": key},
            )

        return EstimateView(
            event_key=key,
            label=entry.label if entry else None,
            estimated_time=estimated,
            time_display=format_time(estimated) if estimated is not None else None,
            enough_data=estimated is not None,
        )

    async def improvement(self, athlete_id: str, event_type: str) -> Optional[ImprovementView]:
        """Progression summary for one event, or None if it has no results."""
        records = await self.load_records(athlete_id)
        summary = summarize_improvement(records, event_type)
        if summary is None:
            return None

        return ImprovementView(
            event_type=summary.event_type,
            result_count=summary.result_count,
            first_time=summary.first_time,
            latest_time=summary.latest_time,
            best_time=summary.best_time,
            total_improvement=summary.total_improvement,
            total_percent=summary.total_percent,
            improvement_to_best=summary.improvement_to_best,
            percent_to_best=summary.percent_to_best,
        )

    async def predict_event(
        self,
        athlete_id: str,
        event_type: str,
        on_date: date,
    ) -> PredictionView:
        """
        Predict the athlete's time for an event they've swum, on a
        future date such as an upcoming meet.

        Needs at least two results for the event; with fewer,
        ``enough_data`` is False and no time is given.
        """
        records = await self.load_records(athlete_id)
        predicted = predict_time(records, event_type, on_date)
        if predicted is None:
            logger.info(
                "Not enough data to predict event",
                extra={"athlete_id": athlete_id, "event_type": event_type},
            )

        entry = EVENT_CATALOG.get(event_type)
        return PredictionView(
            event_type=event_type,
            label=entry.label if entry else None,
            on_date=on_date,
            predicted_time=predicted,
            time_display=format_time(predicted) if predicted is not None else None,
            enough_data=predicted is not None,
        )
