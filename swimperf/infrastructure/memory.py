"""
In-memory performance source.

Stands in for the document store during local development and tests.
Records are kept as the same raw mappings the store returns, so they go
through the same boundary validation as production data.
"""

import copy
import logging
from typing import Any, Iterable, Mapping, Optional


logger = logging.getLogger(__name__)


class InMemoryPerformanceSource:
    """
    Performance records held in a dictionary keyed by athlete id.

    Not suitable for production, but enough to exercise the whole
    service without a database.
    """

    def __init__(self, records: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None) -> None:
        self._records: dict[str, list[dict[str, Any]]] = {}
        for athlete_id, athlete_records in (records or {}).items():
            for raw in athlete_records:
                self.add(athlete_id, raw)
        logger.info(
            "Initialized in-memory performance source",
            extra={"athletes": len(self._records)},
        )

    def add(self, athlete_id: str, raw: Mapping[str, Any]) -> None:
        """Store one raw record for an athlete."""
        self._records.setdefault(athlete_id, []).append(dict(raw))

    async def fetch_performances(self, athlete_id: str) -> list[dict[str, Any]]:
        """Return copies of the athlete's raw records; unknown athletes have none."""
        records = self._records.get(athlete_id, [])

        logger.debug(
            "Fetched performances from memory",
            extra={"athlete_id": athlete_id, "count": len(records)},
        )

        # copies, so callers can't mutate what's stored
        return copy.deepcopy(records)
