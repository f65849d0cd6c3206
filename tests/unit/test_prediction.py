"""
Unit tests for exponential-plateau time prediction.
"""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from swimperf.core.performance.prediction import MIN_DECAY_RATE, PLATEAU_FACTOR, predict_time


# make_record counts its day offsets from the same start
SEASON_START = date(2024, 9, 1)


def _day(offset: int) -> date:
    return SEASON_START + timedelta(days=offset)


class TestPredictTime:
    """Tests for predicting an event's time on a given date."""

    # ------------------------------------------------------------------
    # Not enough data
    # ------------------------------------------------------------------

    def test_no_results(self):
        assert predict_time([], "100-fr-scy", _day(30)) is None

    def test_single_result(self, make_record):
        records = [make_record(time=60.0, day=0)]

        assert predict_time(records, "100-fr-scy", _day(30)) is None

    def test_other_events_do_not_count(self, make_record):
        records = [
            make_record(time=60.0, day=0),
            make_record(course="scm", time=58.0, day=5),
        ]

        assert predict_time(records, "100-fr-scy", _day(30)) is None

    # ------------------------------------------------------------------
    # Curve shape
    # ------------------------------------------------------------------

    def test_passes_through_latest_result(self, make_record):
        records = [
            make_record(time=90.0, day=10),
            make_record(time=100.0, day=0),
        ]

        assert predict_time(records, "100-fr-scy", _day(10)) == pytest.approx(90.0)

    def test_levels_off_at_plateau(self, make_record):
        records = [
            make_record(time=100.0, day=0),
            make_record(time=90.0, day=10),
        ]

        predicted = predict_time(records, "100-fr-scy", _day(10_000))

        assert predicted == pytest.approx(90.0 * PLATEAU_FACTOR)

    def test_between_latest_and_plateau(self, make_record):
        records = [
            make_record(time=100.0, day=0),
            make_record(time=90.0, day=10),
        ]

        predicted = predict_time(records, "100-fr-scy", _day(30))

        assert 90.0 * PLATEAU_FACTOR < predicted < 90.0

    def test_never_below_plateau(self, make_record):
        # slower than the first result: the raw curve dips under the floor
        records = [
            make_record(time=80.0, day=0),
            make_record(time=100.0, day=10),
        ]

        assert predict_time(records, "100-fr-scy", _day(20)) == pytest.approx(97.0)

    def test_decay_rate_floor_without_improvement(self, make_record):
        records = [
            make_record(time=100.0, day=0),
            make_record(time=100.0, day=10),
        ]

        predicted = predict_time(records, "100-fr-scy", _day(1000))

        assert predicted == pytest.approx(97.0 + 3.0 * math.exp(-MIN_DECAY_RATE * 1000))

    def test_same_day_results_use_one_day_span(self, make_record):
        records = [
            make_record(time=100.0, day=0),
            make_record(time=90.0, day=0),
        ]

        assert predict_time(records, "100-fr-scy", _day(1)) == pytest.approx(90.0)

    def test_date_before_first_result(self, make_record):
        records = [
            make_record(time=100.0, day=5),
            make_record(time=90.0, day=15),
        ]

        assert predict_time(records, "100-fr-scy", _day(0)) == pytest.approx(100.0)

    def test_accepts_aware_datetime(self, make_record):
        records = [
            make_record(time=100.0, day=0),
            make_record(time=90.0, day=10),
        ]
        meet = datetime(2024, 9, 11, tzinfo=timezone.utc)

        assert predict_time(records, "100-fr-scy", meet) == pytest.approx(90.0)
