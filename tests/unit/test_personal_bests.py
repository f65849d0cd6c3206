"""
Unit tests for personal best detection.
"""

from swimperf.core.performance.models import PBAnnotation
from swimperf.core.performance.personal_bests import find_pbs, group_by_event


class TestFindPBs:
    """Tests for the date-ordered PB walk."""

    def test_improvement_moves_current_pb(self, make_record):
        first = make_record(distance=500, time=300, day=1)
        second = make_record(distance=500, time=290, day=2)

        pbs = find_pbs([first, second])

        assert pbs[first.id] == PBAnnotation(is_pb=True, curr_pb=False)
        assert pbs[second.id] == PBAnnotation(is_pb=True, curr_pb=True)

    def test_equal_times_are_not_new_pbs(self, make_record):
        """Ties don't count: the first swim to reach the time keeps it."""
        records = [make_record(time=300, day=d) for d in (1, 2, 3)]

        pbs = find_pbs(records)

        assert pbs[records[0].id] == PBAnnotation(is_pb=True, curr_pb=True)
        assert pbs[records[1].id] == PBAnnotation()
        assert pbs[records[2].id] == PBAnnotation()

    def test_slower_swims_are_not_pbs(self, make_record):
        fast = make_record(time=58.0, day=1)
        slow = make_record(time=61.0, day=2)

        pbs = find_pbs([fast, slow])

        assert pbs[fast.id] == PBAnnotation(is_pb=True, curr_pb=True)
        assert pbs[slow.id] == PBAnnotation(is_pb=False, curr_pb=False)

    def test_walk_uses_date_order_not_input_order(self, make_record):
        later = make_record(time=59.0, day=10)
        earlier = make_record(time=60.0, day=1)

        pbs = find_pbs([later, earlier])

        assert pbs[earlier.id] == PBAnnotation(is_pb=True, curr_pb=False)
        assert pbs[later.id] == PBAnnotation(is_pb=True, curr_pb=True)

    def test_events_are_tracked_independently(self, make_record):
        free = make_record(distance=100, stroke="fr", time=55.0, day=1)
        back = make_record(distance=100, stroke="bk", time=65.0, day=2)
        free_lcm = make_record(distance=100, stroke="fr", course="lcm", time=60.0, day=3)

        pbs = find_pbs([free, back, free_lcm])

        assert all(a == PBAnnotation(is_pb=True, curr_pb=True) for a in pbs.values())

    def test_every_record_gets_an_annotation(self, make_record):
        records = [make_record(time=t, day=d) for d, t in enumerate([62, 61, 63, 60, 60.5])]

        pbs = find_pbs(records)

        assert set(pbs) == {r.id for r in records}
        assert [pbs[r.id].is_pb for r in records] == [True, True, False, True, False]
        assert [pbs[r.id].curr_pb for r in records] == [False, False, False, True, False]

    def test_empty_history(self):
        assert find_pbs([]) == {}

    def test_accepts_any_iterable(self, make_record):
        records = [make_record(time=60.0, day=1)]
        assert find_pbs(iter(records)) == {records[0].id: PBAnnotation(True, True)}


class TestGroupByEvent:
    """Tests for event partitioning."""

    def test_groups_and_sorts_oldest_first(self, make_record):
        b = make_record(distance=200, day=5)
        a1 = make_record(distance=100, day=3)
        a0 = make_record(distance=100, day=1)

        grouped = group_by_event([b, a1, a0])

        assert grouped == {"200-fr-scy": [b], "100-fr-scy": [a0, a1]}

    def test_same_day_keeps_input_order(self, make_record):
        first = make_record(time=60.0, day=1)
        second = make_record(time=60.0, day=1)

        assert group_by_event([first, second])["100-fr-scy"] == [first, second]
