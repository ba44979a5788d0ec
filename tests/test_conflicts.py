"""
Tests for conflict grouping.
"""

from week_peek.conflicts import group_conflicts, group_events_by_day, intervals_disjoint
from week_peek.time_only import DayOfWeek


def ids(groups):
    return [[e.id for e in group] for group in groups]


class TestGroupConflicts:

    def test_empty_day(self):
        assert group_conflicts([]) == []

    def test_transitive_overlap_forms_one_group(self, make_event):
        """A overlaps B, B overlaps C, A and C are apart: still one group."""
        a = make_event("a", "09:00", "10:00")
        b = make_event("b", "09:30", "11:00")
        c = make_event("c", "10:30", "12:00")
        assert intervals_disjoint(a, c)
        assert ids(group_conflicts([c, a, b])) == [["a", "b", "c"]]

    def test_touching_events_are_separate(self, make_event):
        a = make_event("a", "09:00", "10:00")
        b = make_event("b", "10:00", "11:00")
        assert ids(group_conflicts([a, b])) == [["a"], ["b"]]

    def test_groups_follow_start_order(self, make_event):
        late = make_event("late", "14:00", "15:00")
        early = make_event("early", "09:00", "10:00")
        overlap = make_event("overlap", "09:30", "09:45")
        assert ids(group_conflicts([late, early, overlap])) == [["early", "overlap"], ["late"]]

    def test_equal_starts_keep_input_order(self, make_event):
        first = make_event("first", "09:00", "10:00")
        second = make_event("second", "09:00", "09:30")
        assert ids(group_conflicts([first, second])) == [["first", "second"]]
        assert ids(group_conflicts([second, first])) == [["second", "first"]]

    def test_long_event_bridges_later_events(self, make_event):
        long = make_event("long", "09:00", "13:00")
        x = make_event("x", "10:00", "10:30")
        y = make_event("y", "12:00", "12:30")
        assert ids(group_conflicts([y, x, long])) == [["long", "x", "y"]]

    def test_zero_duration_event_inside_another(self, make_event):
        outer = make_event("outer", "09:00", "11:00")
        point = make_event("point", "10:00", "10:00")
        assert ids(group_conflicts([outer, point])) == [["outer", "point"]]

    def test_input_not_modified(self, make_event):
        events = [make_event("b", "10:00", "11:00"), make_event("a", "09:00", "10:30")]
        snapshot = list(events)
        group_conflicts(events)
        assert events == snapshot


class TestGroupEventsByDay:

    def test_buckets_in_day_order(self, make_event):
        mon = make_event("m", "09:00", "10:00", day=DayOfWeek.MONDAY)
        wed = make_event("w", "09:00", "10:00", day=DayOfWeek.WEDNESDAY)
        sat = make_event("s", "09:00", "10:00", day=DayOfWeek.SATURDAY)
        by_day = group_events_by_day([mon, wed, sat], [DayOfWeek.WEDNESDAY, DayOfWeek.MONDAY, DayOfWeek.TUESDAY])
        assert list(by_day) == [DayOfWeek.WEDNESDAY, DayOfWeek.MONDAY, DayOfWeek.TUESDAY]
        assert by_day[DayOfWeek.WEDNESDAY] == [wed]
        assert by_day[DayOfWeek.MONDAY] == [mon]
        assert by_day[DayOfWeek.TUESDAY] == []
        assert DayOfWeek.SATURDAY not in by_day
