"""
Tests for merging per-course grids and detecting collisions.
"""

import itertools

from app.utils.conflict import ConflictCell, Conflicted, Merged, detect_conflicts
from app.utils.schedule_grid import build_course_grid
from tests.conftest import make_course


def entries_for(*courses):
    return [(c, build_course_grid(c)) for c in courses]


class TestMerged:
    def test_disjoint_days(self):
        a = make_course("A", {"Monday": [("8:00", "8:55")]})
        b = make_course("B", {"Tuesday": [("8:00", "8:55")]})

        report = detect_conflicts(entries_for(a, b))

        assert isinstance(report, Merged)
        assert report.status == "merged"
        assert report.grid == {"Monday": {8: "A"}, "Tuesday": {8: "B"}}

    def test_same_day_back_to_back_hours(self):
        a = make_course("A", {"Monday": [("8:00", "9:55")]})
        b = make_course("B", {"Monday": [("10:00", "11:30")]})

        report = detect_conflicts(entries_for(a, b))

        assert isinstance(report, Merged)
        assert report.grid == {"Monday": {8: "A", 9: "A", 10: "B", 11: "B"}}

    def test_every_bucket_present_once(self):
        a = make_course("A", {"Monday": [("7:00", "8:00")], "Friday": [("15:00", "16:10")]})
        b = make_course("B", {"Monday": [("9:00", "9:10")], "Wednesday": [("7:00", "18:59")]})
        c = make_course("C", {"Sunday": [("12:00", "12:00")]})

        report = detect_conflicts(entries_for(a, b, c))

        assert isinstance(report, Merged)
        owned = [(day, h, owner) for day, cells in report.grid.items() for h, owner in cells.items()]
        expected = [
            (day, h, course.course_number)
            for course in (a, b, c)
            for day, hours in build_course_grid(course).items()
            for h in hours
        ]
        assert sorted(owned) == sorted(expected)

    def test_same_course_twice_is_not_a_conflict(self):
        a = make_course("A", {"Monday": [("8:00", "8:55")]})
        report = detect_conflicts(entries_for(a, a))
        assert isinstance(report, Merged)

    def test_no_entries_gives_empty_grid(self):
        assert detect_conflicts([]) == Merged(grid={})


class TestConflicted:
    def test_overlapping_hour(self):
        a = make_course("A", {"Monday": [("12:00", "13:55")]})
        b = make_course("B", {"Monday": [("13:00", "13:30")]})

        report = detect_conflicts(entries_for(a, b))

        assert isinstance(report, Conflicted)
        assert report.status == "conflicted"
        assert report.conflicts == [ConflictCell("Monday", 13, "A", "B")]
        assert report.conflicting_courses() == ["A", "B"]

    def test_keeps_unmodified_per_course_grids(self):
        a = make_course("A", {"Monday": [("12:00", "13:55")]})
        b = make_course("B", {"Monday": [("13:00", "13:30")], "Friday": [("9:00", "9:30")]})
        entries = entries_for(a, b)

        report = detect_conflicts(entries)

        assert report.entries == entries
        assert report.entries[1][1] == {"Monday": (13,), "Friday": (9,)}

    def test_scan_continues_after_first_conflict(self):
        a = make_course("A", {"Monday": [("8:00", "9:55")], "Thursday": [("15:00", "15:30")]})
        b = make_course("B", {"Monday": [("9:00", "9:30")]})
        c = make_course("C", {"Monday": [("8:00", "8:30")], "Thursday": [("15:00", "16:00")]})

        report = detect_conflicts(entries_for(a, b, c))

        assert isinstance(report, Conflicted)
        assert report.conflicts == [
            ConflictCell("Monday", 9, "A", "B"),
            ConflictCell("Monday", 8, "A", "C"),
            ConflictCell("Thursday", 15, "A", "C"),
        ]

    def test_earlier_owner_is_never_overwritten(self):
        a = make_course("A", {"Monday": [("8:00", "8:55")]})
        b = make_course("B", {"Monday": [("8:00", "8:55")]})
        c = make_course("C", {"Monday": [("8:00", "8:55")]})

        report = detect_conflicts(entries_for(a, b, c))

        assert [cell.owner for cell in report.conflicts] == ["A", "A"]

    def test_collisions_outside_display_window_count(self):
        a = make_course("A", {"Saturday": [("20:00", "21:30")]})
        b = make_course("B", {"Saturday": [("21:00", "22:00")]})

        report = detect_conflicts(entries_for(a, b))

        assert isinstance(report, Conflicted)
        assert report.conflicts == [ConflictCell("Saturday", 21, "A", "B")]
        assert [grid for _, grid in report.entries] == [{}, {}]

    def test_idempotent(self):
        a = make_course("A", {"Monday": [("12:00", "13:55")]})
        b = make_course("B", {"Monday": [("13:00", "13:30")]})
        entries = entries_for(a, b)

        assert detect_conflicts(entries) == detect_conflicts(entries)


class TestOrdering:
    def test_permutations_keep_classification(self):
        courses = [
            make_course("A", {"Monday": [("12:00", "13:55")]}),
            make_course("B", {"Monday": [("13:00", "13:30")]}),
            make_course("C", {"Tuesday": [("8:00", "8:55")]}),
        ]
        statuses = {detect_conflicts(entries_for(*p)).status for p in itertools.permutations(courses)}
        assert statuses == {"conflicted"}

        disjoint = [courses[0], courses[2]]
        statuses = {detect_conflicts(entries_for(*p)).status for p in itertools.permutations(disjoint)}
        assert statuses == {"merged"}

    def test_permutation_changes_only_listing_order(self):
        a = make_course("A", {"Monday": [("12:00", "13:55")]})
        b = make_course("B", {"Monday": [("13:00", "13:30")]})

        forward = detect_conflicts(entries_for(a, b))
        backward = detect_conflicts(entries_for(b, a))

        assert [c.course_number for c, _ in forward.entries] == ["A", "B"]
        assert [c.course_number for c, _ in backward.entries] == ["B", "A"]
        assert backward.conflicts == [ConflictCell("Monday", 13, "B", "A")]
