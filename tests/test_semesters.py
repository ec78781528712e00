"""Tests for semester arithmetic."""

import pytest

from study_planner.exceptions import InvalidSemesterError
from study_planner.models import Offering, Semester
from study_planner.semesters import (
    SemesterRange,
    next_semester,
    parse_semester,
    previous_semester,
    semester_range,
)

ALL_OFFERINGS = [Offering.SEMESTER_1, Offering.SEMESTER_2, Offering.SUMMER]


class TestStepping:
    """Tests for next_semester and previous_semester."""

    def test_semester_1_to_semester_2(self):
        assert next_semester(Semester(2021, Offering.SEMESTER_1)) == Semester(2021, Offering.SEMESTER_2)

    def test_semester_2_to_summer(self):
        assert next_semester(Semester(2021, Offering.SEMESTER_2)) == Semester(2021, Offering.SUMMER)

    def test_summer_rolls_into_next_year(self):
        assert next_semester(Semester(2021, Offering.SUMMER)) == Semester(2022, Offering.SEMESTER_1)

    def test_previous_of_semester_1_is_last_summer(self):
        assert previous_semester(Semester(2022, Offering.SEMESTER_1)) == Semester(2021, Offering.SUMMER)

    @pytest.mark.parametrize("offering", ALL_OFFERINGS)
    @pytest.mark.parametrize("year", [1999, 2020, 2021])
    def test_round_trip(self, year, offering):
        semester = Semester(year, offering)
        assert previous_semester(next_semester(semester)) == semester
        assert next_semester(previous_semester(semester)) == semester

    @pytest.mark.parametrize("offering", ALL_OFFERINGS)
    def test_next_is_always_later(self, offering):
        semester = Semester(2021, offering)
        assert next_semester(semester) > semester
        assert previous_semester(semester) < semester


class TestSemesterRange:
    """Tests for semester_range."""

    def test_inclusive_range(self):
        result = list(semester_range(parse_semester("2020/2"), parse_semester("2021/2")))
        assert result == [
            parse_semester("2020/2"),
            parse_semester("2020/S"),
            parse_semester("2021/1"),
            parse_semester("2021/2"),
        ]

    def test_single_semester(self):
        semester = parse_semester("2021/S")
        assert list(semester_range(semester, semester)) == [semester]

    def test_empty_when_first_after_last(self):
        assert list(semester_range(parse_semester("2022/1"), parse_semester("2021/2"))) == []

    def test_restartable(self):
        semesters = semester_range(parse_semester("2021/1"), parse_semester("2022/1"))
        assert list(semesters) == list(semesters)

    def test_length_matches_steps(self):
        first = parse_semester("2020/2")
        last = parse_semester("2023/1")
        steps = 0
        current = first
        while current != last:
            current = next_semester(current)
            steps += 1
        semesters = semester_range(first, last)
        assert len(semesters) == steps + 1
        assert len(list(semesters)) == steps + 1

    def test_empty_length(self):
        assert len(SemesterRange(parse_semester("2022/1"), parse_semester("2021/1"))) == 0

    def test_contains(self):
        semesters = semester_range(parse_semester("2021/1"), parse_semester("2021/S"))
        assert parse_semester("2021/2") in semesters
        assert parse_semester("2022/1") not in semesters
        assert "2021/2" not in semesters


class TestParseSemester:
    """Tests for parse_semester."""

    def test_parses_offerings(self):
        assert parse_semester("2021/1") == Semester(2021, Offering.SEMESTER_1)
        assert parse_semester("2021/2") == Semester(2021, Offering.SEMESTER_2)
        assert parse_semester("2021/S") == Semester(2021, Offering.SUMMER)

    def test_lowercase_summer(self):
        assert parse_semester(" 2021/s ") == Semester(2021, Offering.SUMMER)

    @pytest.mark.parametrize("text", ["2021", "2021/3", "abcd/1", "/1", ""])
    def test_invalid(self, text):
        with pytest.raises(InvalidSemesterError):
            parse_semester(text)
