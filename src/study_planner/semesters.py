"""Semester arithmetic: stepping and ranges over (year, offering) pairs."""

from collections.abc import Iterator

from .exceptions import InvalidSemesterError
from .models import Offering, Semester


def next_semester(semester: Semester) -> Semester:
    """Get the semester immediately after the given one.

    Summer rolls over into Semester 1 of the following year.
    """
    if semester.offering == Offering.SEMESTER_1:
        return Semester(semester.year, Offering.SEMESTER_2)
    if semester.offering == Offering.SEMESTER_2:
        return Semester(semester.year, Offering.SUMMER)
    return Semester(semester.year + 1, Offering.SEMESTER_1)


def previous_semester(semester: Semester) -> Semester:
    """Get the semester immediately before the given one."""
    if semester.offering == Offering.SEMESTER_2:
        return Semester(semester.year, Offering.SEMESTER_1)
    if semester.offering == Offering.SUMMER:
        return Semester(semester.year, Offering.SEMESTER_2)
    return Semester(semester.year - 1, Offering.SUMMER)


class SemesterRange:
    """Consecutive semesters from first to last, both inclusive.

    Iteration is lazy and can be restarted; the range is empty when
    first comes after last.
    """

    def __init__(self, first: Semester, last: Semester):
        self.first = first
        self.last = last

    def __iter__(self) -> Iterator[Semester]:
        current = self.first
        while current <= self.last:
            yield current
            current = next_semester(current)

    def __contains__(self, semester: object) -> bool:
        if not isinstance(semester, Semester):
            return False
        return self.first <= semester <= self.last

    def __len__(self) -> int:
        if self.first > self.last:
            return 0
        steps = (self.last.year - self.first.year) * len(Offering)
        return steps + self.last.offering.ordinal - self.first.offering.ordinal + 1

    def __repr__(self) -> str:
        return f"SemesterRange({self.first}, {self.last})"


def semester_range(first: Semester, last: Semester) -> SemesterRange:
    """Get the semesters from first to last inclusive."""
    return SemesterRange(first, last)


def parse_semester(text: str) -> Semester:
    """Parse semester text such as '2021/1', '2021/2' or '2021/S'."""
    year, sep, offering = str(text).strip().partition("/")
    if not sep:
        raise InvalidSemesterError(text)
    try:
        return Semester(int(year), Offering(offering.strip().upper()))
    except ValueError:
        raise InvalidSemesterError(text) from None
