"""Data models for study plan scheduling."""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, Union


class Offering(str, Enum):
    """Teaching period within an academic year.

    Declaration order is the order within a year and the rollover order:
    Semester 1, then Semester 2, then Summer, then Semester 1 of next year.
    """

    SEMESTER_1 = "1"
    SEMESTER_2 = "2"
    SUMMER = "S"

    @property
    def ordinal(self) -> int:
        """Position of the offering within the year (0-based)."""
        return list(Offering).index(self)


@total_ordering
@dataclass(frozen=True)
class Semester:
    """A concrete teaching period: a year and an offering."""

    year: int
    offering: Offering

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Semester):
            return NotImplemented
        return (self.year, self.offering.ordinal) < (other.year, other.offering.ordinal)

    def __str__(self) -> str:
        return f"{self.year}/{self.offering.value}"


# Prerequisite expressions


@dataclass(frozen=True)
class UnitPrereq:
    """Requires a specific unit to be completed."""

    code: str


@dataclass(frozen=True)
class AndPrereq:
    """Requires every sub-expression to hold."""

    items: tuple["Prereq", ...] = ()


@dataclass(frozen=True)
class OrPrereq:
    """Requires at least one sub-expression to hold."""

    items: tuple["Prereq", ...] = ()


@dataclass(frozen=True)
class CreditPointsPrereq:
    """Requires a minimum number of completed credit points."""

    points: int


@dataclass(frozen=True)
class NoPrereq:
    """No prerequisite."""


Prereq = Union[UnitPrereq, AndPrereq, OrPrereq, CreditPointsPrereq, NoPrereq]


@dataclass(frozen=True)
class UnitInfo:
    """Catalog entry for a unit of study."""

    title: str
    credit_points: int
    offered: frozenset[Offering]
    prereq: Prereq = field(default_factory=NoPrereq)
    prereq_text: str = ""


@dataclass(frozen=True)
class UnitInPlan:
    """A unit placed in a concrete semester of a study plan."""

    code: str
    study_area: str
    semester: Semester

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "study_area": self.study_area,
            "semester": str(self.semester),
        }


@dataclass(frozen=True)
class PlannedUnit:
    """A unit still to be scheduled, with the semesters it could go in."""

    code: str
    study_area: str
    possible_semesters: tuple[Semester, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "study_area": self.study_area,
            "possible_semesters": [str(s) for s in self.possible_semesters],
        }


# A study plan is an ordered, immutable snapshot of placements with unique codes
StudyPlan = tuple[UnitInPlan, ...]

# One bound unit per unit still to be scheduled
BoundPlan = tuple[PlannedUnit, ...]
