"""Prerequisite evaluation and enrolment legality checks."""

from collections.abc import Iterable, Iterator

from ..catalog import Catalog
from ..constants import MAX_UNITS_PER_SEMESTER
from ..models import (
    AndPrereq,
    CreditPointsPrereq,
    NoPrereq,
    OrPrereq,
    Prereq,
    Semester,
    UnitInPlan,
    UnitPrereq,
)


def satisfied(prereq: Prereq, completed: Iterable[UnitInPlan], catalog: Catalog) -> bool:
    """Check whether a prerequisite expression is met by completed units.

    Callers pass only the units regarded as completed (for example those
    placed before some semester); no date filtering happens here.
    """
    completed = list(completed)

    if isinstance(prereq, UnitPrereq):
        return any(unit.code == prereq.code for unit in completed)
    if isinstance(prereq, AndPrereq):
        return all(satisfied(item, completed, catalog) for item in prereq.items)
    if isinstance(prereq, OrPrereq):
        return any(satisfied(item, completed, catalog) for item in prereq.items)
    if isinstance(prereq, CreditPointsPrereq):
        earned = sum(catalog.lookup(unit.code).credit_points for unit in completed)
        return earned >= prereq.points
    if isinstance(prereq, NoPrereq):
        return True
    raise TypeError(f"Unknown prerequisite type: {type(prereq).__name__}")


def prereq_codes(prereq: Prereq) -> Iterator[str]:
    """Yield every unit code mentioned anywhere in an expression."""
    if isinstance(prereq, UnitPrereq):
        yield prereq.code
    elif isinstance(prereq, (AndPrereq, OrPrereq)):
        for item in prereq.items:
            yield from prereq_codes(item)


class PrerequisiteChecker:
    """Answers whether units can legally be placed in a study plan."""

    def __init__(self, catalog: Catalog, max_units_per_semester: int = MAX_UNITS_PER_SEMESTER):
        self.catalog = catalog
        self.max_units_per_semester = max_units_per_semester

    def unit_prereqs(self, code: str) -> list[str]:
        """Get the unit codes mentioned in a unit's prerequisites, in order, without repeats."""
        return list(dict.fromkeys(prereq_codes(self.catalog.lookup(code).prereq)))

    def is_offered(self, code: str, semester: Semester) -> bool:
        """Check if a unit runs in the semester's offering."""
        return semester.offering in self.catalog.lookup(code).offered

    def is_legal_in(self, code: str, semester: Semester, plan: Iterable[UnitInPlan]) -> bool:
        """Check if a unit can be studied in a semester given the other placements.

        Only units placed strictly before the semester count towards its
        prerequisites.
        """
        earlier = [unit for unit in plan if unit.semester < semester]
        return self.is_offered(code, semester) and satisfied(
            self.catalog.lookup(code).prereq, earlier, self.catalog
        )

    def is_enrollable_in(self, code: str, semester: Semester, plan: Iterable[UnitInPlan]) -> bool:
        """Check if a unit can be added to the plan in a semester.

        Besides legality, the semester must have room for another unit.
        """
        plan = list(plan)
        load = sum(1 for unit in plan if unit.semester == semester)
        return load < self.max_units_per_semester and self.is_legal_in(code, semester, plan)

    def is_enrollable(self, code: str, plan: Iterable[UnitInPlan]) -> bool:
        """Check if the plan could ever satisfy a unit's prerequisites, ignoring semesters."""
        return satisfied(self.catalog.lookup(code).prereq, plan, self.catalog)

    def is_legal_plan(self, plan: Iterable[UnitInPlan]) -> bool:
        """Check if every unit in the plan is legally placed."""
        plan = list(plan)
        return all(self.is_legal_in(unit.code, unit.semester, plan) for unit in plan)
