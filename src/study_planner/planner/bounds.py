"""Bound propagation: which semesters each unit of a plan could occupy.

Dependencies are derived from the plan itself: a unit only constrains
another when removing it would leave the other without its prerequisites.
Earliest semesters propagate forward along those edges from the first
semester, latest semesters propagate backward from the last one.

The catalog's prerequisite graph must be acyclic; a cycle makes the
propagation recurse without end.
"""

import logging
from collections.abc import Iterable, Sequence

from ..exceptions import UnitNotOfferedError
from ..models import BoundPlan, Offering, PlannedUnit, Semester, UnitInPlan
from ..semesters import next_semester, previous_semester, semester_range
from .prerequisites import PrerequisiteChecker

logger = logging.getLogger(__name__)

# (prerequisite, dependent) pair of unit codes
Dependency = tuple[str, str]


def all_bounds_feasible(bounds: Iterable[PlannedUnit]) -> bool:
    """Check that every unit has at least one possible semester."""
    return all(unit.possible_semesters for unit in bounds)


class BoundsOptimizer:
    """Computes per-unit semester windows for a candidate study plan."""

    def __init__(self, checker: PrerequisiteChecker):
        self.checker = checker

    def dependencies_within_plan(self, plan: Sequence[UnitInPlan]) -> list[Dependency]:
        """Get all pairs (X, Y) in the plan where X must be completed before Y.

        A prerequisite mentioned in an ``or`` group whose alternative is also
        in the plan does not produce an edge, since dropping it alone does
        not break enrolment.
        """
        codes = {unit.code for unit in plan}
        dependencies: list[Dependency] = []

        for unit in plan:
            for prereq in self.checker.unit_prereqs(unit.code):
                if prereq not in codes:
                    continue
                without = [other for other in plan if other.code != prereq]
                if not self.checker.is_enrollable(unit.code, without):
                    dependencies.append((prereq, unit.code))

        return dependencies

    def first_offering_on_or_after(self, code: str, semester: Semester) -> Semester:
        """Get the first semester on or after the given one in which the unit runs."""
        for _ in Offering:
            if self.checker.is_offered(code, semester):
                return semester
            semester = next_semester(semester)
        raise UnitNotOfferedError(code)

    def first_offering_on_or_before(self, code: str, semester: Semester) -> Semester:
        """Get the last semester on or before the given one in which the unit runs."""
        for _ in Offering:
            if self.checker.is_offered(code, semester):
                return semester
            semester = previous_semester(semester)
        raise UnitNotOfferedError(code)

    def earliest_semester(
        self,
        dependencies: Sequence[Dependency],
        code: str,
        first: Semester,
        _cache: dict[str, Semester] | None = None,
    ) -> Semester:
        """Get the earliest semester a unit could be studied in.

        Every unit involved is assumed to start no earlier than ``first``;
        a unit must wait for its slowest prerequisite chain.
        """
        cache = {} if _cache is None else _cache
        if code in cache:
            return cache[code]

        prereqs = [p for p, dependent in dependencies if dependent == code]
        if not prereqs:
            result = self.first_offering_on_or_after(code, first)
        else:
            result = max(
                self.first_offering_on_or_after(
                    code, next_semester(self.earliest_semester(dependencies, p, first, cache))
                )
                for p in prereqs
            )

        cache[code] = result
        return result

    def latest_semester(
        self,
        dependencies: Sequence[Dependency],
        code: str,
        last: Semester,
        _cache: dict[str, Semester] | None = None,
    ) -> Semester:
        """Get the latest semester a unit could be studied in.

        Every unit involved is assumed to finish no later than ``last``;
        a unit must leave room before its tightest dependent.
        """
        cache = {} if _cache is None else _cache
        if code in cache:
            return cache[code]

        dependents = [d for prereq, d in dependencies if prereq == code]
        if not dependents:
            result = self.first_offering_on_or_before(code, last)
        else:
            result = min(
                self.first_offering_on_or_before(
                    code, previous_semester(self.latest_semester(dependencies, d, last, cache))
                )
                for d in dependents
            )

        cache[code] = result
        return result

    def bound_units_in_plan(
        self,
        plan: Sequence[UnitInPlan],
        first: Semester,
        last: Semester,
    ) -> BoundPlan:
        """Bound every unit of the plan to the semesters it could legally occupy.

        Args:
            plan: Units to bound (their current semesters are ignored)
            first: Earliest semester any unit may be studied in
            last: Latest semester any unit may be studied in

        Returns:
            One PlannedUnit per plan entry, in plan order, each with its
            possible semesters in ascending order (possibly empty)
        """
        dependencies = self.dependencies_within_plan(plan)
        logger.debug(f"Found {len(dependencies)} dependencies among {len(plan)} units")

        earliest_cache: dict[str, Semester] = {}
        latest_cache: dict[str, Semester] = {}
        bounds = []
        for unit in plan:
            earliest = self.earliest_semester(dependencies, unit.code, first, earliest_cache)
            latest = self.latest_semester(dependencies, unit.code, last, latest_cache)
            possible = tuple(
                s for s in semester_range(earliest, latest) if self.checker.is_offered(unit.code, s)
            )
            bounds.append(PlannedUnit(unit.code, unit.study_area, possible))

        return tuple(bounds)
