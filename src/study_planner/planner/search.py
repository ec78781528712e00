"""Backtracking search that places bound units into concrete semesters."""

import logging
from collections.abc import Iterable, Sequence

from ..models import PlannedUnit, Semester, StudyPlan, UnitInPlan
from .prerequisites import PrerequisiteChecker

logger = logging.getLogger(__name__)


class ScheduleSearch:
    """Assigns each remaining unit one of its possible semesters.

    The search picks the first remaining unit that can be enrolled somewhere
    and only backtracks over that unit's semester choice; it never retries a
    different unit order. It can therefore report a plan as infeasible when
    another selection order would have succeeded.
    """

    def __init__(self, checker: PrerequisiteChecker):
        self.checker = checker

    def schedule_remaining(
        self,
        remaining: Sequence[PlannedUnit],
        placed: Iterable[UnitInPlan] = (),
    ) -> StudyPlan | None:
        """Try to legally schedule all remaining units around the placed ones.

        Args:
            remaining: Units still to place, each with its candidate semesters
            placed: Units already placed

        Returns:
            The completed plan, or None if no legal completion was found
        """
        placed = tuple(placed)
        if not remaining:
            return placed

        selected = self._first_enrollable(remaining, placed)
        if selected is None:
            logger.debug(f"No enrollable unit among {len(remaining)} remaining")
            return None

        unit, semesters = selected
        rest = tuple(r for r in remaining if r.code != unit.code)
        for semester in semesters:
            plan = placed + (UnitInPlan(unit.code, unit.study_area, semester),)
            result = self.schedule_remaining(rest, plan)
            if result is not None:
                return result

        logger.debug(f"Backtracking: no semester works for {unit.code}")
        return None

    def _first_enrollable(
        self,
        remaining: Sequence[PlannedUnit],
        placed: StudyPlan,
    ) -> tuple[PlannedUnit, list[Semester]] | None:
        """Find the first unit with any enrollable semester, and those semesters."""
        for unit in remaining:
            semesters = [
                s for s in unit.possible_semesters
                if self.checker.is_enrollable_in(unit.code, s, placed)
            ]
            if semesters:
                return unit, semesters
        return None
