"""Iterative improvement of a study plan towards an earlier completion."""

import logging
import math
from collections.abc import Iterable, Iterator

from ..catalog import Catalog
from ..config import PlannerConfig
from ..constants import SEMESTERS_PER_YEAR
from ..models import Offering, Semester, StudyPlan, UnitInPlan
from ..semesters import previous_semester
from .bounds import BoundsOptimizer, all_bounds_feasible
from .prerequisites import PrerequisiteChecker
from .search import ScheduleSearch

logger = logging.getLogger(__name__)


def last_semester(plan: Iterable[UnitInPlan]) -> Semester:
    """Get the last semester in which the plan has a unit."""
    return max(unit.semester for unit in plan)


def best_achievable(
    first: Semester,
    plan: Iterable[UnitInPlan],
    max_units_per_semester: int,
) -> Semester:
    """Get a lower bound on the semester the plan could be completed by.

    Assumes study starts in ``first``, takes only Semester 1 and Semester 2,
    and fills every semester to capacity. Starting in Summer gives the
    trivial bound ``first``.
    """
    unit_count = sum(1 for _ in plan)
    semesters = math.ceil(unit_count / max_units_per_semester)
    years = semesters // SEMESTERS_PER_YEAR
    odd = semesters % SEMESTERS_PER_YEAR == 1

    if first.offering == Offering.SEMESTER_1:
        if odd:
            return Semester(first.year + years, Offering.SEMESTER_1)
        return Semester(first.year + years - 1, Offering.SEMESTER_2)
    if first.offering == Offering.SEMESTER_2:
        if odd:
            return Semester(first.year + years, Offering.SEMESTER_2)
        return Semester(first.year + years, Offering.SEMESTER_1)
    return first


class SchedulingWizard:
    """
    Searches for study plans that finish earlier than a given plan.

    Each round bounds every unit to the window between the current semester
    and a target one semester before the last plan's finish, then searches
    for a concrete schedule inside those bounds.

    Example:
        wizard = SchedulingWizard(catalog, PlannerConfig(current_semester=start))
        for improved in wizard.try_to_improve_schedule(plan):
            print(last_semester(improved))
    """

    def __init__(self, catalog: Catalog, config: PlannerConfig | None = None):
        self.catalog = catalog
        self.config = config or PlannerConfig()
        self.checker = PrerequisiteChecker(catalog, self.config.max_units_per_semester)
        self.optimizer = BoundsOptimizer(self.checker)
        self.search = ScheduleSearch(self.checker)

    @property
    def current_semester(self) -> Semester:
        return self.config.current_semester

    def best_achievable(self, plan: Iterable[UnitInPlan]) -> Semester:
        """Get the lower bound on completion for a plan starting now."""
        return best_achievable(self.current_semester, plan, self.config.max_units_per_semester)

    def try_to_improve_schedule(self, plan: Iterable[UnitInPlan]) -> Iterator[StudyPlan]:
        """Yield progressively shorter study plans.

        Every yielded plan finishes strictly earlier than the one before it.
        The generator stops once no shorter plan is found or the lower bound
        is reached; callers may stop pulling at any point.
        """
        plan = tuple(plan)
        if not plan:
            return

        best = self.best_achievable(plan)
        target = previous_semester(last_semester(plan))
        logger.info(
            f"Improving plan of {len(plan)} units finishing {last_semester(plan)} "
            f"(lower bound {best})"
        )

        while target >= best:
            improved = self.try_to_complete_by(plan, target)
            if improved is None:
                break
            finish = last_semester(improved)
            logger.info(f"Found plan finishing {finish}")
            yield improved
            target = previous_semester(finish)

        logger.info("No further improvement possible")

    def try_to_complete_by(self, plan: StudyPlan, target: Semester) -> StudyPlan | None:
        """Try to schedule all of the plan's units between now and the target."""
        bounds = self.optimizer.bound_units_in_plan(plan, self.current_semester, target)
        if not all_bounds_feasible(bounds):
            logger.debug(f"Bounds infeasible for target {target}")
            return None
        return self.search.schedule_remaining(bounds, ())
