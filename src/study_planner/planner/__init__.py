"""Study plan scheduling engine.

Three layers, each building on the previous one:

- PrerequisiteChecker: offering and prerequisite legality of placements
- BoundsOptimizer: earliest/latest semester windows from in-plan dependencies
- ScheduleSearch / SchedulingWizard: backtracking placement and the
  iterative search for plans that finish earlier

Usage:
    from study_planner.planner import SchedulingWizard

    wizard = SchedulingWizard(catalog)
    for improved in wizard.try_to_improve_schedule(plan):
        ...
"""

from .bounds import BoundsOptimizer, all_bounds_feasible
from .prerequisites import PrerequisiteChecker, prereq_codes, satisfied
from .search import ScheduleSearch
from .wizard import SchedulingWizard, best_achievable, last_semester

__all__ = [
    "BoundsOptimizer",
    "PrerequisiteChecker",
    "ScheduleSearch",
    "SchedulingWizard",
    "all_bounds_feasible",
    "best_achievable",
    "last_semester",
    "prereq_codes",
    "satisfied",
]
