"""Study Planner - prerequisite-aware scheduling of university study plans.

Given a catalog of units (credit points, semester offerings, prerequisite
expressions) and a student's plan, this package checks plan legality,
derives the semesters each unit could occupy, and searches for legal
plans that finish earlier.

Example usage:
    from study_planner import SchedulingWizard, last_semester, load_catalog, load_study_plan

    catalog = load_catalog("units.json")
    plan = load_study_plan("plan.json")

    wizard = SchedulingWizard(catalog)
    for improved in wizard.try_to_improve_schedule(plan):
        print(f"Finishes {last_semester(improved)}")
"""

from .catalog import Catalog, load_catalog, parse_prereq
from .config import ConfigLoader, PlannerConfig
from .exceptions import (
    CatalogError,
    InvalidPlanError,
    InvalidSemesterError,
    PlannerError,
    PrereqSyntaxError,
    UnitNotOfferedError,
    UnknownUnitError,
)
from .exporters import export_plan_excel, export_plan_json, load_study_plan
from .models import (
    AndPrereq,
    CreditPointsPrereq,
    NoPrereq,
    Offering,
    OrPrereq,
    PlannedUnit,
    Semester,
    UnitInfo,
    UnitInPlan,
    UnitPrereq,
)
from .planner import (
    BoundsOptimizer,
    PrerequisiteChecker,
    ScheduleSearch,
    SchedulingWizard,
    all_bounds_feasible,
    last_semester,
)
from .semesters import next_semester, parse_semester, previous_semester, semester_range

__version__ = "0.1.0"

__all__ = [
    # Planning engine
    "SchedulingWizard",
    "BoundsOptimizer",
    "PrerequisiteChecker",
    "ScheduleSearch",
    "all_bounds_feasible",
    "last_semester",
    # Models
    "Offering",
    "Semester",
    "UnitInfo",
    "UnitInPlan",
    "PlannedUnit",
    "UnitPrereq",
    "AndPrereq",
    "OrPrereq",
    "CreditPointsPrereq",
    "NoPrereq",
    # Semester arithmetic
    "next_semester",
    "previous_semester",
    "semester_range",
    "parse_semester",
    # Catalog
    "Catalog",
    "load_catalog",
    "parse_prereq",
    # Configuration
    "PlannerConfig",
    "ConfigLoader",
    # Plan I/O
    "load_study_plan",
    "export_plan_json",
    "export_plan_excel",
    # Exceptions
    "PlannerError",
    "UnknownUnitError",
    "UnitNotOfferedError",
    "InvalidSemesterError",
    "InvalidPlanError",
    "CatalogError",
    "PrereqSyntaxError",
]
