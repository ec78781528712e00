"""Planner configuration."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from .constants import DEFAULT_CURRENT_SEMESTER, MAX_UNITS_PER_SEMESTER
from .exceptions import PlannerError
from .models import Semester
from .semesters import parse_semester


@dataclass(frozen=True)
class PlannerConfig:
    """Settings that shape every planning run.

    Attributes:
        current_semester: Earliest semester any unit may be scheduled in
        max_units_per_semester: Course load cap per semester
    """

    current_semester: Semester = field(default=DEFAULT_CURRENT_SEMESTER)
    max_units_per_semester: int = MAX_UNITS_PER_SEMESTER

    def __post_init__(self):
        if self.max_units_per_semester < 1:
            raise PlannerError(
                f"max_units_per_semester must be at least 1, got {self.max_units_per_semester}"
            )


class ConfigLoader:
    """Loader for planner settings from planner.json."""

    FILENAME = "planner.json"

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Directory that may contain planner.json with keys
                       "current_semester" (e.g. "2021/1") and
                       "max_units_per_semester". Missing file or keys fall
                       back to defaults.
        """
        if config_dir is None:
            config_dir = Path("reference")
        self.config_dir = Path(config_dir)

    def load(self) -> PlannerConfig:
        """Load configuration, using defaults for anything not set."""
        path = self.config_dir / self.FILENAME
        if not path.exists():
            return PlannerConfig()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        current = data.get("current_semester")
        return PlannerConfig(
            current_semester=parse_semester(current) if current else DEFAULT_CURRENT_SEMESTER,
            max_units_per_semester=int(
                data.get("max_units_per_semester", MAX_UNITS_PER_SEMESTER)
            ),
        )
