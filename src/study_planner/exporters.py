"""Import and export of study plans (JSON and Excel)."""

import json
from collections import defaultdict
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, Side

from .catalog import Catalog
from .display import display_semester, unit_title
from .exceptions import InvalidPlanError
from .models import Semester, StudyPlan, UnitInPlan
from .semesters import parse_semester

# Fonts
FONT_TITLE = Font(name="Calibri", size=14, bold=True)
FONT_HEADER = Font(name="Calibri", size=11, bold=True)
FONT_CELL = Font(name="Calibri", size=11, bold=False)

# Alignments
ALIGN_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
ALIGN_LEFT = Alignment(horizontal="left", vertical="center", wrap_text=True)

# Borders
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)

SEMESTER_COLUMN_WIDTH = 12.0
UNIT_COLUMN_WIDTH = 36.0

# Header occupies rows 1-3, units start on row 4
FIRST_DATA_ROW = 4


def study_plan_from_dict(data: dict[str, Any]) -> StudyPlan:
    """Build a study plan from ``{"units": [{code, study_area, semester}]}``.

    Raises:
        InvalidPlanError: If the data is not shaped as above, an entry is
            incomplete or a code appears twice
    """
    if not isinstance(data, dict):
        raise InvalidPlanError(f"expected an object with a 'units' list, got {type(data).__name__}")
    entries = data.get("units", [])
    if not isinstance(entries, list):
        raise InvalidPlanError("'units' must be a list")

    plan = []
    seen: set[str] = set()
    for entry in entries:
        if not isinstance(entry, dict):
            raise InvalidPlanError(f"unit entry must be an object, got {entry!r}")
        code = str(entry.get("code", "")).strip().upper()
        if not code:
            raise InvalidPlanError("entry without a unit code")
        if code in seen:
            raise InvalidPlanError("unit appears more than once", code)
        if "semester" not in entry:
            raise InvalidPlanError("missing semester", code)
        seen.add(code)
        plan.append(
            UnitInPlan(
                code=code,
                study_area=str(entry.get("study_area", "")),
                semester=parse_semester(entry["semester"]),
            )
        )
    return tuple(plan)


def plan_to_dict(plan: StudyPlan) -> dict[str, Any]:
    """Convert a plan to a dictionary, ordered by semester."""
    ordered = sorted(plan, key=lambda u: (u.semester, u.code))
    return {
        "last_semester": display_semester(max(u.semester for u in plan)) if plan else None,
        "units": [u.to_dict() for u in ordered],
    }


def load_study_plan(input_path: Path | str) -> StudyPlan:
    """Load a study plan from a JSON file.

    Args:
        input_path: Path to plan JSON file

    Returns:
        The plan in file order
    """
    with open(input_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidPlanError(f"{input_path} is not valid JSON: {e}") from e
    return study_plan_from_dict(data)


def export_plan_json(plan: StudyPlan, output_path: Path | str) -> None:
    """Export a study plan to a JSON file.

    Args:
        plan: Plan to export
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(plan_to_dict(plan), f, ensure_ascii=False, indent=2)


def group_by_semester(plan: StudyPlan) -> dict[Semester, list[UnitInPlan]]:
    """Group plan entries by semester, semesters ascending and codes sorted."""
    grouped: dict[Semester, list[UnitInPlan]] = defaultdict(list)
    for unit in plan:
        grouped[unit.semester].append(unit)
    return {s: sorted(grouped[s], key=lambda u: u.code) for s in sorted(grouped)}


class PlanExcelGenerator:
    """Generates an Excel sheet with one row per semester of a plan."""

    def __init__(self, catalog: Catalog, units_per_row: int = 4):
        """Initialize generator.

        Args:
            catalog: Catalog used for unit titles
            units_per_row: Number of unit columns per semester row
        """
        self.catalog = catalog
        self.units_per_row = units_per_row

    def create_workbook(self, plan: StudyPlan, title: str = "Study Plan") -> Workbook:
        """Create a workbook laying the plan out semester by semester."""
        wb = Workbook()
        ws = wb.active
        ws.title = title[:31]

        last_col = 1 + self.units_per_row
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=last_col)
        ws.cell(row=1, column=1, value=title).font = FONT_TITLE
        ws.cell(row=1, column=1).alignment = ALIGN_CENTER

        ws.column_dimensions["A"].width = SEMESTER_COLUMN_WIDTH
        headers = ["Semester"] + [f"Unit {i}" for i in range(1, self.units_per_row + 1)]
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=3, column=col, value=header)
            cell.font = FONT_HEADER
            cell.alignment = ALIGN_CENTER
            cell.border = THIN_BORDER
            if col > 1:
                ws.column_dimensions[cell.column_letter].width = UNIT_COLUMN_WIDTH

        row = FIRST_DATA_ROW
        for semester, units in group_by_semester(plan).items():
            cell = ws.cell(row=row, column=1, value=display_semester(semester))
            cell.font = FONT_HEADER
            cell.alignment = ALIGN_CENTER
            cell.border = THIN_BORDER
            for col in range(2, last_col + 1):
                index = col - 2
                value = unit_title(self.catalog, units[index].code) if index < len(units) else None
                cell = ws.cell(row=row, column=col, value=value)
                cell.font = FONT_CELL
                cell.alignment = ALIGN_LEFT
                cell.border = THIN_BORDER
            row += 1

        return wb


def export_plan_excel(plan: StudyPlan, catalog: Catalog, output_path: Path | str) -> Path:
    """Export a study plan to an Excel file.

    Args:
        plan: Plan to export
        catalog: Catalog used for unit titles
        output_path: Path to output .xlsx file

    Returns:
        Path of the written file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    units_per_row = max((len(u) for u in group_by_semester(plan).values()), default=4)
    generator = PlanExcelGenerator(catalog, units_per_row=max(units_per_row, 4))
    wb = generator.create_workbook(plan)
    wb.save(output)
    return output
