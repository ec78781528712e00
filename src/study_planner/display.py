"""Human-readable formatting of semesters, units and prerequisites."""

from .catalog import Catalog
from .models import (
    AndPrereq,
    CreditPointsPrereq,
    NoPrereq,
    Offering,
    OrPrereq,
    Prereq,
    Semester,
    UnitPrereq,
)


def display_semester(semester: Semester) -> str:
    """Format a semester as YEAR/OFFERING (e.g. '2021/1', '2021/S')."""
    return f"{semester.year}/{semester.offering.value}"


def unit_title(catalog: Catalog, code: str) -> str:
    """Get the unit code followed by its title."""
    return f"{code} {catalog.lookup(code).title}"


def prereq_text(catalog: Catalog, code: str) -> str:
    """Get the unit's prerequisites as display text."""
    text = catalog.lookup(code).prereq_text
    return f"Prereqs: {text}" if text else "Prereqs: Nil"


def offered_text(catalog: Catalog, code: str) -> str:
    """Describe the offerings a unit runs in (e.g. 'semester 1 or 2')."""
    offerings = sorted(catalog.lookup(code).offered, key=lambda o: o.ordinal)
    parts = []
    for i, offering in enumerate(offerings):
        if offering == Offering.SUMMER:
            parts.append("summer")
        elif i == 0:
            parts.append(f"semester {offering.value}")
        else:
            parts.append(offering.value)
    return " or ".join(parts)


def format_prereq(prereq: Prereq) -> str:
    """Render an expression in the syntax accepted by parse_prereq.

    Empty groups and NoPrereq inside a group have no text form and raise
    ValueError; a bare NoPrereq renders as an empty string.
    """
    if isinstance(prereq, UnitPrereq):
        return prereq.code
    if isinstance(prereq, CreditPointsPrereq):
        return f"{prereq.points}cp"
    if isinstance(prereq, (AndPrereq, OrPrereq)):
        if not prereq.items:
            raise ValueError(f"Cannot format empty {type(prereq).__name__}")
        keyword = " and " if isinstance(prereq, AndPrereq) else " or "
        parts = []
        for item in prereq.items:
            if isinstance(item, NoPrereq):
                raise ValueError("Cannot format NoPrereq inside a group")
            text = format_prereq(item)
            if isinstance(item, (AndPrereq, OrPrereq)) and len(item.items) > 1:
                text = f"({text})"
            parts.append(text)
        return keyword.join(parts)
    return ""
