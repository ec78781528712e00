"""Catalog loading from JSON, CSV and Excel files."""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..exceptions import CatalogError, PrereqSyntaxError
from ..models import Offering, UnitInfo
from .catalog import Catalog
from .prereq_parser import parse_prereq

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["code", "title", "credit_points", "offered"]


def parse_offered(value: Any, source: str | None = None, code: str | None = None) -> frozenset[Offering]:
    """Parse offerings given as a list or a ';'-separated string of 1, 2, S."""
    if isinstance(value, str):
        parts = [p.strip() for p in value.replace(",", ";").split(";")]
    elif isinstance(value, (list, tuple, set, frozenset)):
        parts = [str(p).strip() for p in value]
    else:
        raise CatalogError(f"offerings must be a list or string, got {value!r}", source, code)

    offered = set()
    for part in parts:
        if not part:
            continue
        try:
            offered.add(Offering(part.upper()))
        except ValueError:
            raise CatalogError(f"unknown offering '{part}'", source, code) from None

    if not offered:
        raise CatalogError("unit is not offered in any semester", source, code)
    return frozenset(offered)


def unit_from_record(record: dict[str, Any], source: str | None = None) -> tuple[str, UnitInfo]:
    """Build a (code, UnitInfo) pair from one catalog record."""
    if not isinstance(record, dict):
        raise CatalogError(f"unit record must be an object, got {record!r}", source)
    missing = [c for c in REQUIRED_COLUMNS if c not in record or _is_blank(record[c])]
    if missing:
        raise CatalogError(f"missing fields: {', '.join(missing)}", source, record.get("code"))

    code = str(record["code"]).strip().upper()
    try:
        credit_points = _to_int(record["credit_points"])
    except (TypeError, ValueError):
        raise CatalogError(
            f"credit points must be an integer, got {record['credit_points']!r}", source, code
        ) from None
    if credit_points < 0:
        raise CatalogError("credit points must not be negative", source, code)

    prereq_text = record.get("prereq")
    prereq_text = "" if _is_blank(prereq_text) else str(prereq_text).strip()
    try:
        prereq = parse_prereq(prereq_text)
    except PrereqSyntaxError as e:
        raise CatalogError(str(e), source, code) from e

    return code, UnitInfo(
        title=str(record["title"]).strip(),
        credit_points=credit_points,
        offered=parse_offered(record["offered"], source, code),
        prereq=prereq,
        prereq_text=prereq_text,
    )


def catalog_from_records(records: list[dict[str, Any]], source: str | None = None) -> Catalog:
    """Build a catalog from a list of unit records."""
    units: dict[str, UnitInfo] = {}
    for record in records:
        code, info = unit_from_record(record, source)
        if code in units:
            raise CatalogError("duplicate unit code", source, code)
        units[code] = info
    return Catalog(units)


def load_catalog(path: Path | str) -> Catalog:
    """Load a unit catalog from a .json, .csv or .xlsx file.

    JSON files hold ``{"units": [record, ...]}``; tabular files hold one
    record per row. Records have the columns code, title, credit_points,
    offered and an optional prereq expression.

    Args:
        path: Path to the catalog file

    Returns:
        Catalog keyed by upper-case unit code
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise CatalogError(f"not valid JSON: {e}", str(path)) from e
        records = data.get("units", []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise CatalogError("expected a list of unit records", str(path))
    elif suffix == ".csv":
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.ParserError as e:
            raise CatalogError(f"malformed CSV: {e}", str(path)) from e
        records = _frame_to_records(df)
    elif suffix in (".xlsx", ".xls"):
        records = _frame_to_records(pd.read_excel(path, dtype=str))
    else:
        raise CatalogError(f"unsupported catalog format '{suffix}'", str(path))

    catalog = catalog_from_records(records, str(path))
    logger.info(f"Loaded {len(catalog)} units from {path.name}")
    return catalog


def _frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    df = df.rename(columns=lambda c: str(c).strip().lower())
    return df.to_dict(orient="records")


def _to_int(value: Any) -> int:
    # Spreadsheet cells may hold whole numbers as "12.0"
    number = float(value)
    if not number.is_integer():
        raise ValueError(value)
    return int(number)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return False
    return bool(pd.isna(value))
