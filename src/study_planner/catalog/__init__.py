"""Unit catalog: lookup table, prerequisite parsing and file loading."""

from .catalog import Catalog
from .loader import catalog_from_records, load_catalog, parse_offered
from .prereq_parser import PrereqParser, parse_prereq

__all__ = [
    "Catalog",
    "PrereqParser",
    "catalog_from_records",
    "load_catalog",
    "parse_offered",
    "parse_prereq",
]
