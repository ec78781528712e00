"""Test fixtures for study planner tests."""

import json

import pytest

from study_planner.catalog import catalog_from_records
from study_planner.models import UnitInPlan
from study_planner.semesters import parse_semester


@pytest.fixture
def make_catalog():
    """Factory building a catalog from {code: (credit_points, offered, prereq)}."""

    def _make(units):
        records = [
            {
                "code": code,
                "title": f"Title of {code}",
                "credit_points": cp,
                "offered": offered,
                "prereq": prereq,
            }
            for code, (cp, offered, prereq) in units.items()
        ]
        return catalog_from_records(records)

    return _make


@pytest.fixture
def make_plan():
    """Factory building a plan from (code, "YYYY/O") pairs."""

    def _make(entries, study_area="Core"):
        return tuple(UnitInPlan(code, study_area, parse_semester(s)) for code, s in entries)

    return _make


@pytest.fixture
def chain_catalog(make_catalog):
    """A -> B chain, both offered every semester."""
    return make_catalog(
        {
            "AAA101": (12, "1;2;S", ""),
            "BBB102": (12, "1;2;S", "AAA101"),
        }
    )


@pytest.fixture
def independent_catalog(make_catalog):
    """Five units without prerequisites, offered every semester."""
    return make_catalog({f"IND10{i}": (12, "1;2;S", "") for i in range(1, 6)})


@pytest.fixture
def or_catalog(make_catalog):
    """CCC103 needs either AAA101 or BBB102."""
    return make_catalog(
        {
            "AAA101": (12, "1;2", ""),
            "BBB102": (12, "1;2", ""),
            "CCC103": (12, "1;2", "AAA101 or BBB102"),
        }
    )


@pytest.fixture
def degree_catalog(make_catalog):
    """A small degree with chains, credit points and restricted offerings."""
    return make_catalog(
        {
            "IFB101": (12, "1;2", ""),
            "IFB102": (12, "1;2", ""),
            "IFB103": (12, "1", ""),
            "IFB104": (12, "1;2", ""),
            "CAB201": (12, "1;2", "IFB101"),
            "CAB202": (12, "2", "IFB102 and IFB101"),
            "CAB203": (12, "1;2", "IFB103 or IFB104"),
            "CAB301": (12, "1", "CAB201"),
            "IFB399": (24, "1;2", "96cp"),
        }
    )


@pytest.fixture
def degree_plan(make_plan):
    """A legal but slow plan over the degree catalog (finishes 2024/1)."""
    return make_plan(
        [
            ("IFB101", "2020/1"),
            ("IFB103", "2020/1"),
            ("IFB102", "2020/2"),
            ("IFB104", "2021/1"),
            ("CAB201", "2021/2"),
            ("CAB202", "2022/2"),
            ("CAB203", "2022/2"),
            ("CAB301", "2023/1"),
            ("IFB399", "2024/1"),
        ]
    )


@pytest.fixture
def catalog_json_file(tmp_path):
    """Write a small JSON catalog to disk."""
    path = tmp_path / "units.json"
    data = {
        "units": [
            {"code": "AAA101", "title": "Intro", "credit_points": 12, "offered": ["1", "2"], "prereq": ""},
            {"code": "BBB102", "title": "Next", "credit_points": 12, "offered": ["1", "2", "S"], "prereq": "AAA101"},
        ]
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def plan_json_file(tmp_path):
    """Write a slow two-unit plan to disk."""
    path = tmp_path / "plan.json"
    data = {
        "units": [
            {"code": "AAA101", "study_area": "Core", "semester": "2020/1"},
            {"code": "BBB102", "study_area": "Core", "semester": "2021/2"},
        ]
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
