"""Tests for the catalog and catalog loading."""

import json

import pandas as pd
import pytest

from study_planner.catalog import Catalog, catalog_from_records, load_catalog, parse_offered
from study_planner.exceptions import CatalogError, UnknownUnitError
from study_planner.models import NoPrereq, Offering, UnitInfo, UnitPrereq


class TestCatalog:
    """Tests for Catalog lookups."""

    def test_lookup(self):
        info = UnitInfo("Intro", 12, frozenset({Offering.SEMESTER_1}))
        catalog = Catalog({"IFB104": info})
        assert catalog.lookup("IFB104") is info
        assert "IFB104" in catalog
        assert len(catalog) == 1

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            Catalog().lookup("NOPE101")
        assert exc_info.value.code == "NOPE101"

    def test_codes_sorted(self):
        info = UnitInfo("x", 12, frozenset({Offering.SEMESTER_1}))
        catalog = Catalog({"ZZZ101": info, "AAA101": info})
        assert catalog.codes() == ["AAA101", "ZZZ101"]
        assert sorted(catalog) == ["AAA101", "ZZZ101"]


class TestParseOffered:
    """Tests for parse_offered."""

    def test_string(self):
        assert parse_offered("1;2") == frozenset({Offering.SEMESTER_1, Offering.SEMESTER_2})

    def test_list(self):
        assert parse_offered(["s", 1]) == frozenset({Offering.SUMMER, Offering.SEMESTER_1})

    def test_unknown_offering(self):
        with pytest.raises(CatalogError):
            parse_offered("1;3")

    def test_empty(self):
        with pytest.raises(CatalogError):
            parse_offered([])


class TestCatalogFromRecords:
    """Tests for catalog_from_records."""

    def test_builds_units(self):
        catalog = catalog_from_records(
            [
                {"code": "aaa101", "title": "Intro", "credit_points": "12", "offered": "1", "prereq": ""},
                {"code": "BBB102", "title": "Next", "credit_points": 12, "offered": "2", "prereq": "aaa101"},
            ]
        )
        assert catalog.lookup("AAA101").prereq == NoPrereq()
        assert catalog.lookup("BBB102").prereq == UnitPrereq("AAA101")
        assert catalog.lookup("BBB102").prereq_text == "aaa101"

    def test_duplicate_code(self):
        record = {"code": "AAA101", "title": "Intro", "credit_points": 12, "offered": "1"}
        with pytest.raises(CatalogError):
            catalog_from_records([record, dict(record)])

    def test_missing_field(self):
        with pytest.raises(CatalogError) as exc_info:
            catalog_from_records([{"code": "AAA101", "title": "Intro", "offered": "1"}])
        assert "credit_points" in str(exc_info.value)

    def test_negative_credit_points(self):
        with pytest.raises(CatalogError):
            catalog_from_records(
                [{"code": "AAA101", "title": "Intro", "credit_points": -1, "offered": "1"}]
            )

    def test_bad_prereq_reports_unit(self):
        with pytest.raises(CatalogError) as exc_info:
            catalog_from_records(
                [{"code": "AAA101", "title": "Intro", "credit_points": 12, "offered": "1", "prereq": "X101 and"}]
            )
        assert exc_info.value.code == "AAA101"


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_json(self, catalog_json_file):
        catalog = load_catalog(catalog_json_file)
        assert len(catalog) == 2
        assert catalog.lookup("BBB102").offered == frozenset(
            {Offering.SEMESTER_1, Offering.SEMESTER_2, Offering.SUMMER}
        )

    def test_json_list(self, tmp_path):
        path = tmp_path / "units.json"
        path.write_text(
            json.dumps([{"code": "AAA101", "title": "Intro", "credit_points": 12, "offered": ["1"]}]),
            encoding="utf-8",
        )
        assert "AAA101" in load_catalog(path)

    def test_csv(self, tmp_path):
        path = tmp_path / "units.csv"
        path.write_text(
            "code,title,credit_points,offered,prereq\n"
            "AAA101,Intro,12,1;2,\n"
            "BBB102,Next,12,2,AAA101\n",
            encoding="utf-8",
        )
        catalog = load_catalog(path)
        assert catalog.lookup("AAA101").prereq == NoPrereq()
        assert catalog.lookup("BBB102").prereq == UnitPrereq("AAA101")
        assert catalog.lookup("BBB102").credit_points == 12

    def test_excel(self, tmp_path):
        path = tmp_path / "units.xlsx"
        pd.DataFrame(
            {
                "code": ["AAA101", "BBB102"],
                "title": ["Intro", "Next"],
                "credit_points": [12, 24],
                "offered": ["1", "1;2;S"],
                "prereq": [None, "AAA101 or 24cp"],
            }
        ).to_excel(path, index=False)
        catalog = load_catalog(path)
        assert catalog.lookup("AAA101").prereq == NoPrereq()
        assert catalog.lookup("BBB102").credit_points == 24
        assert catalog.lookup("BBB102").prereq_text == "AAA101 or 24cp"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "units.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    @pytest.mark.parametrize(
        "content",
        ["{not json", '{"units": {"code": "AAA101"}}', '["AAA101"]'],
    )
    def test_malformed_json(self, tmp_path, content):
        path = tmp_path / "units.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)
