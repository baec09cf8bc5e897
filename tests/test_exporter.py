"""
Tests for result export.
"""

import csv
import json
from datetime import date
from pathlib import Path

import pytest

from french_workdays.core.calculator import WorkdayCalculator
from french_workdays.core.holiday_provider import HolidayProvider
from french_workdays.output.exporter import ResultExporter


@pytest.fixture
def result():
    """Workday result for the first half of 2024."""
    return WorkdayCalculator().calculate_simple(date(2024, 1, 1), date(2024, 7, 1))


@pytest.fixture
def exporter(tmp_path):
    """Create an exporter writing into a temporary directory."""
    return ResultExporter(output_directory=str(tmp_path / "results"))


class TestResultExporter:
    """Tests for ResultExporter."""

    def test_export_json_default_path(self, exporter, result, tmp_path):
        """Without an explicit path, a timestamped file is created."""
        path = exporter.export_json(result)

        assert path.startswith(str(tmp_path / "results"))
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["start_date"] == "2024-01-01"
        assert data["end_date"] == "2024-07-01"
        assert data["calculation"]["working_days"] == result.working_days
        assert [h["name"] for h in data["holidays"]][:2] == ["Jour de l'an", "Lundi de Pâques"]

    def test_export_json_keeps_accents(self, exporter, result, tmp_path):
        """Holiday names are written as UTF-8, not escaped."""
        path = exporter.export_json(result, str(tmp_path / "out" / "r.json"))

        assert "Pâques" in Path(path).read_text(encoding="utf-8")

    def test_export_both(self, exporter, result):
        """JSON and CSV exports are both written."""
        json_path, csv_path = exporter.export_both(result)

        assert json_path.endswith(".json")
        assert csv_path.endswith(".csv")

    def test_export_holidays_csv(self, exporter, tmp_path):
        """Holiday CSV has one row per holiday with the Easter offset."""
        holidays = HolidayProvider().get_holidays(2023)

        path = exporter.export_holidays_csv(holidays, str(tmp_path / "holidays.csv"))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 11
        ascension = next(r for r in rows if r["Name"] == "Jeudi de l'Ascension")
        assert ascension == {
            "Date": "2023-05-18",
            "Name": "Jeudi de l'Ascension",
            "Kind": "movable",
            "Easter Offset": "39",
        }
