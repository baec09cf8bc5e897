"""
Export functionality for workday calculation results.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from french_workdays.data.schemas import Holiday, WorkdayResult

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports workday calculation results to various formats."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, prefix: str, extension: str, output_path: Optional[str]) -> Path:
        """Return the explicit output path, or a timestamped one in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(
        self, result: WorkdayResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to JSON file.

        Args:
            result: WorkdayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("workdays", "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self._result_to_dict(result), f, indent=2, ensure_ascii=False)

        logger.info("Exported result to %s", file_path)
        return str(file_path)

    def export_csv(
        self, result: WorkdayResult, output_path: Optional[str] = None
    ) -> str:
        """
        Export result to CSV file.

        Args:
            result: WorkdayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("workdays", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)

            writer.writerow([
                "Start Date",
                "End Date (exclusive)",
                "Calendar Days",
                "Weekend Days",
                "Saturdays",
                "Sundays",
                "Holidays Count",
                "Working Days",
            ])
            writer.writerow([
                result.start_date.isoformat(),
                result.end_date.isoformat(),
                result.calendar_days,
                result.weekend_days,
                result.weekends_detail.get("saturdays", 0),
                result.weekends_detail.get("sundays", 0),
                result.holidays_count,
                result.working_days,
            ])

        logger.info("Exported result to %s", file_path)
        return str(file_path)

    def export_holidays_csv(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export holidays list to CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name", "Kind", "Easter Offset"])
            for holiday in holidays:
                writer.writerow([
                    holiday.holiday_date.isoformat(),
                    holiday.name,
                    holiday.kind.value,
                    "" if holiday.easter_offset is None else holiday.easter_offset,
                ])

        logger.info("Exported %d holidays to %s", len(holidays), file_path)
        return str(file_path)

    def export_both(
        self, result: WorkdayResult
    ) -> Tuple[str, str]:
        """
        Export result to both JSON and CSV.

        Args:
            result: WorkdayResult to export.

        Returns:
            Tuple of (json_path, csv_path).
        """
        json_path = self.export_json(result)
        csv_path = self.export_csv(result)
        return json_path, csv_path

    def _result_to_dict(self, result: WorkdayResult) -> dict:
        """
        Convert WorkdayResult to a JSON-serializable dictionary.

        Args:
            result: WorkdayResult to convert.

        Returns:
            Dictionary representation.
        """
        return {
            "start_date": result.start_date.isoformat(),
            "end_date": result.end_date.isoformat(),
            "calculation": {
                "calendar_days": result.calendar_days,
                "weekend_days": result.weekend_days,
                "weekends_detail": result.weekends_detail,
                "holidays_count": result.holidays_count,
                "working_days": result.working_days,
                "working_days_by_year": {
                    str(year): count for year, count in result.working_days_by_year.items()
                },
            },
            "holidays": [
                {
                    "date": h.holiday_date.isoformat(),
                    "name": h.name,
                    "kind": h.kind.value,
                }
                for h in result.holidays
            ],
            "metadata": {
                "calculation_timestamp": result.calculation_timestamp.isoformat(),
            },
        }
