"""
Output formatting and export functionality.
"""

from french_workdays.output.formatter import ConsoleFormatter
from french_workdays.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
