"""
Console output formatting using Rich.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from french_workdays.data.holiday_data import WEEKDAY_NAMES
from french_workdays.data.schemas import Holiday, WorkdayResult


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_result(self, result: WorkdayResult) -> None:
        """
        Print a workday calculation result.

        Args:
            result: WorkdayResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Jours ouvrés[/bold blue]")
        self.console.print()

        # Period table
        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white")

        summary_table.add_row("Du (inclus):", result.start_date.strftime("%d.%m.%Y"))
        summary_table.add_row("Au (exclu):", result.end_date.strftime("%d.%m.%Y"))

        self.console.print(Panel(summary_table, title="[bold]Period[/bold]"))

        # Calculation result table
        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=24)
        calc_table.add_column("Value", style="white", justify="right", width=14)

        calc_table.add_row("Calendar Days:", str(result.calendar_days))
        calc_table.add_row(
            "Weekend Days:",
            f"- {result.weekend_days} ({result.weekends_detail.get('saturdays', 0)} Sat, "
            f"{result.weekends_detail.get('sundays', 0)} Sun)",
        )
        calc_table.add_row("Holidays (on weekdays):", f"- {result.holidays_count}")
        calc_table.add_row("", "─" * 14)
        calc_table.add_row(
            Text("Working Days:", style="bold green"),
            Text(str(result.working_days), style="bold green"),
        )

        if len(result.working_days_by_year) > 1:
            for year, count in result.working_days_by_year.items():
                calc_table.add_row(f"  {year}:", str(count))

        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))

        if result.holidays:
            self.print_holidays(result.holidays)

        self.console.print()

    def print_holidays(self, holidays: List[Holiday], title: str = "Jours fériés") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Jour", style="dim", width=10)
        holiday_table.add_column("Nom", style="white")
        holiday_table.add_column("Type", style="dim")

        for holiday in holidays:
            kind = holiday.kind.value
            if holiday.easter_offset is not None:
                kind = f"{kind} (Pâques +{holiday.easter_offset})"
            holiday_table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
                kind,
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, holidays: List[Holiday]) -> None:
        """
        Print all holidays for a year.

        Args:
            year: Year.
            holidays: List of holidays.
        """
        self.console.print()
        self.console.rule(f"[bold blue]Jours fériés {year}[/bold blue]")
        self.console.print()
        self.print_holidays(holidays, title=f"{len(holidays)} jours fériés")
        self.console.print()

    def print_holiday_check(self, check_date: date, name: Optional[str]) -> None:
        """
        Print whether a date is a holiday.

        Args:
            check_date: Date that was checked.
            name: Holiday name, or None if it is not a holiday.
        """
        day = f"{WEEKDAY_NAMES[check_date.weekday()]} {check_date.strftime('%d.%m.%Y')}"
        if name:
            self.console.print(f"[bold green]{day}[/bold green] is a holiday: {name}")
        else:
            self.console.print(f"[bold]{day}[/bold] is not a holiday")

    def print_easter(self, year: int, easter: date) -> None:
        """Print the date of Easter Sunday for a year."""
        self.console.print(f"Pâques {year}: [bold cyan]{easter.strftime('%d.%m.%Y')}[/bold cyan]")

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
