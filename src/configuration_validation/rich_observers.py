"""Rich-based console output for configuration validation.

Provides a live failure printer and a summary table renderer.

Requires the 'rich' package: pip install configuration-validation[rich]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from configuration_validation.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

    from configuration_validation.results import ConfigurationValidationItem

__all__ = ["RichFailureObserver", "build_validation_table", "print_validation_table"]


class RichFailureObserver(ValidationObserver):
    """Print failures to a Rich console as they are recorded.

    Example:
        observer = RichFailureObserver()
        config.add_observer(observer)
        config.validate_configuration()

    Requires:
        pip install rich
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
        """
        from rich.console import Console

        self._console = console or Console()
        self._failed = 0

    @property
    def failed(self) -> int:
        """Number of failures printed since the last VALIDATION_STARTED."""
        return self._failed

    def on_event(self, event: ValidationEvent) -> None:
        """Print failure and completion events."""
        if event.event_type == ValidationEventType.VALIDATION_STARTED:
            self._failed = 0

        elif event.event_type == ValidationEventType.VALIDATION_FAILED:
            from rich.markup import escape

            self._failed += 1
            data = {
                key: escape("" if value is None else str(value))
                for key, value in event.data.items()
            }
            self._console.print(
                f"[red]✗[/] [cyan]{data.get('section')}[/] : [bold]{data.get('item')}[/] "
                f'failed: "{data.get("message")}" (Value: {data.get("value")})',
                markup=True,
                highlight=False,
            )

        elif event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            if event.data.get("is_valid"):
                self._console.print("[green]✓[/] No problems found in configuration.")
            else:
                count = event.data.get("error_count", self._failed)
                self._console.print(f"[red]✗ {count} validations failed.[/]")


def build_validation_table(
    failures: Iterable[ConfigurationValidationItem],
    title: str = "Configuration validation failures",
) -> Table:
    """Build a Rich table with one row per failure."""
    from rich.markup import escape
    from rich.table import Table

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Section", style="cyan")
    table.add_column("Item", style="bold")
    table.add_column("Value", style="yellow")
    table.add_column("Message", style="red")

    for failure in failures:
        value = "" if failure.value is None else str(failure.value)
        table.add_row(
            escape(failure.section), escape(failure.item), escape(value), escape(failure.message)
        )

    if table.row_count == 0:
        table.add_row("-", "-", "-", "No problems found")

    return table


def print_validation_table(
    failures: Iterable[ConfigurationValidationItem],
    console: Console | None = None,
) -> None:
    """Print failures as a Rich table."""
    from rich.console import Console

    (console or Console()).print(build_validation_table(failures))
