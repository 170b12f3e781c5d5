"""Output formatting and reporting."""

from dataclasses import asdict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import utils
from .completion import Suggestion
from .declarations import FieldOrArgument
from .notifications import Notification, Severity

console = Console()
err_console = Console(stderr=True)


def emit_suggestions(suggestions: list[Suggestion], fmt: str) -> None:
    """
    Output completion suggestions.

    Args:
        suggestions: Suggestions to print
        fmt: Output format ("json" or "console")
    """
    if fmt == "json":
        print(utils.to_json([asdict(s) for s in suggestions]))
        return

    if not suggestions:
        console.print("\n[green]✓ Nothing left to declare[/green]\n")
        return

    table = Table(show_header=True, box=None)
    table.add_column("Name", style="cyan")
    table.add_column("Declaration")
    table.add_column("Kind", style="dim")
    table.add_column("Description", style="dim")

    for s in suggestions:
        table.add_row(s.label, escape(s.text), s.type_text, escape(s.tail_text.strip()))

    console.print()
    console.print(table)
    console.print()


def emit_fields(type_name: str, fields: list[FieldOrArgument], declarations: list[str]) -> None:
    """Print the fields of a type next to their rendered declarations."""
    console.print(f"\n[bold cyan]{type_name}[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("GraphQL", style="yellow")
    table.add_column("Java")

    for f, declaration in zip(fields, declarations):
        table.add_row(f.name, escape(utils.describe(f.graphql_type)), escape(declaration))

    console.print(table)
    console.print()


def print_names(title: str, names: list[str]) -> None:
    console.print(f"\n[bold cyan]{title}[/bold cyan]\n")
    for name in names:
        console.print(f"  {name}")
    console.print()


def print_notification(notification: Notification) -> None:
    """Notification sink for terminal use."""
    if notification.severity is Severity.WARNING:
        err_console.print(f"[yellow]⚠ {escape(notification.message)}[/yellow]")
    else:
        err_console.print(f"[red]✖ {escape(notification.message)}[/red]")
