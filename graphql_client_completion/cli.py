"""CLI for graphql-client-completion."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import completion, config, declarations, report
from .completion import Container, ContainerKind
from .notifications import Notifier
from .schema_cache import SchemaCache, Workspace

app = typer.Typer(help="GraphQL typesafe client completion")
config_app = typer.Typer(help="Configuration")
app.add_typer(config_app, name="config")

console = Console()


def setup_logging(level: str) -> None:
    level = str(level).upper()
    if not isinstance(logging.getLevelName(level), int):
        console.print(f"[red]Error: unknown log level {level}[/red]")
        raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@contextmanager
def open_cache(root: str, verbose: bool) -> Iterator[SchemaCache]:
    """
    Build a schema cache for a workspace directory.

    Notifications go to stderr and are flushed when the block exits.
    """
    root_path = Path(root).resolve()
    cfg = config.load_for_workspace(str(root_path))
    setup_logging("DEBUG" if verbose else cfg.log_level)

    workspace = Workspace(name=root_path.name, root_path=str(root_path))
    notifier = Notifier(report.print_notification)
    try:
        yield SchemaCache(lambda: workspace, notifier, cfg)
    finally:
        notifier.flush()
        notifier.close()


@app.command("types")
def types_cmd(
    root: str = typer.Argument(".", help="Workspace root"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """List the types declared in the workspace schema."""
    with open_cache(root, verbose) as cache:
        names = sorted(cache.type_names())
    if not names:
        raise typer.Exit(1)
    report.print_names("Types", names)


@app.command("fields")
def fields_cmd(
    type_name: str = typer.Argument(..., help="GraphQL type name"),
    root: str = typer.Argument(".", help="Workspace root"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show the fields of a type and their Java declarations."""
    with open_cache(root, verbose) as cache:
        fields = cache.fields_in(type_name)
        render = (
            declarations.method_declaration
            if type_name in completion.ROOT_TYPES
            else declarations.field_declaration
        )
        rows = []
        for f in fields:
            text = completion.declaration(cache, f, render)
            if text is not None:
                rows.append((f, text))
    if not fields:
        console.print(f"[yellow]No fields found for {type_name}[/yellow]")
        raise typer.Exit(1)
    report.emit_fields(type_name, [f for f, _ in rows], [text for _, text in rows])


@app.command("suggest")
def suggest_cmd(
    root: str = typer.Argument(".", help="Workspace root"),
    api: bool = typer.Option(False, "--api", help="Suggest operations for a client API interface"),
    type_name: Optional[str] = typer.Option(None, "--type", help="Suggest fields for a type class"),
    existing: str = typer.Option("", help="Comma separated names already declared"),
    output: str = typer.Option("console", help="Output format (console|json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Suggest declarations that are missing from an API interface or type class."""
    if api == bool(type_name):
        console.print("[red]Error: pass exactly one of --api or --type NAME[/red]")
        raise typer.Exit(1)

    declared = frozenset(name.strip() for name in existing.split(",") if name.strip())
    if api:
        container = Container(ContainerKind.API, "api", declared)
    else:
        container = Container(ContainerKind.TYPE, type_name, declared)

    with open_cache(root, verbose) as cache:
        suggestions = completion.suggest(cache, container)
    report.emit_suggestions(suggestions, output)


@config_app.command("init")
def config_init(
    path: Optional[str] = typer.Option(None, help="Config file path"),
):
    """Write an example configuration file."""
    try:
        written = config.create_example_config(path)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓ Config written to {written}[/green]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
