"""Command-line entry point for editdist."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import DEFAULT_STRATEGY, Strategy, get_strategy
from .formats import from_json
from .tree import Folder, Node, structurally_equal

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="editdist",
    help="Edit distance between sequences and multilevel lists.",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("editdist").setLevel(level)


def _resolve(strategy: str):
    try:
        return get_strategy(strategy)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)


def _load_tree(path: Path) -> Node:
    if not path.exists():
        console.print(f"[red]File not found:[/red] {escape(str(path))}")
        raise typer.Exit(code=1)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot read {escape(str(path))}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    try:
        node = from_json(text)
    except (json.JSONDecodeError, TypeError) as exc:
        console.print(f"[red]Invalid multilevel list in {escape(str(path))}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    logger.info("Loaded %s (%d nodes)", path, node.size())
    return node


@app.command()
def distance(
    s1: str = typer.Argument("NOHELLO", help="First string."),
    s2: str = typer.Argument("HELLGO", help="Second string."),
    strategy: str = typer.Option(
        DEFAULT_STRATEGY.value, "--strategy", "-s",
        help="naive, tabulation or memoization.",
    ),
    all_strategies: bool = typer.Option(
        False, "--all", help="Run every strategy and tabulate the results."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Edit distance between two strings, character by character."""
    _configure_logging(verbose)

    if not all_strategies:
        fn = _resolve(strategy)
        console.print(f"Edit distance between {escape(s1)} and {escape(s2)} is {fn(s1, s2)}")
        return

    table = Table(title=f"{escape(s1)} → {escape(s2)}")
    table.add_column("strategy")
    table.add_column("distance", justify="right")
    for member in Strategy:
        table.add_row(member.value, str(get_strategy(member)(s1, s2)))
    console.print(table)


@app.command()
def tree(
    first: Path = typer.Argument(..., help="JSON file holding the first list."),
    second: Path = typer.Argument(..., help="JSON file holding the second list."),
    strategy: str = typer.Option(
        DEFAULT_STRATEGY.value, "--strategy", "-s",
        help="naive, tabulation or memoization.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Compare two multilevel lists stored as JSON."""
    _configure_logging(verbose)
    fn = _resolve(strategy)

    a = _load_tree(first)
    b = _load_tree(second)
    if not (isinstance(a, Folder) and isinstance(b, Folder)):
        console.print("[red]Both lists must have a folder at the top level[/red]")
        raise typer.Exit(code=1)

    equal = structurally_equal(a, b)
    console.print(f"Structurally equal: {'[green]yes[/green]' if equal else '[yellow]no[/yellow]'}")
    console.print(f"Edit distance between children is {fn(a.children, b.children)}")


def main() -> None:
    app()
