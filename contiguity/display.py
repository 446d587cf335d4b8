"""Rich terminal display helpers for interval trees."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from contiguity.interval_tree import ContiguousIntervalTree, IntervalNode, SearchOutcome
from contiguity.models import InsertReport

_console = Console()

_OUTCOME_STYLES = {
    SearchOutcome.exact: "green",
    SearchOutcome.in_gap: "yellow",
    SearchOutcome.out_of_range: "red",
}


def configure_logging(level: str = "WARNING") -> None:
    """Route standard logging through a rich handler.

    Args:
        level: Logging level name for the root logger.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def display_intervals(
    tree: ContiguousIntervalTree, title: str = "Intervals", console: Console | None = None
) -> None:
    """Print the in-order traversal as a table, gaps included.

    Args:
        tree: Tree to traverse.
        title: Table title.
        console: Optional console override for tests.
    """
    c = console or _console
    table = Table(title=title)
    table.add_column("Interval")
    table.add_column("Value")
    table.add_column("Kind")

    stored = {id(node.interval) for node in tree.nodes()}
    for interval, value in tree.items():
        if id(interval) not in stored:
            table.add_row(escape(str(interval)), "", "[dim]gap[/dim]")
        else:
            table.add_row(escape(str(interval)), escape(str(value)), "stored")
    c.print(table)
    c.print(f"{tree.size()} stored, {tree.num_intervals()} contiguous intervals")


def display_structure(
    tree: ContiguousIntervalTree, alpha: float = 0.5, console: Console | None = None
) -> None:
    """Print the node layout with each node's alpha-balance flag.

    Args:
        tree: Tree whose shape is rendered.
        alpha: Weight bound passed to ``alpha_balanced``.
        console: Optional console override for tests.
    """
    c = console or _console
    if tree.root is None:
        c.print("[dim](empty tree)[/dim]")
        return

    def _label(node: IntervalNode) -> str:
        balanced = node.alpha_balanced(alpha)
        color = "green" if balanced else "red"
        return f"{escape(str(node.interval))} [{color}]({balanced})[/{color}]"

    root = Tree(_label(tree.root))
    pending: list[tuple[Tree, IntervalNode]] = [(root, tree.root)]
    while pending:
        branch, node = pending.pop()
        for side, child in (("L", node.left), ("R", node.right)):
            if child is not None:
                pending.append((branch.add(f"{side} {_label(child)}"), child))
    c.print(root)
    c.print(f"height {tree.height()}, alpha={alpha}")


def display_insert_report(report: InsertReport, console: Console | None = None) -> None:
    """Print how many records were inserted and which ones overlapped.

    Args:
        report: Insert report from ``build_tree``.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[green]Inserted {report.accepted_count} interval(s)[/green]")
    if not report.rejected:
        return
    c.print(f"[yellow]Rejected {report.rejected_count} overlapping interval(s):[/yellow]")
    for record in report.rejected:
        interval = escape(str(record.to_interval()))
        c.print(f"[yellow]- {interval}: {escape(str(record.value))}[/yellow]")


def display_search_results(
    tree: ContiguousIntervalTree, points: list[Any], console: Console | None = None
) -> None:
    """Print the search outcome for each point.

    Args:
        tree: Tree to search.
        points: Keys to look up.
        console: Optional console override for tests.
    """
    c = console or _console
    table = Table(title="Search")
    table.add_column("Point")
    table.add_column("Outcome")
    table.add_column("Interval")
    table.add_column("Value")

    for point in points:
        result = tree.search(point)
        style = _OUTCOME_STYLES[result.outcome]
        interval = escape(str(result.node.interval)) if result.node else ""
        value = "" if result.value is None else escape(str(result.value))
        table.add_row(
            escape(str(point)), f"[{style}]{result.outcome.value}[/{style}]", interval, value
        )
    c.print(table)


def display_error(message: str, console: Console | None = None) -> None:
    """Print an error message in red.

    Args:
        message: Error message to display.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[red]Error: {message}[/red]")
