"""CLI entry point for inspecting interval datasets."""

import argparse
from pathlib import Path

import yaml
from pydantic import ValidationError

from contiguity.config import Config
from contiguity.display import (
    configure_logging,
    display_error,
    display_insert_report,
    display_intervals,
    display_search_results,
    display_structure,
)
from contiguity.interval_tree import ContiguousIntervalTree
from contiguity.loader import build_tree, load_dataset
from contiguity.models import IntervalDataset


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with show, structure and find subcommands.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="ctree")
    subcommands = parser.add_subparsers(dest="command", required=True)

    show_parser = subcommands.add_parser("show")
    show_parser.add_argument("dataset_path")

    structure_parser = subcommands.add_parser("structure")
    structure_parser.add_argument("dataset_path")
    structure_parser.add_argument(
        "--alpha", type=float, default=None,
        help="Weight bound for the balance flag (defaults to config)",
    )

    find_parser = subcommands.add_parser("find")
    find_parser.add_argument("dataset_path")
    find_parser.add_argument(
        "points", nargs="*",
        help="Points to look up (defaults to the dataset's points)",
    )
    return parser


def parse_point(raw: str):
    """Parse a command-line point as a YAML scalar so numbers stay numbers.

    Args:
        raw: Point as typed on the command line.

    Returns:
        Parsed scalar value.
    """
    return yaml.safe_load(raw)


def load_tree(
    dataset_path: Path, config: Config
) -> tuple[ContiguousIntervalTree, IntervalDataset]:
    """Load a dataset, build its tree and print the insert report.

    Args:
        dataset_path: Location of the YAML dataset.
        config: Active configuration.

    Returns:
        Tuple of (tree holding every non-overlapping record, dataset).
    """
    if not dataset_path.exists():
        display_error(f"Dataset file not found: {dataset_path}")
        raise SystemExit(1)
    try:
        dataset = load_dataset(dataset_path, config)
        tree, report = build_tree(dataset, config)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        display_error(str(exc))
        raise SystemExit(1) from exc
    display_insert_report(report)
    return tree, dataset


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args and dispatch to show, structure or find behavior.

    Args:
        argv: Optional argument vector for testing.
    """
    args = build_parser().parse_args(argv)
    try:
        config = Config()
    except ValidationError as exc:
        display_error(f"Invalid configuration: {exc}")
        raise SystemExit(1) from exc
    configure_logging(config.log_level)

    dataset_path = Path(args.dataset_path)
    tree, dataset = load_tree(dataset_path, config)

    if args.command == "show":
        display_intervals(tree)
    elif args.command == "structure":
        alpha = args.alpha if args.alpha is not None else config.balance_alpha
        display_structure(tree, alpha=alpha)
    elif args.command == "find":
        if args.points:
            points = [parse_point(raw) for raw in args.points]
        else:
            points = dataset.points
        try:
            display_search_results(tree, points)
        except TypeError as exc:
            display_error(f"Points are not comparable with the dataset keys: {exc}")
            raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
