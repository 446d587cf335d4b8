"""Load YAML interval datasets and build trees from them."""

from pathlib import Path

import yaml

from contiguity.config import Config
from contiguity.interval_tree import ContiguousIntervalTree
from contiguity.models import InsertReport, IntervalDataset


def load_dataset(dataset_path: Path, config: Config | None = None) -> IntervalDataset:
    """Parse a YAML dataset file and return an IntervalDataset model.

    Args:
        dataset_path: Path to the YAML dataset file.
        config: Optional configuration; ``validate_intervals`` controls the
            record bounds check.

    Returns:
        IntervalDataset populated from the YAML data.
    """
    data = yaml.safe_load(dataset_path.read_text())
    if not data:
        raise ValueError("Dataset file is empty")
    config = config or Config()
    return IntervalDataset.model_validate(
        data, context={"validate_intervals": config.validate_intervals}
    )


def build_tree(
    dataset: IntervalDataset, config: Config | None = None
) -> tuple[ContiguousIntervalTree, InsertReport]:
    """Insert every dataset record into a fresh tree, in file order.

    Args:
        dataset: Dataset whose intervals are inserted.
        config: Optional configuration; defaults to one read from the environment.

    Returns:
        Tuple of (tree, report listing accepted and overlapping records).
    """
    config = config or Config()
    tree = ContiguousIntervalTree(validate=config.validate_intervals)
    report = InsertReport()
    for record in dataset.intervals:
        if tree.insert(record.to_interval(), record.value):
            report.accepted.append(record)
        else:
            report.rejected.append(record)
    return tree, report
