import pytest
import yaml



@pytest.fixture
def tree():
    """Provide an empty tree ordered by natural key order.

    Returns:
        Empty ContiguousIntervalTree.
    """
    from contiguity.interval_tree import ContiguousIntervalTree

    return ContiguousIntervalTree()


@pytest.fixture
def sorted_scenario_tree():
    """Provide a tree filled out of order with six touching or gapped intervals.

    Returns:
        ContiguousIntervalTree holding [1,2) [2,3) [3,4) [6,9) [10,12) [12,14).
    """
    from contiguity.interval import SimpleInterval
    from contiguity.interval_tree import ContiguousIntervalTree

    it = ContiguousIntervalTree()
    for start, end in [(6, 9), (1, 2), (3, 4), (2, 3), (12, 14), (10, 12)]:
        it.insert(SimpleInterval(start=start, end=end), "data")
    return it


@pytest.fixture
def write_dataset(tmp_path):
    """Provide a helper that writes a dataset mapping to a YAML file.

    Args:
        tmp_path: Pytest tmp_path fixture.

    Returns:
        Callable taking a dict and returning the written Path.
    """

    def _write(data: dict, name: str = "dataset.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path

    return _write


@pytest.fixture
def schedule_data():
    """Provide a dataset mapping with one overlapping record.

    Returns:
        Dict shaped like an IntervalDataset YAML file.
    """
    return {
        "name": "schedule",
        "description": "Booked slots of a meeting room.",
        "intervals": [
            {"start": 9, "end": 10, "value": "standup"},
            {"start": 1, "end": 4, "value": "maintenance"},
            {"start": 10, "end": 12, "value": "planning"},
            {"start": 11, "end": 13, "value": "overlapping lunch"},
            {"start": 12, "end": 14, "value": "review"},
            {"start": 6, "end": 6, "value": "door check"},
        ],
        "points": [0, 5, 9, 20],
    }
