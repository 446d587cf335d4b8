"""Binary search tree over contiguous, non-overlapping intervals.

Intervals are ``[start, end)`` spans ordered by a caller-supplied three-way
comparator. Overlapping inserts are rejected, zero-length intervals at the same
point stack, and in-order traversal also yields the empty gaps between stored
intervals so the result partitions the whole covered range.

The tree is not thread-safe and never rebalances; its shape is fixed by
insertion order.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator

from contiguity.comparator import Comparator, natural_order
from contiguity.interval import Interval, SimpleInterval

logger = logging.getLogger(__name__)

Visitor = Callable[[Interval, Any], None]


class IntervalNode:
    """Tree node owning one interval, its value and both child links."""

    __slots__ = ["interval", "value", "left", "right"]

    def __init__(self, interval: Interval, value: Any):
        self.interval: Interval = interval
        self.value: Any = value
        self.left: IntervalNode | None = None
        self.right: IntervalNode | None = None

    def size(self) -> int:
        """Count the nodes in the subtree rooted here."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        return count

    def alpha_balanced(self, alpha: float) -> bool:
        """Check the BB[alpha] weight criterion for this node.

        Args:
            alpha: Weight bound, usually between 0.5 and 1.

        Returns:
            True when neither subtree holds more than ``alpha`` of the
            nodes rooted here.
        """
        left = self.left.size() if self.left else 0
        right = self.right.size() if self.right else 0
        bound = alpha * (left + right + 1)
        return left <= bound and right <= bound

    def __repr__(self) -> str:
        return f"IntervalNode({self.interval}, {self.value!r})"


class SearchOutcome(str, Enum):
    """Where a searched point landed."""

    exact = "exact"
    in_gap = "in_gap"
    out_of_range = "out_of_range"


@dataclass(frozen=True)
class SearchResult:
    """Result of a point search.

    Attributes:
        outcome: Whether the point hit a stored interval, a gap, or nothing.
        node: The containing node, only set for an exact hit.
    """

    outcome: SearchOutcome
    node: IntervalNode | None = None

    @property
    def found(self) -> bool:
        """True when the point lies within the covered range."""
        return self.outcome != SearchOutcome.out_of_range

    @property
    def value(self) -> Any:
        """Value of the containing node, or None outside stored intervals."""
        return self.node.value if self.node else None


class ContiguousIntervalTree:
    """Unbalanced BST of non-overlapping intervals with gap-aware traversal."""

    def __init__(self, comparator: Comparator = natural_order, validate: bool = True):
        self.root: IntervalNode | None = None
        self._comparator = comparator
        self._validate = validate

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    # --- Mutation ---

    def insert(self, interval: Interval, value: Any = None) -> bool:
        """Insert an interval unless it overlaps a stored one.

        Zero-length intervals may be inserted any number of times at the same
        point; they are chained to the left of the existing node.

        Args:
            interval: Interval to store.
            value: Value associated with the interval.

        Returns:
            True when inserted, False when rejected as overlapping. A rejected
            insert leaves the tree unchanged.
        """
        cmp = self._comparator
        if self._validate and cmp(interval.start, interval.end) > 0:
            raise ValueError(
                f"Interval start {interval.start!r} sorts after end {interval.end!r}"
            )

        new_node = IntervalNode(interval, value)
        if self.root is None:
            self.root = new_node
            return True

        current = self.root
        while True:
            if cmp(interval.start, current.interval.start) <= 0:
                if cmp(interval.end, current.interval.start) > 0:
                    break
                if current.left is None:
                    current.left = new_node
                    return True
                current = current.left
            elif cmp(interval.start, current.interval.end) >= 0:
                if current.right is None:
                    current.right = new_node
                    return True
                current = current.right
            else:
                break

        logger.debug("Rejected %s: overlaps %s", interval, current.interval)
        return False

    # --- Queries ---

    def search(self, point: Any) -> SearchResult:
        """Locate a point relative to the stored intervals.

        The walk tracks ``drift`` (right moves minus left moves) and ``depth``
        (total moves). Falling off a leaf after moving only leftward, or only
        rightward, means the point lies beyond that extremity of the covered
        range; any mixed path means it sits in a gap bounded on both sides.

        Args:
            point: Key to locate.

        Returns:
            SearchResult with an exact node, an in-gap marker, or out of range.
        """
        cmp = self._comparator
        drift = 0
        depth = 0
        current = self.root
        while current is not None:
            if cmp(point, current.interval.start) < 0:
                if current.left is None:
                    if drift == -depth:
                        return SearchResult(SearchOutcome.out_of_range)
                    return SearchResult(SearchOutcome.in_gap)
                current = current.left
                drift -= 1
                depth += 1
            elif cmp(point, current.interval.end) > 0:
                if current.right is None:
                    if drift == depth:
                        return SearchResult(SearchOutcome.out_of_range)
                    return SearchResult(SearchOutcome.in_gap)
                current = current.right
                drift += 1
                depth += 1
            else:
                return SearchResult(SearchOutcome.exact, current)
        return SearchResult(SearchOutcome.out_of_range)

    def find(self, point: Any) -> bool:
        """Return True when a point is inside a stored interval or a gap."""
        return self.search(point).found

    def __contains__(self, point: Any) -> bool:
        return self.find(point)

    # --- Traversal ---

    def items(self) -> Iterator[tuple[Interval, Any]]:
        """Yield ``(interval, value)`` pairs in increasing start order.

        Gaps strictly between consecutive stored intervals are yielded as
        SimpleInterval instances with a None value. Nothing is yielded before
        the first or after the last stored interval.
        """
        cmp = self._comparator
        last: Interval | None = None
        for node in self.nodes():
            if last is not None and cmp(last.end, node.interval.start) < 0:
                yield SimpleInterval(start=last.end, end=node.interval.start), None
            yield node.interval, node.value
            last = node.interval

    def __iter__(self) -> Iterator[tuple[Interval, Any]]:
        return self.items()

    def nodes(self) -> Iterator[IntervalNode]:
        """Yield the stored nodes in order, without gaps.

        Sorted inserts can build chains deeper than the recursion limit, so
        the walk keeps its own stack.
        """
        stack: list[IntervalNode] = []
        node = self.root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node
                node = node.right

    def traverse_in_order(self, visit: Visitor) -> None:
        """Call ``visit(interval, value)`` for every pair ``items()`` yields.

        The tree must not be mutated from inside ``visit``.
        """
        for interval, value in self.items():
            visit(interval, value)

    def traverse_between(self, start: Any, end: Any, visit: Visitor) -> None:
        raise NotImplementedError("Range traversal is not supported")

    # --- Counting and diagnostics ---

    def size(self) -> int:
        """Number of stored intervals.

        May be lower than ``num_intervals()``, which also counts gaps.
        """
        return self.root.size() if self.root else 0

    def __len__(self) -> int:
        return self.size()

    def num_intervals(self) -> int:
        """Number of contiguous intervals, gaps between stored ones included."""
        return sum(1 for _ in self.items())

    def height(self) -> int:
        depth = 0
        level = [self.root] if self.root else []
        while level:
            depth += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return depth

    def alpha_balanced(self, alpha: float) -> bool:
        """Weight-balance check at the root. Never triggers restructuring."""
        return self.root.alpha_balanced(alpha) if self.root else True
