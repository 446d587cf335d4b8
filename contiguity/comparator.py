"""Three-way comparators used to order tree keys."""

from typing import Any, Callable, TypeVar

K = TypeVar("K")

Comparator = Callable[[K, K], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two keys by their own ``<`` and ``>`` operators.

    Args:
        a: Left-hand key.
        b: Right-hand key.

    Returns:
        Negative when ``a`` sorts first, positive when ``b`` does, else 0.
    """
    return (a > b) - (a < b)


def reverse_order(comparator: Comparator) -> Comparator:
    """Return a comparator that sorts in the opposite direction.

    Args:
        comparator: Comparator to invert.

    Returns:
        New comparator with its sign flipped.
    """

    def _reversed(a, b) -> int:
        return comparator(b, a)

    return _reversed


def key_order(key: Callable[[Any], Any]) -> Comparator:
    """Build a comparator that orders keys by ``key(k)``.

    Args:
        key: Projection applied to each key before comparing.

    Returns:
        Comparator comparing the projected values naturally.
    """

    def _by_key(a, b) -> int:
        return natural_order(key(a), key(b))

    return _by_key
