"""Interval protocol and the simple start/end interval model."""

from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict

K = TypeVar("K")


@runtime_checkable
class Interval(Protocol):
    """Anything exposing ``start`` and ``end`` can be stored in a tree."""

    @property
    def start(self) -> Any: ...

    @property
    def end(self) -> Any: ...


class SimpleInterval(BaseModel, Generic[K]):
    """A plain ``[start, end)`` pair.

    Also used for the gap intervals synthesized during traversal.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    start: K
    end: K

    @classmethod
    def of(cls, start: K, end: K) -> "SimpleInterval[K]":
        """Build an interval from positional bounds.

        Args:
            start: Inclusive lower bound.
            end: Exclusive upper bound.

        Returns:
            New SimpleInterval.
        """
        return cls(start=start, end=end)

    @property
    def is_empty(self) -> bool:
        """True when ``start == end`` by natural equality.

        A tree ordered by a custom comparator may treat other intervals as
        zero-length too; this property does not consult any comparator.
        """
        return self.start == self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
