"""Pydantic v2 models for interval datasets loaded from disk."""

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, model_validator

from contiguity.interval import SimpleInterval


class IntervalRecord(BaseModel):
    """One interval and its value as written in a dataset file."""

    start: Any
    end: Any
    value: Any = None

    @model_validator(mode="after")
    def check_bounds(self, info: ValidationInfo) -> "IntervalRecord":
        """Reject records whose start sorts after their end.

        Skipped when the validation context sets ``validate_intervals`` to False.

        Args:
            info: Validation info carrying the optional context.

        Returns:
            The validated record.
        """
        if info.context and not info.context.get("validate_intervals", True):
            return self
        try:
            reversed_bounds = self.start > self.end
        except TypeError as exc:
            raise ValueError(
                f"start {self.start!r} and end {self.end!r} are not comparable"
            ) from exc
        if reversed_bounds:
            raise ValueError(f"start {self.start!r} is after end {self.end!r}")
        return self

    def to_interval(self) -> SimpleInterval:
        """Convert the record bounds into a SimpleInterval.

        Returns:
            Interval spanning ``[start, end)``.
        """
        return SimpleInterval(start=self.start, end=self.end)


class IntervalDataset(BaseModel):
    """A named collection of intervals plus optional points to look up."""

    name: str
    description: str = ""
    intervals: list[IntervalRecord] = Field(default_factory=list)
    points: list[Any] = Field(default_factory=list)


class InsertReport(BaseModel):
    """Outcome of inserting a dataset's records into a tree."""

    accepted: list[IntervalRecord] = Field(default_factory=list)
    rejected: list[IntervalRecord] = Field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)
