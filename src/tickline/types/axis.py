"""Axis query and result types."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from tickline.errors import InvalidAxisQueryError


class LabelRange(StrEnum):
    """How generated label bounds relate to the data range."""

    ANY = "any"
    INCLUDED = "included"
    EXCLUDED = "excluded"

    def accepts(self, dmin: float, dmax: float, lmin: float, lmax: float) -> bool:
        """True if the label bounds ``lmin..lmax`` satisfy this policy."""
        if self is LabelRange.INCLUDED:
            return lmin <= dmin and lmax >= dmax
        if self is LabelRange.EXCLUDED:
            return lmin >= dmin and lmax <= dmax
        return True


@dataclass(frozen=True, slots=True)
class LabelSet:
    """Evenly spaced, strictly ascending axis labels.

    ``fallback`` is set when the search gave up and the labels are a plain
    uniform split of the data range.
    """

    values: tuple[float, ...]
    step: float
    fallback: bool = False

    @property
    def first(self) -> float:
        return self.values[0]

    @property
    def last(self) -> float:
        return self.values[-1]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]


@dataclass(frozen=True, slots=True)
class AxisQuery:
    """Input to the label search."""

    data_min: float
    data_max: float
    target_label_count: float
    inclusion: LabelRange = LabelRange.ANY

    def validate(self) -> None:
        """Raise :class:`InvalidAxisQueryError` if the query breaks the contract."""
        for name in ("data_min", "data_max", "target_label_count"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidAxisQueryError(f"{name} must be finite, got {value!r}", **{name: value})
        if self.data_min > self.data_max:
            raise InvalidAxisQueryError(
                f"data_min ({self.data_min}) is greater than data_max ({self.data_max})",
                data_min=self.data_min,
                data_max=self.data_max,
            )
        if self.target_label_count < 1:
            raise InvalidAxisQueryError(
                f"target_label_count must be at least 1, got {self.target_label_count}",
                target_label_count=self.target_label_count,
            )

    @property
    def is_degenerate(self) -> bool:
        return self.data_min == self.data_max


@dataclass(frozen=True, slots=True)
class AxisResult:
    """Labels, shared precision and linear scale for one axis."""

    labels: LabelSet
    precision: int
    scale: float
    effective_min: float
    effective_max: float
    target_label_count: int

    def position(self, value: float) -> float:
        """Offset of ``value`` from the start of the axis, in the caller's units."""
        return (value - self.effective_min) * self.scale

    def format_label(self, value: float) -> str:
        from tickline.ticks.precision import format_value

        return format_value(value, self.precision)

    def formatted_labels(self) -> list[str]:
        return [self.format_label(v) for v in self.labels]
