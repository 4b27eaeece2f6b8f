"""Line chart data model.

Usage::

    data = (
        LineChartData()
        .with_title("Requests")
        .with_line(Line(points=((0, 1.5), (1, 2.25), (2, 4.0)), color="green"))
    )
    extents = data.extents()
    x_axis = data.x_axis(width=60, spacing=10)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from tickline.ticks.axis import compose
from tickline.ticks.precision import get_precision_of_set
from tickline.types.axis import AxisResult

# Fraction of each y bound's magnitude added as headroom.
Y_PADDING = 0.05


@dataclass(frozen=True, slots=True)
class Line:
    """One series of ``(x, y)`` points drawn in a single color."""

    points: tuple[tuple[float, float], ...]
    color: str = "green"


@dataclass(frozen=True, slots=True)
class ChartExtents:
    """Value range covered by the chart's data."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float


@dataclass(frozen=True, slots=True)
class LineChartData:
    """Immutable chart content: an optional title and a list of lines."""

    title: str | None = None
    lines: tuple[Line, ...] = ()

    def with_title(self, title: str) -> LineChartData:
        return replace(self, title=title)

    def with_line(self, line: Line) -> LineChartData:
        return replace(self, lines=(*self.lines, line))

    def _xs(self) -> Iterator[float]:
        return (float(x) for line in self.lines for x, _ in line.points)

    def _ys(self) -> Iterator[float]:
        return (float(y) for line in self.lines for _, y in line.points)

    def extents(self) -> ChartExtents:
        """Data extents; the y range gets headroom. Empty charts span ``1..1``."""
        xs = list(self._xs())
        ys = list(self._ys())
        if not xs:
            return ChartExtents(1.0, 1.0, 1.0, 1.0)
        min_y, max_y = min(ys), max(ys)
        return ChartExtents(
            min_x=min(xs),
            max_x=max(xs),
            min_y=min_y - Y_PADDING * abs(min_y),
            max_y=max_y + Y_PADDING * abs(max_y),
        )

    def precision_x(self) -> int:
        """Decimals needed to show every x value (1 when there is no data)."""
        xs = list(self._xs())
        return get_precision_of_set(xs) if xs else 1

    def precision_y(self) -> int:
        """Decimals needed to show every y value (1 when there is no data)."""
        ys = list(self._ys())
        return get_precision_of_set(ys) if ys else 1

    def x_axis(self, width: float, spacing: float) -> AxisResult:
        extents = self.extents()
        return compose(extents.min_x, extents.max_x, width, spacing)

    def y_axis(self, height: float, spacing: float) -> AxisResult:
        extents = self.extents()
        return compose(extents.min_y, extents.max_y, height, spacing)
