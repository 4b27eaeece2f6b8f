"""Tests for the line chart data model."""

from __future__ import annotations

import pytest

from tickline.charts.data import ChartExtents, Line, LineChartData


@pytest.fixture
def chart() -> LineChartData:
    return (
        LineChartData()
        .with_title("Latency")
        .with_line(Line(points=((0, 10.0), (1, 12.5), (2, 20.0)), color="green"))
        .with_line(Line(points=((0.5, 15.25), (3, 11.0)), color="cyan"))
    )


class TestLineChartData:
    def test_builder_returns_new_instances(self) -> None:
        empty = LineChartData()
        titled = empty.with_title("A")
        assert empty.title is None
        assert titled.title == "A"
        assert titled.with_line(Line(points=((1, 1),))).lines != titled.lines

    def test_lines_keep_order(self, chart: LineChartData) -> None:
        assert [line.color for line in chart.lines] == ["green", "cyan"]

    def test_equality_by_value(self) -> None:
        a = LineChartData().with_line(Line(points=((1, 2),)))
        b = LineChartData().with_line(Line(points=((1, 2),)))
        assert a == b


class TestExtents:
    def test_empty_chart(self) -> None:
        assert LineChartData().extents() == ChartExtents(1.0, 1.0, 1.0, 1.0)

    def test_x_range_is_exact(self, chart: LineChartData) -> None:
        extents = chart.extents()
        assert extents.min_x == 0.0
        assert extents.max_x == 3.0

    def test_y_range_gets_headroom(self, chart: LineChartData) -> None:
        extents = chart.extents()
        assert extents.min_y == pytest.approx(9.5)
        assert extents.max_y == pytest.approx(21.0)

    def test_negative_y_headroom_widens(self) -> None:
        data = LineChartData().with_line(Line(points=((0, -20.0), (1, -10.0))))
        extents = data.extents()
        assert extents.min_y == pytest.approx(-21.0)
        assert extents.max_y == pytest.approx(-9.5)


class TestPrecision:
    def test_data_precision(self, chart: LineChartData) -> None:
        assert chart.precision_x() == 1
        assert chart.precision_y() == 2

    def test_empty_defaults_to_one(self) -> None:
        assert LineChartData().precision_x() == 1
        assert LineChartData().precision_y() == 1


class TestAxes:
    def test_axes_cover_extents(self, chart: LineChartData) -> None:
        extents = chart.extents()
        x_axis = chart.x_axis(width=60, spacing=10)
        y_axis = chart.y_axis(height=20, spacing=5)
        assert x_axis.labels.first <= extents.min_x
        assert x_axis.labels.last >= extents.max_x
        assert y_axis.labels.first <= extents.min_y
        assert y_axis.labels.last >= extents.max_y
        assert x_axis.target_label_count == 6
        assert y_axis.target_label_count == 4

    def test_empty_chart_axis_is_degenerate_but_valid(self) -> None:
        axis = LineChartData().x_axis(width=40, spacing=10)
        assert axis.labels.first <= 1.0 <= axis.labels.last
