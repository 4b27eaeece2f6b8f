"""Chart data model."""

from tickline.charts.data import ChartExtents, Line, LineChartData

__all__ = ["ChartExtents", "Line", "LineChartData"]
