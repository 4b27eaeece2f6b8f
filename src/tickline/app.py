"""Demo application showing the axis ruler and numeric table."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from tickline.charts.data import LineChartData
from tickline.config import ChartConfig
from tickline.ticks.axis import ChartAxisModel
from tickline.widgets.axis_ruler import AxisRuler
from tickline.widgets.numeric_table import NumericTable


class TicklineDemoApp(App):
    """Renders one chart's x and y axes as rulers plus its points as a table."""

    TITLE = "tickline"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("plus,equals", "zoom(0.5)", "Zoom in"),
        Binding("minus", "zoom(2.0)", "Zoom out"),
    ]

    DEFAULT_CSS = """
    #axes {
        height: auto;
        padding: 1 2;
    }
    .axis-title {
        color: $text-muted;
    }
    """

    def __init__(self, data: LineChartData, config: ChartConfig | None = None) -> None:
        super().__init__()
        self._data = data
        self._config = config or ChartConfig()

    def compose(self) -> ComposeResult:
        extents = self._data.extents()
        spacing = ChartAxisModel(self._config).horizontal_spacing
        yield Header()
        with Vertical(id="axes"):
            yield Static(self._data.title or "(untitled)", classes="axis-title")
            yield Static("x", classes="axis-title")
            yield AxisRuler(extents.min_x, extents.max_x, spacing, id="x-ruler")
            yield Static("y", classes="axis-title")
            yield AxisRuler(extents.min_y, extents.max_y, spacing, id="y-ruler")
        yield NumericTable(
            headers=["Line", "x", "y"],
            rows=[
                (line.color, x, y)
                for line in self._data.lines
                for x, y in line.points
            ],
            id="points",
        )
        yield Footer()

    def action_zoom(self, factor: float) -> None:
        """Scale both rulers' ranges around their centres."""
        for ruler in self.query(AxisRuler):
            centre = (ruler.low + ruler.high) / 2
            half = (ruler.high - ruler.low) / 2 * float(factor)
            ruler.low, ruler.high = centre - half, centre + half
