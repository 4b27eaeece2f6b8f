"""Column-aligned table widget with shared numeric precision.

Usage::

    table = NumericTable(
        headers=["Run", "Latency", "Cost"],
        rows=[("a", 12.5, 0.03), ("b", 9, 0.125)],
    )
"""

from __future__ import annotations

from numbers import Real

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from tickline.ticks.precision import format_value, get_precision_of_set

Cell = str | float | int


class NumericTable(Widget):
    """Renders a table whose numeric columns share one precision each.

    Numbers in a column are printed with the same number of decimals and
    right-aligned, so the decimal points line up::

        Run | Latency | Cost
        ----+---------+------
        a   |    12.5 | 0.030
        b   |     9.0 | 0.125
    """

    DEFAULT_CSS = """
    NumericTable {
        height: auto;
    }
    """

    headers: reactive[list[str]] = reactive(list, layout=True)
    rows: reactive[list[tuple[Cell, ...]]] = reactive(list, layout=True)

    def __init__(
        self,
        headers: list[str] | None = None,
        rows: list[tuple[Cell, ...]] | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.headers = list(headers) if headers else []
        self.rows = list(rows) if rows else []

    def column_precisions(self) -> list[int]:
        """Shared precision of each column's numeric cells (0 for text columns)."""
        precisions: list[int] = []
        for i in range(len(self.headers)):
            numbers = [row[i] for row in self.rows if i < len(row) and _is_number(row[i])]
            precisions.append(get_precision_of_set(numbers))
        return precisions

    def formatted_rows(self) -> list[list[tuple[str, bool]]]:
        """Cell text plus a right-align flag for every cell."""
        precisions = self.column_precisions()
        formatted: list[list[tuple[str, bool]]] = []
        for row in self.rows:
            cells: list[tuple[str, bool]] = []
            for i in range(len(self.headers)):
                cell = row[i] if i < len(row) else ""
                if _is_number(cell):
                    cells.append((format_value(cell, precisions[i]), True))
                else:
                    cells.append((str(cell), False))
            formatted.append(cells)
        return formatted

    def render(self) -> Text:
        if not self.headers:
            return Text("(no data)")

        rows = self.formatted_rows()

        # Compute the maximum width for each column.
        col_widths = [len(h) for h in self.headers]
        for row in rows:
            for i, (cell, _) in enumerate(row):
                col_widths[i] = max(col_widths[i], len(cell))

        text = Text()

        # Header row.
        header_parts = [h.ljust(col_widths[i]) for i, h in enumerate(self.headers)]
        text.append(" | ".join(header_parts).rstrip(), style="bold")
        text.append("\n")

        # Separator row.
        text.append("-+-".join("-" * w for w in col_widths), style="dim")

        for row in rows:
            text.append("\n")
            parts = [
                cell.rjust(col_widths[i]) if numeric else cell.ljust(col_widths[i])
                for i, (cell, numeric) in enumerate(row)
            ]
            text.append(" | ".join(parts).rstrip())

        return text

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed (header + separator + data rows)."""
        return max(2 + len(self.rows), 1)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
