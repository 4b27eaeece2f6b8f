"""Tests for the NumericTable widget."""

from __future__ import annotations

from rich.text import Text

from tickline.widgets.numeric_table import NumericTable


class TestNumericTable:
    def test_empty_headers(self) -> None:
        table = NumericTable()
        assert "(no data)" in str(table.render())

    def test_column_precisions(self) -> None:
        table = NumericTable(
            headers=["Run", "Latency", "Cost"],
            rows=[("a", 12.5, 0.03), ("b", 9, 0.125)],
        )
        assert table.column_precisions() == [0, 1, 3]

    def test_numbers_share_decimals(self) -> None:
        table = NumericTable(
            headers=["Run", "Latency", "Cost"],
            rows=[("a", 12.5, 0.03), ("b", 9, 0.125)],
        )
        rendered = str(table.render())
        assert "12.5" in rendered
        assert " 9.0" in rendered
        assert "0.030" in rendered
        assert "0.125" in rendered

    def test_layout(self) -> None:
        table = NumericTable(
            headers=["Run", "Latency", "Cost"],
            rows=[("a", 12.5, 0.03), ("b", 9, 0.125)],
        )
        lines = str(table.render()).split("\n")
        assert lines == [
            "Run | Latency | Cost",
            "----+---------+------",
            "a   |    12.5 | 0.030",
            "b   |     9.0 | 0.125",
        ]

    def test_short_rows_are_padded(self) -> None:
        table = NumericTable(headers=["A", "B"], rows=[(1.5,)])
        lines = str(table.render()).split("\n")
        assert len(lines) == 3
        assert lines[2].startswith("1.5")

    def test_booleans_are_text(self) -> None:
        table = NumericTable(headers=["Flag"], rows=[(True,), (False,)])
        assert table.column_precisions() == [0]
        assert "True" in str(table.render())

    def test_render_returns_text(self) -> None:
        table = NumericTable(headers=["A"], rows=[(1,)])
        assert isinstance(table.render(), Text)

    def test_content_height(self) -> None:
        table = NumericTable(headers=["A"], rows=[(1,), (2,), (3,)])
        assert table.get_content_height(None, None, 40) == 5
