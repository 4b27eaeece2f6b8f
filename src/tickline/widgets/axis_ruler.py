"""Horizontal axis ruler widget.

Usage::

    ruler = AxisRuler(low=1.0, high=10.0, min_label_spacing=8)
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from tickline.errors import InvalidAxisQueryError
from tickline.ticks.axis import compose

_RULE = "\u2500"  # ─
_TICK = "\u252c"  # ┬


class AxisRuler(Widget):
    """Two-line axis: a rule with tick marks and the formatted labels below.

    Labels are centred on their ticks and kept inside the widget; a label
    that would touch its left neighbour is dropped, its tick stays.
    """

    DEFAULT_CSS = """
    AxisRuler {
        height: 2;
    }
    """

    low: reactive[float] = reactive(0.0)
    high: reactive[float] = reactive(1.0)
    min_label_spacing: reactive[float] = reactive(8.0)

    def __init__(
        self,
        low: float = 0.0,
        high: float = 1.0,
        min_label_spacing: float = 8.0,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.low = low
        self.high = high
        self.min_label_spacing = min_label_spacing

    def render(self) -> Text:
        return self.render_ruler(self.size.width)

    def render_ruler(self, width: int) -> Text:
        """Render the ruler for a given number of columns."""
        if width <= 0:
            return Text("")
        try:
            axis = compose(self.low, self.high, max(width - 1, 1), self.min_label_spacing)
        except InvalidAxisQueryError as exc:
            return Text(f"({exc})", style="red")

        rule = [_RULE] * width
        labels = [" "] * width
        label_end = -1

        for value in axis.labels:
            col = min(max(round(axis.position(value)), 0), width - 1)
            rule[col] = _TICK

            label = axis.format_label(value)
            if len(label) > width:
                continue
            start = min(max(col - len(label) // 2, 0), width - len(label))
            if start <= label_end:
                continue
            labels[start : start + len(label)] = list(label)
            label_end = start + len(label)

        text = Text()
        text.append("".join(rule), style="dim")
        text.append("\n")
        text.append("".join(labels).rstrip())
        return text

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """A rule line and a label line."""
        return 2
