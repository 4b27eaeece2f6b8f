"""Textual widgets built on the axis labeling core.

Lightweight widgets rendered with Unicode characters and Rich styling.
"""

from __future__ import annotations

from tickline.widgets.axis_ruler import AxisRuler
from tickline.widgets.numeric_table import NumericTable

__all__ = [
    "AxisRuler",
    "NumericTable",
]
