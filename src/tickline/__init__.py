"""Tickline: axis labeling, chart and table widgets for Textual."""

from tickline.errors import ConfigurationError, InvalidAxisQueryError, TicklineError
from tickline.ticks import (
    ChartAxisModel,
    compose,
    format_value,
    generate_labels,
    get_precision,
    get_precision_of_set,
)
from tickline.types import AxisQuery, AxisResult, LabelRange, LabelSet

__version__ = "0.1.0"

__all__ = [
    "AxisQuery",
    "AxisResult",
    "ChartAxisModel",
    "ConfigurationError",
    "InvalidAxisQueryError",
    "LabelRange",
    "LabelSet",
    "TicklineError",
    "compose",
    "format_value",
    "generate_labels",
    "get_precision",
    "get_precision_of_set",
]
