"""Axis tick-label generation."""

from tickline.ticks.axis import ChartAxisModel, compose, target_label_count
from tickline.ticks.precision import format_value, get_precision, get_precision_of_set
from tickline.ticks.wilkinson import (
    DEFAULT_SEARCH_CONFIG,
    NICE_NUMBERS,
    LabelSearchConfig,
    ScoreWeights,
    generate_labels,
)

__all__ = [
    "DEFAULT_SEARCH_CONFIG",
    "NICE_NUMBERS",
    "ChartAxisModel",
    "LabelSearchConfig",
    "ScoreWeights",
    "compose",
    "format_value",
    "generate_labels",
    "get_precision",
    "get_precision_of_set",
    "target_label_count",
]
