"""Axis composition: space budget in, labels, precision and scale out."""

from __future__ import annotations

import math

from tickline.config import ChartConfig
from tickline.errors import InvalidAxisQueryError
from tickline.ticks.precision import MAX_PRECISION_DIGITS, get_precision_of_set
from tickline.ticks.wilkinson import DEFAULT_SEARCH_CONFIG, LabelSearchConfig, generate_labels
from tickline.types.axis import AxisResult, LabelRange

# Font size to minimum label spacing, horizontal and vertical axes.
HORIZONTAL_SPACING_RATIO = 0.3
VERTICAL_SPACING_RATIO = 0.4


def target_label_count(available_pixels: float, min_label_spacing_px: float) -> int:
    """Number of labels that fit in *available_pixels* (at least 1)."""
    if not available_pixels > 0:
        raise InvalidAxisQueryError(
            f"available_pixels must be positive, got {available_pixels}",
            available_pixels=available_pixels,
        )
    if not min_label_spacing_px > 0:
        raise InvalidAxisQueryError(
            f"min_label_spacing_px must be positive, got {min_label_spacing_px}",
            min_label_spacing_px=min_label_spacing_px,
        )
    return max(1, math.floor(available_pixels / min_label_spacing_px))


def compose(
    data_min: float,
    data_max: float,
    available_pixels: float,
    min_label_spacing_px: float,
    *,
    inclusion: LabelRange | str = LabelRange.INCLUDED,
    search_config: LabelSearchConfig = DEFAULT_SEARCH_CONFIG,
    max_precision_digits: int = MAX_PRECISION_DIGITS,
) -> AxisResult:
    """Compute labels, shared precision and value-to-position scale for an axis.

    The effective range spans both the data and the labels, so every label
    maps inside ``0..available_pixels``.
    """
    target = target_label_count(available_pixels, min_label_spacing_px)
    labels = generate_labels(data_min, data_max, target, inclusion, config=search_config)

    effective_min = min(data_min, labels.first)
    effective_max = max(data_max, labels.last)
    span = effective_max - effective_min
    scale = available_pixels / span if span > 0 else 0.0

    return AxisResult(
        labels=labels,
        precision=get_precision_of_set(labels, max_digits=max_precision_digits),
        scale=scale,
        effective_min=effective_min,
        effective_max=effective_max,
        target_label_count=target,
    )


class ChartAxisModel:
    """Builds both axes of a chart from its configuration.

    Label spacing follows the configured font size: horizontal labels need
    ``font_size / 0.3`` units, vertical ones ``font_size / 0.4``.
    """

    def __init__(self, config: ChartConfig | None = None) -> None:
        self.config = config or ChartConfig()
        self._search_config = DEFAULT_SEARCH_CONFIG.with_budget(self.config.max_evaluations)

    @property
    def horizontal_spacing(self) -> float:
        return self.config.font_size / HORIZONTAL_SPACING_RATIO

    @property
    def vertical_spacing(self) -> float:
        return self.config.font_size / VERTICAL_SPACING_RATIO

    def x_axis(self, data_min: float, data_max: float, width: float) -> AxisResult:
        bounds = width - self.config.padding_left - self.config.padding_right
        return self._compose(data_min, data_max, bounds, self.horizontal_spacing)

    def y_axis(self, data_min: float, data_max: float, height: float) -> AxisResult:
        bounds = height - self.config.padding_top - self.config.padding_bottom
        return self._compose(data_min, data_max, bounds, self.vertical_spacing)

    def _compose(self, data_min: float, data_max: float, bounds: float, spacing: float) -> AxisResult:
        return compose(
            data_min,
            data_max,
            bounds,
            spacing,
            search_config=self._search_config,
            max_precision_digits=self.config.max_precision_digits,
        )
