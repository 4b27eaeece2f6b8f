"""Tests for axis composition (target count, labels, precision, scale)."""

from __future__ import annotations

import math

import pytest

from tickline.config import ChartConfig
from tickline.errors import InvalidAxisQueryError
from tickline.ticks.axis import ChartAxisModel, compose, target_label_count
from tickline.types.axis import AxisResult, LabelRange


class TestTargetLabelCount:
    def test_floor_division(self) -> None:
        assert target_label_count(500, 50) == 10
        assert target_label_count(520, 50) == 10

    def test_at_least_one(self) -> None:
        assert target_label_count(10, 50) == 1

    @pytest.mark.parametrize("pixels", [0, -5])
    def test_non_positive_pixels(self, pixels: float) -> None:
        with pytest.raises(InvalidAxisQueryError, match="available_pixels"):
            target_label_count(pixels, 10)

    def test_non_positive_spacing(self) -> None:
        with pytest.raises(InvalidAxisQueryError, match="min_label_spacing_px"):
            target_label_count(100, 0)


class TestCompose:
    def test_reference_example(self) -> None:
        result = compose(data_min=0, data_max=100, available_pixels=500, min_label_spacing_px=50)
        assert isinstance(result, AxisResult)
        assert result.target_label_count == 10
        assert result.scale == 500 / (result.effective_max - result.effective_min)

    def test_effective_range_covers_data_and_labels(self) -> None:
        result = compose(1.0, 10.0, 400, 80)
        assert result.effective_min == min(1.0, result.labels.first)
        assert result.effective_max == max(10.0, result.labels.last)
        assert result.effective_min <= 1.0
        assert result.effective_max >= 10.0

    def test_included_by_default(self) -> None:
        result = compose(3.7, 41.2, 300, 40)
        assert result.labels.first <= 3.7
        assert result.labels.last >= 41.2

    def test_precision_is_shared(self) -> None:
        result = compose(1.0, 10.0, 400, 80)
        assert list(result.labels) == [0.0, 2.5, 5.0, 7.5, 10.0]
        assert result.precision == 1
        assert result.formatted_labels() == ["0.0", "2.5", "5.0", "7.5", "10.0"]

    def test_positions_span_available_space(self) -> None:
        result = compose(1.0, 10.0, 400, 80)
        assert result.position(result.effective_min) == pytest.approx(0.0)
        assert result.position(result.effective_max) == pytest.approx(400.0)
        for value in result.labels:
            assert 0.0 <= result.position(value) <= 400.0 + 1e-9

    def test_excluded_policy(self) -> None:
        result = compose(1.0, 10.0, 400, 80, inclusion=LabelRange.EXCLUDED)
        assert result.labels.first >= 1.0
        assert result.labels.last <= 10.0
        assert result.effective_min == 1.0
        assert result.effective_max == 10.0

    def test_degenerate_data(self) -> None:
        result = compose(5.0, 5.0, 200, 40)
        assert result.scale > 0
        assert result.effective_min < 5.0 < result.effective_max

    def test_contract_violations(self) -> None:
        with pytest.raises(InvalidAxisQueryError):
            compose(10.0, 1.0, 400, 80)
        with pytest.raises(InvalidAxisQueryError):
            compose(1.0, 10.0, 0, 80)

    def test_precision_cap(self) -> None:
        result = compose(0.0, 1.0, 1100, 100, max_precision_digits=0)
        assert result.precision == 0


class TestChartAxisModel:
    def test_spacing_from_font_size(self) -> None:
        model = ChartAxisModel(ChartConfig(font_size=12.0))
        assert model.horizontal_spacing == pytest.approx(40.0)
        assert model.vertical_spacing == pytest.approx(30.0)

    def test_default_config(self) -> None:
        model = ChartAxisModel()
        assert model.config == ChartConfig()

    def test_x_axis_subtracts_padding(self) -> None:
        config = ChartConfig(font_size=12.0, padding_left=50.0, padding_right=50.0)
        model = ChartAxisModel(config)
        result = model.x_axis(0.0, 100.0, 500.0)
        assert result.target_label_count == math.floor(400.0 / model.horizontal_spacing)
        assert result.position(result.effective_max) == pytest.approx(400.0)

    def test_y_axis_uses_vertical_spacing(self) -> None:
        config = ChartConfig(font_size=12.0, padding_top=10.0, padding_bottom=10.0)
        model = ChartAxisModel(config)
        result = model.y_axis(-1.0, 1.0, 320.0)
        assert result.target_label_count == math.floor(300.0 / model.vertical_spacing)
        assert result.labels.first <= -1.0
        assert result.labels.last >= 1.0

    def test_budget_comes_from_config(self) -> None:
        config = ChartConfig(max_evaluations=1)
        result = ChartAxisModel(config).x_axis(1.0, 10.0, 400.0)
        assert result.labels.fallback
