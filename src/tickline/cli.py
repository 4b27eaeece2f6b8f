"""CLI entry point using Click."""

from __future__ import annotations

import json
import math

import click

from tickline import __version__
from tickline.charts.data import Line, LineChartData
from tickline.config import ChartConfig, load_config
from tickline.errors import TicklineError
from tickline.logger import get_logger, setup_logging
from tickline.ticks.axis import compose
from tickline.ticks.precision import format_value, get_precision_of_set
from tickline.ticks.wilkinson import DEFAULT_SEARCH_CONFIG, generate_labels
from tickline.types.axis import LabelRange


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Path to a YAML config file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="tickline")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, debug: bool) -> None:
    """Tickline - axis labels for charts and tables.

    Pass negative numbers after ``--``, e.g. ``tickline ticks -- -5 5``.
    """
    overrides = {"debug": True} if debug else {}
    try:
        config = load_config(config_path, overrides=overrides)
    except TicklineError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(debug=config.debug)
    get_logger(__name__).debug(
        "config_loaded", path=config_path, max_evaluations=config.max_evaluations
    )
    ctx.obj = config


@main.command()
@click.argument("data_min", type=float)
@click.argument("data_max", type=float)
@click.option("--count", "-n", type=float, default=5.0, show_default=True,
              help="Target number of labels")
@click.option("--inclusion", type=click.Choice([r.value for r in LabelRange]), default="any",
              show_default=True, help="How labels relate to the data range")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_obj
def ticks(
    config: ChartConfig,
    data_min: float,
    data_max: float,
    count: float,
    inclusion: str,
    as_json: bool,
) -> None:
    """Print labels for the range DATA_MIN..DATA_MAX."""
    search = DEFAULT_SEARCH_CONFIG.with_budget(config.max_evaluations)
    try:
        labels = generate_labels(data_min, data_max, count, inclusion, config=search)
    except TicklineError as exc:
        raise click.ClickException(str(exc)) from exc

    precision = get_precision_of_set(labels, max_digits=config.max_precision_digits)
    if as_json:
        click.echo(json.dumps({
            "labels": list(labels),
            "step": labels.step,
            "precision": precision,
            "fallback": labels.fallback,
        }))
        return
    click.echo(" ".join(format_value(v, precision) for v in labels))


@main.command()
@click.argument("values", nargs=-1, required=True, type=float)
@click.pass_obj
def precision(config: ChartConfig, values: tuple[float, ...]) -> None:
    """Print the number of decimals needed to show every VALUE."""
    click.echo(get_precision_of_set(values, max_digits=config.max_precision_digits))


@main.command()
@click.argument("data_min", type=float)
@click.argument("data_max", type=float)
@click.option("--size", type=float, required=True, help="Available axis length")
@click.option("--spacing", type=float, required=True, help="Minimum distance between labels")
@click.pass_obj
def axis(config: ChartConfig, data_min: float, data_max: float, size: float, spacing: float) -> None:
    """Print the composed axis (labels, precision, scale) for DATA_MIN..DATA_MAX."""
    search = DEFAULT_SEARCH_CONFIG.with_budget(config.max_evaluations)
    try:
        result = compose(
            data_min,
            data_max,
            size,
            spacing,
            search_config=search,
            max_precision_digits=config.max_precision_digits,
        )
    except TicklineError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"labels: {' '.join(result.formatted_labels())}")
    click.echo(f"target: {result.target_label_count}")
    click.echo(f"precision: {result.precision}")
    click.echo(f"range: {result.effective_min!r}..{result.effective_max!r}")
    click.echo(f"scale: {result.scale!r}")


@main.command()
@click.option("--points", type=int, default=24, show_default=True, help="Points per line")
@click.pass_obj
def demo(config: ChartConfig, points: int) -> None:
    """Launch the interactive demo."""
    from tickline.app import TicklineDemoApp

    TicklineDemoApp(_demo_data(points), config).run()


def _demo_data(points: int) -> LineChartData:
    wave = tuple((i * 0.25, round(10 + 8 * math.sin(i / 3), 2)) for i in range(points))
    ramp = tuple((i * 0.25, round(2.5 + i * 0.75, 2)) for i in range(points))
    return (
        LineChartData()
        .with_title("Demo")
        .with_line(Line(points=wave, color="green"))
        .with_line(Line(points=ramp, color="cyan"))
    )
