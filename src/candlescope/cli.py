"""
Command-line interface for candlescope.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import Config
from .data.synthetic import generate_candles
from .logger import configure_logging, get_analysis_adapter
from .models.market_data import Candle, CandleDataError, Timeframe, load_candles
from .models.signals import MarketReport, PatternBias, Signal
from .strategies.pattern_engine import analyze_market
from .strategies.patterns.pattern_config import get_pattern_config, load_pattern_config
from .strategies.signal_generator import SignalConfiguration

console = Console()

SIGNAL_STYLES = {
    Signal.BUY: "bold green",
    Signal.SELL: "bold red",
    Signal.NEUTRAL: "bold yellow",
}

BIAS_STYLES = {
    PatternBias.BULLISH: "green",
    PatternBias.BEARISH: "red",
    PatternBias.NEUTRAL: "yellow",
}


@click.group()
@click.version_option(version=__version__, prog_name="candlescope")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a .env configuration file"
)
@click.option(
    "--pattern-config",
    "-p",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a JSON pattern threshold file"
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging"
)
@click.pass_context
def main(ctx: click.Context, config: Optional[Path], pattern_config: Optional[Path], verbose: bool) -> None:
    """
    candlescope: candlestick signal and pattern analysis

    Computes a 6/14 SMA crossover signal and detects candlestick and chart
    patterns over an OHLCV candle sequence.
    """
    ctx.ensure_object(dict)

    try:
        ctx.obj["config"] = Config.load_from_env(str(config) if config else None)
    except (ValidationError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if verbose:
        ctx.obj["config"].logging.level = "DEBUG"

    ctx.obj["logger"] = configure_logging(ctx.obj["config"].logging)

    if pattern_config:
        try:
            load_pattern_config(pattern_config)
        except (OSError, ValueError, TypeError) as e:
            click.echo(f"Error loading pattern configuration: {e}", err=True)
            sys.exit(1)
        ctx.obj["logger"].info(f"Loaded pattern configuration from {pattern_config}")


@main.command()
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def analyze(ctx: click.Context, file: Path, as_json: bool) -> None:
    """Analyze candles stored in a JSON FILE (list or Twelve Data payload)."""
    logger = get_analysis_adapter(ctx.obj["logger"], source=file.name)

    try:
        candles = load_candles(file)
    except (CandleDataError, ValidationError, OSError) as e:
        console.print(f"[red]✗[/red] Could not load candles from {file}: {escape(str(e))}")
        sys.exit(1)

    logger.info(f"Loaded {len(candles)} candles from {file}")
    _report(candles, as_json, title=file.name)


@main.command()
@click.option(
    "--timeframe",
    "-t",
    type=click.Choice([tf.value for tf in Timeframe]),
    default=None,
    help="Candle interval (defaults to configuration)"
)
@click.option("--count", "-n", type=click.IntRange(1, 5000), default=None, help="Number of candles")
@click.option("--base-price", type=float, default=None, help="Starting price")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible data")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def demo(
    ctx: click.Context,
    timeframe: Optional[str],
    count: Optional[int],
    base_price: Optional[float],
    seed: Optional[int],
    as_json: bool
) -> None:
    """Analyze synthetically generated candles."""
    settings = ctx.obj["config"].analysis
    tf = Timeframe(timeframe) if timeframe else Timeframe(settings.default_timeframe)

    candles = generate_candles(
        count=count or settings.synthetic_candle_count,
        timeframe=tf,
        base_price=base_price or settings.synthetic_base_price,
        seed=seed
    )

    logger = get_analysis_adapter(ctx.obj["logger"], source="synthetic", timeframe=tf.value)
    logger.info(f"Generated {len(candles)} candles")
    _report(candles, as_json, title=f"Synthetic {tf.value}")


@main.command(name="config")
def show_config() -> None:
    """Show the active signal and pattern thresholds."""
    payload = {
        "signal": SignalConfiguration().model_dump(),
        "patterns": get_pattern_config().to_dict(),
    }
    console.print_json(json.dumps(payload))


def _report(candles: List[Candle], as_json: bool, title: str) -> None:
    report = analyze_market(candles)

    if as_json:
        console.print_json(report.model_dump_json())
        return

    _print_report(report, candles, title)


def _print_report(report: MarketReport, candles: List[Candle], title: str) -> None:
    analysis = report.analysis
    last_time = candles[-1].time.strftime("%Y-%m-%d %H:%M UTC") if candles else "n/a"

    console.print(f"\n[bold]📈 {title}[/bold] ({len(candles)} candles, last {last_time})")
    style = SIGNAL_STYLES[analysis.signal]
    console.print(f"Signal: [{style}]{analysis.signal.value}[/{style}]  Strength: {analysis.strength}%")

    if analysis.indicators:
        table = Table(title="Indicators", show_header=True)
        table.add_column("Name", style="cyan")
        table.add_column("Value", justify="right")
        table.add_column("Interpretation")
        for indicator in analysis.indicators:
            table.add_row(indicator.name, f"{indicator.value:.5f}", indicator.interpretation)
        console.print(table)
    else:
        console.print("[yellow]Not enough history for a signal[/yellow]")

    if not report.patterns:
        console.print("No patterns")
        return

    table = Table(title="Patterns", show_header=True)
    table.add_column("Pattern", style="cyan")
    table.add_column("Type")
    table.add_column("Bias")
    table.add_column("Description")
    for pattern in report.patterns:
        bias_style = BIAS_STYLES[pattern.bias]
        table.add_row(
            pattern.name,
            pattern.type.value,
            f"[{bias_style}]{pattern.bias.value}[/{bias_style}]",
            pattern.description
        )
    console.print(table)


if __name__ == "__main__":
    main()
