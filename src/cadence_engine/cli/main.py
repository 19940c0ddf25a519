"""Command line interface entry points."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, replace
from pathlib import Path
from typing import Optional

import typer

from ..analysis.runner import analyze
from ..config import get_settings
from ..core.errors import CadenceError
from ..core.spec import load_config
from ..io import artifacts
from ..io.timestamps import load_timestamps_csv

logger = logging.getLogger(__name__)

app = typer.Typer(help="Detect recurring periods in event timestamps.")


def _configure_logging(level: Optional[str]) -> None:
    name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("analyze")
def analyze_cmd(
    input_path: Path = typer.Option(
        ...,
        "--input",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="CSV file with epoch-millisecond timestamps",
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", help="JSON output file (default: stdout)"
    ),
    min_period: Optional[float] = typer.Option(None, "--min-period", help="Minimum period in hours"),
    max_period: Optional[float] = typer.Option(None, "--max-period", help="Maximum period in hours"),
    num_periods: Optional[int] = typer.Option(None, "--num-periods", help="Number of periods to return"),
    samples_per_peak: Optional[int] = typer.Option(
        None, "--samples-per-peak", help="Samples per peak for the periodogram"
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON file with period configuration; flags override its values",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
) -> None:
    """Analyse a timestamp file and print or save the JSON result."""

    _configure_logging(log_level)
    settings = get_settings()
    overrides = {
        "min_period": min_period,
        "max_period": max_period,
        "num_periods": num_periods,
        "samples_per_peak": samples_per_peak,
    }

    try:
        config = settings.period_config()
        if config_path is not None:
            config = load_config(config_path, config)
        config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        timestamps = load_timestamps_csv(input_path)
        logger.info("Loaded %d timestamps from %s", len(timestamps), input_path)
        result = analyze(timestamps, config)
    except CadenceError as exc:
        typer.echo(f"Analysis failed: {exc}", err=True)
        raise typer.Exit(1)

    if output_path is not None:
        artifacts.write_result(output_path, result)
        logger.info("Results saved to %s", output_path)
    else:
        typer.echo(artifacts.result_to_json(result))


@app.command("defaults")
def defaults_cmd() -> None:
    """Print the default period configuration."""

    typer.echo(json.dumps(asdict(get_settings().period_config()), separators=(",", ":")))


if __name__ == "__main__":
    app()
