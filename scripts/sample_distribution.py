#!/usr/bin/env python
"""
Sample a source distribution from a YAML config or preset and summarize it.
"""

import logging
from pathlib import Path

import numpy as np
import typer
from numpy.typing import NDArray
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from source_distributions.config.loading import build_distribution, load_config
from source_distributions.config.presets import get_preset
from source_distributions.config.settings import SamplingConfig
from source_distributions.core.utils import get_rng
from source_distributions.distributions.base import draw_samples

DEFAULT_BINS = 20
QUANTILES = (0.05, 0.25, 0.5, 0.75, 0.95)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("sample_distribution")

console = Console()
app = typer.Typer()


def resolve_config(
    config_path: Path | None, preset: str | None
) -> SamplingConfig:
    """Load the config from a path or a preset name (exactly one)."""
    if (config_path is None) == (preset is None):
        raise typer.BadParameter("Pass either CONFIG_PATH or --preset")
    if preset is not None:
        return get_preset(preset)
    assert config_path is not None
    return load_config(config_path)


def print_summary_table(samples: NDArray[np.float64]) -> None:
    table = Table(title="Sample Summary")
    table.add_column("Statistic", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("count", str(samples.size))
    table.add_row("mean", f"{np.mean(samples):.6g}")
    table.add_row("std", f"{np.std(samples):.6g}")
    table.add_row("min", f"{np.min(samples):.6g}")
    table.add_row("max", f"{np.max(samples):.6g}")
    quantiles = np.quantile(samples, QUANTILES)
    for q, value in zip(QUANTILES, quantiles, strict=True):
        table.add_row(f"q{int(q * 100):02d}", f"{value:.6g}")

    console.print(table)


def print_histogram_table(samples: NDArray[np.float64], bins: int) -> None:
    counts, edges = np.histogram(samples, bins=bins)
    widest = max(int(counts.max()), 1)

    table = Table(title="Histogram")
    table.add_column("Bin", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("")

    for count, low, high in zip(counts, edges[:-1], edges[1:], strict=True):
        bar = "#" * int(round(40 * count / widest))
        table.add_row(f"[{low:.4g}, {high:.4g})", str(count), bar)

    console.print(table)


@app.command()
def main(
    config_path: Path | None = typer.Argument(
        None,
        help="Path to a sampling config YAML file",
    ),
    preset: str | None = typer.Option(
        None,
        help="Name of a bundled preset instead of a config file",
    ),
    n_samples: int | None = typer.Option(
        None,
        min=1,
        help="Number of samples (overrides the config)",
    ),
    seed: int | None = typer.Option(
        None,
        help="Random seed (overrides the config)",
    ),
    bins: int = typer.Option(
        DEFAULT_BINS,
        min=1,
        help="Number of histogram bins",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Draw samples from a configured distribution and summarize them."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = resolve_config(config_path, preset)
        distribution = build_distribution(config)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    count = n_samples if n_samples is not None else config.n_samples
    random_seed = seed if seed is not None else config.random_seed

    console.print(
        Panel(
            f"[bold]Sampling Request[/bold]\n\n"
            f"Distribution: [cyan]{escape(repr(distribution))}[/cyan]\n"
            f"Samples: [cyan]{count}[/cyan]\n"
            f"Seed: [cyan]{random_seed}[/cyan]",
            title="Configuration",
        )
    )

    samples = draw_samples(distribution, count, get_rng(random_seed))
    logger.info("Drew %d samples", samples.size)

    print_summary_table(samples)
    print_histogram_table(samples, bins)


if __name__ == "__main__":
    app()
