"""
Sampling CLI command.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import get_config
from ..generators import ExponentialGenerator
from .errors import handle_cli_error

console = Console()


def sample(
    rate: float = typer.Option(..., "--rate", "-r", help="Rate (inverse mean) of the distribution"),
    count: Optional[int] = typer.Option(None, "--count", "-c", help="Number of samples to draw"),
    seed: int = typer.Option(0, "--seed", help="Seed of the uniform source"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table")
):
    """
    Draw exponential samples and compare their moments with theory.

    Examples:
    ```
    discrete-hmm sample --rate 2.5 --count 10000 --seed 3
    ```
    """
    try:
        if count is None:
            count = get_config('sampling', 'count')

        generator = ExponentialGenerator(rate, seed)
        values = generator.sample(count)

        summary = {
            "count": count,
            "mean": float(values.mean()) if count else 0.0,
            "variance": float(values.var()) if count else 0.0,
            "expected_mean": generator.mean,
            "expected_variance": generator.variance
        }

        if as_json:
            typer.echo(json.dumps(summary))
            return

        table = Table(title=f"Exponential(rate={rate}) over {count} samples")
        table.add_column("Moment", style="cyan")
        table.add_column("Empirical", style="green", justify="right")
        table.add_column("Expected", style="magenta", justify="right")
        table.add_row("Mean", f"{summary['mean']:.6f}", f"{summary['expected_mean']:.6f}")
        table.add_row("Variance", f"{summary['variance']:.6f}", f"{summary['expected_variance']:.6f}")
        console.print(table)
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, "sample")
