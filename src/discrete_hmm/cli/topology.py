"""
Topology CLI commands.

Build and display transition matrices and initial state probabilities.
"""

import json
from typing import Optional

import typer
from rich.console import Console

from ..generators import UniformGenerator
from ..topology import ErgodicTopology, ForwardTopology
from .errors import handle_cli_error
from .utils import matrix_table

console = Console()

topology_app = typer.Typer(
    name="topology",
    help="Build state transition topologies"
)


def _show(title: str, A, pi, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps({"transitions": A.tolist(), "initial": pi.tolist()}))
        return

    console.print(matrix_table(f"{title} transitions", A, column_label="to "))
    console.print(matrix_table(f"{title} initial probabilities", pi, row_label=""))


@topology_app.command("forward")
def forward_topology(
    states: int = typer.Option(..., "--states", "-n", help="Number of hidden states"),
    deepness: Optional[int] = typer.Option(
        None, "--deepness", "-d", help="Maximum forward jump, counting the current state"),
    random: bool = typer.Option(False, "--random", help="Draw random transition weights"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables")
):
    """
    Build a forward-only (left-to-right) topology.

    Examples:
    ```
    discrete-hmm topology forward --states 3
    discrete-hmm topology forward --states 5 --deepness 2 --random --seed 7
    ```
    """
    try:
        A, pi = ForwardTopology(states, deepness, random).build(UniformGenerator(seed))
        _show("Forward", A, pi, as_json)
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, "topology forward")


@topology_app.command("ergodic")
def ergodic_topology(
    states: int = typer.Option(..., "--states", "-n", help="Number of hidden states"),
    random: bool = typer.Option(False, "--random", help="Draw random transition weights"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables")
):
    """Build a fully connected topology."""
    try:
        A, pi = ErgodicTopology(states, random).build(UniformGenerator(seed))
        _show("Ergodic", A, pi, as_json)
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, "topology ergodic")
