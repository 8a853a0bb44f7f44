"""
Inference CLI commands.

Decode, evaluate and predict observation sequences with a model described
on the command line.
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import get_config
from ..logger import get_logger
from .errors import handle_cli_error
from .utils import build_model

console = Console()
logger = get_logger(__name__)

SEQUENCE_ARGUMENT = typer.Argument(..., help="Observation symbols, e.g. 0 1 1 1")
STATES_OPTION = typer.Option(None, "--states", "-n", help="Number of states of a forward model")
SYMBOLS_OPTION = typer.Option(None, "--symbols", "-m", help="Number of symbols (uniform emissions)")
DEEPNESS_OPTION = typer.Option(None, "--deepness", "-d", help="Forward model deepness")
RANDOM_OPTION = typer.Option(False, "--random", help="Random forward transitions")
SEED_OPTION = typer.Option(None, "--seed", help="Seed for random transitions")
TRANSITIONS_OPTION = typer.Option(None, "--transitions", "-A", help="Transition matrix as JSON")
EMISSIONS_OPTION = typer.Option(None, "--emissions", "-B", help="Emission matrix as JSON")
INITIAL_OPTION = typer.Option(None, "--initial", "-p", help="Initial probabilities as JSON")
LOG_OPTION = typer.Option(False, "--log", help="Report log-probabilities")
JSON_OPTION = typer.Option(False, "--json", help="Print JSON instead of rich output")


def decode(
    sequence: List[int] = SEQUENCE_ARGUMENT,
    states: Optional[int] = STATES_OPTION,
    symbols: Optional[int] = SYMBOLS_OPTION,
    deepness: Optional[int] = DEEPNESS_OPTION,
    random: bool = RANDOM_OPTION,
    seed: Optional[int] = SEED_OPTION,
    transitions: Optional[str] = TRANSITIONS_OPTION,
    emissions: Optional[str] = EMISSIONS_OPTION,
    initial: Optional[str] = INITIAL_OPTION,
    logarithm: bool = LOG_OPTION,
    as_json: bool = JSON_OPTION
):
    """
    Find the most likely state path for a sequence (Viterbi).

    Examples:
    ```
    discrete-hmm decode 0 1 1 --states 3 --symbols 2
    discrete-hmm decode 0 1 -A '[[0.9,0.1],[0,1]]' -B '[[1,0],[0,1]]' -p '[1,0]'
    ```
    """
    try:
        model = build_model(states, symbols, deepness, random, seed, transitions, emissions, initial)
        path, probability = model.decode(sequence, logarithm=logarithm)

        if as_json:
            typer.echo(json.dumps({"path": path.tolist(), "probability": probability}))
            return

        label = "Log-probability" if logarithm else "Probability"
        console.print(Panel.fit(
            f"[bold]Viterbi Path[/bold]\n"
            f"Sequence: {list(sequence)}\n"
            f"States:   [cyan]{path.tolist()}[/cyan]\n"
            f"{label}: {probability:.6g}",
            border_style="blue"
        ))
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, "decode")


def evaluate(
    sequence: List[int] = SEQUENCE_ARGUMENT,
    states: Optional[int] = STATES_OPTION,
    symbols: Optional[int] = SYMBOLS_OPTION,
    deepness: Optional[int] = DEEPNESS_OPTION,
    random: bool = RANDOM_OPTION,
    seed: Optional[int] = SEED_OPTION,
    transitions: Optional[str] = TRANSITIONS_OPTION,
    emissions: Optional[str] = EMISSIONS_OPTION,
    initial: Optional[str] = INITIAL_OPTION,
    logarithm: bool = LOG_OPTION,
    as_json: bool = JSON_OPTION
):
    """
    Compute the probability of a sequence (forward algorithm).

    Examples:
    ```
    discrete-hmm evaluate 0 1 1 1 --states 3 --symbols 2 --log
    ```
    """
    try:
        model = build_model(states, symbols, deepness, random, seed, transitions, emissions, initial)
        probability = model.evaluate(sequence, logarithm=logarithm)

        if as_json:
            typer.echo(json.dumps({"probability": probability}))
            return

        label = "Log-likelihood" if logarithm else "Probability"
        console.print(f"[bold]{label}:[/bold] [green]{probability:.6g}[/green]")
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, "evaluate")


def predict(
    sequence: List[int] = SEQUENCE_ARGUMENT,
    horizon: Optional[int] = typer.Option(None, "--horizon", "-k", help="Number of symbols to forecast"),
    states: Optional[int] = STATES_OPTION,
    symbols: Optional[int] = SYMBOLS_OPTION,
    deepness: Optional[int] = DEEPNESS_OPTION,
    random: bool = RANDOM_OPTION,
    seed: Optional[int] = SEED_OPTION,
    transitions: Optional[str] = TRANSITIONS_OPTION,
    emissions: Optional[str] = EMISSIONS_OPTION,
    initial: Optional[str] = INITIAL_OPTION,
    logarithm: bool = LOG_OPTION,
    as_json: bool = JSON_OPTION
):
    """
    Greedily forecast the next symbols after a sequence.

    Examples:
    ```
    discrete-hmm predict 0 1 --horizon 3 --states 3 --symbols 2
    ```
    """
    try:
        if horizon is None:
            horizon = get_config('prediction', 'horizon')

        model = build_model(states, symbols, deepness, random, seed, transitions, emissions, initial)
        result = model.predict(sequence, horizon, logarithm=logarithm)

        if as_json:
            typer.echo(json.dumps({
                "symbols": result.symbols.tolist(),
                "probabilities": result.probabilities.tolist(),
                "probability": result.probability
            }))
            return

        console.print(f"[bold]Forecast:[/bold] [cyan]{result.symbols.tolist()}[/cyan]")

        if horizon > 0:
            table = Table(title="Per-step symbol probabilities")
            table.add_column("Step", style="cyan")
            table.add_column("Symbol", style="magenta")
            for s in range(model.n_symbols):
                table.add_column(f"P({s})", style="green", justify="right")

            for t, (symbol, distribution) in enumerate(zip(result.symbols, result.probabilities)):
                table.add_row(str(t + 1), str(symbol), *(f"{p:.4f}" for p in distribution))

            console.print(table)

        label = "Log-likelihood" if logarithm else "Probability"
        console.print(f"[bold]{label}:[/bold] {result.probability:.6g}")
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, "predict")
