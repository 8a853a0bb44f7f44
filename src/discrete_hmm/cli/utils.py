"""
CLI utility functions.

Shared model construction and rendering helpers for CLI commands.
"""

from typing import Optional

import numpy as np
from rich.console import Console
from rich.table import Table

from ..config import get_config
from ..generators import UniformGenerator
from ..hmm import HiddenMarkovModel
from ..topology import ForwardTopology
from .errors import ModelSpecificationError, parse_json_array

console = Console()


def build_model(states: Optional[int] = None,
                symbols: Optional[int] = None,
                deepness: Optional[int] = None,
                random_topology: Optional[bool] = None,
                seed: Optional[int] = None,
                transitions: Optional[str] = None,
                emissions: Optional[str] = None,
                initial: Optional[str] = None) -> HiddenMarkovModel:
    """
    Build a model from command line options.

    Either the full parameter set (``transitions``, ``emissions`` and
    ``initial`` as JSON) or a forward topology (``states`` plus ``symbols``
    or ``emissions``) must be given.
    """
    if transitions is not None:
        if emissions is None or initial is None:
            raise ModelSpecificationError(
                "--transitions requires --emissions and --initial",
                suggestions=["Pass all three matrices, or use --states with --symbols instead"]
            )
        return HiddenMarkovModel.from_parameters(
            parse_json_array(transitions, "--transitions", 2),
            parse_json_array(emissions, "--emissions", 2),
            parse_json_array(initial, "--initial", 1)
        )

    if states is None:
        raise ModelSpecificationError(
            "No model given",
            suggestions=[
                "Use --states N --symbols M for a forward model with uniform emissions",
                "Use --transitions, --emissions and --initial for explicit parameters"
            ]
        )

    if initial is not None:
        raise ModelSpecificationError("--initial is only valid together with --transitions")

    if deepness is None:
        deepness = get_config('topology', 'deepness')
    if not random_topology:
        random_topology = bool(get_config('topology', 'random'))

    topology = ForwardTopology(states, deepness, random_topology)

    if emissions is not None:
        model_emissions = parse_json_array(emissions, "--emissions", 2)
    elif symbols is not None:
        model_emissions = symbols
    else:
        raise ModelSpecificationError(
            "Forward models need --symbols or --emissions",
            suggestions=["Add --symbols M for uniform emissions over M symbols"]
        )

    return HiddenMarkovModel(topology, model_emissions, rng=UniformGenerator(seed))


def matrix_table(title: str, matrix: np.ndarray, row_label: str = "state",
                 column_label: str = "") -> Table:
    """Render a vector or matrix as a rich table."""
    matrix = np.atleast_2d(matrix)

    table = Table(title=title)
    table.add_column(row_label, style="cyan")
    for j in range(matrix.shape[1]):
        table.add_column(f"{column_label}{j}", style="green", justify="right")

    for i, row in enumerate(matrix):
        table.add_row(str(i), *(f"{value:.4f}" for value in row))

    return table
