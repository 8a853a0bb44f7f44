"""
Main CLI application for discrete-hmm.

Provides command-line access to topology construction, decoding, evaluation,
prediction and exponential sampling.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import load_config_file
from ..exceptions import ConfigurationError
from ..logger import set_log_level
from .errors import ConfigurationCLIError, EXIT_CODES, handle_cli_error
from .infer import decode, evaluate, predict
from .sample import sample
from .topology import topology_app

console = Console()

app = typer.Typer(
    name="discrete-hmm",
    help="Discrete Hidden Markov Model inference engine",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True
)

app.add_typer(topology_app, name="topology")
app.command("decode")(decode)
app.command("evaluate")(evaluate)
app.command("predict")(predict)
app.command("sample")(sample)


@app.command("version")
def show_version():
    """Show discrete-hmm version information."""
    from .. import __version__

    console.print(Panel.fit(
        f"[bold]discrete-hmm Version {__version__}[/bold]\n"
        f"Discrete Hidden Markov Model inference engine\n"
        f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        border_style="blue"
    ))


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all log output except errors"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to JSON configuration file",
        exists=True,
        file_okay=True,
        dir_okay=False
    )
):
    """
    discrete-hmm: Discrete Hidden Markov Model inference engine

    \b
    Quick Start:
    1. Inspect a topology:  discrete-hmm topology forward --states 3
    2. Decode a sequence:   discrete-hmm decode 0 1 1 --states 3 --symbols 2
    3. Evaluate it:         discrete-hmm evaluate 0 1 1 --states 3 --symbols 2
    4. Forecast symbols:    discrete-hmm predict 0 1 --horizon 2 --states 3 --symbols 2
    """
    if quiet:
        set_log_level('ERROR')
    elif verbose:
        set_log_level('DEBUG')
    else:
        set_log_level('INFO')

    if config_file:
        try:
            load_config_file(str(config_file))
        except ConfigurationError as e:
            handle_cli_error(
                ConfigurationCLIError(str(e), suggestions=["Check that the file is a valid JSON object"]),
                "configuration"
            )


def cli_main():
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_CODES["general_error"])


if __name__ == "__main__":
    cli_main()
