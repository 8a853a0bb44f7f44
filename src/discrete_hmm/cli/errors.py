"""
Error handling for CLI commands.

Defines CLI-specific exceptions, argument parsing helpers and consistent
rich-formatted error reporting.
"""

import json
import traceback
from typing import Optional

import numpy as np
import typer
from rich.console import Console
from rich.markup import escape

from ..exceptions import ConfigurationError, InvalidArgumentError
from ..logger import get_logger

console = Console()
logger = get_logger(__name__)


EXIT_CODES = {
    "success": 0,
    "general_error": 1,
    "invalid_usage": 2,
    "invalid_argument": 10,
    "model_error": 11,
    "config_error": 13
}


class DiscreteHMMCLIError(Exception):
    """Base exception for CLI-specific errors."""

    def __init__(self, message: str, exit_code: int = 1, suggestions: Optional[list] = None):
        self.message = message
        self.exit_code = exit_code
        self.suggestions = suggestions or []
        super().__init__(message)


class ModelSpecificationError(DiscreteHMMCLIError):
    """Model options that are missing, conflicting or malformed."""

    def __init__(self, message: str, suggestions: Optional[list] = None):
        super().__init__(message, EXIT_CODES["model_error"], suggestions)


class ConfigurationCLIError(DiscreteHMMCLIError):
    """Configuration file errors."""

    def __init__(self, message: str, suggestions: Optional[list] = None):
        super().__init__(message, EXIT_CODES["config_error"], suggestions)


def format_error_message(error: Exception, operation: str, debug: bool = False) -> str:
    """Format error message with context and suggestions."""
    error_type = type(error).__name__

    message_parts = [
        f"[red]Error during {operation}:[/red]",
        f"[red]{error_type}: {escape(str(error))}[/red]"
    ]

    if getattr(error, 'suggestions', None):
        message_parts.append("")
        message_parts.append("[yellow]Suggestions:[/yellow]")
        for suggestion in error.suggestions:
            message_parts.append(f"  • {escape(suggestion)}")

    if debug:
        message_parts.append("")
        message_parts.append("[dim]Debug information:[/dim]")
        message_parts.append(f"[dim]{traceback.format_exc()}[/dim]")

    return "\n".join(message_parts)


def exit_code_for(error: Exception) -> int:
    """Map an exception to the CLI exit code."""
    if isinstance(error, DiscreteHMMCLIError):
        return error.exit_code
    if isinstance(error, InvalidArgumentError):
        return EXIT_CODES["invalid_argument"]
    if isinstance(error, ConfigurationError):
        return EXIT_CODES["config_error"]
    return EXIT_CODES["general_error"]


def handle_cli_error(error: Exception, operation: str, debug: bool = False) -> None:
    """Display an error with rich formatting and exit with the matching code."""
    console.print(format_error_message(error, operation, debug))
    console.print(f"\n[dim]For more help, run: discrete-hmm {operation.split()[0]} --help[/dim]")

    logger.error(f"CLI error in {operation}: {error}", exc_info=debug)

    raise typer.Exit(exit_code_for(error))


def parse_json_array(text: str, name: str, ndim: int) -> np.ndarray:
    """
    Parse a JSON-encoded vector or matrix given on the command line.

    Args:
        text: JSON text, e.g. ``"[[0.5, 0.5], [0, 1]]"``
        name: Option name used in error messages
        ndim: Expected number of dimensions (1 or 2)

    Raises:
        ModelSpecificationError: If the text is not a numeric array of that rank
    """
    try:
        values = json.loads(text)
        array = np.array(values, dtype=float)
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        raise ModelSpecificationError(
            f"Could not parse {name} as JSON numbers: {e}",
            suggestions=[f"Quote the value, e.g. {name} '{_example(ndim)}'"]
        )

    if array.ndim != ndim:
        raise ModelSpecificationError(
            f"{name} must be a {'matrix' if ndim == 2 else 'vector'}, got {array.ndim} dimension(s)",
            suggestions=[f"Example: {name} '{_example(ndim)}'"]
        )

    return array


def _example(ndim: int) -> str:
    return "[[0.5, 0.5], [0.0, 1.0]]" if ndim == 2 else "[1.0, 0.0]"
