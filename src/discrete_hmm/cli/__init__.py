"""
Command-line interface module.

Typer application exposing topology, inference and sampling commands.
"""

from .main import app, cli_main

__all__ = [
    "app",
    "cli_main"
]
