"""CLI entry point for llamacommit.

This module provides the main CLI application that combines the default
commit message command and the config subcommands.
"""

import typer

from llamacommit.cli.config import config_app
from llamacommit.cli.main import main_command

# Main application
app = typer.Typer(
    name="llamacommit",
    help="llamacommit: one-line commit messages from a local model",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
