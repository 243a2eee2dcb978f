"""Main CLI command for generating commit messages."""

import logging
import sys
from typing import Optional

import typer

from llamacommit import __version__
from llamacommit.config import load_config
from llamacommit.pipeline import PIPELINE_ERRORS, generate_commit_message


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"llamacommit {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Ollama model to run (default: llama3)",
    ),
    diff_command: Optional[str] = typer.Option(
        None,
        "--diff-command",
        help="Shell command that prints the staged diff",
    ),
    model_command: Optional[str] = typer.Option(
        None,
        "--model-command",
        help="Full command that reads the prompt on stdin (overrides --model)",
    ),
    manage_server: Optional[bool] = typer.Option(
        None,
        "--manage-server/--no-manage-server",
        help="Start the inference server before the run and stop it afterwards",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log pipeline steps to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a one-line commit message for the staged changes with a local model."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        config = load_config(
            model=model,
            diff_command=diff_command,
            model_command=model_command,
            manage_server=manage_server,
        )
        exit_code = generate_commit_message(config)
    except PIPELINE_ERRORS as e:
        typer.echo(f"{e.stage}: {e}", err=True)
        raise typer.Exit(1)

    raise typer.Exit(exit_code)
