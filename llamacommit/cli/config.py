"""CLI commands for global configuration management."""

import typer

from llamacommit import global_config
from llamacommit.config import CONFIG_KEYS, load_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global llamacommit configuration in ~/.llamacommit/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"{e.stage}: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Configuration ({global_config.get_config_file_path()}):")
    else:
        typer.echo("No configuration file found, using defaults.")
    typer.echo()

    for key in CONFIG_KEYS:
        value = getattr(config, key)
        typer.echo(f"  {key}: {'not set' if value is None else value}")

    typer.echo()
    typer.echo(f"  Model command: {config.get_model_command()}")


@config_app.command("init")
def config_init() -> None:
    """Write a default config.yaml if none exists."""
    if global_config.is_configured():
        typer.echo(f"Configuration already exists at {global_config.get_config_file_path()}")
        return

    try:
        global_config.initialize_default_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"{e.stage}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Created {global_config.get_config_file_path()}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key (e.g. model, manage_server)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a single configuration value."""
    try:
        global_config.set_config_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"{e.stage}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {value}")
