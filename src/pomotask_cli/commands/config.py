"""Configuration management commands."""

from typing import Optional

import typer
from pydantic import ValidationError

from pomotask_cli.config import get_config_manager
from pomotask_cli.ui.formatters import format_config_table, format_error, format_success
from pomotask_cli.utils import exit_codes
from pomotask_cli.utils.typer_helpers import SuggestingGroup
from pomotask_cli.utils.ui.console import get_console

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | float | bool:
    """Convert a command-line string to bool, int or float where it looks like one."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    format_config_table(config_manager.config.model_dump(), console)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.focus_seconds)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager(profile).get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found", console)
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS)
    console.print(value)


# Negative numbers such as -1 are values, not options.
@app.command("set", context_settings={"ignore_unknown_options": True})
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.focus_seconds)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_manager(profile).set(key, parsed_value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found", console)
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS)
    except ValidationError as e:
        format_error(f"Invalid value for '{key}': {e.errors()[0]['msg']}", console)
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS)
    format_success(f"Configuration '{key}' set to '{parsed_value}'", console)


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled", console)
            raise typer.Exit(exit_codes.SUCCESS)

    get_config_manager(profile).reset(key)

    if key:
        format_success(f"Configuration '{key}' reset to default", console)
    else:
        format_success("Configuration reset to defaults", console)


@app.command("list")
def list_profiles() -> None:
    """List configuration profiles."""
    profiles = get_config_manager().list_profiles()
    if not profiles:
        console.print("[yellow]No saved profiles[/yellow]")
        return
    for name in profiles:
        console.print(name)
