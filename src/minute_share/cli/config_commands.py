"""CLI commands for configuration management."""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click  # type: ignore[import-not-found]
from rich.console import Console  # type: ignore[import-not-found]
from rich.table import Table  # type: ignore[import-not-found]

from minute_share.core.config import ConfigManager

console = Console()
error_console = Console(stderr=True)


def load_config(ctx: click.Context) -> ConfigManager:
    """Load the config file chosen with the top-level --config option."""
    config_path: Optional[str] = (ctx.obj or {}).get("config_path")
    try:
        return ConfigManager(Path(config_path) if config_path else None)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def convert_value(value: str) -> Any:
    """Convert a command-line string to a config value.

    Example:
        >>> convert_value("true"), convert_value("8080"), convert_value("0.5")
        (True, 8080, 0.5)
    """
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if lowered == "null":
        return None
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


@click.group()  # type: ignore[misc]
def config() -> None:
    """Manage Minute Share configuration.

    Configuration is stored in ~/.minute-share/config.yml
    """
    pass


@config.command("show")  # type: ignore[misc]
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")  # type: ignore[misc]
@click.pass_context  # type: ignore[misc]
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Show all configuration settings.

    Example:
        minute-share config show
        minute-share config show --json
    """
    config_mgr = load_config(ctx)

    if as_json:
        click.echo(json.dumps(config_mgr.to_dict(), indent=2))
        return

    table = Table(title="Minute Share Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key in config_mgr.get_all_keys():
        table.add_row(key, str(config_mgr.get(key)))

    console.print(table)
    console.print(f"\nConfig file: {config_mgr.config_path}")


@config.command("get")  # type: ignore[misc]
@click.argument("key")  # type: ignore[misc]
@click.pass_context  # type: ignore[misc]
def config_get(ctx: click.Context, key: str) -> None:
    """Get a specific configuration value.

    Uses dot notation to access nested values.

    Example:
        minute-share config get settings.default_base_amount
        minute-share config get api.cors.origins
    """
    config_mgr = load_config(ctx)
    value = config_mgr.get(key)

    if value is None:
        error_console.print(f"[red]Error:[/red] Configuration key '{key}' not found")
        sys.exit(1)

    if isinstance(value, (dict, list)):
        click.echo(json.dumps(value, indent=2))
    else:
        click.echo(str(value))


@config.command("set")  # type: ignore[misc]
@click.argument("key")  # type: ignore[misc]
@click.argument("value")  # type: ignore[misc]
@click.pass_context  # type: ignore[misc]
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value.

    Values are automatically converted to appropriate types.
    Use 'true'/'false' for booleans and plain numbers for numbers.

    Example:
        minute-share config set settings.default_base_amount 15000
        minute-share config set api.port 9000
        minute-share config set logging.level DEBUG
    """
    config_mgr = load_config(ctx)
    converted_value = convert_value(value)

    try:
        config_mgr.set(key, converted_value)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Set {key} = {converted_value!r}")


@config.command("reset")  # type: ignore[misc]
@click.option("--yes", is_flag=True, help="Skip confirmation")  # type: ignore[misc]
@click.pass_context  # type: ignore[misc]
def config_reset(ctx: click.Context, yes: bool) -> None:
    """Reset configuration to defaults.

    Example:
        minute-share config reset
        minute-share config reset --yes
    """
    if not yes:
        click.confirm("Reset all configuration to defaults?", abort=True)

    config_mgr = load_config(ctx)
    config_mgr.reset()
    console.print("[green]✓[/green] Configuration reset to defaults")
