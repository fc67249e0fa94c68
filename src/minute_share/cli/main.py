"""Main CLI application."""

import sys
from typing import Optional

import click
from rich.console import Console

from minute_share import __version__
from minute_share.api.server import run_server
from minute_share.cli.config_commands import config, load_config

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="minute-share")
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file"
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str]) -> None:
    """Minute Share - record work minutes and split a base amount across them.

    Entries and settings are kept in memory by the API server and are
    lost when it stops.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(config)


@cli.command()
@click.option("--host", default=None, help="Host address (default: from config)")
@click.option("--port", type=int, default=None, help="Port number (default: from config)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Start the API server.

    Examples:
        minute-share serve
        minute-share serve --host 0.0.0.0 --port 8080
        minute-share serve --reload  # Development mode
    """
    config_mgr = load_config(ctx)

    final_host = host or config_mgr.get("api.host", "localhost")
    final_port = port or config_mgr.get("api.port", 8000)
    final_reload = reload or config_mgr.get("api.advanced.reload", False)

    console.print("Starting Minute Share API server...")
    console.print(f"   URL: http://{final_host}:{final_port}")
    console.print(f"   Docs: http://{final_host}:{final_port}/docs")
    if final_reload:
        console.print("   Mode: Development (auto-reload enabled)")
    console.print()

    try:
        run_server(host=final_host, port=final_port, reload=final_reload, config=config_mgr)
    except KeyboardInterrupt:
        console.print("\nShutting down API server...")
    except Exception as e:
        error_console.print(f"[red]Error starting server:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
