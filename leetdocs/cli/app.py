"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from leetdocs import __version__
from leetdocs.api.client import LeetCodeAPIClient
from leetdocs.core.sync_manager import SyncManager
from leetdocs.exceptions import LeetdocsError
from leetdocs.storage.config_manager import ConfigManager

from .formatters import (
    format_error_with_suggestions,
    print_config,
    print_summary_panel,
    print_validation_table,
)
from .progress_manager import ProgressManager

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("leetdocs")

app = typer.Typer(
    name="leetdocs",
    help=(
        "Generate markdown documentation from your solved LeetCode problems."
        " Run without a command to sync."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)

LOCAL_CONFIG_NAME = "leetdocs.ini"


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "leetdocs"


def get_config_file() -> Path:
    """
    Resolves the config file: $LEETDOCS_CONFIG, then ./leetdocs.ini, then the
    per-user config directory.
    """
    if env_path := os.getenv("LEETDOCS_CONFIG"):
        return Path(env_path).expanduser()
    local = Path.cwd() / LOCAL_CONFIG_NAME
    if local.is_file():
        return local
    return get_config_dir() / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """LeetCode documentation generator"""
    if version:
        console.print(f"[bold]leetdocs[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("leetdocs").setLevel(log_level)

    if show_config:
        config_file = get_config_file()
        if not config_file.is_file():
            console.print(
                "[red]✗ Config file not found.[/] Run [cyan]leetdocs init[/cyan]"
                " first."
            )
            raise typer.Exit(code=1)
        print_config(config_file, ConfigManager(config_file).get_display_dict())
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        _run_sync({})


@app.command()
def init(
    username: str = typer.Argument(..., help="LeetCode account name or email."),
    password: str = typer.Argument(..., help="LeetCode password."),
    output_dir: str = typer.Option(
        "solutions", "--output-dir", "-o", help="Directory for generated pages."
    ),
    language: str = typer.Option(
        "javascript", "--language", "-l", help="Language of the submissions to fetch."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing credentials without asking."
    ),
):
    """Initialize configuration with LeetCode credentials."""
    config_file = get_config_file()
    if (
        config_file.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(config_file).save_new_config(
            {
                "username": username,
                "password": password,
                "output_dir": output_dir,
                "language": language,
            }
        )
    except LeetdocsError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"\n[bold green]✓ Configuration saved to '{config_file}'[/bold green]")
    console.print("Ready to go! Try: [cyan]leetdocs sync[/cyan]")


@app.command()
def sync(
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=0, help="Only render the first N solved problems."
    ),
    output_dir: str | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for generated pages."
    ),
):
    """Fetch solved problems and write the documentation pages."""
    cli_options = {}
    if limit is not None:
        cli_options["limit"] = limit
    if output_dir is not None:
        cli_options["output_dir"] = output_dir
    _run_sync(cli_options)


def _run_sync(cli_options: dict[str, Any]) -> None:
    async def _sync_async():
        api_client = None
        try:
            config = ConfigManager(get_config_file()).load_config(cli_options)
            api_client = LeetCodeAPIClient(config.base_url, config.max_workers)

            console.print("[bold cyan]📚 Starting sync session...[/bold cyan]")
            start_time = time.monotonic()

            async with ProgressManager(console) as progress_manager:
                manager = SyncManager(config, api_client, progress_manager)
                stats = await manager.run()

            print_summary_panel(
                stats, manager.output_dir, time.monotonic() - start_time
            )
        except Exception as e:
            console.print(format_error_with_suggestions(e))
            log.debug("Full traceback:", exc_info=True)
            raise typer.Exit(code=1) from e
        finally:
            if api_client:
                await api_client.close()

    asyncio.run(_sync_async())


@app.command()
def validate():
    """Validate the current configuration."""
    try:
        config = ConfigManager(get_config_file()).load_config()
        print_validation_table(config)
    except LeetdocsError as e:
        console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
        raise typer.Exit(code=1) from e
