"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from leetdocs.models.config import SyncConfig
from leetdocs.models.stats import SyncStats
from leetdocs.utils.formatting import format_duration


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "AuthenticationError": [
            "• Verify the username and password in the configuration file.",
            "• Log in once through the browser in case a captcha is required.",
            "• Run `leetdocs init --force` to rewrite your credentials.",
        ],
        "ConfigurationError": [
            "• Run `leetdocs init <USERNAME> <PASSWORD>` to create a config file.",
            "• Run `leetdocs validate` to check the current settings.",
        ],
        "APIError": [
            "• The site may have changed its GraphQL schema.",
            "• Run the command with -vv for detailed logs.",
        ],
        "ClientResponseError": [
            "• The site rejected a request; your session may have expired.",
            "• Lower `max_workers` if you are being rate-limited.",
        ],
        "ClientConnectorError": [
            "• A network connection issue occurred.",
            "• Check `base_url` in the configuration file.",
        ],
        "TimeoutError": [
            "• A request timed out. Check your internet connection.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the current configuration, hiding the password."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        if key == "password":
            value = "[hidden]"
        content += f"{key} = {escape(str(value))}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )


def print_validation_table(config: SyncConfig):
    """Displays a summary of the current settings."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Username:", f"[green]{config.username}[/green]")
    table.add_row("Site:", config.base_url)
    table.add_row("Language:", f"{config.language} ([dim]{config.fence_language}[/dim])")
    table.add_row("Max Workers:", str(config.max_workers))
    table.add_row("Limit:", str(config.limit) if config.limit else "All problems")
    table.add_row(
        "Translation:", "✓ Enabled" if config.use_translation else "✗ Disabled"
    )
    table.add_row("Output Dir:", f"[dim]{config.output_dir}[/dim]")
    table.add_row("Summary File:", f"[dim]{config.summary_file}[/dim]")

    console.print(
        Panel(
            table,
            title="[bold green]✓ Validated Settings[/bold green]",
            border_style="green",
        )
    )


def print_summary_panel(stats: SyncStats, output_dir: Path, duration_s: float):
    """Displays the final summary of a sync run."""
    console = Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("Solved:", f"[bold]{stats.problems_solved}[/bold]")
    stats_table.add_row("✓ Written:", f"[bold green]{stats.files_written}[/bold green]")
    if stats.files_failed > 0:
        stats_table.add_row("✗ Failed:", f"[bold red]{stats.files_failed}[/bold red]")
    stats_table.add_row(
        "Summary:", "[green]✓[/green]" if stats.summary_written else "[red]✗[/red]"
    )
    stats_table.add_row("", "")
    stats_table.add_row("Output:", f"[dim]{output_dir}[/dim]")
    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(duration_s)}[/blue]")

    border_color = "green" if stats.files_failed == 0 else "yellow"
    console.print()
    console.print(
        Panel(
            stats_table,
            title="📚 [bold]Sync Complete![/bold]",
            border_style=border_color,
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )
    console.print()
