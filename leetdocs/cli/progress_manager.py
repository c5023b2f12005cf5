"""
Rich progress display for the concurrent fetch stage.
"""

import logging

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

log = logging.getLogger("leetdocs")


class ProgressManager:
    """Wraps a single Rich progress bar; used as an async context manager."""

    def __init__(self, console: Console):
        self.console = console
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            "•",
            TimeElapsedColumn(),
            console=console,
            transient=True,
        )
        self._task_id: TaskID | None = None

    async def __aenter__(self) -> "ProgressManager":
        self.progress.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.progress.stop()

    def start(self, description: str, total: int) -> None:
        self._task_id = self.progress.add_task(description, total=total)

    def advance(self, count: int = 1) -> None:
        if self._task_id is not None:
            self.progress.advance(self._task_id, count)
