"""
Counters for a single documentation run.
"""

from dataclasses import dataclass, field


@dataclass
class SyncStats:
    """Tracks statistics for a sync session."""

    problems_solved: int = 0
    files_written: int = 0
    files_failed: int = 0
    summary_written: bool = False
    written_files: list[str] = field(default_factory=list)
