"""
Utilities for handling output file names and directories.
"""

from pathlib import Path

from pathvalidate import sanitize_filename


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def problem_filename(question_id: int, title_slug: str, ext: str = "md") -> str:
    """Builds the `<id>.<slug>.<ext>` file name for a problem document."""
    return sanitize_filename(f"{question_id}.{title_slug}.{ext}", platform="universal")


def resolve_output_dir(output_dir: str, base: Path | None = None) -> Path:
    """Resolves the configured output directory against `base` (default: CWD)."""
    path = Path(output_dir).expanduser()
    if not path.is_absolute():
        path = (base or Path.cwd()) / path
    return path
