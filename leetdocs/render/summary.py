"""
Builds and writes the JSON index that accompanies the generated pages.
"""

import json
from pathlib import Path
from typing import Any

import aiofiles

from leetdocs.models.problem import LeetCodeData


def build_summary(data: LeetCodeData) -> dict[str, Any]:
    """
    Collects user, progress, calendar and the slugs of `data.problems`, in
    the order the problems are given.
    """
    return {
        "user": data.user,
        "progress": data.progress,
        "problems": [problem.title_slug for problem in data.problems],
        "calendar": data.calendar,
    }


async def write_summary(path: Path, summary: dict[str, Any]) -> None:
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(json.dumps(summary, indent=2, ensure_ascii=False) + "\n")
