"""
The main orchestrator: logs in, collects solved problems and writes the
documentation pages.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiofiles

from leetdocs.api.client import LeetCodeAPIClient
from leetdocs.cli.progress_manager import ProgressManager
from leetdocs.models.config import SyncConfig
from leetdocs.models.problem import LeetCodeData, SolvedProblem
from leetdocs.models.stats import SyncStats
from leetdocs.render.markdown import MarkdownRenderer
from leetdocs.render.summary import build_summary, write_summary
from leetdocs.utils.path import create_dir, resolve_output_dir

log = logging.getLogger(__name__)

USER_FIELDS = ("user_name",)
PROGRESS_FIELDS = ("num_solved", "num_total", "ac_easy", "ac_medium", "ac_hard")


def pick(source: Dict[str, Any], keys: tuple) -> Dict[str, Any]:
    """Returns the subset of `source` whose keys are listed in `keys`."""
    return {key: source[key] for key in keys if key in source}


def solved_problems(problems_response: Dict[str, Any]) -> List[SolvedProblem]:
    """Keeps the stat/status pairs the user has an accepted solution for."""
    return [
        SolvedProblem.from_stat(pair["stat"])
        for pair in problems_response.get("stat_status_pairs", [])
        if pair.get("status") == "ac"
    ]


def sort_problems(problems: List[SolvedProblem]) -> List[SolvedProblem]:
    """Orders problems by ascending numeric question id."""
    return sorted(problems, key=lambda problem: int(problem.question_id))


class SyncManager:
    """Orchestrates the whole documentation run."""

    def __init__(
        self,
        config: SyncConfig,
        api_client: LeetCodeAPIClient,
        progress_manager: Optional[ProgressManager] = None,
    ):
        self.config = config
        self.api_client = api_client
        self.progress_manager = progress_manager
        self.stats = SyncStats()
        self.renderer = MarkdownRenderer(
            fence_language=config.fence_language,
            use_translation=config.use_translation,
        )
        self.output_dir = resolve_output_dir(config.output_dir)
        self.semaphore = asyncio.Semaphore(config.max_workers)

    async def collect(self) -> LeetCodeData:
        """Logs in and gathers everything needed to render the pages."""
        await self.api_client.authenticator.login(
            self.config.username, self.config.password
        )

        problems_response = await self.api_client.fetch_problems()
        data = LeetCodeData(
            user=pick(problems_response, USER_FIELDS),
            progress=pick(problems_response, PROGRESS_FIELDS),
            problems=solved_problems(problems_response),
        )
        self.stats.problems_solved = len(data.problems)
        log.info(f"Found {len(data.problems)} solved problems.")

        if self.config.limit:
            data.problems = data.problems[: self.config.limit]

        await self._fetch_details(data.problems)

        if username := data.user.get("user_name"):
            data.calendar = await self.api_client.fetch_submission_calendar(username)

        return data

    async def _fetch_details(self, problems: List[SolvedProblem]) -> None:
        """
        Fetches question detail and last submission for every problem. The
        first failing request propagates and aborts the batch.
        """
        if not problems:
            return

        log.debug(f"Batch fetching details for {len(problems)} problems...")
        if self.progress_manager:
            self.progress_manager.start("Fetching problems", total=len(problems))

        async def fetch_single(problem: SolvedProblem) -> None:
            async with self.semaphore:
                problem.question, problem.last_submission = await asyncio.gather(
                    self.api_client.fetch_question(problem.title_slug),
                    self.api_client.fetch_last_submission(
                        problem.question_id, self.config.language
                    ),
                )
            if self.progress_manager:
                self.progress_manager.advance()

        await asyncio.gather(*(fetch_single(problem) for problem in problems))

    async def generate(self, data: LeetCodeData) -> SyncStats:
        """Writes one page per problem and the summary file."""
        create_dir(self.output_dir)
        data.problems = sort_problems(data.problems)

        for problem in data.problems:
            await self._write_problem(problem)

        summary_path = self.output_dir / self.config.summary_file
        try:
            await write_summary(summary_path, build_summary(data))
            self.stats.summary_written = True
            log.info(f"Summary written to [dim]{summary_path}[/dim]")
        except OSError as e:
            log.error(f"[red]Could not write summary {summary_path}: {e}[/red]")

        return self.stats

    async def _write_problem(self, problem: SolvedProblem) -> Optional[Path]:
        path = self.output_dir / self.renderer.filename(problem)
        try:
            async with aiofiles.open(path, "w", encoding="utf-8") as f:
                await f.write(self.renderer.render(problem))
        except OSError as e:
            self.stats.files_failed += 1
            log.error(f"[red]✗ Could not write {path.name}: {e}[/red]")
            return None

        self.stats.files_written += 1
        self.stats.written_files.append(path.name)
        log.info(f"{problem.question_id}.{problem.title_slug}")
        return path

    async def run(self) -> SyncStats:
        """Runs the full pipeline."""
        data = await self.collect()
        return await self.generate(data)
