"""
Data structures for the problems and account data pulled from LeetCode.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SolvedProblem:
    """A solved problem along with its question detail and last submission."""

    question_id: int
    title: str
    title_slug: str
    frontend_id: str = ""
    question: dict[str, Any] = field(default_factory=dict)
    last_submission: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_stat(cls, stat: dict[str, Any]) -> "SolvedProblem":
        """Builds a problem from the `stat` half of a stat/status pair."""
        return cls(
            question_id=int(stat["question_id"]),
            title=stat.get("question__title", ""),
            title_slug=stat["question__title_slug"],
            frontend_id=str(stat.get("frontend_question_id", stat["question_id"])),
        )

    @property
    def difficulty(self) -> str:
        return self.question.get("difficulty", "")

    @property
    def code(self) -> str:
        return self.last_submission.get("code", "")

    @property
    def topic_tags(self) -> list[str]:
        return [
            tag.get("name", "")
            for tag in self.question.get("topicTags") or []
            if tag.get("name")
        ]


@dataclass
class LeetCodeData:
    """Everything collected from the site for a single documentation run."""

    user: dict[str, Any] = field(default_factory=dict)
    progress: dict[str, Any] = field(default_factory=dict)
    problems: list[SolvedProblem] = field(default_factory=list)
    calendar: dict[str, int] = field(default_factory=dict)
