"""
Renders a solved problem into an MDX-compatible markdown document.
"""

import re

from bs4 import BeautifulSoup

from leetdocs.models.problem import SolvedProblem
from leetdocs.utils.formatting import first_sentence, yaml_scalar
from leetdocs.utils.path import problem_filename

# MDX parses documents as JSX, so void elements must be self-closed
_VOID_TAG = re.compile(r"<(br|hr|img)\b([^>]*?)\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"(<[^>]+>)")


def close_void_tags(html: str) -> str:
    """Rewrites `<br>`, `<hr>` and `<img ...>` as self-closing tags."""
    return _VOID_TAG.sub(lambda m: f"<{m.group(1)}{m.group(2)} />", html)


def escape_braces(html: str) -> str:
    """
    Replaces `{` and `}` in text with HTML entities so MDX does not read
    them as JSX expressions. Braces inside tags are left alone.
    """
    parts = _TAG.split(html)
    for i in range(0, len(parts), 2):
        parts[i] = parts[i].replace("{", "&#123;").replace("}", "&#125;")
    return "".join(parts)


def html_to_text(html: str) -> str:
    """Strips markup from a problem statement."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text(" ", strip=True)


class MarkdownRenderer:
    """
    Builds one documentation page per problem: front-matter, a difficulty
    badge, the problem statement wrapped in a `<Question>` component and the
    last submission as a fenced code block.
    """

    def __init__(self, fence_language: str = "javascript", use_translation: bool = False):
        self.fence_language = fence_language
        self.use_translation = use_translation

    def filename(self, problem: SolvedProblem) -> str:
        return problem_filename(problem.question_id, problem.title_slug)

    def _title(self, problem: SolvedProblem) -> str:
        if self.use_translation and problem.question.get("translatedTitle"):
            return problem.question["translatedTitle"]
        return problem.title

    def _content(self, problem: SolvedProblem) -> str:
        question = problem.question
        if self.use_translation and question.get("translatedContent"):
            return question["translatedContent"]
        return question.get("content") or ""

    def front_matter(self, problem: SolvedProblem) -> str:
        qid = problem.question_id
        lines = [
            "---",
            f"id: {yaml_scalar(problem.title_slug)}",
            f"title: {yaml_scalar(f'{qid}.{self._title(problem)}')}",
            f"sidebar_label: {yaml_scalar(f'{qid}.{problem.title_slug}')}",
        ]
        if description := first_sentence(html_to_text(self._content(problem))):
            lines.append(f"description: {yaml_scalar(description)}")
        if tags := problem.topic_tags:
            lines.append(f"tags: [{', '.join(yaml_scalar(t) for t in tags)}]")
        lines.append("---")
        return "\n".join(lines) + "\n\n"

    def render(self, problem: SolvedProblem) -> str:
        """Returns the full markdown document for `problem`."""
        md = self.front_matter(problem)
        md += (
            "<p style={{marginBottom: '10px'}}>"
            f'<span className="badge badge--primary">{problem.difficulty}</span>'
            "</p>\n\n"
        )
        md += "import Question from './question';\n\n"
        md += "<Question>\n"
        md += f"{escape_braces(close_void_tags(self._content(problem)))}\n"
        md += "</Question>\n\n"
        md += "---\n"
        md += f"\n```{self.fence_language}\n{problem.code}\n```\n"
        return md
