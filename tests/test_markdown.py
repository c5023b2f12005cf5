import pytest

from leetdocs.models.config import get_fence_language
from leetdocs.models.problem import SolvedProblem
from leetdocs.render.markdown import (
    MarkdownRenderer,
    close_void_tags,
    escape_braces,
    html_to_text,
)
from leetdocs.utils.formatting import first_sentence, yaml_scalar


@pytest.fixture
def problem() -> SolvedProblem:
    return SolvedProblem(
        question_id=1,
        title="Two Sum",
        title_slug="two-sum",
        frontend_id="1",
        question={
            "difficulty": "Easy",
            "content": "<p>Given an array of integers. Return indices.<br>Done.</p>",
            "translatedTitle": "两数之和",
            "translatedContent": "<p>给定一个整数数组。返回下标。</p>",
            "topicTags": [{"name": "Array"}, {"name": "Hash Table"}],
        },
        last_submission={"code": "var twoSum = function(nums, target) {};"},
    )


def front_matter_of(document: str) -> list[str]:
    _, block, _ = document.split("---\n", 2)
    return block.strip().splitlines()


def test_front_matter_fields(problem):
    lines = front_matter_of(MarkdownRenderer().render(problem))

    assert lines[:3] == [
        "id: two-sum",
        "title: 1.Two Sum",
        "sidebar_label: 1.two-sum",
    ]
    assert "description: Given an array of integers." in lines
    assert "tags: [Array, Hash Table]" in lines


def test_document_layout(problem):
    document = MarkdownRenderer().render(problem)

    assert document.startswith("---\nid: two-sum\n")
    assert '<span className="badge badge--primary">Easy</span>' in document
    assert "import Question from './question';" in document
    assert "<Question>\n<p>Given an array of integers. Return indices.<br />Done.</p>\n</Question>" in document
    assert document.endswith(
        "---\n\n```javascript\nvar twoSum = function(nums, target) {};\n```\n"
    )


def test_fence_language_is_configurable(problem):
    document = MarkdownRenderer(fence_language=get_fence_language("python3")).render(problem)

    assert "\n```python\n" in document


def test_translation_is_preferred_when_enabled(problem):
    document = MarkdownRenderer(use_translation=True).render(problem)

    assert "title: 1.两数之和" in front_matter_of(document)
    assert "description: 给定一个整数数组。" in front_matter_of(document)
    assert "<p>给定一个整数数组。返回下标。</p>" in document


def test_translation_falls_back_to_original(problem):
    problem.question["translatedTitle"] = None
    problem.question["translatedContent"] = ""

    document = MarkdownRenderer(use_translation=True).render(problem)

    assert "title: 1.Two Sum" in front_matter_of(document)
    assert "Given an array of integers." in document


def test_paid_only_problem_without_content(problem):
    problem.question = {"difficulty": "Hard", "content": None, "topicTags": None}

    lines = front_matter_of(MarkdownRenderer().render(problem))

    assert not any(line.startswith("description:") for line in lines)
    assert not any(line.startswith("tags:") for line in lines)


def test_title_with_colon_is_quoted(problem):
    problem.title = "Design: LRU Cache"

    lines = front_matter_of(MarkdownRenderer().render(problem))

    assert 'title: "1.Design: LRU Cache"' in lines


def test_filename(problem):
    assert MarkdownRenderer().filename(problem) == "1.two-sum.md"


@pytest.mark.parametrize(
    "html, expected",
    [
        ("a<br>b", "a<br />b"),
        ("a<br/>b", "a<br />b"),
        ("a<BR >b", "a<BR />b"),
        ("<hr>", "<hr />"),
        ('<img src="x.png" alt="x">', '<img src="x.png" alt="x" />'),
        ("<bread>", "<bread>"),
    ],
)
def test_close_void_tags(html, expected):
    assert close_void_tags(html) == expected


def test_html_to_text():
    assert html_to_text("<p>Hello <code>world</code></p>") == "Hello world"
    assert html_to_text("") == ""


def test_first_sentence_truncates():
    assert first_sentence("One. Two.") == "One."
    assert first_sentence("x" * 200, max_length=10) == "x" * 9 + "…"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("two-sum", "two-sum"),
        ("Hash Table", "Hash Table"),
        ("1.Two Sum", "1.Two Sum"),
        ("a: b", '"a: b"'),
        ("", '""'),
        (" padded", '" padded"'),
        ("null", '"null"'),
        ("Null", '"Null"'),
        ("~", '"~"'),
        ("true", '"true"'),
        ("False", '"False"'),
        ("yes", '"yes"'),
        ("off", '"off"'),
        ("42", '"42"'),
        ("-7", '"-7"'),
        ("3.14", '"3.14"'),
        ("1e5", '"1e5"'),
        ("0x1F", '"0x1F"'),
        (".inf", '".inf"'),
        ("2020-01-01", '"2020-01-01"'),
        ("- see below.", '"- see below."'),
        ("? maybe", '"? maybe"'),
        ("!important", '"!important"'),
    ],
)
def test_yaml_scalar(value, expected):
    assert yaml_scalar(value) == expected


def test_reserved_words_in_front_matter_are_quoted(problem):
    problem.title_slug = "null"
    problem.question["content"] = "<p>- see below.</p>"
    problem.question["topicTags"] = [{"name": "true"}, {"name": "Array"}]

    lines = front_matter_of(MarkdownRenderer().render(problem))

    assert 'id: "null"' in lines
    assert "sidebar_label: 1.null" in lines
    assert 'description: "- see below."' in lines
    assert 'tags: ["true", Array]' in lines


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<p>()[]{}</p>", "<p>()[]&#123;&#125;</p>"),
        ("<code>{a: 1}</code>", "<code>&#123;a: 1&#125;</code>"),
        ('<span style="{x}">}</span>', '<span style="{x}">&#125;</span>'),
        ("no braces", "no braces"),
    ],
)
def test_escape_braces(html, expected):
    assert escape_braces(html) == expected


def test_statement_braces_are_escaped_in_document(problem):
    problem.question["content"] = '<p>Input: s = "()[]{}"</p>'

    document = MarkdownRenderer().render(problem)

    assert '<Question>\n<p>Input: s = "()[]&#123;&#125;"</p>\n</Question>' in document
    assert "<p style={{marginBottom: '10px'}}>" in document
