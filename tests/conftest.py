"""
Shared fixtures: an in-process fake of the LeetCode China site.
"""

import json
from pathlib import Path

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from leetdocs.api.client import LeetCodeAPIClient
from leetdocs.models.config import SyncConfig

USERNAME = "alice"
PASSWORD = "correct horse"
CSRF_TOKEN = "csrf-before-login"
SESSION_VALUE = "session-abc"

PROBLEMS_RESPONSE = {
    "user_name": USERNAME,
    "num_solved": 3,
    "num_total": 2000,
    "ac_easy": 2,
    "ac_medium": 1,
    "ac_hard": 0,
    "frequency_high": 0,
    "stat_status_pairs": [
        {
            "stat": {
                "question_id": 15,
                "question__title": "3Sum",
                "question__title_slug": "3sum",
                "frontend_question_id": "15",
            },
            "status": "ac",
            "difficulty": {"level": 2},
        },
        {
            "stat": {
                "question_id": 1,
                "question__title": "Two Sum",
                "question__title_slug": "two-sum",
                "frontend_question_id": "1",
            },
            "status": "ac",
            "difficulty": {"level": 1},
        },
        {
            "stat": {
                "question_id": 2,
                "question__title": "Add Two Numbers",
                "question__title_slug": "add-two-numbers",
                "frontend_question_id": "2",
            },
            "status": "notac",
            "difficulty": {"level": 2},
        },
        {
            "stat": {
                "question_id": 3,
                "question__title": "Longest Substring Without Repeating Characters",
                "question__title_slug": "longest-substring-without-repeating-characters",
                "frontend_question_id": "3",
            },
            "status": "ac",
            "difficulty": {"level": 2},
        },
        {
            "stat": {
                "question_id": 4,
                "question__title": "Median of Two Sorted Arrays",
                "question__title_slug": "median-of-two-sorted-arrays",
                "frontend_question_id": "4",
            },
            "status": None,
            "difficulty": {"level": 3},
        },
    ],
}

QUESTIONS = {
    "two-sum": {
        "questionId": "1",
        "title": "Two Sum",
        "titleSlug": "two-sum",
        "content": "<p>Given an array of integers.<br>Return indices.</p>",
        "translatedTitle": "两数之和",
        "translatedContent": "<p>给定一个整数数组。</p>",
        "difficulty": "Easy",
        "topicTags": [{"name": "Array", "slug": "array"}],
    },
    "3sum": {
        "questionId": "15",
        "title": "3Sum",
        "titleSlug": "3sum",
        "content": "<p>Find all triplets.</p>",
        "translatedTitle": "三数之和",
        "translatedContent": "<p>找出所有三元组。</p>",
        "difficulty": "Medium",
        "topicTags": [],
    },
    "longest-substring-without-repeating-characters": {
        "questionId": "3",
        "title": "Longest Substring Without Repeating Characters",
        "titleSlug": "longest-substring-without-repeating-characters",
        "content": "<p>Find the length.</p>",
        "translatedTitle": None,
        "translatedContent": None,
        "difficulty": "Medium",
        "topicTags": [{"name": "Hash Table", "slug": "hash-table"}],
    },
}

# 2020-01-01 00:00 UTC, 2020-01-01 01:00 UTC, 2020-01-02 00:00 UTC
CALENDAR = {"1577836800": 2, "1577840400": 1, "1577923200": 4}


class FakeLeetCode:
    """Just enough of the site to drive the login and sync flows."""

    def __init__(self):
        self.issue_csrf = True
        self.failing_slugs: set[str] = set()
        self.login_forms: list[dict] = []
        self.submission_requests: list[dict] = []
        self.graphql_operations: list[str] = []

    def build_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/api/ensure_csrf/", self.ensure_csrf)
        app.router.add_post("/accounts/login/", self.login)
        app.router.add_get("/api/problems/all/", self.problems)
        app.router.add_get("/api/progress/all/", self.progress)
        app.router.add_get("/problems/api/tags/", self.tags)
        app.router.add_get("/problems/api/favorites/", self.favorites)
        app.router.add_get("/submissions/latest/", self.latest_submission)
        app.router.add_get(
            "/api/user_submission_calendar/{username}/", self.calendar
        )
        app.router.add_post("/graphql", self.graphql)
        return app

    @staticmethod
    def _require_session(request: web.Request) -> None:
        if request.cookies.get("LEETCODE_SESSION") != SESSION_VALUE:
            raise web.HTTPForbidden()

    async def ensure_csrf(self, request: web.Request) -> web.Response:
        response = web.json_response({})
        if self.issue_csrf:
            response.set_cookie("csrftoken", CSRF_TOKEN)
        return response

    async def login(self, request: web.Request) -> web.Response:
        form = await request.post()
        self.login_forms.append(
            {**dict(form), "_cookie": request.cookies.get("csrftoken")}
        )
        if (
            form.get("password") != PASSWORD
            or form.get("csrfmiddlewaretoken") != CSRF_TOKEN
            or request.cookies.get("csrftoken") != CSRF_TOKEN
        ):
            # The login view re-renders the form on bad credentials
            return web.Response(status=200, text="<form>login</form>")

        response = web.Response(status=302, headers={"Location": "/problemset/all/"})
        response.set_cookie("csrftoken", "csrf-after-login")
        response.set_cookie("LEETCODE_SESSION", SESSION_VALUE)
        return response

    async def problems(self, request: web.Request) -> web.Response:
        self._require_session(request)
        return web.json_response(PROBLEMS_RESPONSE)

    async def progress(self, request: web.Request) -> web.Response:
        self._require_session(request)
        return web.json_response({"solvedTotal": 3, "questionTotal": 2000})

    async def tags(self, request: web.Request) -> web.Response:
        return web.json_response({"topics": [{"slug": "array", "name": "Array"}]})

    async def favorites(self, request: web.Request) -> web.Response:
        self._require_session(request)
        return web.json_response([{"id_hash": "abc", "name": "Favorite"}])

    async def latest_submission(self, request: web.Request) -> web.Response:
        self._require_session(request)
        self.submission_requests.append(dict(request.query))
        qid = request.query["qid"]
        return web.json_response({"code": f"// solution for {qid}"})

    async def calendar(self, request: web.Request) -> web.Response:
        # The real endpoint double-encodes the mapping
        return web.json_response(json.dumps(CALENDAR))

    async def graphql(self, request: web.Request) -> web.Response:
        body = await request.json()
        operation = body.get("operationName")
        variables = body.get("variables") or {}
        self.graphql_operations.append(operation)

        if operation == "questionData":
            slug = variables["titleSlug"]
            if slug in self.failing_slugs:
                return web.Response(status=500, text="internal error")
            return web.json_response({"data": {"question": QUESTIONS.get(slug)}})
        if operation == "getQuestionTranslation":
            return web.json_response(
                {"data": {"translations": [{"questionId": "1", "title": "两数之和"}]}}
            )
        if operation == "allQuestionsStatuses":
            return web.json_response(
                {"data": {"allQuestions": [{"questionId": "1", "status": "ac"}]}}
            )
        if operation == "globalData":
            return web.json_response(
                {"data": {"userStatus": {"isSignedIn": True, "username": USERNAME}}}
            )
        return web.json_response({"errors": [{"message": "Unknown operation"}]})


@pytest.fixture
def fake_site() -> FakeLeetCode:
    return FakeLeetCode()


@pytest.fixture
async def server(fake_site):
    test_server = TestServer(fake_site.build_app())
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest.fixture
def base_url(server) -> str:
    return str(server.make_url("/")).rstrip("/")


@pytest.fixture
async def api_client(base_url):
    client = LeetCodeAPIClient(base_url, max_workers=4, calls_per_second=1000)
    yield client
    await client.close()


@pytest.fixture
def sync_config(base_url, tmp_path: Path) -> SyncConfig:
    return SyncConfig(
        username=USERNAME,
        password=PASSWORD,
        base_url=base_url,
        output_dir=str(tmp_path / "solutions"),
        max_workers=4,
    )
