"""
Async client for the LeetCode China REST and GraphQL endpoints.
"""

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import aiohttp

from leetdocs.exceptions import APIError

from . import queries
from .auth import LeetCodeAuthenticator
from .rate_limiter import RateLimiter

log = logging.getLogger(__name__)


class LeetCodeAPIClient:
    """
    Async client for the site's JSON API.

    The session cookie obtained by the authenticator is sent explicitly on
    every request; the aiohttp cookie jar is disabled so that nothing else
    leaks into the Cookie header.
    """

    DEFAULT_BASE_URL = "https://leetcode.cn"

    ENSURE_CSRF_PATH = "/api/ensure_csrf/"
    LOGIN_PATH = "/accounts/login/"
    PROBLEMS_PATH = "/api/problems/all/"
    PROGRESS_PATH = "/api/progress/all/"
    TAGS_PATH = "/problems/api/tags/"
    FAVORITES_PATH = "/problems/api/favorites/"
    LAST_SUBMISSION_PATH = "/submissions/latest/"
    CALENDAR_PATH = "/api/user_submission_calendar/{username}/"
    GRAPHQL_PATH = "/graphql"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        max_workers: int = 8,
        calls_per_second: float = 8.0,
    ):
        """
        Initializes the API client.

        Args:
            base_url: Root URL of the site, without a trailing slash.
            max_workers: The number of concurrent workers, used to size the
                connection pool.
            calls_per_second: Initial pacing of outgoing requests.
        """
        self.base_url = base_url.rstrip("/")
        self.max_workers = max_workers

        # State set by the authenticator
        self.csrf_token: Optional[str] = None
        self.session_cookie: Optional[str] = None

        self._session: Optional[aiohttp.ClientSession] = None
        self._rate_limiter = RateLimiter(calls_per_second)
        self._authenticator = LeetCodeAuthenticator(self)

    @property
    def authenticator(self) -> LeetCodeAuthenticator:
        """Provides access to the authentication helper."""
        return self._authenticator

    @property
    def is_authenticated(self) -> bool:
        return bool(self.session_cookie)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def get_session(self) -> aiohttp.ClientSession:
        """Returns the shared aiohttp session, creating it on first use."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=self.max_workers * 2,
                limit_per_host=self.max_workers,
                ttl_dns_cache=300,
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                cookie_jar=aiohttp.DummyCookieJar(),
                headers={
                    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
                    "Referer": f"{self.base_url}/",
                    "Accept-Encoding": "gzip, deflate",
                },
                timeout=aiohttp.ClientTimeout(total=60, connect=15, sock_read=30),
            )
        return self._session

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def _auth_headers(self, method: str) -> Dict[str, str]:
        headers = {}
        if self.session_cookie:
            headers["Cookie"] = self.session_cookie
        if method != "GET" and self.csrf_token:
            headers["X-CSRFToken"] = self.csrf_token
        return headers

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Makes a paced call against the site and decodes the JSON body.

        Raises:
            aiohttp.ClientResponseError: On any non-2xx status.
        """
        session = await self.get_session()
        await self._rate_limiter.acquire()

        start_time = time.monotonic()
        try:
            async with session.request(
                method,
                self.url_for(path),
                params=params,
                json=json_body,
                headers=self._auth_headers(method),
            ) as r:
                if r.status == 429:
                    await self._rate_limiter.on_429()
                r.raise_for_status()
                data = await r.json(content_type=None)
        except aiohttp.ClientError as e:
            log.debug(f"{method} {path} failed: {e}")
            raise

        duration_ms = (time.monotonic() - start_time) * 1000
        log.debug(f"{method} {path} completed in {duration_ms:.0f} ms")
        return data

    async def graphql(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Runs a GraphQL document and returns its `data` member.

        Raises:
            APIError: If the response carries errors and no data.
        """
        payload: Dict[str, Any] = {"query": query, "variables": variables or {}}
        if operation_name:
            payload["operationName"] = operation_name

        response = await self.request_json("POST", self.GRAPHQL_PATH, json_body=payload)
        data = response.get("data") if isinstance(response, dict) else None
        if not data:
            errors = response.get("errors") if isinstance(response, dict) else None
            messages = "; ".join(e.get("message", str(e)) for e in errors or [])
            raise APIError(f"GraphQL query failed: {messages or 'empty response'}")
        return data

    # REST endpoints
    async def fetch_problems(self) -> Dict[str, Any]:
        return await self.request_json("GET", self.PROBLEMS_PATH)

    async def fetch_progress(self) -> Dict[str, Any]:
        return await self.request_json("GET", self.PROGRESS_PATH)

    async def fetch_tags(self) -> Dict[str, Any]:
        return await self.request_json("GET", self.TAGS_PATH)

    async def fetch_favorites(self) -> List[Dict[str, Any]]:
        return await self.request_json("GET", self.FAVORITES_PATH)

    async def fetch_last_submission(
        self, question_id: int, lang: str = "javascript"
    ) -> Dict[str, Any]:
        return await self.request_json(
            "GET",
            self.LAST_SUBMISSION_PATH,
            params={"qid": str(question_id), "lang": lang},
        )

    async def fetch_submission_calendar(self, username: str) -> Dict[str, int]:
        """
        Fetches the submission calendar and folds it into daily counts.

        The endpoint answers with a mapping of unix timestamps to counts, which
        is sometimes JSON-encoded a second time as a string.
        """
        raw = await self.request_json(
            "GET", self.CALENDAR_PATH.format(username=username)
        )
        if isinstance(raw, str):
            raw = json.loads(raw) if raw else {}
        return to_daily_counts(raw or {})

    # GraphQL endpoints
    async def fetch_question(self, title_slug: str) -> Dict[str, Any]:
        data = await self.graphql(
            queries.QUESTION_DATA, {"titleSlug": title_slug}, "questionData"
        )
        question = data.get("question")
        if question is None:
            raise APIError(f"Question '{title_slug}' was not found.")
        return question

    async def fetch_question_translations(self, lang: str = "zh") -> List[Dict[str, Any]]:
        data = await self.graphql(
            queries.QUESTION_TRANSLATIONS, {"lang": lang}, "getQuestionTranslation"
        )
        return data.get("translations") or []

    async def fetch_question_statuses(self) -> List[Dict[str, Any]]:
        data = await self.graphql(
            queries.QUESTION_STATUSES, operation_name="allQuestionsStatuses"
        )
        return data.get("allQuestions") or []

    async def fetch_global_data(self) -> Dict[str, Any]:
        return await self.graphql(queries.GLOBAL_DATA, operation_name="globalData")


def to_daily_counts(calendar: Dict[str, Any]) -> Dict[str, int]:
    """Converts `{unix_timestamp: count}` into `{YYYY-MM-DD: count}` (UTC)."""
    daily: Dict[str, int] = {}
    for timestamp, count in calendar.items():
        day = datetime.fromtimestamp(int(timestamp), tz=timezone.utc).date().isoformat()
        daily[day] = daily.get(day, 0) + int(count)
    return dict(sorted(daily.items()))
