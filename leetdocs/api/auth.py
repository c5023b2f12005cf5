"""
Handles authentication with the site: CSRF token retrieval and the
cookie-based form login.
"""

import logging
from typing import TYPE_CHECKING

import aiohttp

from leetdocs.exceptions import AuthenticationError

if TYPE_CHECKING:
    from .client import LeetCodeAPIClient

log = logging.getLogger(__name__)


class LeetCodeAuthenticator:
    """
    Manages the login flow for the LeetCode API client.
    """

    CSRF_COOKIE = "csrftoken"
    LOGIN_REDIRECT = "/problemset/all/"

    def __init__(self, api_client: "LeetCodeAPIClient"):
        """
        Initializes the authenticator.

        Args:
            api_client: A reference to the main LeetCodeAPIClient instance.
        """
        self._api_client = api_client

    async def fetch_csrf_token(self) -> str:
        """
        Asks the site to issue a CSRF cookie and returns its value.

        Raises:
            AuthenticationError: If the response does not set the cookie.
        """
        session = await self._api_client.get_session()
        url = self._api_client.url_for(self._api_client.ENSURE_CSRF_PATH)

        async with session.get(url) as r:
            r.raise_for_status()
            morsel = r.cookies.get(self.CSRF_COOKIE)

        if morsel is None or not morsel.value:
            raise AuthenticationError("The site did not issue a CSRF token.")

        log.debug("CSRF token received.")
        return morsel.value

    @staticmethod
    def build_login_form(username: str, password: str, csrf: str) -> aiohttp.MultipartWriter:
        """Builds the multipart body expected by the login view."""
        fields = {
            "csrfmiddlewaretoken": csrf,
            "login": username,
            "password": password,
            "next": LeetCodeAuthenticator.LOGIN_REDIRECT,
        }
        writer = aiohttp.MultipartWriter("form-data")
        for name, value in fields.items():
            part = writer.append(value)
            part.set_content_disposition("form-data", name=name)
        return writer

    async def login(self, username: str, password: str) -> str:
        """
        Logs in and stores the resulting session cookie on the API client.

        The login view answers a successful POST with a 302 redirect carrying
        the session cookies; any other status means the form was rejected.

        Args:
            username: Account name or email.
            password: Plain-text password.

        Returns:
            The Cookie header value to send on subsequent requests.

        Raises:
            AuthenticationError: If the login is not answered with a redirect
                or no session cookie is set.
        """
        log.info(f"Authenticating as: {username}")
        csrf = await self.fetch_csrf_token()

        session = await self._api_client.get_session()
        login_url = self._api_client.url_for(self._api_client.LOGIN_PATH)
        form = self.build_login_form(username, password, csrf)

        async with session.post(
            login_url,
            data=form,
            headers={
                "Referer": login_url,
                "Cookie": f"{self.CSRF_COOKIE}={csrf}",
                "X-CSRFToken": csrf,
            },
            allow_redirects=False,
        ) as r:
            if r.status != 302:
                raise AuthenticationError(
                    f"Login failed with HTTP status {r.status}. "
                    "Check your username and password."
                )
            cookies = {name: morsel.value for name, morsel in r.cookies.items()}

        if not cookies:
            raise AuthenticationError("Login succeeded but no session cookie was set.")

        self._api_client.csrf_token = cookies.get(self.CSRF_COOKIE, csrf)
        self._api_client.session_cookie = "; ".join(
            f"{name}={value}" for name, value in cookies.items()
        )
        log.info(f"Successfully authenticated as: {username}")
        return self._api_client.session_cookie
