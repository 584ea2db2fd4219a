"""Space-Track.org session client.

Documentation: https://www.space-track.org/documentation

Authentication is cookie based: a form POST to ``/ajaxauth/login`` returns a
``chocolatechip`` session cookie that is sent with every query until it
expires. The cookie is handed to ``on_cookie`` so the CLI can store it in
the config file and skip the login on the next run.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

import requests

from . import credentials
from .errors import (
    AuthenticationError,
    ContentTypeError,
    CredentialsError,
    ResponseError,
)
from .models.config import AuthConfig, CookieConfig
from .query.builder import BASE_URL, LOGIN_ENDPOINT, SpaceRequest

logger = logging.getLogger(__name__)

COOKIE_NAME = "chocolatechip"
# Used when the login response does not state an expiry.
SESSION_LIFETIME = timedelta(hours=2)


class SpaceTrackClient:
    """Client for the space-track.org REST API."""

    def __init__(
        self,
        auth: AuthConfig,
        base_url: str = BASE_URL,
        session: Optional[requests.Session] = None,
        on_cookie: Optional[Callable[[CookieConfig], None]] = None,
        timeout: float = 60,
    ):
        self.auth = auth
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.on_cookie = on_cookie
        self.timeout = timeout

    def __enter__(self) -> "SpaceTrackClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.logout()

    def logout(self) -> None:
        self.session.close()

    def credentials(self) -> Dict[str, str]:
        """Identity and password in clear, decrypted when a secret is set."""
        if not self.auth.secret:
            return {"identity": self.auth.identity, "password": self.auth.password}

        key = self.auth.secret.encode("utf-8")
        try:
            return {
                "identity": credentials.decrypt(
                    self.auth.identity.encode("utf-8"), key
                ).decode("utf-8"),
                "password": credentials.decrypt(
                    self.auth.password.encode("utf-8"), key
                ).decode("utf-8"),
            }
        except (CredentialsError, UnicodeDecodeError) as e:
            logger.warning("incorrect secret: %s", e)
            raise CredentialsError("incorrect secret") from e

    def login(self) -> CookieConfig:
        """Authenticate and remember the session cookie.

        Raises:
            AuthenticationError: Login refused or no session cookie returned.
            CredentialsError: Stored credentials can not be decrypted.
        """
        url = self.base_url + LOGIN_ENDPOINT
        logger.debug("POST %s", url)
        response = self.session.post(url, data=self.credentials(), timeout=self.timeout)

        if response.status_code != 200:
            logger.warning(
                "status code differ from usual successful code 200: %d %s",
                response.status_code,
                response.text,
            )
            raise AuthenticationError(
                f"login failed with status {response.status_code}"
            )

        # space-track answers 200 with {"Login": "Failed"} on bad credentials
        if _login_failed(response):
            raise AuthenticationError("login failed: identity or password rejected")

        cookie = self._session_cookie(response)
        if cookie is None:
            raise AuthenticationError("login response carried no session cookie")

        self.auth.cookie = cookie
        logger.info("response from login space-track was ok")
        if self.on_cookie is not None:
            self.on_cookie(cookie)
        return cookie

    def ensure_login(self) -> None:
        if self.auth.needs_login():
            self.login()
        else:
            logger.info(
                "authentication not needed, cookie expires at %s",
                self.auth.cookie.expires.isoformat(),
            )

    def fetch(self, request: SpaceRequest, retry: bool = True) -> List[Dict[str, Any]]:
        """Run ``request`` and return the decoded JSON rows.

        A 401 drops the stored cookie and, when ``retry`` is set, logs in
        again and repeats the request once.

        Raises:
            ResponseError: Non-200 status or a body that is not a JSON array.
            ContentTypeError: Response is not JSON.
        """
        self.ensure_login()

        url = request.url(self.base_url)
        logger.debug("GET %s", url)
        response = self.session.get(
            url,
            headers={"Accept": "application/json", "Cookie": self.auth.cookie.header()},
            timeout=self.timeout,
        )

        if response.status_code == 401 and retry:
            logger.info("session cookie rejected, logging in again")
            self.auth.cookie = None
            return self.fetch(request, retry=False)

        if response.status_code != 200:
            raise ResponseError(
                f"response status code not 200: {response.status_code}",
                status=response.status_code,
                body=response.text,
            )

        return _read_rows(response)

    def _session_cookie(self, response: requests.Response) -> Optional[CookieConfig]:
        for cookie in [*response.cookies, *self.session.cookies]:
            if cookie.name != COOKIE_NAME:
                continue
            if cookie.expires:
                expires = datetime.fromtimestamp(cookie.expires, tz=timezone.utc)
            else:
                expires = datetime.now(timezone.utc) + SESSION_LIFETIME
            return CookieConfig(name=cookie.name, value=cookie.value, expires=expires)
        return None


def _login_failed(response: requests.Response) -> bool:
    try:
        body = response.json()
    except ValueError:
        return False
    return isinstance(body, dict) and body.get("Login") == "Failed"


def _read_rows(response: requests.Response) -> List[Dict[str, Any]]:
    content_type = response.headers.get("Content-Type", "")
    if "json" not in content_type:
        raise ContentTypeError(
            f"incorrect content type {content_type!r}. Can't unmarshal rows"
        )

    try:
        rows = response.json()
    except ValueError as e:
        raise ResponseError(f"invalid JSON body: {e}", status=200, body=response.text) from e

    if not isinstance(rows, list):
        raise ResponseError("expected a JSON array of rows", status=200, body=response.text)

    logger.info("fetched %d rows", len(rows))
    return rows


__all__ = ["COOKIE_NAME", "SpaceTrackClient"]
