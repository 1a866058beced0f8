from __future__ import annotations

import logging
from typing import Final
from urllib.parse import urlsplit

import requests
from ports.rest import RestApiFactoryPort, RestApiPort, RestContextPort

LOG: Final = logging.getLogger("zenit.rest")

# --------- Context ---------


class RequestsRestContext(RestContextPort):
    """Requests bound to one base URL, sharing the parent session."""

    def __init__(self, session: requests.Session, base_url: str, timeout_s: float) -> None:
        self._session = session
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.headers: dict[str, str] = {}

    def set_header(self, content_type: str) -> None:
        self.headers["Content-Type"] = content_type

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def post(self, path: str, body: str) -> requests.Response | None:
        """POST `body` as-is. Transport errors are logged, not raised."""
        try:
            resp = self._session.post(
                self.url_for(path),
                data=body.encode("utf-8"),
                headers=self.headers,
                timeout=self.timeout_s,
            )
        except requests.RequestException as ex:
            LOG.debug("POST %s failed: %r", path, ex)
            return None
        if not resp.ok:
            LOG.debug("POST %s -> HTTP %d", path, resp.status_code)
        return resp


# --------- Session ---------


class RequestsRestApi(RestApiPort):
    def __init__(
        self,
        session: requests.Session | None = None,
        timeout_s: float = 10.0,
        user_agent: str = "",
    ) -> None:
        self.session = session or requests.Session()
        # zenit expects the blank User-Agent the game client sends
        self.session.headers["User-Agent"] = user_agent
        self.timeout_s = timeout_s

    def get_context(self, base_url: str) -> RequestsRestContext | None:
        try:
            parts = urlsplit(base_url)
        except ValueError:
            return None
        if parts.scheme not in ("http", "https") or not parts.netloc:
            LOG.debug("Rejecting base URL %r", base_url)
            return None
        return RequestsRestContext(self.session, base_url, self.timeout_s)

    def close(self) -> None:
        self.session.close()


class RequestsRestApiFactory(RestApiFactoryPort):
    """Holds at most one process-wide RequestsRestApi."""

    def __init__(self, timeout_s: float = 10.0, user_agent: str = "") -> None:
        self.timeout_s = timeout_s
        self.user_agent = user_agent
        self._api: RequestsRestApi | None = None

    def get(self) -> RequestsRestApi | None:
        return self._api

    def create(self) -> RequestsRestApi | None:
        try:
            self._api = RequestsRestApi(timeout_s=self.timeout_s, user_agent=self.user_agent)
        except Exception as ex:
            LOG.debug("Could not create HTTP session: %r", ex)
            return None
        return self._api
