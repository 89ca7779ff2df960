"""Minimal Gitea REST client covering repository search and creation."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .config import request_timeout
from .exceptions import ForgeError
from .models import CreateRepoOptions, Repository, RepositorySummary, SearchResult

log = logging.getLogger(__name__)


class GiteaClient:
    """Talks to ``<base_url>/api/v1``.

    Searching works anonymously; creating a repository needs a username and
    password, sent with HTTP basic auth.
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_base = f"{self.base_url}/api/v1"
        self.timeout = timeout if timeout is not None else request_timeout()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if username is not None or password is not None:
            self.session.auth = (username or "", password or "")

    def search_repositories(self, filter: str | None = None) -> SearchResult:
        params = {"q": filter} if filter else None
        data = self._request("GET", "/repos/search", params=params)
        repositories = tuple(RepositorySummary.from_api(item) for item in data.get("data") or [])
        return SearchResult(ok=bool(data.get("ok")), repositories=repositories)

    def create_repository(self, options: CreateRepoOptions) -> Repository:
        data = self._request("POST", "/user/repos", json=options.to_payload())
        return Repository.from_api(data)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.api_base}{path}"
        log.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ForgeError(f"Request to {url} failed: {exc}") from exc
        log.debug("%s %s -> %s", method, url, response.status_code)
        if not response.ok:
            raise ForgeError(_error_message(response), response.status_code)
        try:
            payload = response.json()
        except ValueError as exc:
            raise ForgeError(f"Unexpected response from {url}: not JSON", response.status_code) from exc
        if not isinstance(payload, dict):
            raise ForgeError(f"Unexpected response from {url}: expected a JSON object", response.status_code)
        return payload


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or "Gitea request failed"


__all__ = ["GiteaClient"]
