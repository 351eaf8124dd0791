"""Fetches release notes from the GitHub Releases API."""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from depwatch.errors import FetchError, MissingOwnerError, MissingRepoError

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RELEASES = 5


@dataclass(frozen=True)
class GitHubRelease:
    """A single GitHub release."""

    tag_name: str = ""
    name: str = ""
    body: str = ""
    published_at: datetime | None = None
    html_url: str = ""


def _parse_time(value: Any, where: str) -> datetime | None:
    if not value:
        return None
    text = str(value)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise FetchError(f"decoding releases for {where}: bad time {value!r}") from exc


def _release_from_json(item: Any, where: str) -> GitHubRelease:
    if not isinstance(item, dict):
        raise FetchError(f"decoding releases for {where}: expected an object")
    return GitHubRelease(
        tag_name=item.get("tag_name") or "",
        name=item.get("name") or "",
        body=item.get("body") or "",
        published_at=_parse_time(item.get("published_at"), where),
        html_url=item.get("html_url") or "",
    )


class GitHubFetcher:
    """Client for the releases endpoint of a GitHub-compatible API."""

    def __init__(
        self, timeout: float | timedelta = DEFAULT_TIMEOUT, base_url: str = DEFAULT_BASE_URL
    ) -> None:
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self.timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        self.base_url = base_url.rstrip("/")

    def fetch_releases(
        self, owner: str, repo: str, max_releases: int = DEFAULT_MAX_RELEASES
    ) -> list[GitHubRelease]:
        """Return up to max_releases latest releases of owner/repo.

        A non-positive max_releases means the default of 5.
        """
        if not owner:
            raise MissingOwnerError()
        if not repo:
            raise MissingRepoError()
        if max_releases <= 0:
            max_releases = DEFAULT_MAX_RELEASES

        where = f"{owner}/{repo}"
        url = f"{self.base_url}/repos/{owner}/{repo}/releases?per_page={max_releases}"
        request = urllib.request.Request(url, headers={"Accept": "application/vnd.github+json"})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                if resp.status != 200:
                    raise FetchError(f"unexpected status {resp.status} for {where}", status=resp.status)
                raw = resp.read()
        except urllib.error.HTTPError as exc:
            raise FetchError(f"unexpected status {exc.code} for {where}", status=exc.code) from exc
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
            raise FetchError(f"fetching releases for {where}: {exc}") from exc

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise FetchError(f"decoding releases for {where}: {exc}") from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise FetchError(f"decoding releases for {where}: expected a list")
        return [_release_from_json(item, where) for item in data]