"""Fetches raw changelog content over HTTP."""

from __future__ import annotations

import http.client
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from depwatch.errors import FetchError, MissingURLError

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class FetchedChangelog:
    """Raw changelog content fetched for a dependency."""

    dependency: str
    content: str
    fetched_at: datetime
    version: str = ""


class HTTPFetcher:
    """Retrieves changelog documents with HTTP GET requests."""

    def __init__(self, timeout: float | timedelta = DEFAULT_TIMEOUT) -> None:
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self.timeout = float(timeout) if timeout else DEFAULT_TIMEOUT

    def fetch(self, dep: str, url: str) -> FetchedChangelog:
        """Fetch the changelog for dep from url.

        Raises MissingURLError for an empty url and FetchError when the
        request fails or the server does not answer with status 200.
        """
        if not url:
            raise MissingURLError(f"changelog URL for dependency {dep!r} is empty")
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as resp:
                if resp.status != 200:
                    raise FetchError(
                        f"unexpected status {resp.status} fetching changelog for {dep!r}",
                        status=resp.status,
                    )
                body = resp.read()
        except urllib.error.HTTPError as exc:
            raise FetchError(
                f"unexpected status {exc.code} fetching changelog for {dep!r}", status=exc.code
            ) from exc
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
            raise FetchError(f"fetching changelog for {dep!r}: {exc}") from exc
        return FetchedChangelog(
            dependency=dep,
            content=body.decode("utf-8", errors="replace"),
            fetched_at=datetime.now(timezone.utc),
        )