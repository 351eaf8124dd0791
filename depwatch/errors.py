"""Exceptions raised by the changelog processing components."""

from __future__ import annotations


class ChangelogError(Exception):
    """Base class for every error raised by depwatch."""

    default_message = "changelog: error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class MissingURLError(ChangelogError, ValueError):
    """An HTTP source has no URL configured."""

    default_message = "changelog: http source requires a url"


class MissingOwnerError(ChangelogError, ValueError):
    """A GitHub source has no owner configured."""

    default_message = "changelog: github source requires an owner"


class MissingRepoError(ChangelogError, ValueError):
    """A GitHub source has no repo configured."""

    default_message = "changelog: github source requires a repo"


class UnknownSourceTypeError(ChangelogError, ValueError):
    """The source type is not recognised."""

    default_message = "changelog: unknown source type"


class FetchError(ChangelogError):
    """Fetching remote changelog content failed."""

    default_message = "changelog: fetch failed"

    def __init__(self, message: str | None = None, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class QuotaExceededError(ChangelogError):
    """A dependency has exceeded its entry quota for the current period."""

    default_message = "changelog: quota exceeded for dependency"