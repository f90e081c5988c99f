"""
Exception hierarchy.

Every failure aborts the whole retrieval; callers only need to catch
SisParseError. An empty schedule table is not an error.
"""

from __future__ import annotations


class SisParseError(Exception):
    """Base class for all errors raised by sisparse."""


class RetrievalError(SisParseError):
    """A page could not be fetched (transport failure or HTTP error status)."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url


class NavigationError(SisParseError):
    """The expected page structure was not found."""


class ScheduleLinkNotFoundError(NavigationError):
    def __init__(self) -> None:
        super().__init__("Couldn't find schedule URL")


class DecodeError(SisParseError):
    """A schedule table row does not match the expected format."""


class UnknownDayError(DecodeError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown day {token!r}")
        self.token = token


class MalformedTimeError(DecodeError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unable to parse time: {token!r}")
        self.token = token


class MalformedDurationError(DecodeError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unable to parse duration: {token!r}")
        self.token = token


class MalformedRowError(DecodeError):
    def __init__(self, cells: list[str], expected: int) -> None:
        super().__init__(f"Expected at least {expected} columns, got {len(cells)}: {cells!r}")
        self.cells = cells


class OrphanRowError(DecodeError):
    """A continuation row (no name) appeared before any group start."""

    def __init__(self) -> None:
        super().__init__("Continuation row without a preceding group start row")
