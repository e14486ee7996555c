"""
Error types for query construction and execution.

Builder errors are local validation failures raised by the step that
detected them.  Execution errors come from the HTTP layer; the only one
defined here is ResponseDecodeError, raised when a successful response body
cannot be decoded into the requested type.  The two families never mix.
"""
from __future__ import annotations


# ── Builder ──────────────────────────────────────────────

class BuilderError(ValueError):
    """Base class for every query-builder validation failure."""


class InvalidMetricName(BuilderError):
    """Metric name collides with a reserved query-language keyword."""


class InvalidTimeSpecifier(BuilderError):
    """Time is neither a numeric timestamp nor an RFC3339 date-time."""


class InvalidTimeDuration(BuilderError):
    """Duration literal contains an unknown unit or a bad magnitude."""


class IllegalVectorSelector(BuilderError):
    """Selector has neither a metric name nor any label matcher."""


# ── Execution ────────────────────────────────────────────

class ResponseDecodeError(RuntimeError):
    """Response body is not valid JSON or does not fit the response type."""

    def __init__(self, message: str, *, url: str | None = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.url = url
        self.body = body
