"""
HTTP client for the query API.

Wraps an ``httpx.AsyncClient`` together with the API base URL.  Redirects are
followed; only 4xx / 5xx responses surface as errors.  Connection
handling, TLS and timeouts are whatever httpx provides; this class only
wires configuration into it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from promquery.core.config import get_settings
from promquery.core.logging import get_logger

if TYPE_CHECKING:
    from promquery.query.models import Query

logger = get_logger(__name__)


class Client:
    """Query API client.

    Parameters
    ----------
    base_url : str, optional
        API root, e.g. ``http://127.0.0.1:9090/api/v1``.  Defaults to
        ``Settings.base_url``.
    timeout : float, optional
        Per-request timeout in seconds.  Defaults to
        ``Settings.request_timeout_seconds``.
    transport : httpx.AsyncBaseTransport, optional
        Custom transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = settings.request_timeout_seconds if timeout is None else timeout
        self.http = httpx.AsyncClient(timeout=self.timeout, transport=transport, follow_redirects=True)
        logger.debug("Client created  base_url=%s  timeout=%.1fs", self.base_url, self.timeout)

    @classmethod
    def from_settings(cls) -> Client:
        return cls()

    async def query(self, query: Query, response_type: Any = None) -> Any:
        """Execute *query*; shorthand for ``query.execute(client)``."""
        return await query.execute(self, response_type)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"
