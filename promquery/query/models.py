"""
Query values -- immutable, already-validated request descriptors.

Each query knows its endpoint path and the exact parameter list sent on the
wire.  Execution is implemented once in ``promquery.query.executor`` against
the ``Query`` interface.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from promquery.client.responses import InstantQueryResponse, RangeQueryResponse
from promquery.query.executor import execute_query

if TYPE_CHECKING:
    from promquery.client.client import Client
    from promquery.query.builder import InstantQueryBuilder


class Query(ABC):
    """A request against the query API."""

    response_type: ClassVar[Any] = Any

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Path appended to the client's base URL."""

    @abstractmethod
    def params(self) -> list[tuple[str, str]]:
        """URL query parameters, in wire order."""

    async def execute(self, client: Client, response_type: Any = None) -> Any:
        """Send the query through *client* and decode the response.

        Parameters
        ----------
        client : Client
            Configured API client.
        response_type : type, optional
            Target type for the JSON body.  Defaults to the query kind's
            ``response_type``.
        """
        return await execute_query(self, client, response_type or self.response_type)


@dataclass(frozen=True)
class InstantQuery(Query):
    """Query evaluated at a single point in time."""

    query: str
    time: str | None = None
    timeout: str | None = None

    response_type: ClassVar[Any] = InstantQueryResponse

    @property
    def endpoint(self) -> str:
        return "/query"

    def params(self) -> list[tuple[str, str]]:
        params = [("query", self.query)]
        if self.time is not None:
            params.append(("time", self.time))
        if self.timeout is not None:
            params.append(("timeout", self.timeout))
        return params

    @staticmethod
    def builder() -> InstantQueryBuilder:
        from promquery.query.builder import InstantQueryBuilder

        return InstantQueryBuilder()


@dataclass(frozen=True)
class RangeQuery(Query):
    """Query evaluated from *start* to *end* every *step*.

    Values are sent as given; nothing is parsed or canonicalised.
    """

    query: str
    start: str
    end: str
    step: str
    timeout: str | None = None

    response_type: ClassVar[Any] = RangeQueryResponse

    @property
    def endpoint(self) -> str:
        return "/query_range"

    def params(self) -> list[tuple[str, str]]:
        params = [
            ("query", self.query),
            ("start", self.start),
            ("end", self.end),
            ("step", self.step),
        ]
        if self.timeout is not None:
            params.append(("timeout", self.timeout))
        return params
