"""
Query executor -- turns a Query into one HTTP GET and a typed result.

  1. Appends the query's endpoint to the client's base URL
  2. Sends the query's parameters as URL query parameters
  3. Raises httpx.HTTPStatusError on 4xx / 5xx without reading the body
  4. Decodes the JSON body into the requested type

Transport errors (connect, read timeout ...) propagate unchanged from httpx.
Nothing is retried or cached.
"""
from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from promquery.query.errors import ResponseDecodeError
from promquery.core.logging import get_logger
from promquery.core.utils import join_url, timer

if TYPE_CHECKING:
    from promquery.client.client import Client
    from promquery.query.models import Query

logger = get_logger(__name__)


@lru_cache(maxsize=64)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_body(body: bytes, response_type: Any, url: str | None = None) -> Any:
    """Decode a JSON *body* into *response_type*.

    Raises
    ------
    ResponseDecodeError
        If the body is not JSON or does not fit *response_type*.
    """
    try:
        return _adapter(response_type).validate_json(body)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"Could not decode response from {url or 'query API'}: {exc.error_count()} error(s)",
            url=url,
            body=body,
        ) from exc


async def execute_query(query: Query, client: Client, response_type: Any) -> Any:
    """Execute *query* with *client* and decode the body as *response_type*."""
    url = join_url(client.base_url, query.endpoint)
    params = query.params()

    with timer() as t:
        response = await client.http.get(url, params=params)
    logger.info(
        "GET %s -> %d (%d ms)",
        query.endpoint, response.status_code, t["elapsed_ms"],
    )

    response.raise_for_status()
    return decode_body(response.content, response_type, url)
