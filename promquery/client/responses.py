"""
Response envelopes returned by the query API.

Only the envelope is typed.  The ``result`` payload (vector, matrix, scalar
or string samples) is kept as raw JSON values.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class QueryResponse(BaseModel):
    """Common ``{"status": ..., "data": ...}`` envelope."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: Literal["success", "error"]
    data: Any = None
    error_type: str | None = Field(None, alias="errorType")
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    def is_success(self) -> bool:
        return self.status == "success"


class QueryData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    result_type: Literal["matrix", "vector", "scalar", "string"] = Field(..., alias="resultType")
    result: Any = Field(default_factory=list)


class InstantQueryResponse(QueryResponse):
    data: QueryData | None = None


class RangeQueryResponse(QueryResponse):
    data: QueryData | None = None
