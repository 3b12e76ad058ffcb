"""Shared API schemas: list filters, batch ids, create response."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from app.application.dtos.query import QueryColumn, QueryParams
from app.core.constants import MAX_RECORD_ID, QUERY_LIMIT_MAX


class QueryColumnRequest(BaseModel):
    """One filter condition; logic joins it to the next condition."""

    name: str = Field(..., min_length=1, max_length=64)
    exp: Literal["eq", "neq", "gt", "gte", "lt", "lte", "like", "in"] = "eq"
    value: Any
    logic: Literal["and", "or"] = "and"


class ListRequest(BaseModel):
    """Request body for POST /<entity>/list."""

    page: int = Field(default=0, ge=0, description="0-based page number")
    limit: int = Field(default=10, ge=1, le=QUERY_LIMIT_MAX)
    sort: str = Field(
        default="",
        max_length=255,
        description="Comma-separated columns, '-' prefix for descending; "
        "'ignore count' skips the total count",
    )
    columns: list[QueryColumnRequest] = Field(default_factory=list, max_length=20)

    def to_params(self) -> QueryParams:
        return QueryParams(
            page=self.page,
            limit=self.limit,
            sort=self.sort,
            columns=[
                QueryColumn(name=c.name, value=c.value, exp=c.exp, logic=c.logic)
                for c in self.columns
            ],
        )


class BatchRequest(BaseModel):
    """Request body for POST /<entity>/batch (get by ids)."""

    ids: list[int] = Field(..., min_length=1, max_length=QUERY_LIMIT_MAX)


class CreatedResponse(BaseModel):
    """Response for POST /<entity> (record created)."""

    id: int = Field(..., ge=1, le=MAX_RECORD_ID)
