"""List query parameters (page, sort, column filters). No ORM dependency."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class QueryColumn:
    """One filter condition: <name> <exp> <value>, joined to the next by logic."""

    name: str
    value: Any
    exp: str = "eq"
    logic: str = "and"


@dataclass(frozen=True)
class QueryParams:
    """Page of records matching columns.

    page is 0-based. sort is a comma-separated list of column names, each
    optionally prefixed with '-' for descending; the special value
    'ignore count' keeps the default order and skips the total count.
    """

    page: int = 0
    limit: int = 10
    sort: str = ""
    columns: list[QueryColumn] = field(default_factory=list)
