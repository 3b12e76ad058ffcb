"""Translate list QueryParams into SQLAlchemy where/order/limit clauses.

Column conditions are evaluated the way a flat SQL string would be: each
column's logic joins it to the next one and AND binds tighter than OR, so
``a and b or c`` becomes ``(a AND b) OR c``.
"""

from collections.abc import Callable, Iterable
from typing import Any

from sqlalchemy import ColumnElement, and_, or_, true
from sqlalchemy.orm import InstrumentedAttribute

from app.application.dtos.query import QueryColumn, QueryParams
from app.core.constants import QUERY_LIMIT_MAX, SORT_IGNORE_COUNT, STORE_MAX_RECORD_ID
from app.domain.exceptions import QueryParamsException

_Operator = Callable[[Any, Any], ColumnElement[bool]]


def _split_in(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [v.strip() for v in str(value).split(",") if v.strip()]


_OPERATORS: dict[str, _Operator] = {
    "eq": lambda c, v: c == v,
    "neq": lambda c, v: c != v,
    "gt": lambda c, v: c > v,
    "gte": lambda c, v: c >= v,
    "lt": lambda c, v: c < v,
    "lte": lambda c, v: c <= v,
    "like": lambda c, v: c.like(f"%{v}%"),
    "in": lambda c, v: c.in_(_split_in(v)),
}

_LOGIC = ("and", "or")


def _fits_store(value: Any) -> bool:
    if not isinstance(value, int):
        return True
    return -STORE_MAX_RECORD_ID - 1 <= value <= STORE_MAX_RECORD_ID


def _column(
    columns: dict[str, InstrumentedAttribute[Any]], name: str
) -> InstrumentedAttribute[Any]:
    try:
        return columns[name]
    except KeyError:
        raise QueryParamsException(f"unknown column '{name}'", name) from None


def build_where(
    columns: dict[str, InstrumentedAttribute[Any]],
    conditions: Iterable[QueryColumn],
) -> ColumnElement[bool]:
    """Build the WHERE clause for conditions against the whitelisted columns.

    Raises:
        QueryParamsException: Unknown column, operator or logic value, or an
            integer value the store cannot compare against.
    """
    groups: list[list[ColumnElement[bool]]] = [[]]
    pending = list(conditions)
    for i, cond in enumerate(pending):
        exp = (cond.exp or "eq").lower()
        logic = (cond.logic or "and").lower()
        op = _OPERATORS.get(exp)
        if op is None:
            raise QueryParamsException(f"unsupported exp '{cond.exp}'", cond.name)
        if logic not in _LOGIC:
            raise QueryParamsException(f"unsupported logic '{cond.logic}'", cond.name)
        if exp == "in" and not _split_in(cond.value):
            raise QueryParamsException("'in' needs at least one value", cond.name)
        values = _split_in(cond.value) if exp == "in" else [cond.value]
        if not all(_fits_store(v) for v in values):
            raise QueryParamsException("value is out of the 64-bit integer range", cond.name)
        groups[-1].append(op(_column(columns, cond.name), cond.value))
        if logic == "or" and i < len(pending) - 1:
            groups.append([])
    clauses = [and_(*g) for g in groups if g]
    if not clauses:
        return true()
    return clauses[0] if len(clauses) == 1 else or_(*clauses)


def build_order(
    columns: dict[str, InstrumentedAttribute[Any]],
    sort: str,
    default: InstrumentedAttribute[Any],
) -> list[Any]:
    """ORDER BY for a comma-separated sort string; default is newest first."""
    if not sort or sort == SORT_IGNORE_COUNT:
        return [default.desc()]
    order: list[Any] = []
    for part in sort.split(","):
        name = part.strip()
        if not name:
            continue
        if name.startswith("-"):
            order.append(_column(columns, name[1:]).desc())
        else:
            order.append(_column(columns, name).asc())
    return order or [default.desc()]


def page_window(params: QueryParams) -> tuple[int, int]:
    """Return (limit, offset) for a 0-based page."""
    if params.page < 0:
        raise QueryParamsException("page must be >= 0")
    if params.limit < 1 or params.limit > QUERY_LIMIT_MAX:
        raise QueryParamsException(f"limit must be between 1 and {QUERY_LIMIT_MAX}")
    offset = params.page * params.limit
    if offset > STORE_MAX_RECORD_ID:
        raise QueryParamsException("page is too large")
    return params.limit, offset


def wants_count(params: QueryParams) -> bool:
    return params.sort != SORT_IGNORE_COUNT
