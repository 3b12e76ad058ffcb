"""Base repository: the backing store accessor for one entity table.

Each operation opens its own short-lived session from the injected factory,
so a shared (single-flight) load never borrows a request-scoped session.
Not-found is always signalled with RecordNotFoundException.
"""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import (
    ColumnElement,
    Select,
    delete,
    func,
    inspect as sa_inspect,
    select,
    true,
    update,
)
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from app.application.dtos.query import QueryParams
from app.core.constants import STORE_MAX_RECORD_ID
from app.domain.exceptions import (
    RecordAlreadyExistsException,
    RecordNotFoundException,
    ValidationException,
)
from app.infrastructure.cache.record_loader import validate_record_id
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.query import (
    build_order,
    build_where,
    page_window,
    wants_count,
)
from app.shared.utils.datetime import utc_now

ModelType = TypeVar("ModelType", bound=Base)
RecordType = TypeVar("RecordType")

# Never written through insert/update_partial
_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at", "deleted_at"})


def in_store_range(record_id: int) -> bool:
    """True if record_id fits the signed 64-bit identifier columns."""
    return record_id <= STORE_MAX_RECORD_ID


def is_sparse_empty(value: Any) -> bool:
    """True for values a partial update leaves untouched (None, "", 0)."""
    return value is None or value == "" or value == 0


class BaseRepository(Generic[ModelType, RecordType]):
    """Generic store accessor: query, query_many, insert, delete_by_id,
    update_partial, query_by_filter.

    Subclasses declare entity, model, record_type, cache_prefix (and id_field
    for join tables keyed by a foreign key) and implement _to_record.
    _before_write is the hook for value normalization (e.g. password hashing).
    """

    entity: str
    model: type[ModelType]
    record_type: type[RecordType]
    cache_prefix: str
    id_field: str = "id"
    # Columns excluded from list filters and sorting
    hidden_fields: frozenset[str] = frozenset()

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        mapper = sa_inspect(self.model)
        self._columns: dict[str, InstrumentedAttribute[Any]] = {
            attr.key: getattr(self.model, attr.key) for attr in mapper.column_attrs
        }
        self._filter_columns = {
            name: col
            for name, col in self._columns.items()
            if name not in self.hidden_fields
        }
        self._id_column = self._columns[self.id_field]
        self._soft_delete = "deleted_at" in self._columns

    def _to_record(self, obj: ModelType) -> RecordType:
        """Map an ORM row to the entity's record DTO."""
        raise NotImplementedError

    async def _before_write(self, values: dict[str, Any]) -> dict[str, Any]:
        """Override to normalize values before insert or update."""
        return values

    def _active(self) -> ColumnElement[bool]:
        if self._soft_delete:
            return self._columns["deleted_at"].is_(None)
        return true()

    def _select(self) -> Select[tuple[ModelType]]:
        return select(self.model).where(self._active())

    def _writable(self, values: Mapping[str, Any], *, include_key: bool) -> dict[str, Any]:
        allowed = self._columns.keys() - _MANAGED_FIELDS
        if not include_key:
            allowed = allowed - {self.id_field}
        unknown = sorted(set(values) - allowed)
        if unknown:
            raise ValidationException(
                f"unknown or read-only field(s) for {self.entity}: {', '.join(unknown)}",
                unknown[0],
            )
        for name, value in values.items():
            if isinstance(value, int) and not (
                -STORE_MAX_RECORD_ID - 1 <= value <= STORE_MAX_RECORD_ID
            ):
                raise ValidationException(f"{name} is out of the 64-bit integer range", name)
        return dict(values)

    async def query(self, record_id: int) -> RecordType:
        """Return the record for record_id or raise RecordNotFoundException."""
        if not in_store_range(record_id):
            raise RecordNotFoundException(self.entity, record_id)
        async with self.session_factory() as session:
            result = await session.execute(
                self._select().where(self._id_column == record_id)
            )
            obj = result.scalar_one_or_none()
            if obj is None:
                raise RecordNotFoundException(self.entity, record_id)
            return self._to_record(obj)

    async def query_many(self, record_ids: list[int]) -> list[RecordType]:
        """Return the records that exist among record_ids (any order)."""
        record_ids = [i for i in record_ids if in_store_range(i)]
        if not record_ids:
            return []
        async with self.session_factory() as session:
            rows = await session.scalars(
                self._select().where(self._id_column.in_(record_ids))
            )
            return [self._to_record(obj) for obj in rows]

    async def insert(self, values: Mapping[str, Any]) -> int:
        """Insert a row and return its identifier.

        Raises:
            ValidationException: values name an unknown or managed column, or
                hold an integer the store columns cannot represent.
            RecordAlreadyExistsException: the key is already taken.
        """
        data = await self._before_write(
            self._writable(values, include_key=self.id_field != "id")
        )
        obj = self.model(**data)
        try:
            async with self.session_factory.begin() as session:
                session.add(obj)
                await session.flush()
                record_id: int = getattr(obj, self.id_field)
        except IntegrityError:
            raise RecordAlreadyExistsException(
                self.entity, data.get(self.id_field)
            ) from None
        return record_id

    async def delete_by_id(self, record_id: int) -> None:
        """Delete the row (soft delete where the table has deleted_at).

        Deleting an id that does not exist is not an error.
        """
        validate_record_id(record_id, self.id_field)
        if not in_store_range(record_id):
            return
        async with self.session_factory.begin() as session:
            if self._soft_delete:
                await session.execute(
                    update(self.model)
                    .where(self._id_column == record_id, self._active())
                    .values(deleted_at=utc_now())
                    .execution_options(synchronize_session=False)
                )
            else:
                await session.execute(
                    delete(self.model)
                    .where(self._id_column == record_id)
                    .execution_options(synchronize_session=False)
                )

    async def update_partial(self, record_id: int, values: Mapping[str, Any]) -> None:
        """Apply the non-empty fields of values to the row for record_id.

        None, '' and 0 are skipped, so a field cannot be cleared through this
        path. Updating an id that does not exist is not an error.

        Raises:
            ValidationException: record_id is 0 or values name an unknown column.
        """
        validate_record_id(record_id, self.id_field)
        data = self._writable(values, include_key=False)
        if not in_store_range(record_id):
            return
        data = {k: v for k, v in data.items() if not is_sparse_empty(v)}
        if not data:
            return
        data = await self._before_write(data)
        async with self.session_factory.begin() as session:
            await session.execute(
                update(self.model)
                .where(self._id_column == record_id, self._active())
                .values(**data)
                .execution_options(synchronize_session=False)
            )

    async def query_by_filter(self, params: QueryParams) -> tuple[list[RecordType], int]:
        """Return one page of matching records and the total match count.

        With sort 'ignore count' the count query is skipped and total is 0.

        Raises:
            QueryParamsException: Bad column, operator, page or limit.
        """
        where = build_where(self._filter_columns, params.columns)
        order = build_order(self._filter_columns, params.sort, self._id_column)
        limit, offset = page_window(params)
        async with self.session_factory() as session:
            total = 0
            if wants_count(params):
                total = (
                    await session.execute(
                        select(func.count())
                        .select_from(self.model)
                        .where(self._active(), where)
                    )
                ).scalar_one()
                if total == 0:
                    return [], 0
            rows = await session.scalars(
                self._select().where(where).order_by(*order).limit(limit).offset(offset)
            )
            return [self._to_record(obj) for obj in rows], total
