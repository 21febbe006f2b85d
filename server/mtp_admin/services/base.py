"""Generic CRUD service shared by every resource."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from uuid import UUID, uuid4

from fastapi.encoders import jsonable_encoder
from sqlalchemy import JSON, Select, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import ConflictError, NotFoundError
from ..core.observability import metrics_collector

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Filter value meaning "do not filter"
ALL = "all"


class CrudService(Generic[ModelT]):
    """
    List, get, create, update and delete for one model.

    Subclasses declare the model and how it is searched and sorted:

    - ``search_fields``: text columns matched case-insensitively by ``search``
    - ``sort_options``: ``sort_by`` key -> (column name, descending)
    - ``default_sort``: key used when ``sort_by`` is missing or unknown
    - ``load_options``: relationships eagerly loaded with every query
    """

    model: ClassVar[Type[Any]]
    resource_type: ClassVar[str] = "resource"
    search_fields: ClassVar[Tuple[str, ...]] = ()
    sort_options: ClassVar[Dict[str, Tuple[str, bool]]] = {"created_at": ("created_at", True)}
    default_sort: ClassVar[str] = "created_at"
    load_options: ClassVar[Tuple[str, ...]] = ()
    conflict_detail: ClassVar[str] = "A record with the same unique fields already exists"

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self) -> Select:
        stmt = select(self.model)
        for name in self.load_options:
            stmt = stmt.options(selectinload(getattr(self.model, name)))
        return stmt

    def _apply_filters(self, stmt: Select, filters: Dict[str, Any]) -> Select:
        for field, value in filters.items():
            if value is None or value == "" or value == ALL:
                continue
            if isinstance(value, Enum):
                value = value.value
            stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    def _apply_search(self, stmt: Select, search: Optional[str]) -> Select:
        term = (search or "").strip()
        if not term or not self.search_fields:
            return stmt
        # % and _ in the term match literally
        return stmt.where(or_(*(
            getattr(self.model, field).icontains(term, autoescape=True) for field in self.search_fields
        )))

    def _apply_sort(self, stmt: Select, sort_by: Optional[str]) -> Select:
        column_name, descending = self.sort_options.get(sort_by or "", self.sort_options[self.default_sort])
        column = getattr(self.model, column_name)
        return stmt.order_by(column.desc() if descending else column.asc(), self.model.id)

    def _column_values(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map validated request data onto column values.

        Enum members become their values, JSON columns get JSON-compatible
        content, and None is dropped for columns that cannot be null.
        """
        columns = self.model.__table__.columns
        values = {}
        for key, value in data.items():
            column = columns.get(key)
            if column is None:
                continue
            if value is None and not column.nullable:
                continue
            if isinstance(value, Enum):
                value = value.value
            if isinstance(column.type, JSON):
                value = jsonable_encoder(value)
            values[key] = value
        return values

    async def _commit(self, action: str, context: Dict[str, Any]) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"{self.resource_type.capitalize()} {action} failed due to integrity constraint",
                extra={**context, "error": str(e.orig)}
            )
            raise ConflictError(detail=self.conflict_detail)

    async def list(self, search: Optional[str] = None, sort_by: Optional[str] = None, **filters: Any) -> List[ModelT]:
        """
        List records matching the filters, search term and sort key.

        Args:
            search: Case-insensitive substring matched against ``search_fields``
            sort_by: Key of ``sort_options``; unknown keys use ``default_sort``
            **filters: Column equality filters; None, "" and "all" are ignored

        Returns:
            Every matching record
        """
        stmt = self._select()
        stmt = self._apply_filters(stmt, filters)
        stmt = self._apply_search(stmt, search)
        stmt = self._apply_sort(stmt, sort_by)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return list(result.scalars().all())

    async def get_by_id(self, record_id: UUID | str) -> Optional[ModelT]:
        """Get a record by ID, or None."""
        if isinstance(record_id, str):
            try:
                record_id = UUID(record_id)
            except ValueError:
                return None
        stmt = (
            self._select()
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id_or_raise(self, record_id: UUID | str) -> ModelT:
        """
        Get a record by ID or raise NotFoundError.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = await self.get_by_id(record_id)
        if not record:
            raise NotFoundError(self.resource_type, str(record_id))
        return record

    async def create(self, data: Dict[str, Any]) -> ModelT:
        """
        Insert a record.

        Raises:
            ConflictError: If a unique constraint is violated
        """
        record = self.model(**self._column_values(data))
        self.db.add(record)
        await self._commit("creation", {"resource_type": self.resource_type})

        logger.info(
            f"{self.resource_type.capitalize()} created successfully",
            extra={"resource_type": self.resource_type, "resource_id": str(record.id)}
        )
        metrics_collector.record_created(self.resource_type)
        return await self.get_by_id(record.id)

    async def update(self, record_id: UUID | str, data: Dict[str, Any]) -> ModelT:
        """
        Replace the supplied fields of a record.

        Raises:
            NotFoundError: If no record has this ID
            ConflictError: If a unique constraint is violated
        """
        record = await self.get_by_id_or_raise(record_id)
        values = self._column_values(data)
        for key, value in values.items():
            setattr(record, key, value)
        await self._commit("update", {"resource_id": str(record.id)})

        logger.info(
            f"{self.resource_type.capitalize()} updated successfully",
            extra={
                "resource_type": self.resource_type,
                "resource_id": str(record.id),
                "fields": sorted(values),
            }
        )
        return await self.get_by_id(record.id)

    async def set_field(self, record_id: UUID | str, field: str, value: Any) -> ModelT:
        """Update one status-like field and record the transition."""
        record = await self.update(record_id, {field: value})
        if isinstance(value, Enum):
            value = value.value
        metrics_collector.record_field_change(self.resource_type, field, str(value))
        return record

    async def delete(self, record_id: UUID | str) -> None:
        """
        Delete a record.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = await self.get_by_id_or_raise(record_id)
        await self.db.delete(record)
        await self.db.commit()

        logger.info(
            f"{self.resource_type.capitalize()} deleted",
            extra={"resource_type": self.resource_type, "resource_id": str(record_id)}
        )
        metrics_collector.record_deleted(self.resource_type)

    async def append_response(
        self,
        record_id: UUID | str,
        message: str,
        responded_by: Optional[str],
    ) -> ModelT:
        """
        Append a reply to the record's ``responses`` list.

        Raises:
            NotFoundError: If no record has this ID
        """
        record = await self.get_by_id_or_raise(record_id)
        entry = {
            "id": str(uuid4()),
            "message": message,
            "responded_by": responded_by,
            "responded_at": datetime.now(timezone.utc).isoformat(),
        }
        # Reassign so the JSON column is flagged dirty
        record.responses = [*(record.responses or []), entry]
        await self.db.commit()

        logger.info(
            f"Response added to {self.resource_type}",
            extra={
                "resource_type": self.resource_type,
                "resource_id": str(record.id),
                "responded_by": responded_by,
            }
        )
        metrics_collector.record_response_added(self.resource_type)
        return await self.get_by_id(record.id)
