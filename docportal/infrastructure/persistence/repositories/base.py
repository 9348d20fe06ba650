"""Base repository: generic CRUD over one ORM model, returning application DTOs.

Store errors are classified here and nowhere else: a uniqueness violation
becomes a ConflictException, any other integrity failure is logged and becomes
a DataStoreException. Callers above this layer only forward.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from docportal.domain.exceptions import (
    ConflictException,
    DataStoreException,
    PortalException,
    ResourceNotFoundException,
)
from docportal.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
ResultType = TypeVar("ResultType")

UNIQUE_VIOLATION_SQLSTATE = "23505"
_UNIQUE_VIOLATION_MARKERS = ("UNIQUE constraint failed", "duplicate key value")


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the driver reports a unique/primary-key violation (PostgreSQL or SQLite)."""
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNIQUE_VIOLATION_SQLSTATE:
        return True
    text = str(orig)
    return any(marker in text for marker in _UNIQUE_VIOLATION_MARKERS)


class EntityRepository(Generic[ModelType, ResultType]):
    """Generic repository with get, list, create, update and delete by id.

    Subclasses bind the model, the ORM-to-DTO mapper and the resource name,
    and may override _conflict to raise a more specific exception.
    """

    resource_type: str = "resource"

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        to_result: Callable[[ModelType], ResultType],
    ) -> None:
        self.db = db
        self.model = model
        self._to_result = to_result

    async def get(self, entity_id: UUID) -> ResultType:
        """Return the entity by primary key; raise ResourceNotFoundException if absent."""
        obj = await self._get_model(entity_id)
        if obj is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        return self._to_result(obj)

    async def list(self) -> Sequence[ResultType]:
        """Return every record, oldest first. Unbounded and unfiltered."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).order_by(model.created_at, model.id)
        )
        return [self._to_result(obj) for obj in result.scalars().all()]

    async def create(self, values: Mapping[str, Any]) -> ResultType:
        """Insert a new record and return it with server-assigned id and timestamps."""
        obj = self.model(**values)
        self.db.add(obj)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise self._classify(e, "create") from e
        await self.db.refresh(obj)
        return self._to_result(obj)

    async def update(self, entity_id: UUID, changes: Mapping[str, Any]) -> ResultType:
        """Apply changes in a single UPDATE statement and return the merged record.

        Fields absent from changes keep their stored value; concurrent partial
        updates touching different fields do not overwrite each other.
        """
        if not changes:
            return await self.get(entity_id)
        model: Any = self.model
        stmt = (
            update(self.model)
            .where(model.id == entity_id)
            .values(**changes, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
        except IntegrityError as e:
            raise self._classify(e, "update") from e
        if result.rowcount == 0:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        obj = await self.db.get(self.model, entity_id, populate_existing=True)
        if obj is None:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        return self._to_result(obj)

    async def delete(self, entity_id: UUID) -> None:
        """Delete by primary key; raise ResourceNotFoundException when no row was removed."""
        model: Any = self.model
        result = await self.db.execute(
            delete(self.model)
            .where(model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise ResourceNotFoundException(self.resource_type, entity_id)

    async def _get_model(self, entity_id: UUID) -> ModelType | None:
        # Always hits the store: rows removed by statement or cascade may linger in the identity map.
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _list_where(self, *criteria: Any) -> Sequence[ResultType]:
        """Return records matching criteria, oldest first."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(*criteria).order_by(model.created_at, model.id)
        )
        return [self._to_result(obj) for obj in result.scalars().all()]

    def _conflict(self) -> PortalException:
        return ConflictException(self.resource_type)

    def _classify(self, error: IntegrityError, operation: str) -> PortalException:
        if is_unique_violation(error):
            logger.info("%s %s rejected: unique constraint violated", self.resource_type, operation)
            return self._conflict()
        logger.error(
            "%s %s failed: %s", self.resource_type, operation, error.orig, exc_info=error
        )
        return DataStoreException(self.resource_type, operation)
