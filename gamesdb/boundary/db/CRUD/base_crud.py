"""
Generic CRUD operations for keyed entity kinds.

EntityCRUD implements the data-access contract once; each entity kind
gets an instance parameterized by its EntityDescriptor. Every call runs
in its own session and either commits fully or rolls back.

Existence semantics:
    read    -> entity, or None when the key is absent
    insert  -> KeyConflictError when the key already exists
    update  -> KeyNotFoundError when no row matched
    delete  -> KeyNotFoundError when no row matched

Dependencies: sqlalchemy, gamesdb.boundary.db.descriptors
System role: Foundation for all database CRUD operations
"""

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generic, Iterator

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from gamesdb.boundary.db.descriptors import EntityDescriptor, EntityT, RowT
from gamesdb.core.exceptions import KeyConflictError, KeyNotFoundError, OperationError
from gamesdb.models.common import EntityModel
from gamesdb.observability.log_utils import log_exception_with_context, log_with_context
from gamesdb.observability.logger import get_logger

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase

logger = get_logger(__name__)


class EntityCRUD(Generic[EntityT, RowT]):
    """
    Generic repository for one entity kind.

    Type Parameters:
        EntityT: Pydantic domain model of the kind
        RowT: SQLAlchemy ORM model of the kind

    Attributes:
        db: Connection handle every call goes through
        descriptor: Per-kind descriptor (models, key field, presence strategy)
    """

    def __init__(self, db: "GamesDatabase", descriptor: EntityDescriptor[EntityT, RowT]) -> None:
        """
        Initialize CRUD for one kind.

        Args:
            db: Connection handle
            descriptor: Descriptor of the kind to operate on
        """
        self.db = db
        self.descriptor = descriptor

    @property
    def name(self) -> str:
        return self.descriptor.name

    @contextmanager
    def _session(self, operation: str, key: Any = None) -> Iterator[Session]:
        """Open a session and translate store failures into OperationError."""
        try:
            with self.db.session() as session:
                yield session
        except IntegrityError as exc:
            log_with_context(
                logger, logging.WARNING, "Key conflict",
                kind=self.name, operation=operation, key=key,
            )
            raise KeyConflictError(
                self.name, key, operation, details={"reason": str(exc.orig)}
            ) from exc
        except SQLAlchemyError as exc:
            log_exception_with_context(
                logger, "Store operation failed", exc,
                kind=self.name, operation=operation, key=key,
            )
            raise OperationError(
                f"{operation} on {self.name} failed: {exc}", self.name, operation
            ) from exc

    def _key_of(self, entity: EntityT, operation: str) -> Any:
        """Validate an entity argument and return its key; the handle must be open."""
        self.db.require_open()
        if not isinstance(entity, self.descriptor.entity_cls):
            raise OperationError(
                f"Expected {self.name}, got {type(entity).__name__}", self.name, operation
            )
        key = self.descriptor.key_of(entity)
        if key is None:
            raise OperationError(
                f"{self.name}.{self.descriptor.key_field} is not set", self.name, operation
            )
        return key

    def read(self, key: Any) -> EntityT | None:
        """
        Retrieve a single entity by key.

        Args:
            key: Key value of the kind

        Returns:
            Entity if found, None otherwise
        """
        with self._session("read", key) as session:
            row = session.get(self.descriptor.row_cls, key)
            if row is None:
                return None
            return self.descriptor.to_entity(row)

    def insert(self, entity: EntityT) -> None:
        """
        Insert a new entity.

        Args:
            entity: Entity with its key set

        Raises:
            KeyConflictError: If the key already exists
            OperationError: If the key is unset or the store fails
        """
        key = self._key_of(entity, "insert")
        with self._session("insert", key) as session:
            session.add(self.descriptor.to_row(entity))
            session.commit()
        log_with_context(logger, logging.DEBUG, "Inserted", kind=self.name, key=key)

    def update(self, entity: EntityT) -> None:
        """
        Replace every non-key field of an existing entity.

        Args:
            entity: Entity with its key set

        Raises:
            KeyNotFoundError: If no row has the entity's key
        """
        key = self._key_of(entity, "update")
        stmt = (
            update(self.descriptor.row_cls)
            .where(self.descriptor.key_column == key)
            .values(**self.descriptor.values_of(entity))
        )
        with self._session("update", key) as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise KeyNotFoundError(self.name, key, "update")
            session.commit()
        log_with_context(logger, logging.DEBUG, "Updated", kind=self.name, key=key)

    def delete(self, target: EntityT | Any) -> None:
        """
        Delete an entity, given either the entity or its key.

        Both forms go through the same key-based deletion.

        Args:
            target: Entity instance or key value

        Raises:
            KeyNotFoundError: If no row has the key
        """
        if isinstance(target, EntityModel):
            key = self._key_of(target, "delete")
        else:
            key = target
        self._delete_by_key(key)

    def _delete_by_key(self, key: Any) -> None:
        stmt = delete(self.descriptor.row_cls).where(self.descriptor.key_column == key)
        with self._session("delete", key) as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise KeyNotFoundError(self.name, key, "delete")
            session.commit()
        log_with_context(logger, logging.DEBUG, "Deleted", kind=self.name, key=key)

    def list_keys(self) -> set[Any]:
        """
        Enumerate every key of the kind.

        Returns:
            Set of key values (empty when the kind holds no rows)
        """
        with self._session("list") as session:
            return set(session.scalars(select(self.descriptor.key_column)).all())

    def count(self) -> int:
        """
        Count rows of the kind.

        Returns:
            Non-negative row count
        """
        stmt = select(func.count()).select_from(self.descriptor.row_cls)
        with self._session("count") as session:
            return session.scalar(stmt) or 0

    def max_key(self) -> int:
        """
        Return the highest key of the kind.

        Basis for client-side key issuance (see IDAllocator).

        Returns:
            Highest key, or -1 when the kind holds no rows
        """
        with self._session("max_key") as session:
            value = session.scalar(select(func.max(self.descriptor.key_column)))
        return -1 if value is None else int(value)

    def query(self, template: EntityT, row_limit: int = -1) -> list[EntityT]:
        """Ad hoc query-by-example restricted to this kind."""
        return self.db.query_engine.query(template, row_limit, descriptor=self.descriptor)
