"""
Stats CRUD operations.

Snapshots are insert-only: there is no update. A refresh job replaces a
snapshot by deleting the kind's rows and inserting a new one, either at
the call site or through replace().

Dependencies: sqlalchemy, gamesdb.boundary.db.models.stats_model
System role: Cached aggregate statistics persistence
"""

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gamesdb.boundary.db.models import StatsModel
from gamesdb.core.exceptions import KeyNotFoundError, OperationError
from gamesdb.models import GameStats, SourceKind
from gamesdb.observability.log_utils import log_exception_with_context, log_with_context
from gamesdb.observability.logger import get_logger

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase

logger = get_logger(__name__)


class StatsCRUD:
    """
    Persistence for per-source aggregate snapshots.

    Attributes:
        db: Connection handle every call goes through
    """

    name = "GameStats"

    def __init__(self, db: "GamesDatabase") -> None:
        self.db = db

    @contextmanager
    def _session(self, operation: str, kind: SourceKind | None = None) -> Iterator[Session]:
        try:
            with self.db.session() as session:
                yield session
        except SQLAlchemyError as exc:
            log_exception_with_context(
                logger, "Stats operation failed", exc, operation=operation, kind=kind,
            )
            raise OperationError(
                f"{operation} on {self.name} failed: {exc}", self.name, operation
            ) from exc

    def _source_kind(self, kind: SourceKind | str, operation: str) -> SourceKind:
        self.db.require_open()
        try:
            return SourceKind(kind)
        except ValueError as exc:
            raise OperationError(
                f"Unknown source kind {kind!r}", self.name, operation, details={"kind_value": kind}
            ) from exc

    @staticmethod
    def _to_row(stats: GameStats) -> StatsModel:
        return StatsModel(**stats.model_dump(exclude={"stats_id"}))

    def insert(self, stats: GameStats) -> GameStats:
        """
        Insert a new snapshot row.

        Args:
            stats: Snapshot to store; any stats_id on it is ignored

        Returns:
            GameStats: Stored copy carrying the store-assigned stats_id
        """
        with self._session("insert", stats.kind) as session:
            row = self._to_row(stats)
            session.add(row)
            session.commit()
            stored = GameStats.model_validate(row)
        log_with_context(
            logger, logging.DEBUG, "Stats inserted", kind=stats.kind, stats_id=stored.stats_id,
        )
        return stored

    def read(self, kind: SourceKind) -> GameStats | None:
        """
        Retrieve the most recently inserted snapshot for a source.

        Args:
            kind: External source

        Returns:
            GameStats if one exists, None otherwise

        Raises:
            OperationError: If kind is not a SourceKind value
        """
        kind = self._source_kind(kind, "read")
        stmt = (
            select(StatsModel)
            .where(StatsModel.kind == kind)
            .order_by(StatsModel.stats_id.desc())
            .limit(1)
        )
        with self._session("read", kind) as session:
            row = session.scalars(stmt).first()
            return None if row is None else GameStats.model_validate(row)

    def delete(self, kind: SourceKind) -> None:
        """
        Delete every snapshot row for a source.

        Args:
            kind: External source

        Raises:
            KeyNotFoundError: If the source had no snapshot
            OperationError: If kind is not a SourceKind value
        """
        kind = self._source_kind(kind, "delete")
        with self._session("delete", kind) as session:
            result = session.execute(delete(StatsModel).where(StatsModel.kind == kind))
            if result.rowcount == 0:
                raise KeyNotFoundError(self.name, kind.value, "delete")
            session.commit()
        log_with_context(logger, logging.DEBUG, "Stats deleted", kind=kind)

    def replace(self, stats: GameStats) -> GameStats:
        """
        Delete the source's snapshots and insert a new one atomically.

        A missing prior snapshot is not an error here.

        Args:
            stats: New snapshot

        Returns:
            GameStats: Stored copy carrying the store-assigned stats_id
        """
        kind = self._source_kind(stats.kind, "replace")
        with self._session("replace", kind) as session:
            session.execute(delete(StatsModel).where(StatsModel.kind == kind))
            row = self._to_row(stats)
            session.add(row)
            session.commit()
            stored = GameStats.model_validate(row)
        log_with_context(
            logger, logging.INFO, "Stats replaced", kind=kind, stats_id=stored.stats_id,
        )
        return stored
