"""
Stats ORM model.

Holds aggregate snapshots per external source. Rows are only ever
inserted or deleted; the newest row per kind is the current snapshot.

Dependencies: sqlalchemy, gamesdb.boundary.db.base
System role: Cached aggregate statistics
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from gamesdb.boundary.db.base import Base
from gamesdb.models.common import SourceKind


class StatsModel(Base):
    """
    Stats snapshot row.

    Attributes:
        stats_id: Autoincrement row id; highest id per kind is the newest row
        kind: Source enum (BGG/CSI/MM)
        sampled_at: Snapshot timestamp
        total_items, max_id, new_items, updated_items: Aggregates
        details: JSON blob of extra per-source aggregates
    """

    __tablename__ = "stats"

    stats_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[SourceKind] = mapped_column(
        Enum(SourceKind, native_enum=False),
        nullable=False,
        index=True,
    )
    sampled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    total_items: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max_id: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)
    new_items: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_items: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    details: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
