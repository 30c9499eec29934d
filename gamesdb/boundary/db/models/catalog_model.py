"""
Catalog ORM models.

One table per external catalog, keyed by the source's native id, plus
the canonical games table and the game relation table. Keys are issued
by the caller, never autoincremented by the store.

Dependencies: sqlalchemy, gamesdb.boundary.db.base
System role: Persisted layout of catalog and price entities
"""

from sqlalchemy import Boolean, Float, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gamesdb.boundary.db.base import Base, TimestampMixin


class BGGGameModel(Base, TimestampMixin):
    """BoardGameGeek game row, keyed by bgg_id."""

    __tablename__ = "bgg_games"

    bgg_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str | None] = mapped_column(String(512))
    year_published: Mapped[int | None] = mapped_column(Integer)
    min_players: Mapped[int | None] = mapped_column(Integer)
    max_players: Mapped[int | None] = mapped_column(Integer)
    min_play_time: Mapped[int | None] = mapped_column(Integer)
    max_play_time: Mapped[int | None] = mapped_column(Integer)
    min_age: Mapped[int | None] = mapped_column(Integer)
    rank: Mapped[int | None] = mapped_column(Integer)
    average_rating: Mapped[float | None] = mapped_column(Float)
    complexity_weight: Mapped[float | None] = mapped_column(Float)
    publisher: Mapped[str | None] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    thumbnail_url: Mapped[str | None] = mapped_column(String(1024))
    is_expansion: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    parent_bgg_id: Mapped[int | None] = mapped_column(Integer)
    designers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    categories: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    mechanics: Mapped[list] = mapped_column(JSON, nullable=False, default=list)


class CoolStuffIncPriceModel(Base, TimestampMixin):
    """CoolStuffInc price row, keyed by csi_id."""

    __tablename__ = "csi_prices"

    csi_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str | None] = mapped_column(String(512))
    sku: Mapped[str | None] = mapped_column(String(64))
    publisher: Mapped[str | None] = mapped_column(String(255))
    msrp: Mapped[float | None] = mapped_column(Float)
    cur_price: Mapped[float | None] = mapped_column(Float)
    availability: Mapped[str | None] = mapped_column(String(64))
    image_url: Mapped[str | None] = mapped_column(String(1024))


class MiniatureMarketPriceModel(Base, TimestampMixin):
    """Miniature Market price row, keyed by mm_id."""

    __tablename__ = "mm_prices"

    mm_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str | None] = mapped_column(String(512))
    sku: Mapped[str | None] = mapped_column(String(64))
    publisher: Mapped[str | None] = mapped_column(String(255))
    category: Mapped[str | None] = mapped_column(String(255))
    msrp: Mapped[float | None] = mapped_column(Float)
    cur_price: Mapped[float | None] = mapped_column(Float)
    availability: Mapped[str | None] = mapped_column(String(64))
    image_url: Mapped[str | None] = mapped_column(String(1024))


class GameModel(Base, TimestampMixin):
    """
    Canonical game row.

    Attributes:
        game_id: Surrogate key issued via max-key-then-increment
        bgg_id, csi_id, mm_id: Cross references into the external catalogs
    """

    __tablename__ = "games"

    game_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str | None] = mapped_column(String(512))
    year_published: Mapped[int | None] = mapped_column(Integer)
    min_players: Mapped[int | None] = mapped_column(Integer)
    max_players: Mapped[int | None] = mapped_column(Integer)
    publisher: Mapped[str | None] = mapped_column(String(255))
    image_url: Mapped[str | None] = mapped_column(String(1024))
    bgg_id: Mapped[int | None] = mapped_column(Integer)
    csi_id: Mapped[int | None] = mapped_column(Integer)
    mm_id: Mapped[int | None] = mapped_column(Integer)


class GameReltnModel(Base, TimestampMixin):
    """Game relation row; related_game_ids is stored opaquely as JSON."""

    __tablename__ = "game_reltns"

    reltn_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    game_id: Mapped[int | None] = mapped_column(Integer)
    reltn_type: Mapped[str | None] = mapped_column(String(64))
    related_game_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
