"""
Collection, wishlist, playthrough and media ORM models.

All keys are surrogate ids issued by the caller. user_id/game_id
columns are plain references; no foreign keys are enforced so rows
can be loaded in any order by the ingestion side.

Dependencies: sqlalchemy, gamesdb.boundary.db.base
System role: Persisted layout of user-owned entities
"""

from sqlalchemy import Boolean, Enum, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gamesdb.boundary.db.base import Base, TimestampMixin
from gamesdb.models.collection import MediaType


class CollectionModel(Base, TimestampMixin):
    """Collection row."""

    __tablename__ = "collections"

    collection_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    user_id: Mapped[int | None] = mapped_column(Integer, index=True)
    name: Mapped[str | None] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class CollectionItemModel(Base, TimestampMixin):
    """Collection line item row."""

    __tablename__ = "collection_items"

    item_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    collection_id: Mapped[int | None] = mapped_column(Integer, index=True)
    game_id: Mapped[int | None] = mapped_column(Integer)
    quantity: Mapped[int | None] = mapped_column(Integer)
    condition: Mapped[str | None] = mapped_column(String(64))
    price_paid: Mapped[float | None] = mapped_column(Float)
    notes: Mapped[str | None] = mapped_column(Text)


class MediaItemModel(Base, TimestampMixin):
    """Media row."""

    __tablename__ = "media_items"

    media_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    user_id: Mapped[int | None] = mapped_column(Integer)
    game_id: Mapped[int | None] = mapped_column(Integer)
    media_type: Mapped[MediaType | None] = mapped_column(Enum(MediaType, native_enum=False))
    url: Mapped[str | None] = mapped_column(String(1024))
    caption: Mapped[str | None] = mapped_column(Text)


class WishlistItemModel(Base, TimestampMixin):
    """Wishlist row."""

    __tablename__ = "wishlist_items"

    wishlist_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    user_id: Mapped[int | None] = mapped_column(Integer, index=True)
    game_id: Mapped[int | None] = mapped_column(Integer)
    priority: Mapped[int | None] = mapped_column(Integer)
    max_price: Mapped[float | None] = mapped_column(Float)
    notes: Mapped[str | None] = mapped_column(Text)


class PlaythruItemModel(Base, TimestampMixin):
    """Playthrough log row."""

    __tablename__ = "playthru_items"

    playthru_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    user_id: Mapped[int | None] = mapped_column(Integer, index=True)
    game_id: Mapped[int | None] = mapped_column(Integer)
    player_count: Mapped[int | None] = mapped_column(Integer)
    duration_minutes: Mapped[int | None] = mapped_column(Integer)
    won: Mapped[bool | None] = mapped_column(Boolean)
    score: Mapped[int | None] = mapped_column(Integer)
    notes: Mapped[str | None] = mapped_column(Text)
