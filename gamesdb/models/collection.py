"""
Ownership and activity domain models.

Collections with their line items, plus per-user, per-game wishlist,
playthrough and media records.

Dependencies: pydantic
System role: User-owned entities
"""

import enum

from gamesdb.models.common import EntityModel


class MediaType(str, enum.Enum):
    """Kinds of media attached to a user or game."""

    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"


class Collection(EntityModel):
    """Named grouping of games owned by a user."""

    collection_id: int | None = None
    user_id: int | None = None
    name: str | None = None
    description: str | None = None
    is_public: bool = False


class CollectionItem(EntityModel):
    """Line item of a collection."""

    item_id: int | None = None
    collection_id: int | None = None
    game_id: int | None = None
    quantity: int | None = None
    condition: str | None = None
    price_paid: float | None = None
    notes: str | None = None


class MediaItem(EntityModel):
    """Image, video or link associated with a user and/or a game."""

    media_id: int | None = None
    user_id: int | None = None
    game_id: int | None = None
    media_type: MediaType | None = None
    url: str | None = None
    caption: str | None = None


class WishlistItem(EntityModel):
    """Game a user wants, with an optional price ceiling."""

    wishlist_id: int | None = None
    user_id: int | None = None
    game_id: int | None = None
    priority: int | None = None
    max_price: float | None = None
    notes: str | None = None


class PlaythruItem(EntityModel):
    """One logged play of a game by a user."""

    playthru_id: int | None = None
    user_id: int | None = None
    game_id: int | None = None
    player_count: int | None = None
    duration_minutes: int | None = None
    won: bool | None = None
    score: int | None = None
    notes: str | None = None
