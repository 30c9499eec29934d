"""
Per-kind entity descriptors.

An EntityDescriptor ties a domain model to its ORM row and names the key
field. The generic repository and the ad hoc query engine are written
once against this descriptor; each entity kind is just one registry entry.

Dependencies: sqlalchemy, pydantic, gamesdb.models
System role: Specialization point of the generic data-access contract
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import JSON, inspect
from sqlalchemy.orm import InstrumentedAttribute

from gamesdb.boundary.db.base import Base
from gamesdb.boundary.db.models import (
    BGGGameModel,
    CollectionItemModel,
    CollectionModel,
    CoolStuffIncPriceModel,
    GameModel,
    GameReltnModel,
    MediaItemModel,
    MiniatureMarketPriceModel,
    PlaythruItemModel,
    UserDetailModel,
    UserModel,
    WishlistItemModel,
)
from gamesdb.models import (
    BGGGame,
    Collection,
    CollectionItem,
    CoolStuffIncPriceData,
    EntityModel,
    Game,
    GameReltn,
    MediaItem,
    MiniatureMarketPriceData,
    PlaythruItem,
    User,
    UserDetail,
    WishlistItem,
)

EntityT = TypeVar("EntityT", bound=EntityModel)
RowT = TypeVar("RowT", bound=Base)


class EntityKind(str, enum.Enum):
    """Every keyed entity kind held by the store."""

    BGG_GAME = "bgg_game"
    CSI_PRICE = "csi_price"
    MM_PRICE = "mm_price"
    GAME = "game"
    GAME_RELTN = "game_reltn"
    USER = "user"
    USER_DETAIL = "user_detail"
    COLLECTION = "collection"
    COLLECTION_ITEM = "collection_item"
    MEDIA_ITEM = "media_item"
    WISHLIST_ITEM = "wishlist_item"
    PLAYTHRU_ITEM = "playthru_item"


def fields_set_presence(entity: EntityModel) -> dict[str, Any]:
    """Presence strategy: a field is populated iff the caller set it."""
    return entity.populated_fields()


@dataclass(frozen=True)
class EntityDescriptor(Generic[EntityT, RowT]):
    """
    Describes how one entity kind is stored.

    Attributes:
        kind: Entity kind enum member
        entity_cls: Pydantic domain model callers work with
        row_cls: SQLAlchemy ORM model the kind is persisted as
        key_field: Name of the key field (same on both models)
        presence: Returns the populated fields of a template entity
    """

    kind: EntityKind
    entity_cls: type[EntityT]
    row_cls: type[RowT]
    key_field: str
    presence: Callable[[EntityModel], dict[str, Any]] = field(default=fields_set_presence)

    @property
    def name(self) -> str:
        return self.entity_cls.__name__

    @property
    def key_column(self) -> InstrumentedAttribute:
        return getattr(self.row_cls, self.key_field)

    def column(self, field_name: str) -> InstrumentedAttribute | None:
        """Return the mapped column attribute for a field, None if unmapped."""
        if field_name not in inspect(self.row_cls).columns:
            return None
        return getattr(self.row_cls, field_name)

    def is_filterable(self, field_name: str) -> bool:
        """JSON columns have no portable equality, so they cannot be filtered on."""
        columns = inspect(self.row_cls).columns
        return field_name in columns and not isinstance(columns[field_name].type, JSON)

    def key_of(self, entity: EntityT) -> Any:
        return getattr(entity, self.key_field)

    def to_row(self, entity: EntityT) -> RowT:
        return self.row_cls(**entity.model_dump())

    def to_entity(self, row: RowT) -> EntityT:
        return self.entity_cls.model_validate(row)

    def values_of(self, entity: EntityT) -> dict[str, Any]:
        """All non-key field values, for a full-row update."""
        return entity.model_dump(exclude={self.key_field})


DESCRIPTORS: dict[EntityKind, EntityDescriptor] = {
    descriptor.kind: descriptor
    for descriptor in (
        EntityDescriptor(EntityKind.BGG_GAME, BGGGame, BGGGameModel, "bgg_id"),
        EntityDescriptor(EntityKind.CSI_PRICE, CoolStuffIncPriceData, CoolStuffIncPriceModel, "csi_id"),
        EntityDescriptor(EntityKind.MM_PRICE, MiniatureMarketPriceData, MiniatureMarketPriceModel, "mm_id"),
        EntityDescriptor(EntityKind.GAME, Game, GameModel, "game_id"),
        EntityDescriptor(EntityKind.GAME_RELTN, GameReltn, GameReltnModel, "reltn_id"),
        EntityDescriptor(EntityKind.USER, User, UserModel, "user_id"),
        EntityDescriptor(EntityKind.USER_DETAIL, UserDetail, UserDetailModel, "user_id"),
        EntityDescriptor(EntityKind.COLLECTION, Collection, CollectionModel, "collection_id"),
        EntityDescriptor(EntityKind.COLLECTION_ITEM, CollectionItem, CollectionItemModel, "item_id"),
        EntityDescriptor(EntityKind.MEDIA_ITEM, MediaItem, MediaItemModel, "media_id"),
        EntityDescriptor(EntityKind.WISHLIST_ITEM, WishlistItem, WishlistItemModel, "wishlist_id"),
        EntityDescriptor(EntityKind.PLAYTHRU_ITEM, PlaythruItem, PlaythruItemModel, "playthru_id"),
    )
}


def descriptor_for(kind: EntityKind | type[EntityModel]) -> EntityDescriptor:
    """
    Look up a descriptor by kind or by domain model class.

    Args:
        kind: EntityKind member or a domain model class

    Returns:
        EntityDescriptor: Descriptor for the kind

    Raises:
        KeyError: If nothing is registered for the kind
    """
    if isinstance(kind, EntityKind):
        return DESCRIPTORS[kind]
    for descriptor in DESCRIPTORS.values():
        if descriptor.entity_cls is kind:
            return descriptor
    raise KeyError(f"No descriptor registered for {kind!r}")
