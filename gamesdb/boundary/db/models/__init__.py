"""
Database models package.

Exports one ORM model per entity kind plus the stats snapshot table.

Dependencies: sqlalchemy, gamesdb.boundary.db.base
System role: Database model definitions for domain entities
"""

from gamesdb.boundary.db.models.catalog_model import (
    BGGGameModel,
    CoolStuffIncPriceModel,
    GameModel,
    GameReltnModel,
    MiniatureMarketPriceModel,
)
from gamesdb.boundary.db.models.user_model import UserDetailModel, UserModel
from gamesdb.boundary.db.models.collection_model import (
    CollectionItemModel,
    CollectionModel,
    MediaItemModel,
    PlaythruItemModel,
    WishlistItemModel,
)
from gamesdb.boundary.db.models.stats_model import StatsModel

__all__ = [
    "BGGGameModel",
    "CoolStuffIncPriceModel",
    "MiniatureMarketPriceModel",
    "GameModel",
    "GameReltnModel",
    "UserModel",
    "UserDetailModel",
    "CollectionModel",
    "CollectionItemModel",
    "MediaItemModel",
    "WishlistItemModel",
    "PlaythruItemModel",
    "StatsModel",
]
