"""
Domain models for the games store.

Exports:
  - EntityModel, SourceKind: Base model and external source enum
  - BGGGame, CoolStuffIncPriceData, MiniatureMarketPriceData: External catalog records
  - Game, GameReltn: Canonical game and game relation
  - User, UserDetail: Accounts and profiles
  - Collection, CollectionItem, MediaItem, MediaType, WishlistItem, PlaythruItem
  - GameStats: Per-source aggregate snapshot
"""

from gamesdb.models.common import EntityModel, SourceKind
from gamesdb.models.catalog import (
    BGGGame,
    CoolStuffIncPriceData,
    Game,
    GameReltn,
    MiniatureMarketPriceData,
)
from gamesdb.models.user import User, UserDetail
from gamesdb.models.collection import (
    Collection,
    CollectionItem,
    MediaItem,
    MediaType,
    PlaythruItem,
    WishlistItem,
)
from gamesdb.models.stats import GameStats

__all__ = [
    "EntityModel",
    "SourceKind",
    "BGGGame",
    "CoolStuffIncPriceData",
    "MiniatureMarketPriceData",
    "Game",
    "GameReltn",
    "User",
    "UserDetail",
    "Collection",
    "CollectionItem",
    "MediaItem",
    "MediaType",
    "WishlistItem",
    "PlaythruItem",
    "GameStats",
]
