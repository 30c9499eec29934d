"""
CRUD operations for database models.

Exports the generic EntityCRUD, its per-kind specializations and the
stats repository, plus build_repositories() which wires one repository
per kind to a connection handle.

Usage:
    from gamesdb import GamesDatabase
    db = GamesDatabase()
    db.initialize()
    game = db.bgg_games.read(13)
"""

from typing import TYPE_CHECKING

from gamesdb.boundary.db.CRUD.base_crud import EntityCRUD
from gamesdb.boundary.db.CRUD.game_crud import GameCRUD
from gamesdb.boundary.db.CRUD.stats_crud import StatsCRUD
from gamesdb.boundary.db.CRUD.user_crud import UserCRUD
from gamesdb.boundary.db.descriptors import EntityKind, descriptor_for

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase


def build_repositories(db: "GamesDatabase") -> dict:
    """
    Create one repository per entity kind bound to a connection handle.

    Args:
        db: Connection handle

    Returns:
        dict: Repository by attribute name
    """

    def generic(kind: EntityKind) -> EntityCRUD:
        return EntityCRUD(db, descriptor_for(kind))

    return {
        "bgg_games": generic(EntityKind.BGG_GAME),
        "csi_prices": generic(EntityKind.CSI_PRICE),
        "mm_prices": generic(EntityKind.MM_PRICE),
        "games": GameCRUD(db),
        "game_reltns": generic(EntityKind.GAME_RELTN),
        "users": UserCRUD(db),
        "user_details": generic(EntityKind.USER_DETAIL),
        "collections": generic(EntityKind.COLLECTION),
        "collection_items": generic(EntityKind.COLLECTION_ITEM),
        "media_items": generic(EntityKind.MEDIA_ITEM),
        "wishlist_items": generic(EntityKind.WISHLIST_ITEM),
        "playthru_items": generic(EntityKind.PLAYTHRU_ITEM),
        "stats": StatsCRUD(db),
    }


__all__ = [
    "EntityCRUD",
    "GameCRUD",
    "UserCRUD",
    "StatsCRUD",
    "build_repositories",
]
