"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite connection handles, per-kind sample entity
factories, and seeded catalog fixtures.
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

from typing import Any, Callable, Iterator

import pytest

from gamesdb.boundary.db.connection import GamesDatabase
from gamesdb.boundary.db.descriptors import EntityKind
from gamesdb.configs import DatabaseSettings
from gamesdb.models import (
    BGGGame,
    Collection,
    CollectionItem,
    CoolStuffIncPriceData,
    EntityModel,
    Game,
    GameReltn,
    MediaItem,
    MediaType,
    MiniatureMarketPriceData,
    PlaythruItem,
    User,
    UserDetail,
    WishlistItem,
)


# Per kind: factory building a fully populated entity for a key, plus a
# field/value pair used to exercise update().
SAMPLES: dict[EntityKind, tuple[Callable[[int], EntityModel], str, Any]] = {
    EntityKind.BGG_GAME: (
        lambda key: BGGGame(
            bgg_id=key,
            name=f"Game {key}",
            year_published=2015,
            min_players=2,
            max_players=4,
            rank=key,
            average_rating=7.5,
            is_expansion=False,
            designers=["Designer A"],
            categories=["Strategy"],
            mechanics=["Dice Rolling", "Trading"],
        ),
        "name",
        "Renamed",
    ),
    EntityKind.CSI_PRICE: (
        lambda key: CoolStuffIncPriceData(
            csi_id=key, title=f"CSI {key}", sku=f"CSI-{key}", msrp=59.99, cur_price=44.99,
            availability="In Stock",
        ),
        "cur_price",
        39.99,
    ),
    EntityKind.MM_PRICE: (
        lambda key: MiniatureMarketPriceData(
            mm_id=key, title=f"MM {key}", sku=f"MM-{key}", msrp=49.99, cur_price=29.99,
            category="Board Games",
        ),
        "availability",
        "Backorder",
    ),
    EntityKind.GAME: (
        lambda key: Game(game_id=key, name=f"Canonical {key}", bgg_id=key + 1000, csi_id=key + 2000),
        "mm_id",
        3000,
    ),
    EntityKind.GAME_RELTN: (
        lambda key: GameReltn(reltn_id=key, game_id=1, reltn_type="expansion", related_game_ids=[2, 3]),
        "related_game_ids",
        [2, 3, 4],
    ),
    EntityKind.USER: (
        lambda key: User(user_id=key, user_name=f"user{key}", email=f"user{key}@example.com"),
        "email",
        "changed@example.com",
    ),
    EntityKind.USER_DETAIL: (
        lambda key: UserDetail(user_id=key, bio="Likes heavy euros", location="Austin"),
        "bio",
        "Likes party games",
    ),
    EntityKind.COLLECTION: (
        lambda key: Collection(collection_id=key, user_id=1, name="Shelf", is_public=True),
        "is_public",
        False,
    ),
    EntityKind.COLLECTION_ITEM: (
        lambda key: CollectionItem(item_id=key, collection_id=1, game_id=7, quantity=1, price_paid=35.0),
        "quantity",
        2,
    ),
    EntityKind.MEDIA_ITEM: (
        lambda key: MediaItem(
            media_id=key, user_id=1, game_id=7, media_type=MediaType.IMAGE,
            url="https://example.com/box.jpg",
        ),
        "media_type",
        MediaType.VIDEO,
    ),
    EntityKind.WISHLIST_ITEM: (
        lambda key: WishlistItem(wishlist_id=key, user_id=1, game_id=7, priority=1, max_price=40.0),
        "max_price",
        0.0,
    ),
    EntityKind.PLAYTHRU_ITEM: (
        lambda key: PlaythruItem(
            playthru_id=key, user_id=1, game_id=7, player_count=3, duration_minutes=90, won=True,
        ),
        "won",
        False,
    ),
}


def make_entity(kind: EntityKind, key: int) -> EntityModel:
    """Build the sample entity of a kind for a key."""
    factory, _, _ = SAMPLES[kind]
    return factory(key)


def updated_entity(kind: EntityKind, key: int) -> EntityModel:
    """Build the sample entity of a kind with its update field changed."""
    _, field_name, value = SAMPLES[kind]
    return make_entity(kind, key).model_copy(update={field_name: value})


@pytest.fixture
def db_settings() -> DatabaseSettings:
    """Provide settings for a private in-memory SQLite database."""
    return DatabaseSettings(url="sqlite:///:memory:")


@pytest.fixture
def db(db_settings: DatabaseSettings) -> Iterator[GamesDatabase]:
    """
    Provide an open connection handle on an empty in-memory database.

    Yields:
        GamesDatabase: Open handle, closed after the test
    """
    database = GamesDatabase(db_settings)
    database.initialize()
    yield database
    database.close()


@pytest.fixture
def closed_db(db_settings: DatabaseSettings) -> GamesDatabase:
    """Provide a handle that was never opened."""
    return GamesDatabase(db_settings)


@pytest.fixture
def file_db(tmp_path) -> Iterator[GamesDatabase]:
    """
    Provide an open handle on a file-backed SQLite database.

    Yields:
        GamesDatabase: Open handle, closed after the test
    """
    database = GamesDatabase(DatabaseSettings(url=f"sqlite:///{tmp_path / 'games.db'}"))
    database.initialize()
    yield database
    database.close()


@pytest.fixture
def seeded_bgg_games(db: GamesDatabase) -> list[BGGGame]:
    """Insert five BoardGameGeek games, three of them named "X"."""
    games = [
        BGGGame(bgg_id=1, name="X", rank=10),
        BGGGame(bgg_id=2, name="Y", rank=20),
        BGGGame(bgg_id=3, name="X", rank=30),
        BGGGame(bgg_id=4, name="Z", rank=10),
        BGGGame(bgg_id=5, name="X", rank=50),
    ]
    for game in games:
        db.bgg_games.insert(game)
    return games


@pytest.fixture
def entity_factory() -> Callable[[EntityKind, int], EntityModel]:
    """Provide make_entity(kind, key)."""
    return make_entity


@pytest.fixture
def updated_factory() -> Callable[[EntityKind, int], EntityModel]:
    """Provide updated_entity(kind, key)."""
    return updated_entity
