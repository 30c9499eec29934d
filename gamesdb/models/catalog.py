"""
Catalog domain models.

External catalog records (BoardGameGeek, CoolStuffInc, Miniature Market),
keyed by each source's native numeric id, plus the internal canonical
Game record that cross-references them and the opaque GameReltn link.

Dependencies: pydantic
System role: Catalog and price entities
"""

from pydantic import Field

from gamesdb.models.common import EntityModel


class BGGGame(EntityModel):
    """Game record scraped from BoardGameGeek, keyed by bgg_id."""

    bgg_id: int | None = None
    name: str | None = None
    year_published: int | None = None
    min_players: int | None = None
    max_players: int | None = None
    min_play_time: int | None = None
    max_play_time: int | None = None
    min_age: int | None = None
    rank: int | None = None
    average_rating: float | None = None
    complexity_weight: float | None = None
    publisher: str | None = None
    description: str | None = None
    image_url: str | None = None
    thumbnail_url: str | None = None
    is_expansion: bool = False
    parent_bgg_id: int | None = None
    designers: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    mechanics: list[str] = Field(default_factory=list)


class CoolStuffIncPriceData(EntityModel):
    """Price quote from CoolStuffInc, keyed by csi_id."""

    csi_id: int | None = None
    title: str | None = None
    sku: str | None = None
    publisher: str | None = None
    msrp: float | None = None
    cur_price: float | None = None
    availability: str | None = None
    image_url: str | None = None


class MiniatureMarketPriceData(EntityModel):
    """Price quote from Miniature Market, keyed by mm_id."""

    mm_id: int | None = None
    title: str | None = None
    sku: str | None = None
    publisher: str | None = None
    category: str | None = None
    msrp: float | None = None
    cur_price: float | None = None
    availability: str | None = None
    image_url: str | None = None


class Game(EntityModel):
    """Canonical game record with a surrogate game_id."""

    game_id: int | None = None
    name: str | None = None
    year_published: int | None = None
    min_players: int | None = None
    max_players: int | None = None
    publisher: str | None = None
    image_url: str | None = None
    bgg_id: int | None = None
    csi_id: int | None = None
    mm_id: int | None = None


class GameReltn(EntityModel):
    """Relation linking a canonical game to related games."""

    reltn_id: int | None = None
    game_id: int | None = None
    reltn_type: str | None = None
    related_game_ids: list[int] = Field(default_factory=list)
