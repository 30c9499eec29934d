"""
Database boundary layer: ORM models, repositories and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - GamesDatabase: Connection handle exposing one repository per kind
  - EntityKind, EntityDescriptor, DESCRIPTORS, descriptor_for: Per-kind wiring
  - EntityCRUD, GameCRUD, UserCRUD, StatsCRUD: Repositories
  - AdHocQueryEngine: Query-by-example
  - IDAllocator: Surrogate key issuance

Dependencies: sqlalchemy, gamesdb.configs
System role: Database adapter providing persistent storage for catalog,
price, user and stats entities.
"""

from gamesdb.boundary.db.base import Base, TimestampMixin
from gamesdb.boundary.db.descriptors import (
    DESCRIPTORS,
    EntityDescriptor,
    EntityKind,
    descriptor_for,
)
from gamesdb.boundary.db.CRUD import EntityCRUD, GameCRUD, StatsCRUD, UserCRUD
from gamesdb.boundary.db.query import AdHocQueryEngine
from gamesdb.boundary.db.id_allocator import IDAllocator
from gamesdb.boundary.db.connection import GamesDatabase

__all__ = [
    "Base",
    "TimestampMixin",
    "DESCRIPTORS",
    "EntityDescriptor",
    "EntityKind",
    "descriptor_for",
    "EntityCRUD",
    "GameCRUD",
    "UserCRUD",
    "StatsCRUD",
    "AdHocQueryEngine",
    "IDAllocator",
    "GamesDatabase",
]
