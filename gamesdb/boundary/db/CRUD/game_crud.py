"""
Game CRUD operations.

Extends the generic repository with lookup of the canonical game that
cross-references a given external catalog id.

Dependencies: sqlalchemy, gamesdb.boundary.db.CRUD.base_crud
System role: Canonical game persistence operations
"""

from typing import TYPE_CHECKING

from sqlalchemy import select

from gamesdb.boundary.db.CRUD.base_crud import EntityCRUD
from gamesdb.boundary.db.descriptors import EntityKind, descriptor_for
from gamesdb.boundary.db.models import GameModel
from gamesdb.models import Game, SourceKind

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase

_EXTERNAL_COLUMNS = {
    SourceKind.BGG: GameModel.bgg_id,
    SourceKind.CSI: GameModel.csi_id,
    SourceKind.MM: GameModel.mm_id,
}


class GameCRUD(EntityCRUD[Game, GameModel]):
    """CRUD operations for the canonical Game record."""

    def __init__(self, db: "GamesDatabase") -> None:
        """Initialize GameCRUD with the Game descriptor."""
        super().__init__(db, descriptor_for(EntityKind.GAME))

    def read_by_external_id(self, source: SourceKind, external_id: int) -> Game | None:
        """
        Retrieve the canonical game linked to an external catalog id.

        Args:
            source: External catalog the id belongs to
            external_id: Native id within that catalog

        Returns:
            Lowest-keyed matching Game, None if no game links to the id
        """
        column = _EXTERNAL_COLUMNS[SourceKind(source)]
        stmt = select(GameModel).where(column == external_id).order_by(GameModel.game_id)
        with self._session("read_by_external_id", external_id) as session:
            row = session.scalars(stmt).first()
            return None if row is None else self.descriptor.to_entity(row)
