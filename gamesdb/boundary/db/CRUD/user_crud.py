"""
User CRUD operations.

Extends the generic repository with lookup by the unique user name.

Dependencies: sqlalchemy, gamesdb.boundary.db.CRUD.base_crud
System role: Account persistence operations
"""

from typing import TYPE_CHECKING

from sqlalchemy import select

from gamesdb.boundary.db.CRUD.base_crud import EntityCRUD
from gamesdb.boundary.db.descriptors import EntityKind, descriptor_for
from gamesdb.boundary.db.models import UserModel
from gamesdb.models import User

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase


class UserCRUD(EntityCRUD[User, UserModel]):
    """CRUD operations for User."""

    def __init__(self, db: "GamesDatabase") -> None:
        """Initialize UserCRUD with the User descriptor."""
        super().__init__(db, descriptor_for(EntityKind.USER))

    def read_by_user_name(self, user_name: str) -> User | None:
        """
        Retrieve a user by unique user name.

        Args:
            user_name: Exact user name

        Returns:
            User if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.user_name == user_name)
        with self._session("read_by_user_name", user_name) as session:
            row = session.scalars(stmt).first()
            return None if row is None else self.descriptor.to_entity(row)
