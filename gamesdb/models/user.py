"""
User domain models.

User holds the account with its unique user_name; UserDetail is the
1:1 profile extension sharing the same user_id.
"""

from gamesdb.models.common import EntityModel


class User(EntityModel):
    """User account."""

    user_id: int | None = None
    user_name: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_admin: bool = False


class UserDetail(EntityModel):
    """Profile extension of a User, keyed by the same user_id."""

    user_id: int | None = None
    bio: str | None = None
    location: str | None = None
    bgg_user_name: str | None = None
    favorite_game_id: int | None = None
    privacy_level: str | None = None
