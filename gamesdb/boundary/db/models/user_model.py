"""
User ORM models.

users holds accounts with a unique user_name; user_details holds the
1:1 profile row under the same user_id. The 1:1 pairing is not a
foreign key: callers keep the two in step.

Dependencies: sqlalchemy, gamesdb.boundary.db.base
System role: Persisted layout of accounts
"""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gamesdb.boundary.db.base import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """User account row."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    user_name: Mapped[str | None] = mapped_column(String(128), unique=True)
    email: Mapped[str | None] = mapped_column(String(255))
    first_name: Mapped[str | None] = mapped_column(String(128))
    last_name: Mapped[str | None] = mapped_column(String(128))
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class UserDetailModel(Base, TimestampMixin):
    """User profile row."""

    __tablename__ = "user_details"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    bio: Mapped[str | None] = mapped_column(Text)
    location: Mapped[str | None] = mapped_column(String(255))
    bgg_user_name: Mapped[str | None] = mapped_column(String(128))
    favorite_game_id: Mapped[int | None] = mapped_column(Integer)
    privacy_level: Mapped[str | None] = mapped_column(String(32))
