"""
Database connection management.

GamesDatabase is the explicit connection handle: it owns the SQLAlchemy
engine and session factory, gates every repository call on being open,
and exposes one repository per entity kind. Independent handles share
no state.

Dependencies: sqlalchemy, gamesdb.configs
System role: Database connection lifecycle management
"""

import threading
from contextlib import AbstractContextManager, contextmanager, nullcontext
from typing import Iterator

from sqlalchemy import create_engine, make_url, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from gamesdb.boundary.db.base import Base
from gamesdb.boundary.db.CRUD import EntityCRUD, build_repositories
from gamesdb.boundary.db.descriptors import EntityKind
from gamesdb.boundary.db.id_allocator import IDAllocator
from gamesdb.boundary.db.query import AdHocQueryEngine
from gamesdb.configs import DatabaseSettings, get_settings
from gamesdb.core.exceptions import ConfigurationError, OperationError
from gamesdb.observability.logger import get_logger

logger = get_logger(__name__)


def _mask_url(url: str) -> str:
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable url>"


class GamesDatabase:
    """
    Connection handle for the games store.

    States: Closed -> Open -> Closed. initialize() and close() are
    idempotent; every other operation raises ConfigurationError while
    the handle is closed.

    Usage:
        db = GamesDatabase(DatabaseSettings(url="sqlite:///games.db"))
        db.initialize()
        try:
            db.bgg_games.insert(BGGGame(bgg_id=13, name="Catan"))
        finally:
            db.close()
    """

    def __init__(self, settings: DatabaseSettings | None = None) -> None:
        """
        Create a closed handle.

        Args:
            settings: Database settings; defaults to the environment-backed
                settings from get_settings()
        """
        self.settings = settings or get_settings().database
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None
        # In-memory SQLite shares one DBAPI connection across threads
        self._memory_lock = threading.RLock()

        repositories = build_repositories(self)
        self._repositories = repositories
        self.bgg_games = repositories["bgg_games"]
        self.csi_prices = repositories["csi_prices"]
        self.mm_prices = repositories["mm_prices"]
        self.games = repositories["games"]
        self.game_reltns = repositories["game_reltns"]
        self.users = repositories["users"]
        self.user_details = repositories["user_details"]
        self.collections = repositories["collections"]
        self.collection_items = repositories["collection_items"]
        self.media_items = repositories["media_items"]
        self.wishlist_items = repositories["wishlist_items"]
        self.playthru_items = repositories["playthru_items"]
        self.stats = repositories["stats"]

        self.query_engine = AdHocQueryEngine(self)
        self.ids = IDAllocator(self)

    def __enter__(self) -> "GamesDatabase":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def masked_url(self) -> str:
        return _mask_url(self.settings.url)

    def initialize(self) -> None:
        """
        Open the connection: build the engine, verify it, create tables.

        Calling this on an open handle does nothing.

        Raises:
            ConfigurationError: If the URL is malformed or the backing
                store cannot be reached
        """
        if self.is_open:
            logger.debug("initialize() on open handle ignored: %s", self.masked_url)
            return

        try:
            engine = create_engine(self.settings.url, **self.settings.engine_options())
        except (ArgumentError, ImportError, TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"Invalid database configuration: {exc}", url=self.masked_url
            ) from exc

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as exc:
            engine.dispose()
            raise ConfigurationError(
                f"Database unreachable: {exc}", url=self.masked_url
            ) from exc

        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database connection opened: %s", self.masked_url)

    def close(self) -> None:
        """
        Close the connection. Closing a closed handle is a no-op.
        """
        if self._engine is None:
            return
        engine = self._engine
        self._engine = None
        self._session_factory = None
        engine.dispose()
        logger.info("Database connection closed: %s", self.masked_url)

    def require_open(self) -> None:
        """Raise ConfigurationError unless the handle is open."""
        if self._engine is None:
            raise ConfigurationError("Database connection is not open", url=self.masked_url)

    def engine(self) -> Engine:
        """Return the live engine; ConfigurationError if the handle is closed."""
        self.require_open()
        return self._engine

    def _connection_guard(self) -> AbstractContextManager:
        """Serialize use of the shared connection behind an in-memory URL."""
        return self._memory_lock if self.settings.is_memory else nullcontext()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Yield a session for one repository call.

        The session is rolled back if the body raises and always closed.
        Committing is the caller's job.

        On an in-memory database the session holds the handle lock until
        it is closed, so only one thread touches the connection at a time.

        Raises:
            ConfigurationError: If the handle is closed
        """
        self.require_open()
        with self._connection_guard():
            db = self._session_factory()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def ping(self) -> bool:
        """
        Check that the backing store still answers.

        Returns:
            bool: True if SELECT 1 succeeds, False otherwise

        Raises:
            ConfigurationError: If the handle is closed
        """
        engine = self.engine()
        try:
            with self._connection_guard(), engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as exc:
            logger.warning("Database ping failed: %s", exc)
            return False

    def repository(self, kind: EntityKind) -> EntityCRUD:
        """
        Return the repository for an EntityKind.

        Args:
            kind: EntityKind member

        Returns:
            EntityCRUD: Repository for that kind

        Raises:
            KeyError: If no repository handles the kind
        """
        for repo in self._repositories.values():
            if isinstance(repo, EntityCRUD) and repo.descriptor.kind == kind:
                return repo
        raise KeyError(f"No repository registered for {kind!r}")

    def query(self, template, row_limit: int = -1) -> list:
        """Run an ad hoc query-by-example; see AdHocQueryEngine.query."""
        return self.query_engine.query(template, row_limit)

    def drop_all(self) -> None:
        """
        Drop every registered table.

        WARNING: Irreversible data loss. Only use in tests or development.

        Raises:
            ConfigurationError: If the handle is closed
            OperationError: If the drop fails
        """
        engine = self.engine()
        try:
            with self._connection_guard():
                Base.metadata.drop_all(bind=engine)
        except SQLAlchemyError as exc:
            raise OperationError(f"Dropping tables failed: {exc}", operation="drop_all") from exc
        logger.warning("All tables dropped: %s", self.masked_url)
