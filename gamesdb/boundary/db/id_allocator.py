"""
Client-side surrogate key issuance.

Kinds without store-side autoincrement get keys as max_key() + 1.
That read-then-insert is not atomic, so issuance is serialized per kind
within the process; across processes the store's key uniqueness is the
final arbiter and a collision surfaces as KeyConflictError.

Dependencies: threading (stdlib), gamesdb.boundary.db.CRUD
System role: Surrogate key allocation
"""

import logging
import threading
from collections import defaultdict
from typing import TYPE_CHECKING

from gamesdb.boundary.db.descriptors import EntityKind, descriptor_for
from gamesdb.models.common import EntityModel
from gamesdb.observability.log_utils import log_with_context
from gamesdb.observability.logger import get_logger

if TYPE_CHECKING:
    from gamesdb.boundary.db.connection import GamesDatabase

logger = get_logger(__name__)


class IDAllocator:
    """
    Issues monotonically increasing keys per entity kind.

    Attributes:
        db: Connection handle the repositories live on
    """

    def __init__(self, db: "GamesDatabase") -> None:
        self.db = db
        self._locks: defaultdict[EntityKind, threading.Lock] = defaultdict(threading.Lock)
        self._guard = threading.Lock()

    def _lock_for(self, kind: EntityKind) -> threading.Lock:
        with self._guard:
            return self._locks[kind]

    def max_key(self, kind: EntityKind) -> int:
        """Highest key of the kind, -1 when empty."""
        return self.db.repository(kind).max_key()

    def next_key(self, kind: EntityKind) -> int:
        """
        Next key for the kind (0 for an empty kind).

        Not reserved: use insert_with_next_key() when inserting.
        """
        return self.max_key(kind) + 1

    def insert_with_next_key(self, entity: EntityModel) -> EntityModel:
        """
        Insert an entity under a freshly issued key.

        The entity is not modified; a copy with the key set is inserted
        and returned.

        Args:
            entity: Entity of any registered kind; its key is ignored

        Returns:
            EntityModel: Inserted copy carrying the issued key

        Raises:
            KeyConflictError: If another writer took the key first
        """
        descriptor = descriptor_for(type(entity))
        repo = self.db.repository(descriptor.kind)
        with self._lock_for(descriptor.kind):
            key = repo.max_key() + 1
            issued = entity.model_copy(update={descriptor.key_field: key})
            repo.insert(issued)
        log_with_context(logger, logging.DEBUG, "Key issued", kind=descriptor.name, key=key)
        return issued
