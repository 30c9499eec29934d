"""
Aggregate statistics snapshot model.

One snapshot per external source kind, replaced wholesale by the
refresh jobs that produce it.

Dependencies: pydantic
System role: Cached aggregate statistics
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from gamesdb.models.common import EntityModel, SourceKind


class GameStats(EntityModel):
    """
    Aggregate snapshot for one external source.

    Attributes:
        stats_id: Store-assigned row id (None until inserted)
        kind: Source the snapshot describes
        sampled_at: When the snapshot was computed (UTC)
        total_items: Number of records held for the source
        max_id: Highest external id held for the source, -1 when empty
        new_items: Records added since the previous snapshot
        updated_items: Records refreshed since the previous snapshot
        details: Free-form per-source aggregates
    """

    stats_id: int | None = None
    kind: SourceKind
    sampled_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total_items: int = 0
    max_id: int = -1
    new_items: int = 0
    updated_items: int = 0
    details: dict = Field(default_factory=dict)

    @field_validator("sampled_at")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        # SQLite stores no offset and hands DateTime(timezone=True) back naive
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
