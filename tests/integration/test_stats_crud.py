"""
Test suite for StatsCRUD snapshot persistence.

Tests insert-only snapshots, latest-row reads, per-kind deletes and
delete-then-insert replacement.

System role: Verification of cached aggregate statistics
"""

from datetime import datetime, timedelta, timezone

import pytest

from gamesdb.boundary.db.connection import GamesDatabase
from gamesdb.core.exceptions import KeyNotFoundError, OperationError
from gamesdb.models import GameStats, SourceKind


@pytest.fixture
def bgg_stats() -> GameStats:
    """Provide a BoardGameGeek snapshot."""
    return GameStats(
        kind=SourceKind.BGG,
        total_items=1200,
        max_id=350000,
        new_items=12,
        updated_items=300,
        details={"expansions": 410},
    )


class TestStatsCRUDInsert:
    """Test suite for StatsCRUD.insert()."""

    def test_insert_should_assign_row_id(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test the stored copy carries a store-assigned id."""
        stored = db.stats.insert(bgg_stats)

        assert stored.stats_id is not None
        assert bgg_stats.stats_id is None

    def test_insert_twice_should_create_two_rows(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test insert never collides: every call adds a row."""
        first = db.stats.insert(bgg_stats)
        second = db.stats.insert(bgg_stats)

        assert second.stats_id > first.stats_id


class TestStatsCRUDRead:
    """Test suite for StatsCRUD.read()."""

    def test_read_should_return_latest_row(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test the most recently inserted snapshot wins."""
        # Arrange
        db.stats.insert(bgg_stats)
        newer = bgg_stats.model_copy(update={"total_items": 1250})
        db.stats.insert(newer)

        # Act
        result = db.stats.read(SourceKind.BGG)

        # Assert
        assert result.total_items == 1250
        assert result.details == {"expansions": 410}

    def test_read_missing_kind_should_return_none(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test absence is a normal result."""
        db.stats.insert(bgg_stats)

        assert db.stats.read(SourceKind.CSI) is None

    def test_kinds_should_be_independent(self, db: GamesDatabase) -> None:
        """Test each source has its own snapshot."""
        db.stats.insert(GameStats(kind=SourceKind.CSI, total_items=10))
        db.stats.insert(GameStats(kind=SourceKind.MM, total_items=20))

        assert db.stats.read(SourceKind.CSI).total_items == 10
        assert db.stats.read(SourceKind.MM).total_items == 20


class TestStatsCRUDDelete:
    """Test suite for StatsCRUD.delete()."""

    def test_delete_should_remove_kind(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test delete removes the snapshot and leaves others alone."""
        db.stats.insert(bgg_stats)
        db.stats.insert(GameStats(kind=SourceKind.MM))

        db.stats.delete(SourceKind.BGG)

        assert db.stats.read(SourceKind.BGG) is None
        assert db.stats.read(SourceKind.MM) is not None

    def test_delete_missing_kind_should_raise(self, db: GamesDatabase) -> None:
        """Test deleting an absent snapshot fails with OperationError."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            db.stats.delete(SourceKind.CSI)
        assert isinstance(exc_info.value, OperationError)

    def test_stats_should_have_no_update(self, db: GamesDatabase) -> None:
        """Test snapshots are replace-only."""
        assert not hasattr(db.stats, "update")


class TestStatsCRUDReplace:
    """Test suite for StatsCRUD.replace()."""

    def test_replace_without_previous_should_insert(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test replace tolerates a missing prior snapshot."""
        stored = db.stats.replace(bgg_stats)

        assert db.stats.read(SourceKind.BGG).stats_id == stored.stats_id

    def test_replace_should_leave_single_row(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test old rows are gone after replace."""
        db.stats.insert(bgg_stats)
        db.stats.insert(bgg_stats)

        db.stats.replace(bgg_stats.model_copy(update={"total_items": 5}))
        db.stats.delete(SourceKind.BGG)

        assert db.stats.read(SourceKind.BGG) is None


class TestStatsCRUDRoundTrip:
    """Test suite for snapshots read back after insert."""

    def test_read_should_equal_inserted_snapshot(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test the latest snapshot reads back equal, timestamp included."""
        stored = db.stats.insert(bgg_stats)

        assert db.stats.read(SourceKind.BGG) == stored

    def test_sampled_at_should_read_back_as_utc(self, db: GamesDatabase) -> None:
        """Test timestamps stay comparable with timezone-aware values."""
        # Arrange
        before = datetime.now(timezone.utc)
        db.stats.insert(GameStats(kind=SourceKind.MM))

        # Act
        result = db.stats.read(SourceKind.MM)

        # Assert
        assert result.sampled_at.tzinfo is not None
        assert result.sampled_at >= before

    def test_offset_timestamp_should_be_stored_as_utc(self, db: GamesDatabase) -> None:
        """Test a non-UTC timestamp keeps its instant."""
        sampled = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=-5)))

        stored = db.stats.insert(GameStats(kind=SourceKind.CSI, sampled_at=sampled))

        assert db.stats.read(SourceKind.CSI).sampled_at == sampled
        assert stored.sampled_at.utcoffset() == timedelta(0)


class TestStatsCRUDUnknownKind:
    """Test suite for source kinds that do not exist."""

    @pytest.mark.parametrize("operation", ["read", "delete"])
    def test_unknown_kind_should_raise_operation_error(self, db: GamesDatabase, operation: str) -> None:
        """Test a bad kind string is rejected like other malformed input."""
        with pytest.raises(OperationError) as exc_info:
            getattr(db.stats, operation)("xyz")

        assert exc_info.value.details["operation"] == operation
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_kind_value_string_should_be_accepted(self, db: GamesDatabase, bgg_stats: GameStats) -> None:
        """Test the enum's string value works in place of the member."""
        db.stats.insert(bgg_stats)

        assert db.stats.read("bgg").kind is SourceKind.BGG
