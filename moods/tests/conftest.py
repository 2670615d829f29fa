# moods/tests/conftest.py
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Sequence

import pytest

from moods.journal import JournalStoreError, MoodEntry, MoodJournal


@pytest.fixture(autouse=True)
def _enable_db_access_for_all_tests(db) -> None:  # noqa: PT004
    """Grant DB access to all tests by default (pytest-django)."""
    pass


class MemoryStore:
    """In-memory store recording every write."""

    def __init__(self, entries: Sequence[MoodEntry] = ()) -> None:
        self.entries = list(entries)
        self.writes: list[tuple[MoodEntry, ...]] = []

    def read(self) -> list[MoodEntry]:
        return list(self.entries)

    def write(self, entries: Sequence[MoodEntry]) -> None:
        self.entries = list(entries)
        self.writes.append(tuple(entries))


class BrokenStore(MemoryStore):
    """Store whose backend is down."""

    def read(self) -> list[MoodEntry]:
        raise JournalStoreError("read failed")

    def write(self, entries: Sequence[MoodEntry]) -> None:
        raise JournalStoreError("write failed")


@pytest.fixture
def now() -> datetime:
    """Fixed clock value: 2024-01-12 09:30 (naive)."""
    return datetime(2024, 1, 12, 9, 30)


@pytest.fixture
def clock(now) -> Callable[[], datetime]:
    return lambda: now


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()


@pytest.fixture
def make_journal(clock):
    """Factory for journals bound to the fixed clock."""

    def _make(store=None, entries=()) -> MoodJournal:
        return MoodJournal(entries, store=store, clock=clock)

    return _make


@pytest.fixture
def make_entry():
    """Factory for MoodEntry values `days_ago` days before 2024-01-12."""
    seq = iter(range(1, 10_000))

    def _make(*, mood: str = "okay", days_ago: int = 0, note: str = "") -> MoodEntry:
        d = date(2024, 1, 12) - timedelta(days=days_ago)
        return MoodEntry(id=next(seq), mood=mood, note=note, date=d, timestamp="12.01.2024 09:30:00")

    return _make
