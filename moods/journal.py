from __future__ import annotations

import json
import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol, Sequence, Union

from django.utils import timezone

from .catalog import category_for

logger = logging.getLogger(__name__)

SUMMARY_WINDOW = timedelta(days=7)
TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"

DateLike = Union[date, datetime, str, None]


class JournalStoreError(Exception):
    """Raised by a store when the journal cannot be read or written."""


@dataclass(frozen=True)
class MoodEntry:
    """Single journaled mood. Never mutated after creation."""

    id: int
    mood: str
    note: str
    date: date
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "mood": self.mood,
            "note": self.note,
            "date": self.date.isoformat(),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Any) -> MoodEntry:
        """Build an entry from its serialized form.

        Raises:
            KeyError, TypeError, ValueError: On missing fields or unreadable values.
        """
        entry_date = _parse_date(str(data["date"]))
        if entry_date is None:
            raise ValueError(f"unreadable date {data['date']!r}")
        return cls(
            id=int(data["id"]),
            mood=str(data["mood"]),
            note=str(data.get("note") or ""),
            date=entry_date,
            timestamp=str(data.get("timestamp") or ""),
        )


@dataclass(frozen=True)
class WeeklySummary:
    """Entry counts within the trailing 7-day window.

    Attributes:
        total: Number of entries in the window.
        counts: Mood value -> count; moods without entries are omitted.
    """
    total: int
    counts: dict[str, int] = field(default_factory=dict)

    def count_for(self, mood: str) -> int:
        return self.counts.get(mood, 0)


class JournalStore(Protocol):
    """Persistence collaborator with whole-collection overwrite semantics."""

    def read(self) -> list[MoodEntry]: ...

    def write(self, entries: Sequence[MoodEntry]) -> None: ...


# =============================================================================
# Parsing / serialization
# =============================================================================

def _parse_iso(raw: str) -> Optional[date]:
    """Parse an ISO date or datetime; a date-only string yields a plain date."""
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def _parse_date(raw: str) -> Optional[date]:
    """Parse an ISO date; a full ISO datetime is reduced to its date."""
    parsed = _parse_iso(raw)
    if isinstance(parsed, datetime):
        return parsed.date()
    return parsed


def _coerce_date(value: DateLike, default: date) -> Optional[date]:
    if value is None or value == "":
        return default
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return _parse_date(str(value))


def _coerce_reference(value: DateLike) -> Optional[date]:
    if isinstance(value, date):  # datetime included
        return value
    if not value:
        return None
    parsed = _parse_iso(str(value))
    if parsed is None:
        logger.debug("Ignoring unreadable summary reference %r", value)
    return parsed


def parse_entries(raw: Any) -> list[MoodEntry]:
    """Turn a persisted blob into entries, failing soft.

    Args:
        raw: JSON text/bytes, an already decoded list, or None.

    Returns:
        The entries in stored order, or [] on missing or malformed data
        (including duplicate ids).
    """
    if raw is None or raw == "" or raw == b"":
        return []
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes, bytearray)) else raw
        if not isinstance(data, list):
            raise ValueError(f"expected a list, got {type(data).__name__}")
        entries = [MoodEntry.from_dict(item) for item in data]
        if len({e.id for e in entries}) != len(entries):
            raise ValueError("duplicate entry ids")
        return entries
    # json accepts Infinity/1e400 (int() overflows) and deep nesting (recursion).
    except (KeyError, TypeError, ValueError, OverflowError, RecursionError) as exc:
        logger.warning("Discarding unreadable mood journal data: %s", exc)
        return []


def serialize_entries(entries: Iterable[MoodEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], ensure_ascii=False)


# =============================================================================
# Ids
# =============================================================================

_id_lock = threading.Lock()
_last_id = 0


def _next_id(now: datetime, floor: int = 0) -> int:
    """Millisecond id, strictly above every id handed out in this process and `floor`."""
    global _last_id
    with _id_lock:
        candidate = max(int(now.timestamp() * 1000), _last_id + 1, floor + 1)
        _last_id = candidate
        return candidate


def _local_now() -> datetime:
    now = timezone.now()
    return timezone.localtime(now) if timezone.is_aware(now) else now


# =============================================================================
# Journal
# =============================================================================

class MoodJournal:
    """Ordered, newest-first collection of mood entries.

    All operations are total: invalid input degrades to a no-op, and store
    failures are logged while the in-memory state is kept.
    """

    category_for = staticmethod(category_for)

    def __init__(
        self,
        entries: Iterable[MoodEntry] = (),
        store: Optional[JournalStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._entries: list[MoodEntry] = list(entries)
        self._store = store
        self._clock = clock or _local_now

    @classmethod
    def load(
        cls,
        raw: Any,
        store: Optional[JournalStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> MoodJournal:
        """Replace-on-load from a persisted blob (see `parse_entries`)."""
        return cls(parse_entries(raw), store=store, clock=clock)

    @classmethod
    def from_store(
        cls,
        store: JournalStore,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> MoodJournal:
        try:
            entries = store.read()
        except JournalStoreError:
            logger.exception("Could not read mood journal; starting empty")
            entries = []
        return cls(entries, store=store, clock=clock)

    # -- queries ---------------------------------------------------------

    @property
    def entries(self) -> tuple[MoodEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MoodEntry]:
        return iter(tuple(self._entries))

    def get(self, entry_id: int) -> Optional[MoodEntry]:
        return next((e for e in self._entries if e.id == entry_id), None)

    def latest(self, limit: int) -> list[MoodEntry]:
        return self._entries[: max(limit, 0)]

    def serialize(self) -> str:
        return serialize_entries(self._entries)

    def weekly_summary(self, reference: DateLike = None) -> WeeklySummary:
        """Count entries dated on or after `reference - 7 days`.

        The window has no upper bound: future-dated entries are counted.

        Args:
            reference: Date, datetime or ISO string. Defaults to today.
                With a date, an entry exactly 7 days back is included.
                With a datetime, entry dates are taken as midnight in the
                reference's timezone.

        Returns:
            WeeklySummary with total and per-mood counts.
        """
        ref = _coerce_reference(reference)
        if ref is None:
            ref = self._clock().date()
        cutoff = ref - SUMMARY_WINDOW

        if isinstance(ref, datetime):
            in_window = [
                e for e in self._entries
                if datetime.combine(e.date, time.min, tzinfo=ref.tzinfo) >= cutoff
            ]
        else:
            in_window = [e for e in self._entries if e.date >= cutoff]

        counts = Counter(e.mood for e in in_window)
        return WeeklySummary(total=len(in_window), counts=dict(counts))

    # -- mutations -------------------------------------------------------

    def append(self, mood: str, note: str = "", day: DateLike = None) -> Optional[MoodEntry]:
        """Insert a new entry at the front and persist the journal.

        Args:
            mood: Catalog value; empty means "nothing selected" and is ignored.
            note: Optional free text.
            day: Entry date; empty means today.

        Returns:
            The created entry, or None when the input was ignored.
        """
        if not mood:
            logger.debug("Ignoring mood entry without a mood")
            return None

        now = self._clock()
        entry_date = _coerce_date(day, default=now.date())
        if entry_date is None:
            logger.info("Ignoring mood entry with unreadable date %r", day)
            return None

        floor = max((e.id for e in self._entries), default=0)
        entry = MoodEntry(
            id=_next_id(now, floor=floor),
            mood=mood,
            note=note or "",
            date=entry_date,
            timestamp=now.strftime(TIMESTAMP_FORMAT),
        )
        self._entries.insert(0, entry)
        logger.info("Added mood entry %s (%s on %s)", entry.id, entry.mood, entry.date)
        self._persist()
        return entry

    def remove(self, entry_id: Any) -> bool:
        """Drop the entry with `entry_id` and persist. Unknown ids are a no-op."""
        try:
            target = int(entry_id)
        except (TypeError, ValueError, OverflowError):
            return False

        remaining = [e for e in self._entries if e.id != target]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        if removed:
            logger.info("Removed mood entry %s", target)
        self._persist()
        return removed

    def _persist(self) -> None:
        if self._store is None:
            return
        try:
            self._store.write(tuple(self._entries))
        except JournalStoreError:
            # Optimistic: the in-memory journal stays authoritative for this request.
            logger.exception("Could not persist mood journal (%d entries)", len(self._entries))
