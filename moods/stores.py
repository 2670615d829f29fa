from __future__ import annotations

import logging
from typing import Any, MutableMapping, Sequence

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, transaction
from django.http import HttpRequest

from .journal import JournalStore, JournalStoreError, MoodEntry, parse_entries, serialize_entries
from .models import MoodRecord

logger = logging.getLogger(__name__)

SESSION_KEY = "moods"
BACKENDS: tuple[str, ...] = ("session", "database")


class SessionJournalStore:
    """Whole journal as one JSON string in the visitor's session.

    Same shape as a browser `localStorage["moods"]` blob.
    """

    def __init__(self, session: MutableMapping[str, Any], key: str = SESSION_KEY) -> None:
        self.session = session
        self.key = key

    def read(self) -> list[MoodEntry]:
        return parse_entries(self.session.get(self.key))

    def write(self, entries: Sequence[MoodEntry]) -> None:
        self.session[self.key] = serialize_entries(entries)


class DatabaseJournalStore:
    """Journal rows in `MoodRecord`, scoped by a journal key.

    `write` replaces the stored collection atomically.
    """

    def __init__(self, journal: str) -> None:
        self.journal = journal

    def read(self) -> list[MoodEntry]:
        try:
            rows = list(MoodRecord.objects.filter(journal=self.journal).order_by("position"))
        except DatabaseError as exc:
            raise JournalStoreError(f"cannot read journal {self.journal!r}") from exc
        return [row.to_entry() for row in rows]

    def write(self, entries: Sequence[MoodEntry]) -> None:
        records = [MoodRecord.from_entry(self.journal, i, e) for i, e in enumerate(entries)]
        try:
            with transaction.atomic():
                MoodRecord.objects.filter(journal=self.journal).delete()
                MoodRecord.objects.bulk_create(records)
        except DatabaseError as exc:
            raise JournalStoreError(f"cannot write journal {self.journal!r}") from exc
        logger.debug("Stored %d entries for journal %s", len(records), self.journal)


def journal_key_for(request: HttpRequest) -> str:
    """Owner key for the database backend: the user if logged in, else the session."""
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return f"user:{user.pk}"
    if not request.session.session_key:
        request.session.create()
    return f"session:{request.session.session_key}"


def get_journal_store(request: HttpRequest) -> JournalStore:
    """Build the store selected by `settings.MOODS_STORE_BACKEND`."""
    backend = getattr(settings, "MOODS_STORE_BACKEND", "session")
    if backend == "session":
        return SessionJournalStore(request.session)
    if backend == "database":
        return DatabaseJournalStore(journal_key_for(request))
    raise ImproperlyConfigured(
        f"MOODS_STORE_BACKEND must be one of {BACKENDS}, got {backend!r}"
    )
