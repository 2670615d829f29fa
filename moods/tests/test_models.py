from __future__ import annotations

from datetime import date

from django.db import IntegrityError
from django.test import TestCase

from moods.journal import MoodEntry
from moods.models import MoodRecord


class MoodRecordModelTests(TestCase):
    """Unit tests for the MoodRecord model."""

    def setUp(self) -> None:
        self.entry = MoodEntry(id=1704873600000, mood="happy", note="yay", date=date(2024, 1, 10), timestamp="10.01.2024 08:00:00")

    def test_entry_round_trip(self) -> None:
        rec = MoodRecord.from_entry("user:1", 0, self.entry)
        rec.save()
        self.assertEqual(MoodRecord.objects.get(pk=rec.pk).to_entry(), self.entry)

    def test_str_and_label(self) -> None:
        rec = MoodRecord.from_entry("user:1", 0, self.entry)
        self.assertEqual(rec.mood_label, "Happy")
        self.assertIn("user:1", str(rec))
        self.assertIn("2024-01-10", str(rec))

    def test_unknown_mood_label_falls_back(self) -> None:
        rec = MoodRecord(journal="x", position=0, entry_id=1, mood="meh", date=date(2024, 1, 1))
        self.assertEqual(rec.mood_label, "Okay")

    def test_unique_entry_per_journal(self) -> None:
        """(journal, entry_id) must be unique."""
        MoodRecord.from_entry("user:1", 0, self.entry).save()
        MoodRecord.from_entry("user:2", 0, self.entry).save()  # other journal is fine
        with self.assertRaises(IntegrityError):
            MoodRecord.from_entry("user:1", 1, self.entry).save()

    def test_default_ordering(self) -> None:
        """Ordered by journal, then position (0 = newest)."""
        MoodRecord.from_entry("j", 1, self.entry).save()
        newer = MoodEntry(id=2, mood="sad", note="", date=date(2024, 1, 9), timestamp="")
        MoodRecord.from_entry("j", 0, newer).save()
        self.assertEqual([r.position for r in MoodRecord.objects.filter(journal="j")], [0, 1])
