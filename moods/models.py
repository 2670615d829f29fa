from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from .catalog import MOOD_CHOICES, category_for
from .journal import MoodEntry


class MoodRecord(models.Model):
    """One stored row of a database-backed mood journal."""

    journal = models.CharField(
        max_length=64,
        verbose_name=_("Journal"),
        help_text=_("Owner key, e.g. 'user:12' or 'session:<key>'."),
    )
    position = models.PositiveIntegerField(
        verbose_name=_("Position"),
        help_text=_("0 = newest entry."),
    )
    entry_id = models.BigIntegerField(verbose_name=_("Entry id"))
    mood = models.CharField(max_length=20, choices=MOOD_CHOICES, verbose_name=_("Mood"))
    note = models.TextField(blank=True, default="", verbose_name=_("Note"))
    date = models.DateField(verbose_name=_("Date"))
    timestamp = models.CharField(max_length=64, blank=True, default="", verbose_name=_("Timestamp"))

    class Meta:
        ordering = ["journal", "position"]
        constraints = [
            models.UniqueConstraint(
                fields=["journal", "entry_id"], name="unique_entry_per_journal"
            ),
        ]
        indexes = [
            models.Index(fields=["journal", "position"], name="idx_journal_position"),
        ]
        verbose_name = _("Mood record")
        verbose_name_plural = _("Mood records")

    @classmethod
    def from_entry(cls, journal: str, position: int, entry: MoodEntry) -> MoodRecord:
        return cls(
            journal=journal,
            position=position,
            entry_id=entry.id,
            mood=entry.mood,
            note=entry.note,
            date=entry.date,
            timestamp=entry.timestamp,
        )

    def to_entry(self) -> MoodEntry:
        return MoodEntry(
            id=self.entry_id,
            mood=self.mood,
            note=self.note,
            date=self.date,
            timestamp=self.timestamp,
        )

    @property
    def mood_label(self) -> str:
        """Catalog label, falling back to "Okay" for unknown values."""
        return str(category_for(self.mood).label)

    def __str__(self) -> str:
        return f"{self.journal} @ {self.date}: {self.mood_label}"
