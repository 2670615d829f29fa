# moods/management/commands/seed_moods.py
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from moods.catalog import MOOD_VALUES
from moods.journal import MoodJournal
from moods.models import MoodRecord
from moods.stores import DatabaseJournalStore


@dataclass(frozen=True)
class BiasConfig:
    """Weights for drawing moods depending on bias."""
    # order must match MOOD_VALUES (amazing .. anxious)
    weights: tuple[int, ...]


# Simple, hand-tuned weights for the demo
BIAS_WEIGHTS = {
    "neg": BiasConfig(weights=(1, 2, 3, 5, 8, 6, 7)),
    "neutral": BiasConfig(weights=(3, 5, 6, 8, 4, 2, 3)),
    "pos": BiasConfig(weights=(8, 9, 7, 5, 2, 1, 1)),
}

DEMO_NOTES: tuple[str, ...] = ("", "", "", "Long day at work", "Went for a run", "Slept badly", "Coffee with a friend")


def _iter_days(days: int, end_date: date, include_weekends: bool) -> Iterable[date]:
    """Yield dates from (end_date - days + 1) .. end_date, optionally skipping weekends."""
    start = end_date - timedelta(days=days - 1)
    d = start
    while d <= end_date:
        if include_weekends or d.weekday() < 5:  # 0=Mon .. 6=Sun
            yield d
        d += timedelta(days=1)


def _pick_mood(bias: str) -> str:
    """Draw a mood value using the configured bias weights."""
    conf = BIAS_WEIGHTS[bias]
    return random.choices(MOOD_VALUES, weights=conf.weights, k=1)[0]


class Command(BaseCommand):
    """Seed a database-backed demo journal.

    Examples:
        python manage.py seed_moods --days 30 --seed 42 --bias neg
        python manage.py seed_moods --journal demo --clear --include-weekends
        python manage.py seed_moods --clear-only

    Safety:
        - Only touches rows of the given journal key (default 'demo').
        - Entries are appended oldest first, so the newest date ends up on top.
    """

    help = "Seed a demo mood journal in the database."

    def add_arguments(self, parser):
        parser.add_argument("--journal", type=str, default="demo", help="Journal key to seed (default: 'demo').")
        parser.add_argument("--days", type=int, default=30, help="Number of calendar days to seed (default: 30).")
        parser.add_argument(
            "--start",
            type=str,
            default=None,
            help="End date (YYYY-MM-DD) to seed up to (default: today in project timezone).",
        )
        parser.add_argument(
            "--bias",
            type=str,
            choices=tuple(BIAS_WEIGHTS),
            default="neutral",
            help="Distribution bias for moods (default: neutral).",
        )
        parser.add_argument(
            "--include-weekends",
            action="store_true",
            help="Include Saturdays/Sundays (default: skip weekends).",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible results (optional).",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Drop existing entries of the journal before seeding.",
        )
        parser.add_argument(
            "--clear-only",
            action="store_true",
            help="Drop existing entries of the journal and exit.",
        )

    @transaction.atomic
    def handle(self, *args, **opts):
        seed: Optional[int] = opts.get("seed")
        if seed is not None:
            random.seed(seed)
            self.stdout.write(self.style.NOTICE(f"[seed] Using random seed {seed}"))

        journal_key: str = str(opts["journal"]).strip() or "demo"
        days: int = int(opts["days"])
        start_raw: Optional[str] = opts.get("start") or None
        include_weekends: bool = bool(opts["include_weekends"])
        bias: str = str(opts["bias"])
        do_clear: bool = bool(opts["clear"])
        clear_only: bool = bool(opts["clear_only"])

        if days < 1:
            raise CommandError("--days must be at least 1.")
        try:
            end_date = date.fromisoformat(start_raw) if start_raw else timezone.localdate()
        except ValueError as exc:
            raise CommandError(f"--start must be YYYY-MM-DD, got {start_raw!r}") from exc

        if do_clear or clear_only:
            deleted, _ = MoodRecord.objects.filter(journal=journal_key).delete()
            self.stdout.write(self.style.WARNING(f"[clear] Deleted {deleted} entries of journal '{journal_key}'."))

        if clear_only:
            self.stdout.write(self.style.SUCCESS("[done] Clear-only completed."))
            return

        store = DatabaseJournalStore(journal_key)
        # Build in memory and write once instead of once per append.
        journal = MoodJournal(store.read())
        before = len(journal)
        for d in _iter_days(days=days, end_date=end_date, include_weekends=include_weekends):
            journal.append(_pick_mood(bias), note=random.choice(DEMO_NOTES), day=d)
        store.write(journal.entries)

        self.stdout.write(
            self.style.SUCCESS(
                f"[done] Entries added: {len(journal) - before}, total: {len(journal)} "
                f"(journal={journal_key}, days={days}, bias={bias}, weekends={'on' if include_weekends else 'off'})"
            )
        )
