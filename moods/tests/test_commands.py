from __future__ import annotations

from datetime import date
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from moods.catalog import MOOD_VALUES
from moods.models import MoodRecord
from moods.stores import DatabaseJournalStore


def _seed(*args: str) -> str:
    out = StringIO()
    call_command("seed_moods", *args, stdout=out)
    return out.getvalue()


def test_seed_creates_newest_first_journal() -> None:
    output = _seed("--journal", "demo", "--days", "7", "--start", "2024-01-14", "--include-weekends", "--seed", "1")
    entries = DatabaseJournalStore("demo").read()

    assert "Entries added: 7" in output
    assert [e.date for e in entries] == [date(2024, 1, 14 - i) for i in range(7)]
    assert all(e.mood in MOOD_VALUES for e in entries)
    assert len({e.id for e in entries}) == 7


def test_seed_skips_weekends_by_default() -> None:
    # 2024-01-08 (Mon) .. 2024-01-14 (Sun)
    _seed("--days", "7", "--start", "2024-01-14")
    entries = DatabaseJournalStore("demo").read()
    assert len(entries) == 5
    assert all(e.date.weekday() < 5 for e in entries)


def test_seed_appends_to_existing_journal_unless_cleared() -> None:
    _seed("--days", "3", "--start", "2024-01-10", "--include-weekends")
    _seed("--days", "3", "--start", "2024-01-10", "--include-weekends")
    assert MoodRecord.objects.filter(journal="demo").count() == 6

    _seed("--days", "3", "--start", "2024-01-10", "--include-weekends", "--clear")
    assert MoodRecord.objects.filter(journal="demo").count() == 3


def test_clear_only_touches_given_journal() -> None:
    _seed("--journal", "a", "--days", "2", "--include-weekends")
    _seed("--journal", "b", "--days", "2", "--include-weekends")
    output = _seed("--journal", "a", "--clear-only")

    assert "Clear-only completed" in output
    assert MoodRecord.objects.filter(journal="a").count() == 0
    assert MoodRecord.objects.filter(journal="b").count() == 2


def test_seed_is_reproducible_with_seed() -> None:
    _seed("--journal", "x", "--days", "10", "--start", "2024-01-10", "--include-weekends", "--seed", "42")
    _seed("--journal", "y", "--days", "10", "--start", "2024-01-10", "--include-weekends", "--seed", "42")
    moods_x = [e.mood for e in DatabaseJournalStore("x").read()]
    moods_y = [e.mood for e in DatabaseJournalStore("y").read()]
    assert moods_x == moods_y


@pytest.mark.parametrize("args", [("--days", "0"), ("--start", "14.01.2024")])
def test_invalid_arguments(args) -> None:
    with pytest.raises(CommandError):
        _seed(*args)
