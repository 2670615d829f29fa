from __future__ import annotations

from typing import Any

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.translation import gettext as _
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .catalog import CATALOG, category_for
from .forms import MoodEntryForm
from .journal import MoodJournal, WeeklySummary
from .stores import get_journal_store


# =============================================================================
# Constants
# =============================================================================

# The summary card shows the leading catalog categories only.
SUMMARY_CATEGORY_COUNT: int = 4
DEFAULT_HISTORY_LIMIT: int = 10


# =============================================================================
# Utilities
# =============================================================================

def _journal_for(request: HttpRequest) -> MoodJournal:
    return MoodJournal.from_store(get_journal_store(request))


def _history_limit() -> int:
    return int(getattr(settings, "MOODS_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT))


def _summary_rows(summary: WeeklySummary) -> list[dict[str, Any]]:
    """Rows for the summary card, zero-filled for categories without entries."""
    return [
        {"category": c, "count": summary.count_for(c.value)}
        for c in CATALOG[:SUMMARY_CATEGORY_COUNT]
    ]


def _journal_context(journal: MoodJournal, form: MoodEntryForm) -> dict[str, Any]:
    today = timezone.localdate()
    summary = journal.weekly_summary(today)
    limit = _history_limit()
    history = [
        {"entry": e, "category": category_for(e.mood)}
        for e in journal.latest(limit)
    ]
    return {
        "form": form,
        "today": today,
        "summary": summary,
        "summary_rows": _summary_rows(summary),
        "history": history,
        "entries_total": len(journal),
        "history_limit": limit,
        "history_truncated": len(journal) > limit,
    }


# =============================================================================
# Views
# =============================================================================

@require_http_methods(["GET", "POST"])
def journal_view(request: HttpRequest) -> HttpResponse:
    """Single-page journal: weekly summary, entry form and history.

    GET:
        Render the page; the date input defaults to today.
    POST:
        Append an entry. Without a selected mood nothing happens.
    """
    journal = _journal_for(request)

    if request.method == "POST":
        form = MoodEntryForm(request.POST)
        if form.is_valid():
            entry = journal.append(
                form.cleaned_data["mood"],
                note=form.cleaned_data["note"],
                day=form.cleaned_data["date"],
            )
            if entry is not None:
                messages.success(request, _("Mood entry saved."))
            return redirect("moods:journal")
    else:
        form = MoodEntryForm(initial={"date": timezone.localdate()})

    return render(request, "moods/journal.html", _journal_context(journal, form))


@require_POST
def delete_entry_view(request: HttpRequest, entry_id: int) -> HttpResponse:
    """Delete one entry by id; unknown ids are ignored."""
    journal = _journal_for(request)
    if journal.remove(entry_id):
        messages.info(request, _("Mood entry deleted."))
    return redirect("moods:journal")


@require_GET
def export_view(request: HttpRequest) -> JsonResponse:
    """The journal in its serialized list shape."""
    journal = _journal_for(request)
    return JsonResponse([e.to_dict() for e in journal], safe=False)
