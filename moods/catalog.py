from __future__ import annotations

from dataclasses import dataclass

from django.utils.translation import gettext_lazy as _


@dataclass(frozen=True)
class MoodCategory:
    """Display definition for one mood value."""

    value: str
    label: str
    emoji: str
    color: str
    background: str


# Order matters: the weekly summary card shows the first four categories.
CATALOG: tuple[MoodCategory, ...] = (
    MoodCategory("amazing", _("Amazing"), "🤩", "#eab308", "#fef9c3"),
    MoodCategory("happy", _("Happy"), "😊", "#22c55e", "#dcfce7"),
    MoodCategory("good", _("Good"), "☀️", "#3b82f6", "#dbeafe"),
    MoodCategory("okay", _("Okay"), "😐", "#6b7280", "#f3f4f6"),
    MoodCategory("sad", _("Sad"), "☁️", "#a855f7", "#f3e8ff"),
    MoodCategory("angry", _("Angry"), "⚡", "#ef4444", "#fee2e2"),
    MoodCategory("anxious", _("Anxious"), "🌧️", "#6366f1", "#e0e7ff"),
)

DEFAULT_CATEGORY: MoodCategory = CATALOG[3]

MOOD_VALUES: tuple[str, ...] = tuple(c.value for c in CATALOG)
MOOD_CHOICES: list[tuple[str, str]] = [(c.value, c.label) for c in CATALOG]

_BY_VALUE: dict[str, MoodCategory] = {c.value: c for c in CATALOG}


def category_for(mood: object) -> MoodCategory:
    """Return the catalog entry for `mood`, never failing.

    Unknown or non-string values map to DEFAULT_CATEGORY ("okay").
    """
    if not isinstance(mood, str):
        return DEFAULT_CATEGORY
    return _BY_VALUE.get(mood, DEFAULT_CATEGORY)
