from django import forms
from django.utils.translation import gettext_lazy as _

from .catalog import MOOD_CHOICES


class MoodEntryForm(forms.Form):
    # Not required: submitting without a mood is a silent no-op in the journal.
    mood = forms.ChoiceField(
        label=_("Select your mood"),
        choices=MOOD_CHOICES,
        required=False,
        widget=forms.RadioSelect(attrs={
            "class": "mood-field",
            "aria-label": _("Mood"),
        }),
    )
    note = forms.CharField(
        label=_("Add a note (optional)"),
        required=False,
        widget=forms.Textarea(attrs={
            "rows": 3,
            "placeholder": _("What's on your mind? Any specific reason for this mood?"),
        }),
    )
    date = forms.DateField(
        label=_("Date"),
        required=False,
        input_formats=["%Y-%m-%d"],
        widget=forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d"),
    )
