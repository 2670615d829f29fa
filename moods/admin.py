from django.contrib import admin

from .models import MoodRecord

admin.site.site_header = "Mood Journal Admin"
admin.site.site_title = "Mood Journal Admin"
admin.site.index_title = "Administration"


@admin.register(MoodRecord)
class MoodRecordAdmin(admin.ModelAdmin):
    # Rows are rewritten wholesale by the journal; keep them read-only here.
    list_display = ("journal", "position", "date", "mood", "note", "timestamp")
    list_filter = ("mood", "date")
    search_fields = ("journal", "note")
    readonly_fields = ("journal", "position", "entry_id", "mood", "note", "date", "timestamp")

    def has_add_permission(self, request):
        return False
