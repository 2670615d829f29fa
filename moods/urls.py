from django.urls import path
from . import views

app_name = "moods"

urlpatterns = [
    path("", views.journal_view, name="journal"),
    path("entries/<int:entry_id>/delete/", views.delete_entry_view, name="delete"),
    path("entries.json", views.export_view, name="export"),
]
