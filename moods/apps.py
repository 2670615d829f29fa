from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class MoodsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "moods"
    verbose_name = _("Mood journal")
