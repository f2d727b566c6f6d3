from django.apps import AppConfig


class ActivityConfig(AppConfig):
    """App configuration for study sessions, the activity log and analytics."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "activity"
