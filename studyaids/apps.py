from django.apps import AppConfig


class StudyaidsConfig(AppConfig):
    """App configuration for generated study aids and learning paths."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "studyaids"
