from django.apps import AppConfig


class LibraryConfig(AppConfig):
    """App configuration for the note library (content and ratings)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "library"
