from django.apps import AppConfig


class ApiConfig(AppConfig):
    """REST surface (v1) over the library, assessments, activity and study aids."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "api"
    verbose_name = "Studyhub API"
