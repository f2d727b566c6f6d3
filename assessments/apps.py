from django.apps import AppConfig


class AssessmentsConfig(AppConfig):
    """App configuration for assessments and attempts."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "assessments"
