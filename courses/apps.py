from django.apps import AppConfig


class CoursesConfig(AppConfig):
    """App configuration for institutions, programmes, courses and enrolments."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "courses"
