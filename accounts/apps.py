from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Profiles, roles, subscription tiers and onboarding answers."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Accounts and profiles"

    def ready(self) -> None:  # pragma: no cover (import-time hook)
        # Every new user gets a student/free profile.
        from . import signals  # noqa: F401
