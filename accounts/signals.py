"""Signals for automatic profile management.

On user creation, create a default `UserProfile` with the student role
and the free tier.
"""
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created: bool, **kwargs):  # noqa: D401
    """Create a profile for new users."""
    if created:
        UserProfile.objects.get_or_create(user=instance)
