from django.contrib import admin

from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "role", "subscription_tier", "institution", "completed_onboarding")
    list_filter = ("role", "subscription_tier", "completed_onboarding")
    search_fields = ("user__username", "user__email")
