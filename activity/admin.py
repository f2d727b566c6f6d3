from django.contrib import admin

from .models import StudySession, UserActivity


@admin.register(StudySession)
class StudySessionAdmin(admin.ModelAdmin):
    list_display = ("user", "duration", "course", "created_at")
    search_fields = ("user__username",)


@admin.register(UserActivity)
class UserActivityAdmin(admin.ModelAdmin):
    list_display = ("user", "activity_type", "description", "created_at")
    list_filter = ("activity_type",)
    search_fields = ("user__username", "description")
