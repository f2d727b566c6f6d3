from django.contrib import admin

from .models import Assessment, AssessmentAttempt


@admin.register(Assessment)
class AssessmentAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "created_by", "total_points", "is_ai_generated", "created_at")
    list_filter = ("type", "is_ai_generated")
    search_fields = ("title", "description", "created_by__username")


@admin.register(AssessmentAttempt)
class AssessmentAttemptAdmin(admin.ModelAdmin):
    list_display = ("assessment", "user", "score", "percentage", "time_spent", "completed_at")
    readonly_fields = ("assessment", "user", "answers", "score", "percentage", "time_spent", "completed_at")
    search_fields = ("assessment__title", "user__username")
