from django.contrib import admin

from .models import AIGeneratedContent, LearningPath


@admin.register(AIGeneratedContent)
class AIGeneratedContentAdmin(admin.ModelAdmin):
    list_display = ("user", "type", "model", "created_at")
    list_filter = ("type", "model")
    search_fields = ("user__username",)


@admin.register(LearningPath)
class LearningPathAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "target_date", "is_completed", "created_at")
    list_filter = ("is_completed",)
    search_fields = ("title", "user__username")
