from django.contrib import admin

from .models import Content, ContentRating


@admin.register(Content)
class ContentAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "uploaded_by", "is_public", "rating", "rating_count", "created_at")
    list_filter = ("type", "is_public")
    search_fields = ("title", "description", "uploaded_by__username")
    readonly_fields = ("rating", "rating_count", "download_count", "file_size")


@admin.register(ContentRating)
class ContentRatingAdmin(admin.ModelAdmin):
    list_display = ("content", "user", "rating", "created_at")
    search_fields = ("content__title", "user__username")
