from django.contrib import admin

from .models import Course, Enrolment, Institution, Programme


@admin.register(Institution)
class InstitutionAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "country", "created_at")
    list_filter = ("type", "country")
    search_fields = ("name",)


@admin.register(Programme)
class ProgrammeAdmin(admin.ModelAdmin):
    list_display = ("name", "institution", "created_at")
    search_fields = ("name", "institution__name")


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "institution", "created_at")
    search_fields = ("name", "code", "description")


@admin.register(Enrolment)
class EnrolmentAdmin(admin.ModelAdmin):
    list_display = ("course", "user", "progress", "enrolled_at")
    search_fields = ("course__name", "user__username")
