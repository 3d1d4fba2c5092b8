from django.contrib import admin

from lab_core.profiles.models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("name", "organisation", "email", "phone", "created_at")
    list_filter = ("organisation",)
    search_fields = ("name", "email", "phone")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)
