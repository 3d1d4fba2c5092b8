# lab_core/results/admin.py
from __future__ import annotations

from django.contrib import admin

from lab_core.results.models import Result


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "sample_id",
        "result_type",
        "profile",
        "activate_time",
        "result_time",
        "created_at",
    )
    list_filter = ("result_type", "activate_time", "result_time")
    search_fields = ("id", "sample_id", "profile__name")
    autocomplete_fields = ("profile",)
    ordering = ("-created_at",)
