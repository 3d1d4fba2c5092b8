# lab_core/api/urls.py
from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("lab_core.results.api.urls")),
]
