# lab_core/results/api/urls.py
from django.urls import path

from lab_core.results.api.views import (
    OrganisationResultListView,
    ProfileResultCollectionView,
    ProfileResultDetailView,
)

app_name = "results"

urlpatterns = [
    path(
        "organisations/<str:org>/results/",
        OrganisationResultListView.as_view(),
        name="organisation-results",
    ),
    path(
        "organisations/<str:org>/profiles/<str:profile_id>/results/",
        ProfileResultCollectionView.as_view(),
        name="profile-results",
    ),
    path(
        "organisations/<str:org>/profiles/<str:profile_id>/results/<str:sample_id>/",
        ProfileResultDetailView.as_view(),
        name="profile-result-detail",
    ),
]
