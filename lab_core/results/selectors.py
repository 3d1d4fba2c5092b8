# lab_core/results/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from lab_core.results.models import Result


def results_for_organisation_qs(*, organisation_id: UUID) -> QuerySet[Result]:
    return (
        Result.objects.filter(profile__organisation_id=organisation_id)
        .select_related("profile")
        .order_by("-activate_time", "-created_at")
    )


def get_profile_result_or_none(*, organisation_id: UUID, profile_id: UUID, sample_id: str) -> Optional[Result]:
    return (
        Result.objects.filter(
            profile_id=profile_id,
            profile__organisation_id=organisation_id,
            sample_id=sample_id,
        )
        .order_by("-created_at")
        .first()
    )
