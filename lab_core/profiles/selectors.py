# lab_core/profiles/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from lab_core.profiles.models import Profile


def get_profile_in_organisation_or_none(*, organisation_id: UUID, profile_id: UUID) -> Optional[Profile]:
    return (
        Profile.objects.select_related("organisation")
        .filter(id=profile_id, organisation_id=organisation_id)
        .first()
    )
