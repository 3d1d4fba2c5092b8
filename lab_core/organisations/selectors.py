# lab_core/organisations/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from lab_core.organisations.models import Organisation


def get_organisation_or_none(*, organisation_id: UUID) -> Optional[Organisation]:
    return Organisation.objects.filter(id=organisation_id).first()
