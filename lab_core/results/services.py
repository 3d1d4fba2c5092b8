# lab_core/results/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import IntegrityError, transaction

from lab_core.profiles.selectors import get_profile_in_organisation_or_none
from lab_core.results.models import Result

logger = logging.getLogger(__name__)


class ResultService:
    class ProfileNotFound(Exception):
        pass

    class DuplicateSample(Exception):
        pass

    @staticmethod
    @transaction.atomic
    def create_result(
        *,
        organisation_id: UUID,
        profile_id: UUID,
        sample_id: str,
        result_type: str,
    ) -> Result:
        """
        Register a sample for a profile. activate_time is stamped now;
        result_time / result stay empty until the analyser reports.
        """
        profile = get_profile_in_organisation_or_none(organisation_id=organisation_id, profile_id=profile_id)
        if profile is None:
            raise ResultService.ProfileNotFound()

        try:
            with transaction.atomic():
                result = Result.objects.create(
                    profile=profile,
                    sample_id=sample_id,
                    result_type=result_type,
                )
        except IntegrityError:
            raise ResultService.DuplicateSample("sampleId already exists for this profile.")

        logger.info("result created id=%s profile=%s sample=%s", result.id, profile.id, sample_id)
        return result
