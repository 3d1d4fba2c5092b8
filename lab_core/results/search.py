# lab_core/results/search.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import django_filters
from rest_framework.exceptions import ValidationError

from lab_core.organisations.models import Organisation
from lab_core.profiles.models import Profile
from lab_core.results.document import ProfileRecord, ResultDocument, ResultRecord
from lab_core.results.models import Result
from lab_core.results.selectors import results_for_organisation_qs

logger = logging.getLogger(__name__)


class ResultFilterSet(django_filters.FilterSet):
    """
    DB-level narrowing applied before the document is built.
    Query param names follow the wire attribute names.
    """

    sampleId = django_filters.CharFilter(field_name="sample_id")
    resultType = django_filters.CharFilter(field_name="result_type")

    class Meta:
        model = Result
        fields = []


def result_record(result: Result) -> ResultRecord:
    return ResultRecord(
        id=str(result.id),
        profile_id=str(result.profile_id),
        sample_id=result.sample_id,
        result_type=result.result_type,
        activate_time=result.activate_time,
        result_time=result.result_time,
        result=result.result,
    )


def profile_record(profile: Profile) -> ProfileRecord:
    return ProfileRecord(
        id=str(profile.id),
        attributes={
            "name": profile.name,
            "email": profile.email,
            "phone": profile.phone,
            "gender": profile.gender,
            "dateOfBirth": profile.date_of_birth,
        },
    )


def build_document(results: Iterable[Result]) -> ResultDocument:
    """
    `included` holds each referenced profile once, in first-appearance order.
    """
    data: list[ResultRecord] = []
    included: dict[Any, ProfileRecord] = {}
    for result in results:
        data.append(result_record(result))
        if result.profile_id not in included:
            included[result.profile_id] = profile_record(result.profile)
    return ResultDocument(data=tuple(data), included=tuple(included.values()))


def search_results(*, organisation: Organisation, params: Mapping[str, Any]) -> ResultDocument:
    qs = results_for_organisation_qs(organisation_id=organisation.id)

    fs = ResultFilterSet(data=params, queryset=qs)
    if not fs.is_valid():
        raise ValidationError(fs.errors)

    document = build_document(fs.qs)
    logger.debug(
        "search_results org=%s data=%d included=%d",
        organisation.id,
        len(document.data),
        len(document.included),
    )
    return document
