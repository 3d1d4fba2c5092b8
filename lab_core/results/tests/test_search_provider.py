# lab_core/results/tests/test_search_provider.py
from datetime import datetime, timezone

import pytest
from django.http import QueryDict

from lab_core.results.models import Result
from lab_core.results.search import search_results
from lab_core.results.services import ResultService

pytestmark = pytest.mark.django_db


def _at(day):
    return datetime(2024, 5, day, 12, 0, tzinfo=timezone.utc)


def test_included_holds_each_profile_once_in_first_appearance_order(organisation, make_profile):
    a = make_profile("A")
    b = make_profile("B")
    Result.objects.create(profile=a, sample_id="1", result_type="CBC", activate_time=_at(1))
    Result.objects.create(profile=b, sample_id="2", result_type="CBC", activate_time=_at(2))
    Result.objects.create(profile=a, sample_id="3", result_type="CBC", activate_time=_at(3))

    document = search_results(organisation=organisation, params=QueryDict(""))

    assert [r.sample_id for r in document.data] == ["3", "2", "1"]
    assert [p.id for p in document.included] == [str(a.id), str(b.id)]
    assert document.included[0].name == "A"
    assert all(isinstance(r.profile_id, str) for r in document.data)
    assert document.total is None


def test_profiles_without_results_are_not_included(organisation, make_profile):
    make_profile("Lonely")

    document = search_results(organisation=organisation, params={})

    assert document.data == ()
    assert document.included == ()


def test_result_type_param_filters_query(organisation, profile):
    Result.objects.create(profile=profile, sample_id="1", result_type="CBC")
    Result.objects.create(profile=profile, sample_id="2", result_type="LFT")

    document = search_results(organisation=organisation, params=QueryDict("resultType=LFT"))

    assert [r.sample_id for r in document.data] == ["2"]


def test_service_creates_result_with_activation_time(organisation, profile):
    result = ResultService.create_result(
        organisation_id=organisation.id,
        profile_id=profile.id,
        sample_id="S-1",
        result_type="CBC",
    )

    assert result.activate_time is not None
    assert result.result_time is None
    assert result.result is None


def test_service_rejects_profile_from_other_organisation(other_organisation, profile):
    with pytest.raises(ResultService.ProfileNotFound):
        ResultService.create_result(
            organisation_id=other_organisation.id,
            profile_id=profile.id,
            sample_id="S-1",
            result_type="CBC",
        )


def test_service_rejects_duplicate_sample(organisation, profile):
    ResultService.create_result(organisation_id=organisation.id, profile_id=profile.id, sample_id="S-1", result_type="CBC")

    with pytest.raises(ResultService.DuplicateSample):
        ResultService.create_result(organisation_id=organisation.id, profile_id=profile.id, sample_id="S-1", result_type="CBC")
