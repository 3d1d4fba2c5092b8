# lab_core/results/tests/test_profile_results_api.py
from datetime import datetime, timezone

import pytest

from lab_core.results.models import Result
from lab_core.tests.helpers import profile_result_url, profile_results_url

pytestmark = pytest.mark.django_db


def _body(sample_id="S-100", result_type="CBC", type_="sample"):
    return {"data": {"type": type_, "attributes": {"sampleId": sample_id, "resultType": result_type}}}


def test_create_result_returns_201(api_client, organisation, profile):
    r = api_client.post(profile_results_url(organisation.id, profile.id), _body(), format="json")

    assert r.status_code == 201, r.data
    data = r.data["data"]
    assert data["type"] == "sample"
    assert data["attributes"]["sampleId"] == "S-100"
    assert data["attributes"]["resultType"] == "CBC"
    assert data["attributes"]["activateTime"]
    assert set(data["attributes"]) == {"sampleId", "resultType", "activateTime"}

    created = Result.objects.get(id=data["id"])
    assert created.profile_id == profile.id
    assert created.result_time is None


def test_create_then_list_shows_result(api_client, organisation, profile):
    api_client.post(profile_results_url(organisation.id, profile.id), _body("S-7"), format="json")

    r = api_client.get(f"/api/v1/organisations/{organisation.id}/results/")

    assert r.status_code == 200, r.data
    assert [row["attributes"]["sampleId"] for row in r.data["data"]] == ["S-7"]
    assert [row["id"] for row in r.data["included"]] == [str(profile.id)]


def test_create_for_profile_in_other_organisation_returns_404(api_client, organisation, other_organisation, make_profile):
    stranger = make_profile("Stranger", org=other_organisation)

    r = api_client.post(profile_results_url(organisation.id, stranger.id), _body(), format="json")

    assert r.status_code == 404
    assert r.data == {"msg": "Profile not found"}
    assert not Result.objects.exists()


def test_create_for_unknown_profile_returns_404(api_client, organisation, unknown_profile_id):
    r = api_client.post(profile_results_url(organisation.id, unknown_profile_id), _body(), format="json")

    assert r.status_code == 404
    assert r.data == {"msg": "Profile not found"}


@pytest.mark.parametrize(
    "body",
    [
        _body(type_="profile"),
        _body(sample_id=""),
        _body(result_type=""),
        {"data": {"type": "sample"}},
        {},
    ],
)
def test_create_validation_errors_return_400(api_client, organisation, profile, body):
    r = api_client.post(profile_results_url(organisation.id, profile.id), body, format="json")

    assert r.status_code == 400, r.data
    assert r.data["error"]["code"] == "validation_error"
    assert "data" in r.data["error"]["details"]


def test_create_with_invalid_path_ids_returns_400(api_client, organisation):
    r = api_client.post(profile_results_url(organisation.id, "nope"), _body(), format="json")

    assert r.status_code == 400
    assert "profileId" in r.data["error"]["details"]


def test_duplicate_sample_for_profile_returns_400(api_client, organisation, profile):
    url = profile_results_url(organisation.id, profile.id)
    first = api_client.post(url, _body("S-DUP"), format="json")
    assert first.status_code == 201, first.data

    dup = api_client.post(url, _body("S-DUP"), format="json")

    assert dup.status_code == 400
    assert "sampleId" in dup.data["error"]["details"]
    assert Result.objects.filter(sample_id="S-DUP").count() == 1


def test_retrieve_result(api_client, organisation, profile):
    Result.objects.create(
        profile=profile,
        sample_id="S-9",
        result_type="LFT",
        activate_time=datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc),
        result_time=datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc),
        result={"alt": 31},
    )

    r = api_client.get(profile_result_url(organisation.id, profile.id, "S-9"))

    assert r.status_code == 200, r.data
    data = r.data["data"]
    assert data["type"] == "sample"
    assert data["attributes"] == {
        "result": {"alt": 31},
        "sampleId": "S-9",
        "resultType": "LFT",
        "activateTime": "2024-03-01T08:30:00Z",
        "resultTime": "2024-03-02T10:00:00Z",
    }


def test_retrieve_missing_result_returns_404(api_client, organisation, profile):
    r = api_client.get(profile_result_url(organisation.id, profile.id, "S-NONE"))

    assert r.status_code == 404
    assert r.data == {"msg": "Result not found"}


def test_retrieve_is_scoped_to_organisation(api_client, organisation, other_organisation, profile):
    Result.objects.create(profile=profile, sample_id="S-1", result_type="CBC")

    r = api_client.get(profile_result_url(other_organisation.id, profile.id, "S-1"))

    assert r.status_code == 404


def test_retrieve_invalid_org_returns_400(api_client, profile):
    r = api_client.get(profile_result_url("bad-org", profile.id, "S-1"))

    assert r.status_code == 400
    assert "org" in r.data["error"]["details"]


def test_retrieve_unexpected_failure_returns_500(api_client, organisation, profile, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr("lab_core.results.api.views.get_profile_result_or_none", boom)

    r = api_client.get(profile_result_url(organisation.id, profile.id, "S-1"))

    assert r.status_code == 500
    assert r.data == {"msg": "Something went wrong"}


def test_other_value_errors_during_create_are_500_not_400(api_client, organisation, profile, monkeypatch):
    def bad_value(**kwargs):
        raise ValueError("unexpected")

    monkeypatch.setattr("lab_core.results.api.views.ResultService.create_result", bad_value)

    r = api_client.post(profile_results_url(organisation.id, profile.id), _body(), format="json")

    assert r.status_code == 500
    assert r.data == {"msg": "Something went wrong"}
