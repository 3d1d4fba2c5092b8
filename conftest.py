# conftest.py
import pytest
from rest_framework.test import APIClient

from lab_core.organisations.models import Organisation
from lab_core.profiles.models import Profile


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def organisation(db):
    return Organisation.objects.create(code="test-org", name="Test Organisation")


@pytest.fixture
def other_organisation(db):
    return Organisation.objects.create(code="other-org", name="Other Organisation")


@pytest.fixture
def profile(db, organisation):
    return Profile.objects.create(organisation=organisation, name="Test Patient")


@pytest.fixture
def make_profile(db, organisation):
    def _make(name, *, org=None):
        return Profile.objects.create(organisation=org or organisation, name=name)

    return _make


@pytest.fixture
def unknown_org_id():
    return "00000000-0000-0000-0000-000000000001"


@pytest.fixture
def unknown_profile_id():
    return "00000000-0000-0000-0000-000000000101"
