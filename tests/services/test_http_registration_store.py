# -*- coding: utf-8 -*-
"""
Tests for HttpRegistrationStore (requests session mocked).
"""
import json
from unittest.mock import Mock

import pytest
import requests

from models.registration import RegistrationDraft
from models.step import Step
from services.error_mapper import MSG_REJECTED, map_error_code
from services.exceptions import ApiException, NetworkException
from services.http_registration_store import HttpRegistrationStore
from services.registration_store import StoreType

BASE_URL = "http://registrations.test/api"


def make_response(status=200, payload=None):
    response = requests.Response()
    response.status_code = status
    response.url = BASE_URL
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def store(session):
    return HttpRegistrationStore(BASE_URL + "/", timeout=5, session=session)


def test_base_url_is_normalized(store):
    assert store.base_url == BASE_URL
    assert store.store_type == StoreType.HTTP


def test_get_schools(store, session):
    session.request.return_value = make_response(payload=[
        {"id": "loyola-nature-club", "name": "Loyola Nature Club", "city": "Chennai"},
    ])

    schools = store.get_schools()

    assert [s.id for s in schools] == ["loyola-nature-club"]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == BASE_URL + "/schools"
    assert kwargs["timeout"] == 5


def test_get_schools_accepts_paged_payload(store, session):
    session.request.return_value = make_response(payload={"items": [{"id": "a", "name": "A"}]})
    assert store.get_schools()[0].name == "A"


def test_directory_is_cached(store, session):
    session.request.return_value = make_response(payload=[{"id": "a", "name": "A"}])

    store.get_schools()
    store.get_schools()

    assert session.request.call_count == 1


def test_get_schools_server_error(store, session):
    session.request.return_value = make_response(status=500, payload={"detail": "boom"})

    with pytest.raises(ApiException) as exc_info:
        store.get_schools()

    assert exc_info.value.status_code == 500
    assert exc_info.value.response_data == {"detail": "boom"}


def test_get_schools_timeout(store, session):
    session.request.side_effect = requests.exceptions.Timeout("timed out")

    with pytest.raises(NetworkException):
        store.get_schools()


def test_submit_form(store, session):
    session.request.return_value = make_response(status=201, payload={
        "referenceNumber": "PLG-20260118153045-A3F2",
        "submittedAt": "2026-01-18T15:30:45",
    })
    draft = RegistrationDraft(full_name="Asha", organization_id="loyola-nature-club")

    response = store.submit_form(draft)

    assert response.success
    assert response.data.reference_number == "PLG-20260118153045-A3F2"
    assert response.data.organization_id == "loyola-nature-club"

    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == BASE_URL + "/registrations"
    assert kwargs["json"]["fullName"] == "Asha"


def test_submit_form_rejected(store, session):
    session.request.return_value = make_response(status=422, payload={"errors": ["fullName"]})

    response = store.submit_form(RegistrationDraft())

    assert not response.success
    assert response.error_code == "E422"
    assert map_error_code(response.error_code) == MSG_REJECTED


def test_submit_form_connection_error(store, session):
    session.request.side_effect = requests.exceptions.ConnectionError("refused")

    response = store.submit_form(RegistrationDraft(full_name="Asha"))

    assert not response.success
    assert response.error_code == "E_CONN"


@pytest.mark.parametrize("payload", [["loyola"], [None], {"items": "loyola"}, "loyola"])
def test_malformed_directory_raises_api_exception(store, session, payload):
    session.request.return_value = make_response(payload=payload)

    with pytest.raises(ApiException):
        store.get_schools()


def test_malformed_directory_leaves_deep_link_at_home(wizard, store, session):
    session.request.return_value = make_response(payload=["loyola-nature-club"])

    assert not wizard.resolve_deep_link("loyola-nature-club", store)
    assert wizard.current_step == Step.HOME
