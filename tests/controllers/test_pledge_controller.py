# -*- coding: utf-8 -*-
"""
Tests for PledgeController.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from controllers.pledge_controller import PledgeController
from models.step import Step
from services.error_mapper import MSG_CONNECTION, MSG_GENERIC, MSG_TIMEOUT
from services.exceptions import NetworkException
from services.http_registration_store import HttpRegistrationStore
from services.local_registration_store import LocalRegistrationStore
from services.registration_store import StoreResponse


class FlakyStore(LocalRegistrationStore):
    """Fails the first ``failures`` submissions, then behaves normally."""

    def __init__(self, failures=1, code="E_CONN"):
        super().__init__()
        self.failures = failures
        self.code = code
        self.calls = 0

    def submit_form(self, draft):
        self.calls += 1
        if self.failures > 0:
            self.failures -= 1
            return StoreResponse.fail("server unavailable", self.code)
        return super().submit_form(draft)


class TimingOutStore(LocalRegistrationStore):

    def submit_form(self, draft):
        raise NetworkException("Read timed out")


def make_response(payload, status=200):
    response = requests.Response()
    response.status_code = status
    response._content = json.dumps(payload).encode("utf-8")
    return response


def settle(qtbot, wizard):
    qtbot.waitUntil(lambda: not wizard.is_transitioning, timeout=1000)


@pytest.fixture
def at_reading(qtbot, wizard):
    """Wizard on the reading step with a filled-in draft."""
    for step in (Step.FORM, Step.PREVIEW, Step.READING):
        wizard.request_transition(step)
        settle(qtbot, wizard)
    wizard.draft.full_name = "Asha"
    return wizard


def test_confirm_outside_reading_is_refused(wizard, local_store):
    pledge = PledgeController(wizard, local_store)

    result = pledge.confirm_pledge()

    assert not result.success
    assert local_store.submissions == []
    assert not pledge.can_confirm()


def test_successful_pledge_moves_to_success(qtbot, at_reading, local_store):
    pledge = PledgeController(at_reading, local_store)
    assert pledge.can_confirm()

    with qtbot.waitSignal(pledge.submission_succeeded, timeout=500) as blocker:
        result = pledge.confirm_pledge()

    assert result.success
    receipt = blocker.args[0]
    assert receipt.reference_number.startswith("PLG-")
    assert pledge.receipt is receipt
    assert local_store.submissions[0]["fullName"] == "Asha"

    settle(qtbot, at_reading)
    assert at_reading.current_step == Step.SUCCESS
    assert not pledge.is_loading


def test_failed_pledge_stays_on_reading(qtbot, at_reading):
    store = FlakyStore(failures=1)
    pledge = PledgeController(at_reading, store)

    with qtbot.waitSignal(pledge.submission_failed, timeout=500) as blocker:
        result = pledge.confirm_pledge()

    assert not result.success
    assert blocker.args == [MSG_CONNECTION]
    assert pledge.receipt is None
    assert not pledge.is_loading
    assert not at_reading.is_transitioning

    qtbot.wait(20)
    assert at_reading.current_step == Step.READING


def test_confirm_again_after_failure(qtbot, at_reading):
    store = FlakyStore(failures=1)
    pledge = PledgeController(at_reading, store)

    assert not pledge.confirm_pledge().success
    assert pledge.confirm_pledge().success
    assert store.calls == 2

    settle(qtbot, at_reading)
    assert at_reading.current_step == Step.SUCCESS


def test_store_exception_is_mapped(at_reading):
    pledge = PledgeController(at_reading, TimingOutStore())
    messages = []
    pledge.submission_failed.connect(messages.append)

    result = pledge.confirm_pledge()

    assert not result.success
    assert messages == [MSG_TIMEOUT]
    assert "Read timed out" in pledge.last_error


def test_no_second_submission_while_moving_to_success(at_reading, local_store):
    pledge = PledgeController(at_reading, local_store)

    assert pledge.confirm_pledge().success
    # Success swap still pending
    assert at_reading.is_transitioning
    assert not pledge.confirm_pledge().success
    assert len(local_store.submissions) == 1


def test_no_reentrant_submission(at_reading):
    nested = []

    class ReentrantStore(LocalRegistrationStore):
        def submit_form(self, draft):
            nested.append(pledge.confirm_pledge())
            return super().submit_form(draft)

    store = ReentrantStore()
    pledge = PledgeController(at_reading, store)

    assert pledge.confirm_pledge().success
    assert len(nested) == 1
    assert not nested[0].success
    assert len(store.submissions) == 1


def test_reset_clears_receipt(qtbot, at_reading, local_store):
    pledge = PledgeController(at_reading, local_store)
    pledge.confirm_pledge()
    settle(qtbot, at_reading)
    assert pledge.receipt is not None

    at_reading.reset()
    settle(qtbot, at_reading)

    assert pledge.receipt is None


def test_unreadable_receipt_timestamp_still_succeeds(qtbot, at_reading):
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response(
        {"referenceNumber": "PLG-1", "submittedAt": "18/01/2026"}
    )
    pledge = PledgeController(at_reading, HttpRegistrationStore("http://registrations.test", session=session))

    result = pledge.confirm_pledge()

    assert result.success
    assert pledge.receipt.reference_number == "PLG-1"
    assert not pledge.is_loading
    settle(qtbot, at_reading)
    assert at_reading.current_step == Step.SUCCESS


def test_malformed_store_reply_is_reported(qtbot, at_reading):

    class BrokenStore(LocalRegistrationStore):
        def submit_form(self, draft):
            raise ValueError("unexpected payload")

    pledge = PledgeController(at_reading, BrokenStore())
    messages = []
    pledge.submission_failed.connect(messages.append)

    result = pledge.confirm_pledge()

    assert not result.success
    assert messages == [MSG_GENERIC]
    assert not pledge.is_loading
    assert pledge.can_confirm()
