# -*- coding: utf-8 -*-
"""
Tests for the registration form page.
"""
import pytest

from models.step import Step
from ui.pages.registration_form_page import RegistrationFormPage


def settle(qtbot, wizard):
    qtbot.waitUntil(lambda: not wizard.is_transitioning, timeout=1000)


@pytest.fixture
def form_page(qtbot, wizard):
    wizard.request_transition(Step.FORM)
    settle(qtbot, wizard)

    page = RegistrationFormPage(wizard)
    qtbot.addWidget(page)
    page.on_show()
    return page


def test_form_shows_draft_defaults(form_page):
    assert form_page.full_name_input.text() == ""
    assert form_page.country_code_combo.currentText() == "+91"
    assert form_page.opt_in_checkbox.isChecked()
    assert form_page.organization_label.isHidden()


def test_name_is_required(form_page):
    result = form_page.validate()
    assert not result.is_valid
    assert "Please enter your full name" in result.errors


def test_email_and_phone_are_checked(form_page):
    form_page.full_name_input.setText("Asha")
    form_page.email_input.setText("asha@")
    form_page.phone_input.setText("98765-43210")

    result = form_page.validate()

    assert len(result.errors) == 2


def test_missing_contact_is_only_a_warning(form_page):
    form_page.full_name_input.setText("Asha")
    result = form_page.validate()
    assert result.is_valid
    assert result.warnings


def test_invalid_submit_stays_on_form(qtbot, form_page, wizard):
    assert not form_page.submit()
    assert not form_page.error_label.isHidden()
    assert not wizard.is_transitioning
    assert wizard.draft.is_default()


def test_submit_writes_draft_and_moves_on(qtbot, form_page, wizard):
    form_page.full_name_input.setText("  Asha Raman ")
    form_page.email_input.setText("asha@example.org")
    form_page.phone_input.setText("9876543210")
    form_page.country_code_combo.setCurrentText("+44")
    form_page.class_input.setText("8")
    form_page.section_input.setText("B")
    form_page.opt_in_checkbox.setChecked(False)

    assert form_page.submit()

    draft = wizard.draft
    assert draft.full_name == "Asha Raman"
    assert draft.full_phone == "+44 9876543210"
    assert draft.class_name == "8"
    assert draft.opt_in_similar_events is False

    settle(qtbot, wizard)
    assert wizard.current_step == Step.PREVIEW


def test_deep_linked_organization_is_shown(qtbot, qapp, local_store):
    from controllers.wizard_controller import WizardController

    controller = WizardController(frame_delay_ms=1, fade_ms=1)
    controller.resolve_deep_link("marina-rotaract", local_store)

    page = RegistrationFormPage(controller)
    qtbot.addWidget(page)
    page.on_show()

    assert not page.organization_label.isHidden()
    assert "Marina Rotaract Club" in page.organization_label.text()
    controller.shutdown()
