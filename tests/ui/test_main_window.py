# -*- coding: utf-8 -*-
"""
Tests for MainWindow: one page per step, header actions and the
complete volunteer flow driven through the pages.
"""
import pytest

from app.main_window import MainWindow
from controllers.pledge_controller import PledgeController
from models.step import Step


def settle(qtbot, wizard):
    qtbot.waitUntil(lambda: not wizard.is_transitioning, timeout=1000)


@pytest.fixture
def pledge(wizard, local_store):
    return PledgeController(wizard, local_store)


@pytest.fixture
def window(qtbot, wizard, pledge):
    main_window = MainWindow(wizard, pledge, carousel_options={"tick_interval_ms": 60000})
    qtbot.addWidget(main_window)
    yield main_window
    main_window.pages[Step.HOME].shutdown()


def test_one_page_per_step(window):
    assert set(window.pages) == set(Step)
    assert window.stack.count() == len(Step)


def test_starts_on_home(window):
    assert window.current_page is window.pages[Step.HOME]


def test_hero_button_opens_form(qtbot, window, wizard):
    window.pages[Step.HOME].btn_start.click()
    settle(qtbot, wizard)

    assert window.current_page is window.pages[Step.FORM]


def test_logo_resets_to_home(qtbot, window, wizard):
    window.pages[Step.HOME].btn_start.click()
    settle(qtbot, wizard)

    window.btn_logo.click()
    settle(qtbot, wizard)

    assert wizard.current_step == Step.HOME
    assert window.current_page is window.pages[Step.HOME]


def test_header_join_opens_group_registration(qtbot, window, wizard):
    window.btn_join.click()
    settle(qtbot, wizard)

    assert window.current_page is window.pages[Step.GROUP_REGISTRATION]


def test_fade_follows_transition(qtbot, window, wizard):
    wizard.request_transition(Step.FORM)
    assert window.fade_animation.endValue() == 0.0

    settle(qtbot, wizard)
    assert window.fade_animation.endValue() == 1.0


def test_carousel_card_opens_details(qtbot, window, wizard):
    window.pages[Step.HOME].carousel_section.initiative_clicked.emit("sand")
    settle(qtbot, wizard)

    page = window.pages[Step.INITIATIVE_DETAILS]
    assert window.current_page is page
    assert page.title_label.text() == "Sand Sculpture Contest"


def test_unknown_initiative_shows_fallback(qtbot, window, wizard):
    wizard.select_initiative("whales")
    settle(qtbot, wizard)

    page = window.pages[Step.INITIATIVE_DETAILS]
    assert page.title_label.text() == page.NOT_FOUND_TITLE
    assert page.btn_join.isHidden()


def test_deep_link_starts_on_form(qtbot, wizard, pledge, local_store):
    wizard.resolve_deep_link("loyola-nature-club", local_store)

    main_window = MainWindow(wizard, pledge, carousel_options={"tick_interval_ms": 60000})
    qtbot.addWidget(main_window)

    page = main_window.pages[Step.FORM]
    assert main_window.current_page is page
    assert "Loyola Nature Club" in page.organization_label.text()
    main_window.pages[Step.HOME].shutdown()


def test_volunteer_flow_through_pages(qtbot, window, wizard, local_store):
    window.pages[Step.HOME].btn_start.click()
    settle(qtbot, wizard)

    form = window.pages[Step.FORM]
    form.full_name_input.setText("Asha")
    form.email_input.setText("asha@example.org")
    form.btn_continue.click()
    settle(qtbot, wizard)

    preview = window.pages[Step.PREVIEW]
    assert window.current_page is preview
    assert preview.name_label.text() == "Asha"
    preview.btn_confirm.click()
    settle(qtbot, wizard)

    reading = window.pages[Step.READING]
    assert window.current_page is reading
    reading.btn_confirm.click()
    settle(qtbot, wizard)

    success = window.pages[Step.SUCCESS]
    assert window.current_page is success
    assert success.title_label.text() == "Thank you, Asha!"
    assert success.reference_label.text().startswith("Reference number: PLG-")
    assert local_store.submissions[0]["email"] == "asha@example.org"

    success.btn_home.click()
    settle(qtbot, wizard)
    assert window.current_page is window.pages[Step.HOME]
    assert wizard.draft.is_default()


def test_close_stops_timers(qtbot, window, wizard):
    window.show()
    qtbot.waitExposed(window)
    carousel = window.pages[Step.HOME].carousel_section.carousel
    assert carousel.is_running

    wizard.request_transition(Step.FORM)
    window.close()

    assert not carousel.is_running
    assert not wizard.is_transitioning


def test_failed_pledge_shows_error(qtbot, monkeypatch, wizard):
    from PyQt5.QtWidgets import QMessageBox

    from services.error_mapper import MSG_CONNECTION
    from services.local_registration_store import LocalRegistrationStore
    from services.registration_store import StoreResponse

    class OfflineStore(LocalRegistrationStore):
        def submit_form(self, draft):
            return StoreResponse.fail("connection refused", "E_CONN")

    dialogs = []
    monkeypatch.setattr(QMessageBox, "critical", lambda parent, title, text: dialogs.append(text))

    main_window = MainWindow(
        wizard, PledgeController(wizard, OfflineStore()),
        carousel_options={"tick_interval_ms": 60000},
    )
    qtbot.addWidget(main_window)
    for step in (Step.FORM, Step.PREVIEW, Step.READING):
        wizard.request_transition(step)
        settle(qtbot, wizard)

    reading = main_window.pages[Step.READING]
    reading.btn_confirm.click()

    assert dialogs == [MSG_CONNECTION]
    assert reading.error_label.text() == MSG_CONNECTION
    assert reading.btn_confirm.isEnabled()
    qtbot.wait(20)
    assert wizard.current_step == Step.READING
    main_window.pages[Step.HOME].shutdown()


def test_pledge_button_waits_for_screen_change(qtbot, window, wizard):
    reading = window.pages[Step.READING]
    for step in (Step.FORM, Step.PREVIEW):
        wizard.request_transition(step)
        settle(qtbot, wizard)

    wizard.request_transition(Step.READING)
    settle(qtbot, wizard)
    assert reading.btn_confirm.isEnabled()

    wizard.request_transition(Step.PREVIEW)
    assert not reading.btn_confirm.isEnabled()
    settle(qtbot, wizard)
