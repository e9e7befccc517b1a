# -*- coding: utf-8 -*-
"""
Tests for the initiatives carousel widget.
"""
import pytest

from models.initiative import INITIATIVES
from ui.components.initiative_carousel import InitiativeCard, InitiativeCarousel


@pytest.fixture
def section(qtbot):
    widget = InitiativeCarousel(tick_interval_ms=60000, settle_ms=5, cooldown_ms=50)
    qtbot.addWidget(widget)
    yield widget
    widget.shutdown()


def _cards(section):
    return section.scroll_area.widget().findChildren(InitiativeCard)


def test_one_card_per_virtual_item(section):
    assert len(_cards(section)) == len(section.carousel.items)
    assert len(section.carousel.items) == len(INITIATIVES) * 4


def test_card_button_reports_initiative(qtbot, section):
    card = _cards(section)[1]
    assert card.cta_button.text() == card.initiative.cta_label

    with qtbot.waitSignal(section.initiative_clicked, timeout=500) as blocker:
        card.cta_button.click()

    assert blocker.args == [card.initiative.id]


def test_arrow_buttons_scroll_manually(section):
    section.btn_right.click()
    assert section.carousel.position == 1
    assert not section.carousel.auto_scroll_allowed

    section.btn_left.click()
    assert section.carousel.position == 0


def test_hover_pauses_auto_advance(section):
    section.scroll_area.hover_changed.emit(True)
    assert section.carousel.is_hovering
    assert not section.carousel.tick()

    section.scroll_area.hover_changed.emit(False)
    assert section.carousel.tick()


def test_runs_only_while_visible(qtbot, section):
    section.show()
    qtbot.waitExposed(section)
    assert section.carousel.is_running

    section.hide()
    assert not section.carousel.is_running
