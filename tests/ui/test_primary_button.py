# -*- coding: utf-8 -*-
"""
Tests for the call-to-action buttons.
"""
import pytest
from PyQt5.QtCore import Qt

from ui.components.primary_button import PrimaryButton
from ui.components.secondary_button import SecondaryButton
from ui.design_system import ButtonDimensions


@pytest.fixture
def primary_button(qtbot):
    """Create a PrimaryButton instance."""
    button = PrimaryButton("Take the Pledge")
    qtbot.addWidget(button)
    return button


def test_button_creation(primary_button):
    assert primary_button.text() == "Take the Pledge"
    assert primary_button.objectName() == "PrimaryButton"
    assert primary_button.height() == ButtonDimensions.PRIMARY_HEIGHT


def test_button_click(primary_button, qtbot):
    """Test button click signal."""
    with qtbot.waitSignal(primary_button.clicked, timeout=500):
        qtbot.mouseClick(primary_button, Qt.LeftButton)


def test_button_enabled_disabled(primary_button):
    primary_button.setEnabled(False)
    assert not primary_button.isEnabled()

    primary_button.setEnabled(True)
    assert primary_button.isEnabled()


def test_secondary_button(qtbot):
    button = SecondaryButton("Back")
    qtbot.addWidget(button)
    assert button.objectName() == "SecondaryButton"
    assert button.height() == ButtonDimensions.SECONDARY_HEIGHT
