# -*- coding: utf-8 -*-
"""
Pledge Reading Page - the volunteer reads the pledge aloud and confirms.
"""

from PyQt5.QtWidgets import QHBoxLayout, QLabel

from controllers.pledge_controller import PledgeController
from models.step import Step
from ui.components.primary_button import PrimaryButton
from ui.components.secondary_button import SecondaryButton
from ui.error_handler import ErrorHandler
from ..design_system import Colors, create_font
from .base_page import BasePage

PLEDGE_TEXT = (
    "I pledge to protect sea turtles and their nesting beaches. "
    "I will keep our shores free of plastic, switch off lights facing the sea "
    "during nesting season, never disturb a nest or a hatchling, and report "
    "any stranded turtle I see."
)


class PledgeReadingPage(BasePage):
    """Pledge text plus the confirm action that submits the registration."""

    def __init__(self, controller, pledge_controller: PledgeController, parent=None):
        super().__init__(controller, parent)
        self.pledge_controller = pledge_controller
        self.pledge_controller.submission_failed.connect(self._on_submission_failed)
        self.pledge_controller.loading_changed.connect(self._refresh_confirm_button)
        self.controller.transitioning_changed.connect(self._refresh_confirm_button)

    def setup_ui(self):
        self.add_title("Take the Pledge", "Read it out loud, then confirm.")

        self.pledge_label = QLabel(PLEDGE_TEXT)
        self.pledge_label.setWordWrap(True)
        self.pledge_label.setFont(create_font(size=14))
        self.pledge_label.setStyleSheet(f"color: {Colors.MIDNIGHT};")
        self.main_layout.addWidget(self.pledge_label)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Colors.ERROR};")
        self.error_label.setVisible(False)
        self.main_layout.addWidget(self.error_label)

        buttons = QHBoxLayout()
        self.btn_back = SecondaryButton("Back")
        self.btn_back.clicked.connect(lambda: self.controller.request_transition(Step.PREVIEW))
        buttons.addWidget(self.btn_back)
        buttons.addStretch()
        self.btn_confirm = PrimaryButton("I Pledge")
        self.btn_confirm.clicked.connect(self.confirm)
        buttons.addWidget(self.btn_confirm)
        self.main_layout.addLayout(buttons)
        self.main_layout.addStretch()

    def populate_data(self):
        self.error_label.setVisible(False)
        self._refresh_confirm_button()

    def confirm(self):
        self.error_label.setVisible(False)
        return self.pledge_controller.confirm_pledge()

    def _on_submission_failed(self, message: str):
        if not self._is_initialized:
            return
        self.error_label.setText(message)
        self.error_label.setVisible(True)
        ErrorHandler.show_error(self, message, "Pledge not submitted")

    def _refresh_confirm_button(self, *_):
        if self._is_initialized:
            self.btn_confirm.setEnabled(self.pledge_controller.can_confirm())
