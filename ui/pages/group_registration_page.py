# -*- coding: utf-8 -*-
"""
Group Registration Page - schools, colleges and corporate teams.
"""

from models.step import Step
from ui.components.secondary_button import SecondaryButton
from .base_page import BasePage


class GroupRegistrationPage(BasePage):
    """Information for teams that want to join together."""

    def setup_ui(self):
        self.add_title(
            "Bring Your Team",
            "Corporate teams, school groups and college clubs make the biggest impact. "
            "Share your organization link with your members so everyone lands on "
            "the pledge form with your group pre-selected.",
        )

        self.btn_back = SecondaryButton("Back to Home")
        self.btn_back.clicked.connect(lambda: self.controller.request_transition(Step.HOME))
        self.main_layout.addWidget(self.btn_back)
        self.main_layout.addStretch()
