# -*- coding: utf-8 -*-
"""
Home Page - hero with the two entry points and the initiatives carousel.
"""

from PyQt5.QtWidgets import QHBoxLayout

from models.step import Step
from ui.components.initiative_carousel import InitiativeCarousel
from ui.components.primary_button import PrimaryButton
from ui.components.secondary_button import SecondaryButton
from .base_page import BasePage


class HomePage(BasePage):
    """Landing screen."""

    def __init__(self, controller, parent=None, **carousel_options):
        self._carousel_options = carousel_options
        super().__init__(controller, parent)
        # The carousel must exist before the first show so its timers can start.
        self.initialize()

    def setup_ui(self):
        self.add_title(
            "Save a Turtle",
            "Walk the beach at night with us, protect Olive Ridley nests and "
            "take the pledge to keep our coast turtle-safe.",
        )

        buttons = QHBoxLayout()
        self.btn_start = PrimaryButton("Take the Pledge")
        self.btn_start.clicked.connect(lambda: self.controller.request_transition(Step.FORM))
        buttons.addWidget(self.btn_start)

        self.btn_group = SecondaryButton("Register a Group")
        self.btn_group.clicked.connect(lambda: self.controller.request_transition(Step.GROUP_REGISTRATION))
        buttons.addWidget(self.btn_group)
        buttons.addStretch()
        self.main_layout.addLayout(buttons)

        self.carousel_section = InitiativeCarousel(**self._carousel_options)
        self.carousel_section.initiative_clicked.connect(self.controller.select_initiative)
        self.main_layout.addWidget(self.carousel_section)
        self.main_layout.addStretch()

    def shutdown(self):
        self.carousel_section.shutdown()
