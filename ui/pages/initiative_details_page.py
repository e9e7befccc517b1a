# -*- coding: utf-8 -*-
"""
Initiative Details Page.
"""

from PyQt5.QtWidgets import QHBoxLayout

from models.initiative import find_initiative
from models.step import Step
from ui.components.primary_button import PrimaryButton
from ui.components.secondary_button import SecondaryButton
from .base_page import BasePage


class InitiativeDetailsPage(BasePage):
    """Detail screen for the initiative selected on the home carousel."""

    NOT_FOUND_TITLE = "Initiative not found"

    def setup_ui(self):
        self.title_label = self.add_title("")
        self.description_label = self.make_value_label()
        self.main_layout.addWidget(self.description_label)

        buttons = QHBoxLayout()
        self.btn_back = SecondaryButton("Back")
        self.btn_back.clicked.connect(lambda: self.controller.request_transition(Step.HOME))
        buttons.addWidget(self.btn_back)

        self.btn_join = PrimaryButton("Join Us")
        self.btn_join.clicked.connect(lambda: self.controller.request_transition(Step.GROUP_REGISTRATION))
        buttons.addWidget(self.btn_join)
        buttons.addStretch()
        self.main_layout.addLayout(buttons)
        self.main_layout.addStretch()

    def populate_data(self):
        initiative = find_initiative(self.controller.selected_initiative_id)
        if initiative is None:
            self.title_label.setText(self.NOT_FOUND_TITLE)
            self.description_label.setText(
                "We couldn't find that initiative. Head back to explore the others."
            )
            self.btn_join.setVisible(False)
            return

        self.title_label.setText(initiative.title)
        self.description_label.setText(
            f"Volunteer with us for {initiative.title.lower()}. Groups are welcome."
        )
        self.btn_join.setText(initiative.cta_label)
        self.btn_join.setVisible(True)
