# -*- coding: utf-8 -*-
"""
Success Page.
"""

from PyQt5.QtCore import Qt

from controllers.pledge_controller import PledgeController
from ui.components.primary_button import PrimaryButton
from ..design_system import create_font
from .base_page import BasePage


class SuccessPage(BasePage):
    """Thank-you screen shown after the pledge is accepted."""

    def __init__(self, controller, pledge_controller: PledgeController, parent=None):
        super().__init__(controller, parent)
        self.pledge_controller = pledge_controller

    def setup_ui(self):
        self.title_label = self.add_title("Thank you!")

        self.message_label = self.make_value_label()
        self.message_label.setFont(create_font(size=13))
        self.main_layout.addWidget(self.message_label)

        self.reference_label = self.make_value_label()
        self.reference_label.setAlignment(Qt.AlignLeft)
        self.main_layout.addWidget(self.reference_label)

        self.btn_home = PrimaryButton("Back to Home")
        self.btn_home.clicked.connect(self.controller.reset)
        self.main_layout.addWidget(self.btn_home, 0, Qt.AlignLeft)
        self.main_layout.addStretch()

    def populate_data(self):
        name = self.controller.draft.full_name
        self.title_label.setText(f"Thank you, {name}!" if name else "Thank you!")
        self.message_label.setText(
            "Your pledge is in. We'll see you on the beach. "
            "Your certificate will be sent to you after the event."
        )

        receipt = self.pledge_controller.receipt
        if receipt is not None:
            self.reference_label.setText(f"Reference number: {receipt.reference_number}")
        self.reference_label.setVisible(receipt is not None)
