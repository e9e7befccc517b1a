# -*- coding: utf-8 -*-
"""
Certificate Preview Page.
"""

from PyQt5.QtWidgets import QHBoxLayout, QFrame, QVBoxLayout
from PyQt5.QtCore import Qt

from models.step import Step
from ui.components.primary_button import PrimaryButton
from ui.components.secondary_button import SecondaryButton
from ..design_system import Colors, create_font
from .base_page import BasePage


class CertificatePreviewPage(BasePage):
    """Shows the certificate the volunteer will receive."""

    def setup_ui(self):
        self.add_title("Your Certificate", "Check the details before you take the pledge.")

        certificate = QFrame()
        certificate.setObjectName("certificate")
        certificate.setStyleSheet(f"""
            QFrame#certificate {{
                background-color: {Colors.SURFACE};
                border: 2px solid {Colors.PRIMARY};
                border-radius: 16px;
            }}
        """)
        card = QVBoxLayout(certificate)
        card.setContentsMargins(32, 32, 32, 32)

        heading = self.make_value_label("Certificate of Participation")
        heading.setAlignment(Qt.AlignCenter)
        card.addWidget(heading)

        self.name_label = self.make_value_label()
        self.name_label.setFont(create_font(size=20, bold=True))
        self.name_label.setAlignment(Qt.AlignCenter)
        card.addWidget(self.name_label)

        self.class_label = self.make_value_label()
        self.class_label.setAlignment(Qt.AlignCenter)
        card.addWidget(self.class_label)

        self.organization_label = self.make_value_label()
        self.organization_label.setAlignment(Qt.AlignCenter)
        card.addWidget(self.organization_label)

        self.main_layout.addWidget(certificate)

        buttons = QHBoxLayout()
        self.btn_edit = SecondaryButton("Edit Details")
        self.btn_edit.clicked.connect(lambda: self.controller.request_transition(Step.FORM))
        buttons.addWidget(self.btn_edit)
        buttons.addStretch()
        self.btn_confirm = PrimaryButton("Looks Good")
        self.btn_confirm.clicked.connect(lambda: self.controller.request_transition(Step.READING))
        buttons.addWidget(self.btn_confirm)
        self.main_layout.addLayout(buttons)
        self.main_layout.addStretch()

    def populate_data(self):
        draft = self.controller.draft
        self.name_label.setText(draft.full_name)

        class_parts = [p for p in (draft.class_name, draft.section) if p]
        self.class_label.setText(" - ".join(class_parts))
        self.class_label.setVisible(bool(class_parts))

        organization = self.controller.selected_organization
        self.organization_label.setText(organization.name if organization else "")
        self.organization_label.setVisible(organization is not None)
