# -*- coding: utf-8 -*-
"""
Registration Form Page.

Collects the volunteer's details into the controller's draft. The page
writes the draft only when the user continues; Back leaves it untouched
and the wizard discards it on the way Home.
"""

import re

from PyQt5.QtWidgets import (
    QFormLayout, QHBoxLayout, QLineEdit, QComboBox, QCheckBox, QPushButton,
    QLabel, QFileDialog
)

from app.config import Config
from models.step import Step
from ui.components.primary_button import PrimaryButton
from ui.components.secondary_button import SecondaryButton
from ..design_system import Colors, create_font
from .base_page import BasePage, StepValidationResult

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RegistrationFormPage(BasePage):
    """Volunteer details form."""

    def setup_ui(self):
        self.add_title("Your Details", "This is what goes on your certificate.")

        self.organization_label = QLabel()
        self.organization_label.setFont(create_font(size=11, bold=True))
        self.organization_label.setStyleSheet(f"color: {Colors.PRIMARY};")
        self.organization_label.setVisible(False)
        self.main_layout.addWidget(self.organization_label)

        form = QFormLayout()
        form.setSpacing(12)

        self.full_name_input = QLineEdit()
        self.full_name_input.setPlaceholderText("Full name")
        form.addRow("Full name *", self.full_name_input)

        self.email_input = QLineEdit()
        self.email_input.setPlaceholderText("name@example.com")
        form.addRow("Email", self.email_input)

        phone_row = QHBoxLayout()
        self.country_code_combo = QComboBox()
        self.country_code_combo.addItems(Config.COUNTRY_CODES)
        phone_row.addWidget(self.country_code_combo)
        self.phone_input = QLineEdit()
        self.phone_input.setPlaceholderText("Phone number")
        phone_row.addWidget(self.phone_input, 1)
        form.addRow("Phone", phone_row)

        self.class_input = QLineEdit()
        form.addRow("Class", self.class_input)

        self.section_input = QLineEdit()
        form.addRow("Section", self.section_input)

        photo_row = QHBoxLayout()
        self.photo_label = QLabel("No photo selected")
        self.photo_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        photo_row.addWidget(self.photo_label, 1)
        self.btn_photo = QPushButton("Upload Photo")
        self.btn_photo.clicked.connect(self._choose_photo)
        photo_row.addWidget(self.btn_photo)
        form.addRow("Photo", photo_row)

        self.opt_in_checkbox = QCheckBox("Tell me about similar events")
        form.addRow("", self.opt_in_checkbox)

        self.main_layout.addLayout(form)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Colors.ERROR};")
        self.error_label.setVisible(False)
        self.main_layout.addWidget(self.error_label)

        buttons = QHBoxLayout()
        self.btn_back = SecondaryButton("Back")
        self.btn_back.clicked.connect(lambda: self.controller.request_transition(Step.HOME))
        buttons.addWidget(self.btn_back)
        buttons.addStretch()
        self.btn_continue = PrimaryButton("Preview Certificate")
        self.btn_continue.clicked.connect(self.submit)
        buttons.addWidget(self.btn_continue)
        self.main_layout.addLayout(buttons)
        self.main_layout.addStretch()

        self._photo_path = ""

    def populate_data(self):
        draft = self.controller.draft
        self.full_name_input.setText(draft.full_name)
        self.email_input.setText(draft.email)
        self.phone_input.setText(draft.phone)
        self.class_input.setText(draft.class_name)
        self.section_input.setText(draft.section)
        self.opt_in_checkbox.setChecked(draft.opt_in_similar_events)

        index = self.country_code_combo.findText(draft.country_code)
        if index < 0:
            self.country_code_combo.addItem(draft.country_code)
            index = self.country_code_combo.count() - 1
        self.country_code_combo.setCurrentIndex(index)

        self._set_photo(draft.photo)

        organization = self.controller.selected_organization
        if organization is not None:
            self.organization_label.setText(f"Registering with {organization.name}")
        self.organization_label.setVisible(organization is not None)
        self.error_label.setVisible(False)

    def validate(self) -> StepValidationResult:
        result = StepValidationResult()

        if not self.full_name_input.text().strip():
            result.add_error("Please enter your full name")

        email = self.email_input.text().strip()
        if email and not EMAIL_PATTERN.match(email):
            result.add_error("Please enter a valid email address")

        phone = self.phone_input.text().strip().replace(" ", "")
        if phone and not phone.isdigit():
            result.add_error("Phone number may only contain digits")
        elif not phone and not email:
            result.add_warning("Without an email or phone we can't send you event updates")

        return result

    def collect_data(self):
        """Write the form fields into the draft."""
        draft = self.controller.draft
        draft.full_name = self.full_name_input.text().strip()
        draft.email = self.email_input.text().strip()
        draft.phone = self.phone_input.text().strip()
        draft.country_code = self.country_code_combo.currentText()
        draft.class_name = self.class_input.text().strip()
        draft.section = self.section_input.text().strip()
        draft.photo = self._photo_path
        draft.opt_in_similar_events = self.opt_in_checkbox.isChecked()

    def submit(self) -> bool:
        """Validate, store into the draft and move on to the preview."""
        result = self.validate()
        if result.has_errors():
            self.error_label.setText("\n".join(result.errors))
            self.error_label.setVisible(True)
            return False

        self.error_label.setVisible(False)
        self.collect_data()
        return self.controller.request_transition(Step.PREVIEW).success

    def _choose_photo(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Choose a photo", "", "Images (*.png *.jpg *.jpeg)"
        )
        if path:
            self._set_photo(path)

    def _set_photo(self, path: str):
        self._photo_path = path or ""
        self.photo_label.setText(self._photo_path or "No photo selected")
