# -*- coding: utf-8 -*-
"""
Base Page - common base class for the registration screens.

Each page shows exactly one Step. Pages never change the step on their
own; they call WizardController methods and are told when they are
shown or hidden.
"""

from abc import ABCMeta, abstractmethod
from typing import List, Optional
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from controllers.wizard_controller import WizardController
from ..design_system import Colors, create_font


@dataclass
class StepValidationResult:
    """Result of validating the data entered on a page."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        return len(self.errors) > 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    pass


class BasePage(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard pages.

    Subclasses build their widgets in ``setup_ui()`` and refresh them from
    the controller in ``populate_data()``.
    """

    def __init__(self, controller: WizardController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self._is_initialized = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(48, 32, 48, 32)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """Build the UI (called once, on first show)."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the page becomes the active step."""
        if not self._is_initialized:
            self.initialize()
        self.populate_data()

    def on_hide(self):
        """Called when another step becomes active."""
        pass

    @abstractmethod
    def setup_ui(self):
        """Create the page widgets. Called once, on first show."""
        pass

    def populate_data(self):
        """Refresh widgets from controller state."""
        pass

    # =========================================================================
    # Helpers
    # =========================================================================

    def add_title(self, text: str, subtitle: str = "") -> QLabel:
        title = QLabel(text)
        title.setFont(create_font(size=22, bold=True))
        title.setStyleSheet(f"color: {Colors.MIDNIGHT};")
        title.setWordWrap(True)
        self.main_layout.addWidget(title)

        if subtitle:
            sub = QLabel(subtitle)
            sub.setFont(create_font(size=11))
            sub.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
            sub.setWordWrap(True)
            self.main_layout.addWidget(sub)
        return title

    @staticmethod
    def make_value_label(text: str = "") -> QLabel:
        label = QLabel(text)
        label.setFont(create_font(size=11))
        label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY};")
        label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        label.setWordWrap(True)
        return label
