# -*- coding: utf-8 -*-
"""
Main application window: persistent header above a QStackedWidget that
shows exactly one registration page at a time.
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QStackedWidget,
    QScrollArea, QFrame, QPushButton, QGraphicsOpacityEffect
)
from PyQt5.QtCore import Qt, QPropertyAnimation, QEasingCurve

from .config import Config
from controllers.pledge_controller import PledgeController
from controllers.wizard_controller import WizardController
from models.step import Step
from ui.components.primary_button import PrimaryButton
from ui.design_system import Colors, create_font
from ui.pages.base_page import BasePage
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Host window; renders whatever step the wizard controller reports."""

    def __init__(
        self,
        controller: WizardController,
        pledge_controller: PledgeController,
        parent=None,
        carousel_options: Optional[dict] = None,
    ):
        super().__init__(parent)
        self.controller = controller
        self.pledge_controller = pledge_controller
        self._carousel_options = carousel_options or {}
        self.pages: Dict[Step, BasePage] = {}

        self._setup_window()
        self._create_widgets()
        self._connect_signals()

        self._show_page(self.controller.current_step)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setStyleSheet(f"QMainWindow {{ background-color: {Colors.CANVAS}; }}")

    def _create_widgets(self):
        """Create header, scroll area and one page per step."""
        from ui.pages.home_page import HomePage
        from ui.pages.initiative_details_page import InitiativeDetailsPage
        from ui.pages.group_registration_page import GroupRegistrationPage
        from ui.pages.registration_form_page import RegistrationFormPage
        from ui.pages.certificate_preview_page import CertificatePreviewPage
        from ui.pages.pledge_reading_page import PledgeReadingPage
        from ui.pages.success_page import SuccessPage

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addWidget(self._create_header())

        self.stack = QStackedWidget()
        self.pages[Step.HOME] = HomePage(self.controller, **self._carousel_options)
        self.pages[Step.INITIATIVE_DETAILS] = InitiativeDetailsPage(self.controller)
        self.pages[Step.GROUP_REGISTRATION] = GroupRegistrationPage(self.controller)
        self.pages[Step.FORM] = RegistrationFormPage(self.controller)
        self.pages[Step.PREVIEW] = CertificatePreviewPage(self.controller)
        self.pages[Step.READING] = PledgeReadingPage(self.controller, self.pledge_controller)
        self.pages[Step.SUCCESS] = SuccessPage(self.controller, self.pledge_controller)
        for page in self.pages.values():
            self.stack.addWidget(page)

        # Fade the page area while a swap is in flight
        self.opacity_effect = QGraphicsOpacityEffect(self.stack)
        self.opacity_effect.setOpacity(1.0)
        self.stack.setGraphicsEffect(self.opacity_effect)
        self.fade_animation = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_animation.setDuration(Config.FADE_ANIMATION_MS)
        self.fade_animation.setEasingCurve(QEasingCurve.InOutQuad)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setWidget(self.stack)
        layout.addWidget(self.scroll_area, 1)

    def _create_header(self) -> QWidget:
        header = QFrame()
        header.setObjectName("header")
        header.setFixedHeight(Config.HEADER_HEIGHT)
        header.setStyleSheet(f"""
            QFrame#header {{
                background-color: {Colors.WHITE};
                border-bottom: 1px solid {Colors.BORDER};
            }}
        """)
        row = QHBoxLayout(header)
        row.setContentsMargins(32, 0, 32, 0)

        self.btn_logo = QPushButton(Config.APP_NAME)
        self.btn_logo.setFlat(True)
        self.btn_logo.setCursor(Qt.PointingHandCursor)
        self.btn_logo.setFont(create_font(size=16, bold=True))
        self.btn_logo.setStyleSheet(f"color: {Colors.MIDNIGHT}; border: none;")
        row.addWidget(self.btn_logo)
        row.addStretch()

        self.btn_join = PrimaryButton("Join")
        row.addWidget(self.btn_join)
        return header

    def _connect_signals(self):
        self.btn_logo.clicked.connect(self.controller.reset)
        self.btn_join.clicked.connect(self.controller.open_group_registration)

        self.controller.step_changed.connect(self._on_step_changed)
        self.controller.transitioning_changed.connect(self._on_transitioning_changed)
        self.controller.scroll_reset_requested.connect(self._reset_scroll)

    # =========================================================================
    # Controller -> view
    # =========================================================================

    @property
    def current_page(self) -> BasePage:
        return self.stack.currentWidget()

    def _show_page(self, step: Step):
        page = self.pages[step]
        self.stack.setCurrentWidget(page)
        page.on_show()

    def _on_step_changed(self, old_step: Step, new_step: Step):
        old_page = self.pages.get(old_step)
        if old_page is not None and old_page is not self.pages[new_step]:
            old_page.on_hide()
        self._show_page(new_step)

    def _on_transitioning_changed(self, transitioning: bool):
        self.fade_animation.stop()
        self.fade_animation.setStartValue(self.opacity_effect.opacity())
        self.fade_animation.setEndValue(0.0 if transitioning else 1.0)
        self.fade_animation.start()

    def _reset_scroll(self):
        self.scroll_area.verticalScrollBar().setValue(0)

    def closeEvent(self, event):
        """Tear down timers before the window goes away."""
        logger.info("Main window closing")
        self.pages[Step.HOME].shutdown()
        self.controller.shutdown()
        super().closeEvent(event)
