# -*- coding: utf-8 -*-
"""
Primary Button Component
Pill-shaped call-to-action button used on every registration screen.
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from ..design_system import Colors, ButtonDimensions, create_font


class PrimaryButton(QPushButton):
    """
    Primary call-to-action button.

    Usage:
        btn = PrimaryButton("Take the Pledge")
        btn.clicked.connect(self.on_start)
    """

    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self._setup_ui()

    def _setup_ui(self):
        """Setup button UI."""
        self.setObjectName("PrimaryButton")
        self.setMinimumWidth(ButtonDimensions.PRIMARY_MIN_WIDTH)
        self.setFixedHeight(ButtonDimensions.PRIMARY_HEIGHT)
        self.setCursor(Qt.PointingHandCursor)
        self.setFont(create_font(size=10, bold=True))

        self.setStyleSheet(f"""
            QPushButton#PrimaryButton {{
                background-color: {Colors.PRIMARY};
                color: {Colors.WHITE};
                border: none;
                border-radius: {ButtonDimensions.PRIMARY_BORDER_RADIUS}px;
                padding: 0 {ButtonDimensions.PRIMARY_PADDING_H}px;
            }}
            QPushButton#PrimaryButton:hover {{
                background-color: {Colors.PRIMARY_HOVER};
            }}
            QPushButton#PrimaryButton:pressed {{
                background-color: {Colors.PRIMARY_PRESSED};
            }}
            QPushButton#PrimaryButton:disabled {{
                background-color: {Colors.DISABLED_BG};
                color: {Colors.DISABLED_TEXT};
            }}
        """)
