# -*- coding: utf-8 -*-
"""
Secondary Button Component
Outlined button for Back / Edit actions.
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from ..design_system import Colors, ButtonDimensions, create_font


class SecondaryButton(QPushButton):
    """
    Secondary button with a border and transparent background.

    Usage:
        btn = SecondaryButton("Back")
        btn.clicked.connect(self.on_back)
    """

    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("SecondaryButton")
        self.setCursor(Qt.PointingHandCursor)
        self.setFixedHeight(ButtonDimensions.SECONDARY_HEIGHT)
        self.setFont(create_font(size=10))
        self.setStyleSheet(f"""
            QPushButton#SecondaryButton {{
                background-color: transparent;
                color: {Colors.TEXT_PRIMARY};
                border: 1px solid {Colors.BORDER};
                border-radius: {ButtonDimensions.SECONDARY_HEIGHT // 2}px;
                padding: 0 20px;
            }}
            QPushButton#SecondaryButton:hover {{
                background-color: {Colors.CANVAS};
            }}
        """)
