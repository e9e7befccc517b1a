# -*- coding: utf-8 -*-
"""
Initiatives carousel component.

Horizontal strip of initiative cards that advances on its own, pauses
while hovered and after the arrow buttons are used.
"""

from typing import Iterable, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QScrollArea, QPushButton
)
from PyQt5.QtCore import Qt, QPropertyAnimation, QEasingCurve, pyqtSignal

from app.config import Config
from controllers.carousel_controller import CarouselViewport, InfiniteCarousel, ScrollDirection
from models.initiative import INITIATIVES, Initiative
from ..design_system import Colors, CardDimensions, create_font


class ScrollAreaViewport(CarouselViewport):
    """Adapts a QScrollArea's horizontal scroll bar to the carousel."""

    def __init__(self, scroll_area: QScrollArea, animation_ms: int = None):
        self.scroll_area = scroll_area
        self._animation = QPropertyAnimation(scroll_area.horizontalScrollBar(), b"value")
        self._animation.setDuration(
            Config.CAROUSEL_SCROLL_ANIMATION_MS if animation_ms is None else animation_ms
        )
        self._animation.setEasingCurve(QEasingCurve.OutCubic)

    def item_width(self) -> Optional[int]:
        container = self.scroll_area.widget()
        if container is None or container.layout() is None or container.layout().count() == 0:
            return None
        first = container.layout().itemAt(0).widget()
        return first.width() if first is not None else None

    def scroll_to(self, offset: int, animated: bool):
        bar = self.scroll_area.horizontalScrollBar()
        self._animation.stop()
        if animated:
            self._animation.setStartValue(bar.value())
            self._animation.setEndValue(offset)
            self._animation.start()
        else:
            bar.setValue(offset)


class _HoverScrollArea(QScrollArea):
    """QScrollArea reporting pointer enter/leave."""

    hover_changed = pyqtSignal(bool)

    def enterEvent(self, event):
        self.hover_changed.emit(True)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.hover_changed.emit(False)
        super().leaveEvent(event)


class InitiativeCard(QFrame):
    """Single initiative card."""

    clicked = pyqtSignal(str)  # initiative id

    def __init__(self, initiative: Initiative, parent=None):
        super().__init__(parent)
        self.initiative = initiative
        self.setObjectName("initiativeCard")
        self.setFixedSize(CardDimensions.WIDTH, CardDimensions.HEIGHT)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(f"""
            QFrame#initiativeCard {{
                background-color: {Colors.MIDNIGHT};
                border-radius: {CardDimensions.BORDER_RADIUS}px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.addStretch()

        title = QLabel(self._title_html())
        title.setTextFormat(Qt.RichText)
        title.setWordWrap(True)
        title.setFont(create_font(size=20, bold=True))
        title.setStyleSheet("color: white; background: transparent;")
        layout.addWidget(title)

        self.cta_button = QPushButton(initiative.cta_label)
        self.cta_button.setCursor(Qt.PointingHandCursor)
        self.cta_button.setStyleSheet(f"""
            QPushButton {{
                background-color: {Colors.PRIMARY};
                color: white;
                border: none;
                border-radius: 18px;
                padding: 8px 24px;
                font-weight: bold;
            }}
        """)
        self.cta_button.clicked.connect(lambda: self.clicked.emit(self.initiative.id))
        layout.addWidget(self.cta_button, 0, Qt.AlignLeft)

    def _title_html(self) -> str:
        underline = f"border-bottom: 4px solid {self.initiative.accent_color}; text-decoration: underline;"
        if self.initiative.highlight == "subtitle":
            return f'<span style="{underline}">{self.initiative.subtitle}</span>{self.initiative.subtitle_after}'
        return f'{self.initiative.subtitle}<span style="{underline}">{self.initiative.subtitle_after}</span>'

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.initiative.id)
        super().mousePressEvent(event)


class InitiativeCarousel(QWidget):
    """
    "Explore Initiatives" section.

    Signals:
        initiative_clicked(str): a card (or its button) was clicked
    """

    initiative_clicked = pyqtSignal(str)

    def __init__(self, initiatives: Iterable[Initiative] = INITIATIVES, parent=None, **carousel_options):
        super().__init__(parent)
        self._setup_ui()

        self.viewport = ScrollAreaViewport(self.scroll_area)
        self.carousel = InfiniteCarousel(self.viewport, initiatives, parent=self, **carousel_options)
        self._populate_cards()

        self.btn_left.clicked.connect(lambda: self.carousel.manual_scroll(ScrollDirection.LEFT))
        self.btn_right.clicked.connect(lambda: self.carousel.manual_scroll(ScrollDirection.RIGHT))
        self.scroll_area.hover_changed.connect(self.carousel.on_hover_change)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 24, 0, 24)
        layout.setSpacing(16)

        header = QHBoxLayout()
        title = QLabel("Explore Initiatives")
        title.setFont(create_font(size=20, bold=True))
        title.setStyleSheet(f"color: {Colors.MIDNIGHT};")
        header.addWidget(title)
        header.addStretch()

        self.btn_left = QPushButton("‹")
        self.btn_right = QPushButton("›")
        for btn in (self.btn_left, self.btn_right):
            btn.setFixedSize(40, 40)
            btn.setCursor(Qt.PointingHandCursor)
            header.addWidget(btn)
        layout.addLayout(header)

        self.scroll_area = _HoverScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll_area.setFixedHeight(CardDimensions.HEIGHT + 16)
        layout.addWidget(self.scroll_area)

    def _populate_cards(self):
        container = QWidget()
        row = QHBoxLayout(container)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(CardDimensions.GAP)
        for initiative in self.carousel.items:
            card = InitiativeCard(initiative)
            card.clicked.connect(self.initiative_clicked.emit)
            row.addWidget(card)
        row.addStretch()
        self.scroll_area.setWidget(container)

    # Auto-advance only while on screen

    def showEvent(self, event):
        super().showEvent(event)
        self.carousel.start()

    def hideEvent(self, event):
        self.carousel.stop()
        super().hideEvent(event)

    def shutdown(self):
        """Tear down the carousel timers."""
        self.carousel.shutdown()
