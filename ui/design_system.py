"""
Save a Turtle Design System

Design tokens shared by the registration screens: colors, button
dimensions and card geometry.
"""

from PyQt5.QtGui import QFont

from app.config import Config


class Colors:
    """Color palette."""
    PRIMARY = Config.PRIMARY_COLOR
    PRIMARY_HOVER = "#0284C7"
    PRIMARY_PRESSED = "#0369A1"
    SECONDARY = Config.SECONDARY_COLOR
    MIDNIGHT = Config.MIDNIGHT_COLOR
    CANVAS = Config.CANVAS_COLOR
    SURFACE = "#FFFFFF"
    BORDER = "#E2E8F0"
    TEXT_PRIMARY = Config.TEXT_COLOR
    TEXT_SECONDARY = Config.TEXT_LIGHT
    ERROR = Config.ERROR_COLOR
    WHITE = "#FFFFFF"
    DISABLED_BG = "#CBD5E1"
    DISABLED_TEXT = "#64748B"


class ButtonDimensions:
    """Button geometry."""
    PRIMARY_HEIGHT = 48
    PRIMARY_MIN_WIDTH = 160
    PRIMARY_BORDER_RADIUS = 24  # pill
    PRIMARY_PADDING_H = 28
    SECONDARY_HEIGHT = 44


class CardDimensions:
    """Initiative carousel card geometry."""
    WIDTH = Config.CAROUSEL_DEFAULT_ITEM_WIDTH
    HEIGHT = 450
    BORDER_RADIUS = 32
    GAP = Config.CAROUSEL_ITEM_GAP


def create_font(size: int = 10, bold: bool = False, family: str = None) -> QFont:
    """Create a QFont with the app defaults."""
    font = QFont(family) if family else QFont()
    font.setPointSize(size)
    font.setBold(bold)
    return font
