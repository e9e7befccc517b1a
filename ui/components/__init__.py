# -*- coding: utf-8 -*-
"""
Save a Turtle UI Components
"""

from .primary_button import PrimaryButton
from .secondary_button import SecondaryButton
from .initiative_carousel import InitiativeCard, InitiativeCarousel, ScrollAreaViewport

__all__ = [
    "PrimaryButton",
    "SecondaryButton",
    "InitiativeCard",
    "InitiativeCarousel",
    "ScrollAreaViewport",
]
