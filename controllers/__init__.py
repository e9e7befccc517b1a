# -*- coding: utf-8 -*-
"""
Save a Turtle Controllers
=========================
Controller layer for the registration app.

Controllers sit between the UI pages and the registration store.
They provide:
- Qt signals for UI updates
- Standardized results via OperationResult
- Timer-driven state machines (wizard transitions, carousel)

Usage:
    from controllers import WizardController
    from models import Step

    wizard = WizardController()
    result = wizard.request_transition(Step.FORM)
    if not result.success:
        print(f"Rejected: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Domain controllers
from controllers.wizard_controller import WizardController

from controllers.carousel_controller import (
    CarouselViewport,
    InfiniteCarousel,
    ScrollDirection,
)

from controllers.pledge_controller import PledgeController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Wizard
    "WizardController",

    # Carousel
    "CarouselViewport",
    "InfiniteCarousel",
    "ScrollDirection",

    # Pledge
    "PledgeController",
]
