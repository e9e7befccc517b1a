# -*- coding: utf-8 -*-
"""
Shared pytest configuration.
"""
import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def wizard(qapp):
    """WizardController with near-instant swap and fade timers."""
    from controllers.wizard_controller import WizardController

    controller = WizardController(frame_delay_ms=1, fade_ms=1)
    yield controller
    controller.shutdown()


@pytest.fixture
def local_store():
    from services.local_registration_store import LocalRegistrationStore
    return LocalRegistrationStore()
