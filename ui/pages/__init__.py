# -*- coding: utf-8 -*-
"""
Save a Turtle UI Pages - one per registration step
"""

from .base_page import BasePage, StepValidationResult
from .home_page import HomePage
from .initiative_details_page import InitiativeDetailsPage
from .group_registration_page import GroupRegistrationPage
from .registration_form_page import RegistrationFormPage
from .certificate_preview_page import CertificatePreviewPage
from .pledge_reading_page import PledgeReadingPage
from .success_page import SuccessPage

__all__ = [
    "BasePage",
    "StepValidationResult",
    "HomePage",
    "InitiativeDetailsPage",
    "GroupRegistrationPage",
    "RegistrationFormPage",
    "CertificatePreviewPage",
    "PledgeReadingPage",
    "SuccessPage",
]
