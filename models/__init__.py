# -*- coding: utf-8 -*-
"""
Save a Turtle Data Models
"""

from .step import Step, TransitionDecision, plan_transition
from .registration import Organization, RegistrationDraft, SubmissionReceipt
from .initiative import Initiative, INITIATIVES, DEFAULT_INITIATIVE_ID, find_initiative

__all__ = [
    "Step",
    "TransitionDecision",
    "plan_transition",
    "Organization",
    "RegistrationDraft",
    "SubmissionReceipt",
    "Initiative",
    "INITIATIVES",
    "DEFAULT_INITIATIVE_ID",
    "find_initiative",
]
