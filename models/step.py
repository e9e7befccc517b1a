# -*- coding: utf-8 -*-
"""
Registration flow steps and the legal navigation graph.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


class Step(str, Enum):
    """Screen identifiers. Exactly one is active at a time."""
    HOME = "home"
    INITIATIVE_DETAILS = "initiative_details"
    GROUP_REGISTRATION = "group_registration"
    FORM = "form"
    PREVIEW = "preview"
    READING = "reading"
    SUCCESS = "success"


# (source, target) pairs a screen may request.
FLOW_EDGES: FrozenSet[Tuple[Step, Step]] = frozenset({
    (Step.HOME, Step.INITIATIVE_DETAILS),
    (Step.HOME, Step.GROUP_REGISTRATION),
    (Step.HOME, Step.FORM),
    (Step.INITIATIVE_DETAILS, Step.HOME),
    (Step.INITIATIVE_DETAILS, Step.GROUP_REGISTRATION),
    (Step.GROUP_REGISTRATION, Step.HOME),
    (Step.FORM, Step.HOME),
    (Step.FORM, Step.PREVIEW),
    (Step.PREVIEW, Step.FORM),
    (Step.PREVIEW, Step.READING),
    (Step.READING, Step.PREVIEW),
    (Step.READING, Step.SUCCESS),
    (Step.SUCCESS, Step.HOME),
})

# Reachable from every screen through the persistent header ("Join" button).
HEADER_TARGETS: FrozenSet[Step] = frozenset({Step.GROUP_REGISTRATION})


@dataclass(frozen=True)
class TransitionDecision:
    """Outcome of checking a requested step change against the flow graph."""
    accepted: bool
    source: Step
    target: Step
    reason: str = ""


def plan_transition(current: Step, requested: Step) -> TransitionDecision:
    """Decide whether ``requested`` may follow ``current``."""
    current = Step(current)
    requested = Step(requested)

    if (current, requested) in FLOW_EDGES:
        return TransitionDecision(True, current, requested)

    if requested in HEADER_TARGETS and requested != current:
        return TransitionDecision(True, current, requested, "header navigation")

    return TransitionDecision(
        False,
        current,
        requested,
        f"{current.value} -> {requested.value} is not part of the registration flow",
    )
