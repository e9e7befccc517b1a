# -*- coding: utf-8 -*-
"""
Wizard Controller - owns the active registration screen.

Handles:
- Step changes checked against the flow graph
- The fade window around every screen swap (is_transitioning)
- The single in-flight RegistrationDraft
- The one-shot ``?org=`` deep link into the form

Every step change is deferred: a swap timer fires after one frame so the
host can fade the old screen out, then a fade timer clears the
transitioning flag. Only one transition is ever pending; a newer accepted
request cancels the older one before scheduling itself.
"""

from typing import Optional

from PyQt5.QtCore import QTimer, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController, OperationResult
from models.initiative import DEFAULT_INITIATIVE_ID
from models.registration import Organization, RegistrationDraft
from models.step import Step, plan_transition
from services.exceptions import ApiException, NetworkException, StoreException
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardController(BaseController):
    """
    Controller for the registration wizard.

    Screens never set the step themselves; they call the transition
    methods below. The controller does not touch draft fields except for
    the organization pre-selected by a deep link.
    """

    # Signals
    step_changed = pyqtSignal(object, object)  # old Step, new Step
    transitioning_changed = pyqtSignal(bool)
    scroll_reset_requested = pyqtSignal()
    transition_rejected = pyqtSignal(object, object, str)  # current, requested, reason
    draft_reset = pyqtSignal()
    deep_link_resolved = pyqtSignal(str)  # organization id

    def __init__(self, frame_delay_ms: int = None, fade_ms: int = None, parent=None):
        super().__init__(parent)
        self._frame_delay_ms = Config.TRANSITION_FRAME_MS if frame_delay_ms is None else frame_delay_ms
        self._fade_ms = Config.TRANSITION_FADE_MS if fade_ms is None else fade_ms

        self._current_step = Step.HOME
        self._pending_target: Optional[Step] = None
        self._is_transitioning = False
        self._selected_initiative_id = DEFAULT_INITIATIVE_ID
        self._selected_organization: Optional[Organization] = None
        self._draft = self._new_draft()
        self._deep_link_consumed = False

        self._swap_timer = QTimer(self)
        self._swap_timer.setSingleShot(True)
        self._swap_timer.timeout.connect(self._execute_swap)

        self._fade_timer = QTimer(self)
        self._fade_timer.setSingleShot(True)
        self._fade_timer.timeout.connect(self._finish_transition)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def current_step(self) -> Step:
        return self._current_step

    @property
    def pending_step(self) -> Optional[Step]:
        """Target of the scheduled swap, if any."""
        return self._pending_target

    @property
    def is_transitioning(self) -> bool:
        return self._is_transitioning

    @property
    def draft(self) -> RegistrationDraft:
        return self._draft

    @property
    def selected_initiative_id(self) -> str:
        return self._selected_initiative_id

    @property
    def selected_organization(self) -> Optional[Organization]:
        return self._selected_organization

    # =========================================================================
    # Transitions
    # =========================================================================

    def request_transition(self, target: Step) -> OperationResult:
        """
        Request a change of screen.

        The request is checked against the step currently on screen. Rejected
        requests leave every piece of state untouched.

        Returns:
            OperationResult with the TransitionDecision as data on success
        """
        try:
            target = Step(target)
        except ValueError:
            message = f"Unknown step: {target!r}"
            logger.warning(message)
            return OperationResult.fail(message)

        decision = plan_transition(self._current_step, target)
        if not decision.accepted:
            logger.warning(f"Transition rejected: {decision.reason}")
            self.transition_rejected.emit(decision.source, decision.target, decision.reason)
            return OperationResult.fail(decision.reason)

        self._schedule(target)
        return OperationResult.ok(data=decision)

    def reset(self) -> OperationResult:
        """Discard the draft and return to Home from any step."""
        self._replace_draft()
        self._schedule(Step.HOME)
        return OperationResult.ok()

    def select_initiative(self, initiative_id: str) -> OperationResult:
        """Open the detail screen of an initiative (id is not validated here)."""
        result = self.request_transition(Step.INITIATIVE_DETAILS)
        if result.success:
            self._selected_initiative_id = initiative_id
            self._log_operation("select_initiative", initiative_id=initiative_id)
        return result

    def open_group_registration(self) -> OperationResult:
        """Header "Join" button."""
        return self.request_transition(Step.GROUP_REGISTRATION)

    def _schedule(self, target: Step):
        """Replace any pending transition with one towards ``target``."""
        if self._pending_target is not None:
            logger.debug(
                f"Cancelling pending transition to {self._pending_target.value} "
                f"in favour of {target.value}"
            )
        self._swap_timer.stop()
        self._fade_timer.stop()

        self._pending_target = target
        self._set_transitioning(True)
        self._swap_timer.start(self._frame_delay_ms)

    def _execute_swap(self):
        target = self._pending_target
        self._pending_target = None
        if target is None:
            return

        old_step = self._current_step
        self._current_step = target

        if target != Step.INITIATIVE_DETAILS:
            self._selected_initiative_id = DEFAULT_INITIATIVE_ID
        if target == Step.HOME and not self._draft_is_pristine():
            self._replace_draft()

        logger.info(f"Step {old_step.value} -> {target.value}")
        self.step_changed.emit(old_step, target)
        self.scroll_reset_requested.emit()

        self._fade_timer.start(self._fade_ms)

    def _finish_transition(self):
        self._set_transitioning(False)

    def _set_transitioning(self, value: bool):
        if self._is_transitioning != value:
            self._is_transitioning = value
            self.transitioning_changed.emit(value)

    # =========================================================================
    # Draft
    # =========================================================================

    @staticmethod
    def _new_draft() -> RegistrationDraft:
        return RegistrationDraft(country_code=Config.DEFAULT_COUNTRY_CODE)

    def _draft_is_pristine(self) -> bool:
        return self._draft == self._new_draft()

    def _replace_draft(self):
        self._draft = self._new_draft()
        self._selected_organization = None
        self.draft_reset.emit()

    # =========================================================================
    # Deep link
    # =========================================================================

    def resolve_deep_link(self, org_param: Optional[str], directory) -> bool:
        """
        Jump straight to the form with an organization pre-selected.

        Runs once, synchronously, before the window is shown. Later calls,
        an absent parameter, an unknown organization or an unreachable
        directory all leave the wizard at Home.

        Args:
            org_param: Raw value of the ``org`` startup parameter
            directory: RegistrationStore holding the organization directory

        Returns:
            True if the wizard moved to the form
        """
        if self._deep_link_consumed:
            logger.debug("Deep link already resolved, ignoring")
            return False
        self._deep_link_consumed = True

        if not org_param:
            return False

        try:
            school = directory.find_school(org_param)
        except (ApiException, NetworkException, StoreException) as e:
            logger.warning(f"Organization directory unavailable, ignoring deep link: {e}")
            return False
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            logger.warning(f"Organization directory unreadable, ignoring deep link: {e}")
            return False

        if school is None:
            logger.info(f"Deep link organization not found: {org_param}")
            return False

        logger.info(f"Direct link: navigating to {school.name}")
        self._swap_timer.stop()
        self._fade_timer.stop()
        self._pending_target = None
        self._set_transitioning(False)

        self._draft.organization_id = school.id
        self._selected_organization = school

        old_step = self._current_step
        self._current_step = Step.FORM
        self.step_changed.emit(old_step, Step.FORM)
        self.deep_link_resolved.emit(school.id)
        return True

    # =========================================================================
    # Teardown
    # =========================================================================

    def shutdown(self):
        """Stop pending timers; a half-finished transition is dropped."""
        self._swap_timer.stop()
        self._fade_timer.stop()
        self._pending_target = None
        self._set_transitioning(False)
