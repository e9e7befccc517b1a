# -*- coding: utf-8 -*-
"""
Pledge Controller - submits the registration when the pledge is confirmed.

The Reading screen owns submission timing. Only after the store accepts
the draft does the wizard move on to Success. A failed submission keeps
the user on Reading with a message; confirming again re-submits the same
draft. There is no automatic retry.
"""

from typing import Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from controllers.wizard_controller import WizardController
from models.registration import SubmissionReceipt
from models.step import Step
from services.error_mapper import map_error_code, map_exception
from services.exceptions import ApiException, NetworkException, StoreException
from services.registration_store import RegistrationStore
from utils.logger import get_logger

logger = get_logger(__name__)

OPERATION = "submit_pledge"


class PledgeController(BaseController):
    """Bridges the Reading screen, the registration store and the wizard."""

    submission_started = pyqtSignal()
    submission_succeeded = pyqtSignal(object)  # SubmissionReceipt
    submission_failed = pyqtSignal(str)  # user-facing message

    def __init__(self, wizard: WizardController, store: RegistrationStore, parent=None):
        super().__init__(parent)
        self.wizard = wizard
        self.store = store
        self._receipt: Optional[SubmissionReceipt] = None
        self.wizard.draft_reset.connect(self._on_draft_reset)

    @property
    def receipt(self) -> Optional[SubmissionReceipt]:
        """Receipt of the last accepted submission for the current draft."""
        return self._receipt

    def can_confirm(self) -> bool:
        return (
            self.wizard.current_step == Step.READING
            and not self.wizard.is_transitioning
            and not self.is_loading
        )

    def confirm_pledge(self) -> OperationResult:
        """
        Submit the current draft and, if accepted, move to Success.

        Returns:
            OperationResult with the SubmissionReceipt on success
        """
        if self.wizard.current_step != Step.READING:
            return OperationResult.fail(
                f"Pledge can only be confirmed from the reading step (at {self.wizard.current_step.value})"
            )
        if self.wizard.is_transitioning or self.is_loading:
            logger.debug("Ignoring pledge confirmation while busy")
            return OperationResult.fail("A submission or screen change is already in progress")

        draft = self.wizard.draft
        self._emit_started(OPERATION)
        self.submission_started.emit()

        try:
            response = self.store.submit_form(draft)
        except (ApiException, NetworkException, StoreException) as e:
            return self._fail(map_exception(e, context="pledge"), str(e))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            # Unreadable store reply
            logger.exception("Pledge submission returned an unusable response")
            return self._fail(map_exception(e, context="pledge"), str(e))

        if not response.success:
            return self._fail(map_error_code(response.error_code), response.error or "")

        self._receipt = response.data
        self._emit_completed(OPERATION, True)
        logger.info(f"Pledge submitted: {getattr(self._receipt, 'reference_number', '')}")
        self.submission_succeeded.emit(self._receipt)

        self.wizard.request_transition(Step.SUCCESS)
        return OperationResult.ok(data=self._receipt)

    def _fail(self, user_message: str, detail: str) -> OperationResult:
        self._emit_error(OPERATION, detail or user_message)
        self.submission_failed.emit(user_message)
        return OperationResult.fail(user_message, errors=[detail] if detail else [])

    def _on_draft_reset(self):
        self._receipt = None
