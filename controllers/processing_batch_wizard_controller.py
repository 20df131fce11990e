# -*- coding: utf-8 -*-
"""
Processing Batch Wizard Controller
==================================
Orchestrates the batch creation wizard.

Forward moves are gated here: each step's form is validated (or the
selection checked) before the context is told to advance. On the review
step "next" becomes the submission.
"""

from typing import Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Pages
from controllers.base_controller import BaseController, NoticeLevel, OperationResult
from models.processing_batch import FirstStageDetails, InitialCriteria, ProcessingBatch
from services.batch_submission_service import BatchSubmissionService
from services.error_mapper import map_api_error, map_network_error
from services.event_bus import DataEventBus, get_event_bus
from services.exceptions import ApiException, NetworkException, SubmissionPreconditionError
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework.step_form import StepForm
from ui.wizards.processing_batch.batch_context import ProcessingBatchContext, WizardStep
from utils.logger import get_logger

logger = get_logger(__name__)


def _as_lot_number(value) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


class ProcessingBatchWizardController(BaseController):
    """
    Step orchestrator and submission flow for the batch creation wizard.

    Signals:
        step_changed(str): the context's active step changed (step value)
        submitting_changed(bool): a submission started / finished
        batch_created(object): the ProcessingBatch returned by the backend
        navigate_requested(str): page to show after a successful submission
    """

    step_changed = pyqtSignal(str)
    submitting_changed = pyqtSignal(bool)
    batch_created = pyqtSignal(object)
    navigate_requested = pyqtSignal(str)

    def __init__(
        self,
        context: ProcessingBatchContext,
        submission_service: Optional[BatchSubmissionService] = None,
        event_bus: Optional[DataEventBus] = None,
        parent=None
    ):
        super().__init__(parent)
        self.context = context
        self.submission_service = submission_service or BatchSubmissionService()
        self.event_bus = event_bus or get_event_bus()

    # =========================================================================
    # Navigation
    # =========================================================================

    def handle_next(self, form: Optional[StepForm] = None) -> bool:
        """
        Try to leave the active step.

        Args:
            form: The active step's form (None for steps without one)

        Returns:
            True if the wizard moved forward or the batch was created
        """
        if self.context.is_submitting:
            logger.debug("Next ignored: submission in flight")
            return False

        step = self.context.active_step

        if step == WizardStep.REVIEW:
            return self.handle_submit().success

        if step == WizardStep.SELECT_CRITERIA:
            if not self._commit_criteria(form):
                return False

        elif step == WizardStep.SELECT_PROCUREMENTS:
            if not self.context.selected_procurement_ids:
                self._notify(NoticeLevel.WARNING, tr("validation.procurements.required"))
                return False

        elif step == WizardStep.FIRST_STAGE_DETAILS and form is not None:
            if not form.trigger():
                message = StepValidator.first_error_message(form.errors)
                self._notify(NoticeLevel.WARNING, message or tr("validation.first_stage.incomplete"))
                return False
            self.context.set_first_stage_details(FirstStageDetails.from_form_values(form.get_values()))

        self.context.go_to_next_step()
        self.step_changed.emit(self.context.active_step.value)
        return True

    def _commit_criteria(self, form: Optional[StepForm]) -> bool:
        if form is None:
            self.context.set_initial_criteria(InitialCriteria())
            return True

        if not form.trigger():
            message = StepValidator.first_error_message(form.errors)
            self._notify(NoticeLevel.WARNING, message or tr("validation.criteria.invalid"))
            return False

        values = form.get_values()
        self.context.set_initial_criteria(InitialCriteria(
            crop=values.get("crop") or None,
            lot_no=_as_lot_number(values.get("lotNo")),
        ))
        return True

    def handle_previous(self) -> bool:
        """Go back one step; no validation. Ignored while submitting."""
        if self.context.is_submitting:
            return False
        before = self.context.active_step
        self.context.go_to_previous_tab()
        if self.context.active_step != before:
            self.step_changed.emit(self.context.active_step.value)
        return True

    def cancel(self):
        """Abandon the session: reset the context to its first step."""
        logger.info(f"Wizard {self.context.reference_number} cancelled")
        self.context.reset_form()
        self.step_changed.emit(self.context.active_step.value)

    # =========================================================================
    # Submission
    # =========================================================================

    def _set_submitting(self, value: bool):
        self.context.set_is_submitting(value)
        self.submitting_changed.emit(value)
        self._set_loading(value)

    def handle_submit(self) -> OperationResult[ProcessingBatch]:
        """
        Submit the session as a new processing batch.

        The context is only reset on success; every failure leaves it as it
        was so the user can correct and retry.
        """
        if self.context.is_submitting:
            logger.debug("Submit ignored: submission already in flight")
            return OperationResult.fail(tr("submit.already_in_progress"))

        self._set_submitting(True)
        try:
            try:
                payload = self.submission_service.build_payload(self.context)
            except SubmissionPreconditionError as e:
                self._emit_error("submit", e.message)
                return OperationResult.fail(e.message, errors=[e.field] if e.field else [])

            try:
                batch = self.submission_service.submit(payload)
            except ApiException as e:
                message, description = map_api_error(e)
                self._emit_error("submit", message, description)
                return OperationResult.fail(message, description)
            except NetworkException as e:
                message = map_network_error(e)
                self._emit_error("submit", message)
                return OperationResult.fail(message)

            self._notify(NoticeLevel.SUCCESS, tr("submit.success"))
            self.event_bus.notify_processing_batches_changed()
            self.context.reset_form()
            self.step_changed.emit(self.context.active_step.value)
            self.batch_created.emit(batch)
            self.navigate_requested.emit(Pages.PROCESSING_BATCHES)
            return OperationResult.ok(batch, tr("submit.success"))
        finally:
            self._set_submitting(False)
