# -*- coding: utf-8 -*-
"""
Processing Batch Wizard.

Multi-step wizard that creates a processing batch and starts its first
stage.

Steps:
1. Select Criteria - crop and/or lot number
2. Select Procurements - records that form the batch (locks its identity)
3. First Stage Details - P1 method, date and operator
4. Review & Submit - summary and creation request
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.processing_batch_wizard_controller import ProcessingBatchWizardController
from services.api_client import ProcessingApiClient, get_api_client
from services.batch_submission_service import BatchSubmissionService
from services.event_bus import DataEventBus
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.processing_batch.batch_context import ProcessingBatchContext, WizardStep
from ui.wizards.processing_batch.steps import (
    SelectCriteriaStep,
    SelectProcurementsStep,
    FirstStageDetailsStep,
    ReviewSubmitStep,
)
from ui.wizards.processing_batch.steps.select_procurements_step import ProcurementLoader
from utils.logger import get_logger

logger = get_logger(__name__)


class ProcessingBatchWizard(BaseWizard):
    """
    Add New Processing Batch wizard.

    The context is the session's state store; the controller gates
    navigation and submits. Steps only read the context and write their
    own forms (plus the procurement selection commit).
    """

    navigate_requested = pyqtSignal(str)

    def __init__(
        self,
        api_client: Optional[ProcessingApiClient] = None,
        event_bus: Optional[DataEventBus] = None,
        procurement_loader: Optional[ProcurementLoader] = None,
        reset_on_close: Optional[bool] = None,
        confirm_cancel: bool = True,
        parent=None
    ):
        self._api_client = api_client
        self._procurement_loader = procurement_loader
        self.reset_on_close = Config.RESET_WIZARD_ON_CLOSE if reset_on_close is None else reset_on_close
        self.confirm_cancel = confirm_cancel
        super().__init__(parent)

        self.controller = ProcessingBatchWizardController(
            self.context,
            submission_service=BatchSubmissionService(self._api_client),
            event_bus=event_bus,
            parent=self
        )
        self.controller.notice.connect(self._on_notice)
        self.controller.step_changed.connect(lambda _: self.refresh_view())
        self.controller.submitting_changed.connect(lambda _: self.refresh_view())
        self.controller.batch_created.connect(self._on_batch_created)
        self.controller.navigate_requested.connect(self.navigate_requested.emit)

        self.setWindowTitle(self.get_wizard_title())
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.refresh_view()

    @property
    def api_client(self) -> ProcessingApiClient:
        if self._api_client is None:
            self._api_client = get_api_client()
        return self._api_client

    def _load_procurements(self, crop, lot_no):
        if self._procurement_loader is not None:
            return self._procurement_loader(crop, lot_no)
        return self.api_client.get_eligible_procurements(crop, lot_no)

    # =========================================================================
    # BaseWizard hooks
    # =========================================================================

    def create_context(self) -> ProcessingBatchContext:
        return ProcessingBatchContext()

    def create_steps(self) -> List[BaseStep]:
        return [
            SelectCriteriaStep(self.context, self),
            SelectProcurementsStep(self.context, self._load_procurements, self),
            FirstStageDetailsStep(self.context, self),
            ReviewSubmitStep(self.context, self),
        ]

    def current_step_index(self) -> int:
        return self.context.step_index()

    def get_progress(self) -> int:
        return self.context.progress_percentage()

    def get_step_title(self) -> str:
        return self.context.step_title()

    def get_submit_button_text(self) -> str:
        return tr("button.submit_batch")

    def is_busy(self) -> bool:
        return self.context.is_submitting

    def on_next(self):
        step = self.current_step()
        self.controller.handle_next(step.form if step is not None else None)

    def on_previous(self):
        self.controller.handle_previous()

    def on_cancel(self) -> bool:
        if self.is_busy():
            return False
        has_progress = (
            self.context.active_step != WizardStep.SELECT_CRITERIA
            or bool(self.context.selected_procurement_ids)
        )
        if has_progress and self.confirm_cancel:
            if not ErrorHandler.confirm(self, tr("wizard.confirm_cancel")):
                return False
        self._reset_session()
        return True

    # =========================================================================
    # Event handlers
    # =========================================================================

    def _on_notice(self, level: str, message: str, description: str):
        ErrorHandler.show_notice(self, level, message, description)

    def _on_batch_created(self, batch):
        for step in self.steps:
            step.reset()
        self.refresh_view()
        self.wizard_completed.emit(batch)

    def _reset_session(self):
        self.controller.cancel()
        for step in self.steps:
            step.reset()
        self.refresh_view()

    def closeEvent(self, event):
        if self.reset_on_close and not self.is_busy():
            logger.debug("Resetting wizard on close")
            self._reset_session()
        super().closeEvent(event)
