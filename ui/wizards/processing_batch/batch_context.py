# -*- coding: utf-8 -*-
"""
Processing Batch Context - State store for the batch creation wizard.

Single source of truth for one batch-creation session:
- Active step (strict linear order, no guards here)
- Initial criteria, selected procurements, first stage (P1) details
- Locked batch identity derived from the selected procurements
- Submission flag

Transitions are plain state changes. Gating a forward move on validation
is the job of ProcessingBatchWizardController.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from models.processing_batch import FirstStageDetails, InitialCriteria, Procurement
from services.translation_manager import tr
from ui.wizards.framework.wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardStep(str, Enum):
    """Wizard steps in their fixed order."""
    SELECT_CRITERIA = "selectCriteria"
    SELECT_PROCUREMENTS = "selectProcurements"
    FIRST_STAGE_DETAILS = "firstStageDetails"
    REVIEW = "review"


STEP_ORDER: List[WizardStep] = [
    WizardStep.SELECT_CRITERIA,
    WizardStep.SELECT_PROCUREMENTS,
    WizardStep.FIRST_STAGE_DETAILS,
    WizardStep.REVIEW,
]

# (translation key, progress %)
STEP_CONFIG = {
    WizardStep.SELECT_CRITERIA: ("wizard.step.select_criteria", 25),
    WizardStep.SELECT_PROCUREMENTS: ("wizard.step.select_procurements", 50),
    WizardStep.FIRST_STAGE_DETAILS: ("wizard.step.first_stage_details", 75),
    WizardStep.REVIEW: ("wizard.step.review", 100),
}


class ProcessingBatchContext(WizardContext):
    """State for one processing batch creation session."""

    def __init__(self):
        super().__init__()
        self.reset_form()

    def _get_reference_prefix(self) -> str:
        return "PBW"

    # =========================================================================
    # Transitions
    # =========================================================================

    def step_index(self) -> int:
        return STEP_ORDER.index(self.active_step)

    def go_to_next_step(self):
        """Advance to the next step. The last step stays put."""
        index = self.step_index()
        if index < len(STEP_ORDER) - 1:
            old_step = self.active_step
            self.active_step = STEP_ORDER[index + 1]
            self.touch()
            logger.debug(f"Step {old_step.value} -> {self.active_step.value}")

    def go_to_previous_tab(self):
        """Move back one step. Always allowed; the first step stays put."""
        index = self.step_index()
        if index > 0:
            old_step = self.active_step
            self.active_step = STEP_ORDER[index - 1]
            self.touch()
            logger.debug(f"Step {old_step.value} <- {self.active_step.value}")

    # =========================================================================
    # Field setters
    # =========================================================================

    def set_initial_criteria(self, criteria: InitialCriteria):
        self.initial_criteria = InitialCriteria(crop=criteria.crop, lot_no=criteria.lot_no)
        self.touch()

    def set_first_stage_details(self, details: FirstStageDetails):
        self.first_stage_details = FirstStageDetails(
            process_method=details.process_method,
            date_of_processing=details.date_of_processing,
            done_by=details.done_by,
        )
        self.touch()

    def set_is_submitting(self, value: bool):
        self.is_submitting = bool(value)

    def commit_procurement_selection(self, procurements: Sequence[Procurement]):
        """
        Record the chosen procurements and derive the locked batch identity.

        The locked crop / lot / procured form are only set when every chosen
        record agrees on all three; otherwise they are cleared. This is the
        only writer of the locked fields.
        """
        ids: List[Union[int, str]] = []
        for procurement in procurements:
            if procurement.id not in ids:
                ids.append(procurement.id)
        self.selected_procurement_ids = ids

        identities = {p.identity for p in procurements}
        if len(identities) == 1:
            crop, lot_no, procured_form = identities.pop()
            self.locked_crop = crop or None
            self.locked_lot_no = lot_no
            self.locked_procured_form = procured_form or None
        else:
            self.locked_crop = None
            self.locked_lot_no = None
            self.locked_procured_form = None

        self.touch()
        logger.debug(
            f"Selection committed: {len(ids)} procurement(s), locked="
            f"({self.locked_crop}, {self.locked_lot_no}, {self.locked_procured_form})"
        )

    def reset_form(self):
        """Return every field to its initial empty value."""
        self.active_step: WizardStep = WizardStep.SELECT_CRITERIA
        self.initial_criteria: Optional[InitialCriteria] = None
        self.selected_procurement_ids: List[Union[int, str]] = []
        self.first_stage_details: FirstStageDetails = FirstStageDetails()
        self.locked_crop: Optional[str] = None
        self.locked_lot_no: Optional[int] = None
        self.locked_procured_form: Optional[str] = None
        self.is_submitting: bool = False
        self.touch()

    def reset(self):
        self.reset_form()

    # =========================================================================
    # Queries
    # =========================================================================

    def has_mixed_selection(self) -> bool:
        """True when procurements are chosen but no identity could be locked."""
        return bool(self.selected_procurement_ids) and not self.is_ready_for_submission()

    def is_ready_for_submission(self) -> bool:
        """All three locked identity fields are determined."""
        return (
            bool(self.locked_crop)
            and isinstance(self.locked_lot_no, int)
            and bool(self.locked_procured_form)
        )

    def step_title(self) -> str:
        return tr(STEP_CONFIG[self.active_step][0])

    def progress_percentage(self) -> int:
        return STEP_CONFIG[self.active_step][1]

    def state_snapshot(self) -> Dict[str, Any]:
        """Session data without identity or timestamps, for comparisons."""
        return {
            "active_step": self.active_step.value,
            "initial_criteria": self.initial_criteria.to_dict() if self.initial_criteria else None,
            "selected_procurement_ids": list(self.selected_procurement_ids),
            "first_stage_details": self.first_stage_details.to_dict(),
            "locked_crop": self.locked_crop,
            "locked_lot_no": self.locked_lot_no,
            "locked_procured_form": self.locked_procured_form,
            "is_submitting": self.is_submitting,
        }

    def get_summary(self) -> Dict[str, Any]:
        """Summary of the session for the review step."""
        return {
            "reference_number": self.reference_number,
            "criteria": self.initial_criteria.to_dict() if self.initial_criteria else None,
            "crop": self.locked_crop,
            "lot_no": self.locked_lot_no,
            "procured_form": self.locked_procured_form,
            "procurement_ids": list(self.selected_procurement_ids),
            "procurements_count": len(self.selected_procurement_ids),
            "first_stage_details": self.first_stage_details.to_dict(),
        }
