# -*- coding: utf-8 -*-
"""
Step validation service for the Processing Batch Wizard.

Validates step form values without UI coupling and picks the message
shown to the user when a step's gate fails.
"""

from typing import Any, Dict, Optional

from services.translation_manager import tr
from ui.wizards.framework.step_form import FieldError, FieldErrors
from utils.datetime_utils import parse_date_value, InvalidDateError

# Key used for cross-field errors that are not bound to a single input
ROOT_ERROR_KEY = "root"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_lot_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class StepValidator:
    """Validates processing batch wizard step values."""

    @staticmethod
    def validate_criteria(values: Dict[str, Any]) -> FieldErrors:
        """
        Validate the criteria step.

        Crop is optional text, lot number an optional positive integer;
        at least one of the two must be given.
        """
        errors: FieldErrors = {}
        crop = values.get("crop")
        lot_no = values.get("lotNo")

        if not _is_blank(crop) and not isinstance(crop, str):
            errors["crop"] = FieldError(tr("validation.criteria.crop_invalid"), ref="crop")

        if not _is_blank(lot_no) and not _is_lot_number(lot_no):
            errors["lotNo"] = FieldError(tr("validation.criteria.lot_no_invalid"), ref="lotNo")

        if _is_blank(crop) and _is_blank(lot_no):
            errors[ROOT_ERROR_KEY] = FieldError(tr("validation.criteria.required"))

        return errors

    @staticmethod
    def validate_first_stage(values: Dict[str, Any]) -> FieldErrors:
        """Validate the first stage (P1) step: all three fields are required."""
        errors: FieldErrors = {}

        if _is_blank(values.get("processMethod")):
            errors["processMethod"] = FieldError(
                tr("validation.first_stage.process_method_required"), ref="processMethod"
            )

        when = values.get("dateOfProcessing")
        if _is_blank(when):
            errors["dateOfProcessing"] = FieldError(
                tr("validation.first_stage.date_required"), ref="dateOfProcessing"
            )
        else:
            try:
                parse_date_value(when)
            except InvalidDateError:
                errors["dateOfProcessing"] = FieldError(
                    tr("validation.first_stage.date_invalid"), ref="dateOfProcessing"
                )

        if _is_blank(values.get("doneBy")):
            errors["doneBy"] = FieldError(
                tr("validation.first_stage.done_by_required"), ref="doneBy"
            )

        return errors

    @staticmethod
    def first_error_message(errors: FieldErrors) -> Optional[str]:
        """
        Pick the message to show for a failed step.

        crop first, then lotNo, then the first other error that has a
        message and is not bound to an input.
        """
        for key in ("crop", "lotNo"):
            error = errors.get(key)
            if error is not None and isinstance(error.message, str):
                return error.message

        for error in errors.values():
            if error is not None and isinstance(error.message, str) and not error.ref:
                return error.message

        return None
