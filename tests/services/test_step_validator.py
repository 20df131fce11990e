# -*- coding: utf-8 -*-
"""
Tests for StepValidator.

Tests cover:
- Criteria step (crop / lot number)
- First stage (P1) step
- First error message selection
"""

from datetime import date

import pytest

from services.wizard.step_validator import StepValidator, ROOT_ERROR_KEY
from ui.wizards.framework.step_form import FieldError, StepForm


class TestCriteriaValidation:
    """Test the criteria step rules."""

    def test_crop_only_is_valid(self):
        assert StepValidator.validate_criteria({"crop": "Coffee", "lotNo": None}) == {}

    def test_lot_only_is_valid(self):
        assert StepValidator.validate_criteria({"crop": None, "lotNo": 7}) == {}

    def test_both_blank_is_a_root_error(self):
        errors = StepValidator.validate_criteria({"crop": "  ", "lotNo": None})

        assert list(errors) == [ROOT_ERROR_KEY]
        assert errors[ROOT_ERROR_KEY].ref is None
        assert errors[ROOT_ERROR_KEY].message == "Please select a Crop or enter a Lot No."

    @pytest.mark.parametrize("lot_no", ["abc", 0, -4, 2.5, True])
    def test_bad_lot_number(self, lot_no):
        errors = StepValidator.validate_criteria({"crop": "Coffee", "lotNo": lot_no})

        assert errors["lotNo"].ref == "lotNo"
        assert errors["lotNo"].message == "Lot No must be a positive whole number."

    def test_non_text_crop(self):
        errors = StepValidator.validate_criteria({"crop": 12, "lotNo": 1})

        assert errors["crop"].ref == "crop"


class TestFirstStageValidation:
    """Test the P1 rules."""

    def test_complete_values(self, first_stage_values):
        assert StepValidator.validate_first_stage(first_stage_values) == {}

    def test_everything_missing(self):
        errors = StepValidator.validate_first_stage({})

        assert set(errors) == {"processMethod", "dateOfProcessing", "doneBy"}
        assert all(error.ref for error in errors.values())

    def test_unparseable_date(self, first_stage_values):
        values = dict(first_stage_values, dateOfProcessing="not-a-date")

        errors = StepValidator.validate_first_stage(values)

        assert errors["dateOfProcessing"].message == "Date of processing is not a valid date."

    def test_iso_string_date_accepted(self, first_stage_values):
        values = dict(first_stage_values, dateOfProcessing="2024-03-01")

        assert StepValidator.validate_first_stage(values) == {}


class TestFirstErrorMessage:
    """Test which message is surfaced for a failed step."""

    def test_crop_wins_over_lot(self):
        errors = {
            "lotNo": FieldError("lot message", ref="lotNo"),
            "crop": FieldError("crop message", ref="crop"),
        }
        assert StepValidator.first_error_message(errors) == "crop message"

    def test_lot_before_other_entries(self):
        errors = {
            ROOT_ERROR_KEY: FieldError("root message"),
            "lotNo": FieldError("lot message", ref="lotNo"),
        }
        assert StepValidator.first_error_message(errors) == "lot message"

    def test_ref_bound_entries_are_skipped(self):
        errors = {
            "doneBy": FieldError("bound", ref="doneBy"),
            ROOT_ERROR_KEY: FieldError("unbound"),
        }
        assert StepValidator.first_error_message(errors) == "unbound"

    def test_no_usable_message(self):
        errors = {
            "doneBy": FieldError("bound", ref="doneBy"),
            "other": FieldError(None),
        }
        assert StepValidator.first_error_message(errors) is None
        assert StepValidator.first_error_message({}) is None


class TestStepForm:
    """Test the form value holder."""

    def test_trigger_sets_errors(self):
        form = StepForm(StepValidator.validate_criteria, defaults={"crop": None, "lotNo": None})

        assert form.trigger() is False
        assert ROOT_ERROR_KEY in form.errors

        form.set_value("crop", "Cocoa")
        assert form.trigger() is True
        assert form.is_valid

    def test_reset_restores_defaults(self):
        form = StepForm(StepValidator.validate_first_stage, defaults={"doneBy": None})
        form.set_values({"doneBy": "Kiran", "processMethod": "dry"})
        form.trigger()

        form.reset()

        assert form.get_values() == {"doneBy": None}
        assert form.errors == {}

    def test_get_values_is_a_copy(self):
        form = StepForm(StepValidator.validate_first_stage)
        form.set_value("dateOfProcessing", date(2024, 1, 1))

        values = form.get_values()
        values["dateOfProcessing"] = None

        assert form.get_value("dateOfProcessing") == date(2024, 1, 1)
