# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.previous": "Previous",
    "button.next": "Next",
    "button.cancel": "Cancel",
    "button.submit_batch": "Create Batch & Start P1",
    "button.submitting": "Submitting...",

    # Wizard
    "wizard.title": "Add New Processing Batch",
    "wizard.step_label": "Step: {title}",
    "wizard.step.select_criteria": "Select Criteria",
    "wizard.step.select_procurements": "Select Procurements",
    "wizard.step.first_stage_details": "First Stage Details (P1)",
    "wizard.step.review": "Review & Submit",
    "wizard.confirm_cancel": "Discard this batch and close the wizard?",

    # Step: criteria
    "criteria.crop": "Crop",
    "criteria.lot_no": "Lot No",
    "criteria.any_crop": "Any crop",
    "validation.criteria.invalid": "Please provide valid criteria (at least Crop or Lot No).",
    "validation.criteria.required": "Please select a Crop or enter a Lot No.",
    "validation.criteria.crop_invalid": "Crop must be text.",
    "validation.criteria.lot_no_invalid": "Lot No must be a positive whole number.",

    # Step: procurements
    "procurements.empty": "No procurements match the selected criteria.",
    "procurements.load_failed": "Failed to load procurements.",
    "procurements.selected_count": "{count} selected",
    "procurements.mixed_identity": "Selected procurements differ in crop, lot or procured form.",
    "validation.procurements.required": "Please select at least one procurement to form the batch.",

    # Step: first stage
    "first_stage.process_method": "Process Method",
    "first_stage.date_of_processing": "Date of Processing",
    "first_stage.done_by": "Done By",
    "validation.first_stage.incomplete": "Please fill in all required P1 details.",
    "validation.first_stage.process_method_required": "Process method is required.",
    "validation.first_stage.date_required": "Date of processing is required.",
    "validation.first_stage.date_invalid": "Date of processing is not a valid date.",
    "validation.first_stage.done_by_required": "Done by is required.",

    # Step: review
    "review.crop": "Crop",
    "review.lot_no": "Lot No",
    "review.procured_form": "Procured Form",
    "review.procurements": "Procurements",
    "review.process_method": "Process Method",
    "review.date_of_processing": "Date of Processing",
    "review.done_by": "Done By",

    # Submission
    "submit.date_missing": "P1 Date of Processing is missing or invalid.",
    "submit.date_invalid": "Invalid date format: {reason}",
    "submit.process_method_missing": "P1 Process Method is missing.",
    "submit.done_by_missing": "P1 Done By is missing.",
    "submit.criteria_incomplete": "Batch criteria (Crop, Lot No, Procured Form) are not fully determined. Please select procurements.",
    "submit.success": "Processing Batch created successfully!",
    "submit.failed": "Failed to create processing batch",
    "submit.client_error": "Client-side error: {reason}",
    "submit.unknown_error": "Something went wrong",
    "submit.already_in_progress": "A submission is already in progress.",

    # Sales
    "error.sales.load_failed": "Failed to fetch sales list",

    # API
    "error.api.connection": "Could not reach the server. Please check your connection.",
    "error.api.timeout": "The server took too long to respond.",
    "error.api.invalid_response": "The server returned an unreadable response.",
}
