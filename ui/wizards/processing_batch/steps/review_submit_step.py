# -*- coding: utf-8 -*-
"""
Review & Submit Step - Step 4 of the Processing Batch Wizard.

Read-only summary of the locked batch identity, the chosen procurements
and the P1 details. The wizard's Next button becomes the submit action.
"""

from PyQt5.QtWidgets import QFormLayout, QFrame, QLabel

from services.translation_manager import tr
from ui.wizards.framework import BaseStep
from ui.wizards.processing_batch.batch_context import ProcessingBatchContext
from utils.datetime_utils import format_display_date

SUMMARY_ROWS = [
    ("crop", "review.crop"),
    ("lot_no", "review.lot_no"),
    ("procured_form", "review.procured_form"),
    ("procurements", "review.procurements"),
    ("process_method", "review.process_method"),
    ("date_of_processing", "review.date_of_processing"),
    ("done_by", "review.done_by"),
]


class ReviewSubmitStep(BaseStep):
    """Step 4: Review & Submit."""

    def __init__(self, context: ProcessingBatchContext, parent=None):
        super().__init__(context, parent)
        self.value_labels = {}

    def get_step_title(self) -> str:
        return tr("wizard.step.review")

    def setup_ui(self):
        self.add_heading(self.get_step_title())

        card = QFrame()
        card.setStyleSheet("QFrame { background: #ffffff; border: 1px solid #dee2e6; border-radius: 6px; }")
        form_layout = QFormLayout(card)
        form_layout.setContentsMargins(16, 16, 16, 16)
        form_layout.setSpacing(10)

        for key, label_key in SUMMARY_ROWS:
            value_label = QLabel("-")
            value_label.setWordWrap(True)
            self.value_labels[key] = value_label
            form_layout.addRow(tr(label_key), value_label)

        self.main_layout.addWidget(card)
        self.main_layout.addStretch()

    def summary_values(self) -> dict:
        """Display strings for each summary row."""
        summary = self.context.get_summary()
        details = summary["first_stage_details"]
        ids = ", ".join(str(pid) for pid in summary["procurement_ids"])

        def show(value):
            return "-" if value in (None, "") else str(value)

        return {
            "crop": show(summary["crop"]),
            "lot_no": show(summary["lot_no"]),
            "procured_form": show(summary["procured_form"]),
            "procurements": f"{summary['procurements_count']} ({ids})" if ids else "0",
            "process_method": show(details["processMethod"]),
            "date_of_processing": format_display_date(self.context.first_stage_details.date_of_processing),
            "done_by": show(details["doneBy"]),
        }

    def populate_data(self):
        for key, text in self.summary_values().items():
            self.value_labels[key].setText(text)
