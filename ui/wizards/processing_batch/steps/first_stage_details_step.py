# -*- coding: utf-8 -*-
"""
First Stage Details Step - Step 3 of the Processing Batch Wizard.

Captures the first processing stage (P1): method, date and operator.
"""

from datetime import date
from typing import Optional

from PyQt5.QtWidgets import QComboBox, QDateEdit, QFormLayout, QLineEdit
from PyQt5.QtCore import QDate

from app.config import Vocabularies
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep, StepForm
from ui.wizards.processing_batch.batch_context import ProcessingBatchContext
from utils.datetime_utils import parse_date_value, InvalidDateError


class FirstStageDetailsStep(BaseStep):
    """Step 3: first stage (P1) details."""

    def __init__(self, context: ProcessingBatchContext, parent=None):
        super().__init__(context, parent)

    def create_form(self) -> Optional[StepForm]:
        return StepForm(
            StepValidator.validate_first_stage,
            defaults={"processMethod": None, "dateOfProcessing": None, "doneBy": None},
        )

    def get_step_title(self) -> str:
        return tr("wizard.step.first_stage_details")

    def setup_ui(self):
        self.add_heading(self.get_step_title())

        form_layout = QFormLayout()
        form_layout.setSpacing(12)

        self.method_combo = QComboBox()
        self.method_combo.addItem("", None)
        for value, label in Vocabularies.PROCESS_METHODS:
            self.method_combo.addItem(label, value)
        self.method_combo.currentIndexChanged.connect(lambda _: self.collect_data())
        form_layout.addRow(tr("first_stage.process_method"), self.method_combo)

        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("dd/MM/yyyy")
        self.date_edit.setDate(QDate.currentDate())
        self.date_edit.dateChanged.connect(lambda _: self.collect_data())
        form_layout.addRow(tr("first_stage.date_of_processing"), self.date_edit)

        self.done_by_input = QLineEdit()
        self.done_by_input.textChanged.connect(lambda _: self.collect_data())
        form_layout.addRow(tr("first_stage.done_by"), self.done_by_input)

        self.main_layout.addLayout(form_layout)
        self.main_layout.addStretch()

    def collect_data(self):
        if not self._is_initialized:
            return
        self.form.set_values({
            "processMethod": self.method_combo.currentData(),
            "dateOfProcessing": self.date_edit.date().toPyDate(),
            "doneBy": self.done_by_input.text().strip() or None,
        })
        self.emit_data_changed()

    def populate_data(self):
        details = self.context.first_stage_details

        self.method_combo.blockSignals(True)
        index = self.method_combo.findData(details.process_method)
        self.method_combo.setCurrentIndex(index if index >= 0 else 0)
        self.method_combo.blockSignals(False)

        try:
            parsed = parse_date_value(details.date_of_processing)
        except InvalidDateError:
            parsed = None
        when: Optional[date] = parsed.date() if parsed else None
        self.date_edit.blockSignals(True)
        self.date_edit.setDate(QDate(when.year, when.month, when.day) if when else QDate.currentDate())
        self.date_edit.blockSignals(False)

        self.done_by_input.blockSignals(True)
        self.done_by_input.setText(details.done_by or "")
        self.done_by_input.blockSignals(False)

        self.collect_data()
