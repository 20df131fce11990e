# -*- coding: utf-8 -*-
"""
Select Criteria Step - Step 1 of the Processing Batch Wizard.

The user narrows the procurement list by crop and/or lot number.
"""

from typing import Any, Optional

from PyQt5.QtWidgets import QComboBox, QFormLayout, QLineEdit

from app.config import Vocabularies
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep, StepForm
from ui.wizards.processing_batch.batch_context import ProcessingBatchContext


def _parse_lot_no(text: str) -> Any:
    """Digits become an int; anything else is passed on for validation."""
    text = text.strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    return text


class SelectCriteriaStep(BaseStep):
    """Step 1: crop / lot number criteria."""

    def __init__(self, context: ProcessingBatchContext, parent=None):
        super().__init__(context, parent)

    def create_form(self) -> Optional[StepForm]:
        return StepForm(StepValidator.validate_criteria, defaults={"crop": None, "lotNo": None})

    def get_step_title(self) -> str:
        return tr("wizard.step.select_criteria")

    def setup_ui(self):
        self.add_heading(self.get_step_title())

        form_layout = QFormLayout()
        form_layout.setSpacing(12)

        self.crop_combo = QComboBox()
        self.crop_combo.setEditable(True)
        self.crop_combo.addItem("")
        self.crop_combo.addItems(Vocabularies.CROPS)
        self.crop_combo.lineEdit().setPlaceholderText(tr("criteria.any_crop"))
        self.crop_combo.currentTextChanged.connect(lambda _: self.collect_data())
        form_layout.addRow(tr("criteria.crop"), self.crop_combo)

        self.lot_no_input = QLineEdit()
        self.lot_no_input.textChanged.connect(lambda _: self.collect_data())
        form_layout.addRow(tr("criteria.lot_no"), self.lot_no_input)

        self.main_layout.addLayout(form_layout)
        self.main_layout.addStretch()

    def collect_data(self):
        if not self._is_initialized:
            return
        self.form.set_values({
            "crop": self.crop_combo.currentText().strip() or None,
            "lotNo": _parse_lot_no(self.lot_no_input.text()),
        })
        self.emit_data_changed()

    def populate_data(self):
        criteria = self.context.initial_criteria
        crop = criteria.crop if criteria else self.form.get_value("crop")
        lot_no = criteria.lot_no if criteria else self.form.get_value("lotNo")

        self.crop_combo.blockSignals(True)
        self.lot_no_input.blockSignals(True)
        self.crop_combo.setEditText(crop or "")
        self.lot_no_input.setText("" if lot_no is None else str(lot_no))
        self.crop_combo.blockSignals(False)
        self.lot_no_input.blockSignals(False)
        self.collect_data()
