# -*- coding: utf-8 -*-
"""
Select Procurements Step - Step 2 of the Processing Batch Wizard.

Lists the procurements matching the chosen criteria. Every change of the
checked rows is committed to the context, which derives the locked batch
identity (crop, lot, procured form) from the selection.
"""

from typing import Callable, List, Optional

from PyQt5.QtWidgets import QHeaderView, QLabel, QTableWidget, QTableWidgetItem
from PyQt5.QtCore import Qt

from models.processing_batch import Procurement
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep
from ui.wizards.processing_batch.batch_context import ProcessingBatchContext
from utils.datetime_utils import format_display_date
from utils.logger import get_logger

logger = get_logger(__name__)

ProcurementLoader = Callable[[Optional[str], Optional[int]], List[Procurement]]

COLUMNS = ["", "ID", "Crop", "Lot No", "Procured Form", "Quantity", "Farmer", "Date"]


class SelectProcurementsStep(BaseStep):
    """Step 2: choose the procurements that form the batch."""

    def __init__(self, context: ProcessingBatchContext, loader: ProcurementLoader, parent=None):
        self._loader = loader
        self.procurements: List[Procurement] = []
        self._loaded_for = None
        super().__init__(context, parent)

    def get_step_title(self) -> str:
        return tr("wizard.step.select_procurements")

    def setup_ui(self):
        self.add_heading(self.get_step_title())

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.itemChanged.connect(self._on_item_changed)
        self.main_layout.addWidget(self.table, 1)

        self.empty_label = QLabel(tr("procurements.empty"))
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.hide()
        self.main_layout.addWidget(self.empty_label)

        self.selection_label = QLabel()
        self.main_layout.addWidget(self.selection_label)

    def populate_data(self):
        criteria = self.context.initial_criteria
        key = (criteria.crop, criteria.lot_no) if criteria else (None, None)
        if key != self._loaded_for:
            self.load_procurements(*key)
        self._render()

    def load_procurements(self, crop: Optional[str], lot_no: Optional[int]):
        """Fetch procurements for the criteria through the injected loader."""
        try:
            self.procurements = list(self._loader(crop, lot_no))
            self._loaded_for = (crop, lot_no)
        except (ApiException, NetworkException) as e:
            self.procurements = []
            self._loaded_for = None
            ErrorHandler.handle(e, self, context="procurements")

        # Drop selections that are no longer listed
        listed = {p.id for p in self.procurements}
        if any(pid not in listed for pid in self.context.selected_procurement_ids):
            self._commit([p for p in self.procurements if p.id in self.context.selected_procurement_ids])

        logger.debug(f"Loaded {len(self.procurements)} procurement(s) for crop={crop} lot={lot_no}")

    def _render(self):
        selected = set(self.context.selected_procurement_ids)
        self.table.blockSignals(True)
        self.table.setRowCount(len(self.procurements))
        for row, procurement in enumerate(self.procurements):
            check = QTableWidgetItem()
            check.setFlags(Qt.ItemIsUserCheckable | Qt.ItemIsEnabled)
            check.setCheckState(Qt.Checked if procurement.id in selected else Qt.Unchecked)
            check.setData(Qt.UserRole, procurement.id)
            self.table.setItem(row, 0, check)

            values = [
                procurement.id,
                procurement.crop or "-",
                "-" if procurement.lot_no is None else procurement.lot_no,
                procurement.procured_form or "-",
                "-" if procurement.quantity is None else procurement.quantity,
                procurement.farmer_name or "-",
                format_display_date(procurement.date),
            ]
            for col, value in enumerate(values, start=1):
                self.table.setItem(row, col, QTableWidgetItem(str(value)))
        self.table.blockSignals(False)

        self.empty_label.setVisible(not self.procurements)
        self._update_selection_label()

    def _on_item_changed(self, item: QTableWidgetItem):
        if item.column() != 0:
            return
        self._commit(self.checked_procurements())
        self._update_selection_label()

    def checked_procurements(self) -> List[Procurement]:
        checked = []
        for row, procurement in enumerate(self.procurements):
            item = self.table.item(row, 0)
            if item is not None and item.checkState() == Qt.Checked:
                checked.append(procurement)
        return checked

    def set_checked(self, procurement_id, checked: bool = True):
        """Check or uncheck the row of a procurement."""
        for row, procurement in enumerate(self.procurements):
            if procurement.id == procurement_id:
                self.table.item(row, 0).setCheckState(Qt.Checked if checked else Qt.Unchecked)
                return

    def _commit(self, procurements: List[Procurement]):
        self.context.commit_procurement_selection(procurements)

    def _update_selection_label(self):
        ctx = self.context
        text = tr("procurements.selected_count", count=len(ctx.selected_procurement_ids))
        if ctx.is_ready_for_submission():
            text += f"  |  {ctx.locked_crop} / {ctx.locked_lot_no} / {ctx.locked_procured_form}"
        elif ctx.has_mixed_selection():
            text += f"  |  {tr('procurements.mixed_identity')}"
        self.selection_label.setText(text)

    def reset(self):
        self._loaded_for = None
        self.procurements = []
        if self._is_initialized:
            self._render()
