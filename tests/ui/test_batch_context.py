# -*- coding: utf-8 -*-
"""
Tests for ProcessingBatchContext.

Tests cover:
- Step transitions
- Procurement selection commit and the locked batch identity
- Reset
- Serialization
"""

from datetime import date

import pytest

from models.processing_batch import FirstStageDetails, InitialCriteria, Procurement
from ui.wizards.processing_batch.batch_context import (
    ProcessingBatchContext, WizardStep, STEP_ORDER
)


@pytest.fixture
def context():
    return ProcessingBatchContext()


class TestTransitions:
    """Test the linear step order."""

    def test_starts_at_criteria(self, context):
        assert context.active_step == WizardStep.SELECT_CRITERIA
        assert context.step_index() == 0
        assert context.progress_percentage() == 25
        assert context.step_title() == "Select Criteria"

    def test_next_walks_the_order_and_stops_at_review(self, context):
        visited = [context.active_step]
        for _ in range(5):
            context.go_to_next_step()
            visited.append(context.active_step)

        assert visited[:4] == STEP_ORDER
        assert visited[4:] == [WizardStep.REVIEW, WizardStep.REVIEW]
        assert context.progress_percentage() == 100

    def test_next_has_no_guard(self, context):
        context.go_to_next_step()
        context.go_to_next_step()

        assert context.active_step == WizardStep.FIRST_STAGE_DETAILS
        assert context.selected_procurement_ids == []

    @pytest.mark.parametrize("steps_forward", [1, 2, 3])
    def test_previous_from_any_later_step(self, context, steps_forward):
        for _ in range(steps_forward):
            context.go_to_next_step()

        context.go_to_previous_tab()

        assert context.step_index() == steps_forward - 1

    def test_previous_at_first_step_stays(self, context):
        context.go_to_previous_tab()

        assert context.active_step == WizardStep.SELECT_CRITERIA


class TestProcurementSelection:
    """Test the selection commit."""

    def test_unanimous_selection_locks_identity(self, context, coffee_procurements):
        context.commit_procurement_selection(coffee_procurements[:2])

        assert context.selected_procurement_ids == [11, 12]
        assert (context.locked_crop, context.locked_lot_no, context.locked_procured_form) == ("Coffee", 7, "cherry")
        assert context.is_ready_for_submission()
        assert not context.has_mixed_selection()

    def test_mixed_selection_clears_identity(self, context, coffee_procurements, mixed_procurements):
        context.commit_procurement_selection(coffee_procurements)
        context.commit_procurement_selection(mixed_procurements)

        assert context.selected_procurement_ids == [21, 22]
        assert context.locked_crop is None
        assert context.locked_lot_no is None
        assert context.locked_procured_form is None
        assert context.has_mixed_selection()

    def test_empty_selection_clears_identity(self, context, coffee_procurements):
        context.commit_procurement_selection(coffee_procurements)
        context.commit_procurement_selection([])

        assert context.selected_procurement_ids == []
        assert context.locked_crop is None
        assert not context.is_ready_for_submission()
        assert not context.has_mixed_selection()

    def test_duplicates_are_dropped_in_order(self, context, coffee_procurements):
        first, second, _ = coffee_procurements
        context.commit_procurement_selection([second, first, second])

        assert context.selected_procurement_ids == [12, 11]

    def test_missing_lot_number_is_not_ready(self, context):
        context.commit_procurement_selection([Procurement(id=1, crop="Cocoa", lot_no=None, procured_form="beans")])

        assert context.locked_crop == "Cocoa"
        assert not context.is_ready_for_submission()


class TestSetters:

    def test_last_write_wins(self, context):
        context.set_initial_criteria(InitialCriteria(crop="Coffee"))
        context.set_initial_criteria(InitialCriteria(lot_no=4))

        assert context.initial_criteria == InitialCriteria(crop=None, lot_no=4)

    def test_details_are_copied(self, context):
        details = FirstStageDetails("dry", date(2024, 3, 1), "Kiran")
        context.set_first_stage_details(details)
        details.done_by = "Someone else"

        assert context.first_stage_details.done_by == "Kiran"


class TestReset:

    def test_reset_form_restores_initial_values(self, context, coffee_procurements):
        fresh = ProcessingBatchContext().state_snapshot()

        context.set_initial_criteria(InitialCriteria(crop="Coffee", lot_no=7))
        context.commit_procurement_selection(coffee_procurements)
        context.set_first_stage_details(FirstStageDetails("wet", date(2024, 3, 1), "Kiran"))
        context.set_is_submitting(True)
        context.go_to_next_step()
        context.go_to_next_step()

        context.reset_form()

        assert context.state_snapshot() == fresh
        assert context.active_step == WizardStep.SELECT_CRITERIA
        assert context.is_submitting is False


class TestSummary:

    def test_reference_number_prefix(self, context):
        assert context.reference_number.startswith("PBW-")

    def test_summary(self, context, coffee_procurements):
        context.commit_procurement_selection(coffee_procurements)

        summary = context.get_summary()

        assert summary["procurements_count"] == 3
        assert summary["procurement_ids"] == [11, 12, 13]
        assert summary["crop"] == "Coffee"
        assert summary["first_stage_details"] == {"processMethod": None, "dateOfProcessing": None, "doneBy": None}
