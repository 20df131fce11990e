# -*- coding: utf-8 -*-
"""
Processing Batch Desk Controllers
=================================
Controller layer between the UI (wizards, pages) and the services.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates and user notices
- Gating and business rules

Usage:
    from controllers import ProcessingBatchWizardController

    controller = ProcessingBatchWizardController(context)
    controller.notice.connect(show_notice)
    controller.handle_next(current_form)
"""

from controllers.base_controller import (
    BaseController,
    NoticeLevel,
    OperationResult,
)

from controllers.processing_batch_wizard_controller import (
    ProcessingBatchWizardController,
)

__all__ = [
    "BaseController",
    "NoticeLevel",
    "OperationResult",
    "ProcessingBatchWizardController",
]
