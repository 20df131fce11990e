# -*- coding: utf-8 -*-
"""
Processing Batch Wizard Package.

This package contains:
- ProcessingBatchContext: state store for one batch creation session
- ProcessingBatchWizard: the wizard window
- Steps: the four wizard steps
"""

from .batch_context import ProcessingBatchContext, WizardStep, STEP_ORDER

# The wizard imports the controller, which imports the context from here
__all__ = [
    'ProcessingBatchContext',
    'WizardStep',
    'STEP_ORDER',
    'ProcessingBatchWizard'
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ProcessingBatchWizard":
        from .processing_batch_wizard import ProcessingBatchWizard
        return ProcessingBatchWizard
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
