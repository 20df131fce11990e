# -*- coding: utf-8 -*-
"""
Wizard Framework - shared building blocks for multi-step wizards.

Provides base classes for wizard windows, steps, session contexts and
the Qt-free step forms the steps bind their inputs to.
"""

from .step_form import StepForm, FieldError, FieldErrors
from .wizard_context import WizardContext
from .base_step import BaseStep
from .base_wizard import BaseWizard

__all__ = [
    'StepForm',
    'FieldError',
    'FieldErrors',
    'WizardContext',
    'BaseStep',
    'BaseWizard',
]
