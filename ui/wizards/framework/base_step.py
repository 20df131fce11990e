# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

Steps are presentational: they build widgets, mirror their inputs into
an optional StepForm and re-populate from the wizard context when shown.
They never change the context's active step.
"""

from typing import Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from .step_form import StepForm
from .wizard_context import WizardContext


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Subclasses implement setup_ui(); steps with inputs also override
    create_form() and collect_data().
    """

    step_data_changed = pyqtSignal(dict)

    def __init__(self, context: WizardContext, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.context = context
        self._is_initialized = False
        self.form: Optional[StepForm] = self.create_form()

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """Build the UI once, the first time the step is needed."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes active."""
        self.initialize()
        self.populate_data()

    def on_hide(self):
        """Called when the step stops being active."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create the step's widgets and layouts."""

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def create_form(self) -> Optional[StepForm]:
        """Return the step's bound form, or None for steps without inputs."""
        return None

    def collect_data(self):
        """Copy widget values into the form."""
        pass

    def populate_data(self):
        """Refresh widgets from the context."""
        pass

    def reset(self):
        """Clear inputs after the wizard session was reset."""
        if self.form is not None:
            self.form.reset()
        if self._is_initialized:
            self.populate_data()

    def get_step_title(self) -> str:
        return self.__class__.__name__

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def add_heading(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-size: 13pt; font-weight: 600;")
        self.main_layout.addWidget(label)
        return label

    def emit_data_changed(self):
        if self.form is not None:
            self.step_data_changed.emit(self.form.get_values())
