# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title, progress bar and step label
- Step container
- Navigation buttons (Cancel, Previous, Next/Submit)

Which step is active is owned by the subclass (usually through its
context); the base class only mirrors it in the UI via refresh_view().
"""

from typing import List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from .base_step import BaseStep, ABCQWidgetMeta
from .wizard_context import WizardContext
from services.translation_manager import tr, get_layout_direction
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_context() / create_steps()
    - current_step_index(), get_progress(), get_step_title()
    - on_next() / on_previous()
    """

    wizard_completed = pyqtSignal(object)
    wizard_cancelled = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self.context = self.create_context()
        self.steps = self.create_steps()
        self._shown_index: Optional[int] = None

        self._setup_ui()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_context(self) -> WizardContext:
        """Create and return the wizard context."""

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """Create and return the wizard steps in order."""

    @abstractmethod
    def current_step_index(self) -> int:
        """Index of the active step."""

    @abstractmethod
    def get_progress(self) -> int:
        """Progress of the active step (0-100)."""

    @abstractmethod
    def get_step_title(self) -> str:
        """Title of the active step."""

    @abstractmethod
    def on_next(self):
        """Next (or Submit on the last step) was clicked."""

    @abstractmethod
    def on_previous(self):
        """Previous was clicked."""

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        return tr("button.next")

    def is_busy(self) -> bool:
        """True while an operation blocks navigation."""
        return False

    def on_cancel(self) -> bool:
        """Return False to keep the wizard open."""
        return True

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        self.setLayoutDirection(get_layout_direction())

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("background-color: #ddd;")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet("background-color: #f8f9fa;")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        layout.addWidget(self.progress_bar)

        self.step_label = QLabel()
        self.step_label.setStyleSheet("color: #6c757d;")
        layout.addWidget(self.step_label)

        return header

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setStyleSheet("background-color: #f8f9fa;")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = QPushButton(tr("button.cancel"))
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = QPushButton(tr("button.previous"))
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton(tr("button.next"))
        self.btn_next.setDefault(True)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def current_step(self) -> Optional[BaseStep]:
        index = self.current_step_index()
        if 0 <= index < len(self.steps):
            return self.steps[index]
        return None

    def is_last_step(self) -> bool:
        return self.current_step_index() == len(self.steps) - 1

    def _handle_previous(self):
        self.on_previous()
        self.refresh_view()

    def _handle_next(self):
        step = self.current_step()
        if step is not None:
            step.collect_data()
        self.on_next()
        self.refresh_view()

    def _handle_cancel(self):
        if self.on_cancel():
            self.wizard_cancelled.emit()
            self.close()

    # =========================================================================
    # View sync
    # =========================================================================

    def refresh_view(self):
        """Bring the UI in line with the active step and busy state."""
        index = self.current_step_index()

        if index != self._shown_index:
            if self._shown_index is not None and 0 <= self._shown_index < len(self.steps):
                self.steps[self._shown_index].on_hide()
            self._shown_index = index
            self.step_container.setCurrentIndex(index)
            step = self.current_step()
            if step is not None:
                logger.debug(f"Showing step {index}: {step.get_step_title()}")
                step.on_show()

        self.progress_bar.setValue(self.get_progress())
        self.step_label.setText(tr("wizard.step_label", title=self.get_step_title()))
        self._update_navigation_buttons()

    def _update_navigation_buttons(self):
        busy = self.is_busy()
        self.btn_previous.setEnabled(self.current_step_index() > 0 and not busy)
        self.btn_next.setEnabled(not busy)

        if self.is_last_step():
            self.btn_next.setText(tr("button.submitting") if busy else self.get_submit_button_text())
        else:
            self.btn_next.setText(tr("button.next"))
