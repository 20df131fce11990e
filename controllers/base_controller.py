# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for controllers in Processing Batch Desk.

Controllers sit between the UI and the services: they hold no widgets,
report progress through Qt signals and hand results back as
OperationResult values.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class NoticeLevel:
    """Severity of a user-facing notice."""
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    description: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, description: Optional[str] = None,
             errors: List[str] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, description=description, errors=errors or [])


class BaseController(QObject):
    """
    Base controller class.

    Signals:
        notice(level, message, description): something to tell the user
        loading_changed(bool): an operation started / finished
        operation_error(operation, message): an operation failed
    """

    notice = pyqtSignal(str, str, str)
    loading_changed = pyqtSignal(bool)
    operation_error = pyqtSignal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    def _set_loading(self, loading: bool):
        if self._is_loading != loading:
            self._is_loading = loading
            self.loading_changed.emit(loading)

    def _notify(self, level: str, message: str, description: Optional[str] = None):
        """Emit a user-facing notice and log it."""
        if level == NoticeLevel.ERROR:
            logger.error(f"{self.__class__.__name__}: {message}" + (f" ({description})" if description else ""))
        elif level == NoticeLevel.WARNING:
            logger.warning(f"{self.__class__.__name__}: {message}")
        else:
            logger.info(f"{self.__class__.__name__}: {message}")
        self.notice.emit(level, message, description or "")

    def _emit_error(self, operation: str, message: str, description: Optional[str] = None):
        """Record and report a failed operation."""
        self._last_error = message
        self.operation_error.emit(operation, message)
        self._notify(NoticeLevel.ERROR, message, description)
