# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.error_mapper import map_exception
from services.translation_manager import tr
from ui.components.toast import Toast
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps exceptions and controller notices to user-facing feedback."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_toast: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show a toast.

        Returns:
            User-friendly error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message, description = map_exception(error)

        if show_toast and parent:
            Toast.notify(parent, message, Toast.ERROR, description or "")

        return message

    @staticmethod
    def show_notice(parent: QWidget, level: str, message: str, description: str = "") -> Toast:
        """Show a controller notice as a toast on the parent widget."""
        return Toast.notify(parent, message, level if level in Toast.COLORS else Toast.INFO, description)

    @staticmethod
    def show_error(parent: QWidget, message: str, description: str = "") -> Toast:
        return ErrorHandler.show_notice(parent, Toast.ERROR, message, description)

    @staticmethod
    def show_warning(parent: QWidget, message: str, description: str = "") -> Toast:
        return ErrorHandler.show_notice(parent, Toast.WARNING, message, description)

    @staticmethod
    def show_success(parent: QWidget, message: str, description: str = "") -> Toast:
        return ErrorHandler.show_notice(parent, Toast.SUCCESS, message, description)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = None) -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent,
            title or tr("dialog.confirm"),
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )
        return reply == QMessageBox.Yes
