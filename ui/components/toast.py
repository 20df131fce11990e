# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation


class Toast(QLabel):
    """Transient notice shown at the bottom of its parent widget."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    COLORS = {
        SUCCESS: "#28a745",
        ERROR: "#dc3545",
        WARNING: "#ffc107",
        INFO: "#17a2b8",
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self.toast_type = self.INFO
        self.description = ""
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fade_out)
        self._setup_ui()

    def _setup_ui(self):
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(520)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self.hide()

    def show_message(self, message: str, toast_type: str = INFO,
                     description: str = "", duration: int = 4000):
        """
        Show a toast message.

        Args:
            message: Headline text
            toast_type: Type (success, error, warning, info)
            description: Optional second line (e.g. field-level details)
            duration: Display duration in milliseconds
        """
        self.toast_type = toast_type
        self.description = description or ""
        self.setText(f"{message}\n{self.description}" if self.description else message)

        color = self.COLORS.get(toast_type, "#333")
        text_color = "#333" if toast_type == self.WARNING else "white"
        self.setStyleSheet(f"""
            QLabel#toast {{
                background-color: {color};
                color: {text_color};
                padding: 12px 24px;
                border-radius: 6px;
                font-size: 11pt;
            }}
        """)

        # Bottom center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            self.move((parent_rect.width() - self.width()) // 2,
                      parent_rect.height() - self.height() - 50)

        self.show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        self._timer.start(duration)

    def _fade_out(self):
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, message: str, toast_type: str = INFO,
               description: str = "", duration: int = 4000) -> "Toast":
        """Show a toast on a widget, reusing the widget's existing toast."""
        toast = parent.findChild(Toast, "toast")
        if not toast:
            toast = Toast(parent)

        toast.show_message(message, toast_type, description, duration)
        return toast
