# -*- coding: utf-8 -*-
"""
Data Event Bus - process-wide "data changed" broadcasts.

Views that list server data connect to these signals and refresh
themselves; producers never call the views directly.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


class DataEventBus(QObject):
    """
    Broadcast hub for domain refresh events.

    Signals:
        processing_batch_data_changed: a processing batch was created,
            changed or deleted
    """

    processing_batch_data_changed = pyqtSignal()

    def notify_processing_batches_changed(self):
        logger.debug("Broadcasting processing_batch_data_changed")
        self.processing_batch_data_changed.emit()


_event_bus: Optional[DataEventBus] = None


def get_event_bus() -> DataEventBus:
    """Get the process-wide event bus."""
    global _event_bus

    if _event_bus is None:
        _event_bus = DataEventBus()

    return _event_bus
