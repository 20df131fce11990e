#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Processing Batch Desk
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.api_client import get_api_client
from services.event_bus import get_event_bus
from ui.wizards.processing_batch import ProcessingBatchWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 60)
        logger.info(f"Starting {Config.APP_NAME}")
        logger.info(f"Backend: {Config.API_BASE_URL}")
        logger.info("=" * 60)

        client = get_api_client()
        if Config.API_TOKEN:
            client.set_access_token(Config.API_TOKEN)

        bus = get_event_bus()
        bus.processing_batch_data_changed.connect(
            lambda: logger.info("Processing batch list is stale; listings should refetch")
        )

        window = ProcessingBatchWizard(api_client=client, event_bus=bus)
        window.navigate_requested.connect(lambda page: logger.info(f"Navigate to: {page}"))
        window.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
