# -*- coding: utf-8 -*-
"""Centralized error dialogs for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Shows user-facing messages; technical details stay in the log."""

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = "Something went wrong"):
        """Show error dialog."""
        logger.debug(f"Showing error dialog: {message}")
        QMessageBox.critical(parent, title, message)
