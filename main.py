#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Save a Turtle - volunteer registration
Main entry point for the application

Usage:
    python main.py
    python main.py --org=loyola-nature-club
    python main.py "turtlereg://register?org=loyola-nature-club"
"""

import sys
from typing import List, Optional
from urllib.parse import parse_qs, urlparse

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from utils.logger import setup_logger


def parse_org_param(argv: List[str]) -> Optional[str]:
    """
    Extract the organization deep link from the command line.

    Accepts ``--org=<id>``, ``--org <id>`` or any argument that is a URL
    whose query string carries ``org=<id>``. The first match wins.
    """
    flag = f"--{Config.DEEP_LINK_PARAM}"
    args = list(argv)
    for i, arg in enumerate(args):
        if arg.startswith(flag + "="):
            return arg.split("=", 1)[1] or None
        if arg == flag:
            return args[i + 1] if i + 1 < len(args) else None

        if "?" in arg:
            values = parse_qs(urlparse(arg).query).get(Config.DEEP_LINK_PARAM)
            if values and values[0]:
                return values[0]
    return None


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        from app.main_window import MainWindow
        from controllers.pledge_controller import PledgeController
        from controllers.wizard_controller import WizardController
        from services.store_factory import create_store

        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} v{Config.VERSION}")
        logger.info("=" * 80)

        store = create_store()
        logger.info(f">> Registration store: {store.store_type.value}")

        wizard = WizardController()
        pledge = PledgeController(wizard, store)

        # Resolve the deep link before anything is on screen
        org_param = parse_org_param(sys.argv[1:])
        if org_param:
            logger.info(f"Deep link organization: {org_param}")
        wizard.resolve_deep_link(org_param, store)

        window = MainWindow(wizard, pledge)
        window.show()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except ImportError as e:
        error_msg = f"Import Error: {e}"
        print(f"\n[ERROR] {error_msg}")
        print("\nMissing dependencies? Run: pip install -e .")
        logger.exception(error_msg)
        sys.exit(1)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
