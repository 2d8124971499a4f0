#!/usr/bin/env python3
"""Volunteer Log - Register volunteers and track their hours.

Single entry point for the application.

Usage:
    python volunteer_log.py              # Launch GUI
    python volunteer_log.py --version    # Show version
    python volunteer_log.py --debug      # Verbose console logging

Records are kept in VolunteerLog.csv in the working directory.
"""

import argparse
import logging
import sys
from typing import Optional

from volunteerlog import __version__
from volunteerlog.core.config import get_config, validate_config
from volunteerlog.core.exceptions import StoreError
from volunteerlog.core.logging import get_logger, setup_logging
from volunteerlog.db.store import VolunteerStore


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for Volunteer Log.

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    parser = argparse.ArgumentParser(
        description="Volunteer Log - Register volunteers and track their hours"
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.version:
        print(f"Volunteer Log v{__version__}")
        return 0

    config = get_config()
    debug = args.debug or config.debug
    setup_logging(
        log_dir=config.log_path,
        console_level=logging.DEBUG if debug else logging.INFO,
    )
    logger = get_logger("main")
    logger.info(f"Volunteer Log v{__version__} starting...")

    for issue in validate_config(config):
        logger.warning(f"Configuration issue: {issue}")

    store = VolunteerStore()
    data_path = config.data_path
    try:
        store.load(data_path)
    except StoreError as e:
        logger.error(
            f"Failed to load volunteer data: {e}",
            extra={"context": {"path": str(data_path)}},
        )

    logger.info("Launching GUI...")
    from volunteerlog.gui.app import VolunteerLogApp

    app = VolunteerLogApp(store, data_path, config)
    app.run()

    logger.info("Volunteer Log shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
