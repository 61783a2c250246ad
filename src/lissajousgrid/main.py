"""
Application Initialization
==========================
This module wires the controller, the main window and logging together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Instantiates the AnimationController (model + clock).
3. Passes the controller into the Main Window (View).
"""
from __future__ import annotations

import argparse
import logging
import sys

from lissajousgrid.application import create_app
from lissajousgrid.config import ALLOWED_CIRCLE_COUNTS, DEFAULT_CIRCLE_COUNT
from lissajousgrid.controller.animation import AnimationController
from lissajousgrid.logging_config import setup_logging
from lissajousgrid.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lissajous-grid",
        description="Animated grid of Lissajous curves.",
    )
    parser.add_argument(
        "--circles",
        type=int,
        choices=list(ALLOWED_CIRCLE_COUNTS),
        default=DEFAULT_CIRCLE_COUNT,
        help="Circles per axis (default: %(default)s).",
    )
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(debug=args.debug, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the controller and the Main Window
    controller = AnimationController(circle_count=args.circles)
    window = MainWindow(controller)
    window.show()

    logger.info(f"Starting with {controller.circle_count} circles per axis.")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
