#!/usr/bin/env python3

import argparse
import logging
import sys

from python_qt_binding.QtWidgets import QApplication

from .config_manager import JoystickConfig
from .joystick_main_widget import JoystickMainWidget
from .logging_config import setup_logging


logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="On-screen virtual joystick reporting angle and strength.")
    parser.add_argument("--interval", type=int, default=50,
                        help="report interval while pressed, in milliseconds (default: 50)")
    parser.add_argument("--size", type=int, default=200,
                        help="preferred joystick size in pixels (default: 200)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Launch the virtual joystick as a standalone Qt application."""
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    app = QApplication(sys.argv[:1])
    try:
        config = JoystickConfig(loop_interval_ms=args.interval, default_size=args.size)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    widget = JoystickMainWidget(config)
    widget.joystick.moved.connect(
        lambda angle, strength: logger.debug("angle=%d strength=%d", angle, strength)
    )
    widget.show()
    return app.exec_()


if __name__ == '__main__':
    sys.exit(main())
