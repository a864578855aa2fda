"""
Logging setup for nearvehicle.

Library modules log through `logging.getLogger(__name__)`, which makes them
children of the package logger. The package itself only installs a NullHandler;
scripts call `configure_logging` to get output on stderr.
"""
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "nearvehicle"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

package_logger = logging.getLogger(PACKAGE_LOGGER)
package_logger.addHandler(logging.NullHandler())


def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Sends package log records to `stream` (stderr by default).
    Calling it again only changes the level, it never stacks handlers.
    """
    if not any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        package_logger.addHandler(handler)

    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return package_logger
