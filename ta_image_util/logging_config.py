"""
Logging for ta_image_util.

Library modules log through children of the 'ta_image_util' logger
(get_logger('reader') and so on). Damaged directories are reported at
WARNING, seeks and ADU reads at DEBUG. The CLI picks the level from
-q / -v; everything goes to stderr so listings on stdout stay clean.
"""

import logging
import os
import sys
from typing import TextIO

# -q shows only damage reports, -v adds seek/read tracing
QUIET = logging.WARNING
NORMAL = logging.INFO
VERBOSE = logging.DEBUG

logger = logging.getLogger('ta_image_util')


class ColorFormatter(logging.Formatter):
    """Colors each line by level when writing to a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
    }

    def __init__(self, fmt: str | None = None, use_colors: bool = True, stream: TextIO | None = None):
        super().__init__(fmt)
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

    @staticmethod
    def _supports_color(stream: TextIO) -> bool:
        # StringIO in tests and redirected output get plain text
        if sys.platform == 'win32':
            try:
                return os.isatty(stream.fileno()) and 'TERM' in os.environ
            except (AttributeError, OSError, ValueError):
                return False
        return hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if self.use_colors and record.levelname in self.COLORS:
            return f"{self.COLORS[record.levelname]}{message}{self.COLORS['RESET']}"
        return message


def setup_logging(
    level: int = NORMAL,
    stream: TextIO | None = None,
    use_colors: bool = True,
    format_string: str | None = None
) -> None:
    """
    (Re)configure the package logger.

    Replaces any handler installed by an earlier call, so the CLI and
    tests can switch level or stream freely.

    Args:
        level: QUIET, NORMAL or VERBOSE
        stream: Destination, stderr by default
        use_colors: Color output when the stream is a terminal
        format_string: Overrides the level-dependent default format
    """
    if stream is None:
        stream = sys.stderr

    if format_string is None:
        if level <= logging.DEBUG:
            # Name the module so seek traces can be told from directory warnings
            format_string = '%(levelname)s: %(name)s: %(message)s'
        else:
            format_string = '%(message)s'

    logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(format_string, use_colors, stream))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or the child named name."""
    if name is None:
        return logger
    return logger.getChild(name)


setup_logging()
