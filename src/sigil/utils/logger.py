"""
Console logger for sigil

Every record is one headline plus optional tree-style details:

    [14:23:45] STATE         ✓ State transition
               ├─ state: NO_IDENTIFIER → GEOMETRY_STALE
               └─ uid: 04:1A:2B:3C:05:10:07

Modules bind a category once at import time:

    log = get_logger().for_category(LogCategory.GEOMETRY)
    log.debug("Geometry precomputed", shape="MANHATTAN")
"""

import sys
from datetime import datetime
from typing import Dict, List, Optional, TextIO, Tuple

from sigil.models.enums import LogLevel, LogCategory


class Colors:
    """ANSI escape sequences shared by the logger and the terminal display"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'

    @staticmethod
    def background(r: int, g: int, b: int) -> str:
        """24-bit background color"""
        return f'\033[48;2;{r};{g};{b}m'


CATEGORY_COLORS: Dict[LogCategory, str] = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.HARDWARE: Colors.BRIGHT_BLUE,
    LogCategory.READER: Colors.BRIGHT_GREEN,
    LogCategory.STATE: Colors.BRIGHT_CYAN,
    LogCategory.COLOR: Colors.BRIGHT_MAGENTA,
    LogCategory.GEOMETRY: Colors.BRIGHT_YELLOW,
    LogCategory.RENDER_ENGINE: Colors.MAGENTA,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

# level -> (priority, symbol, color)
LEVEL_STYLES: Dict[LogLevel, Tuple[int, str, str]] = {
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

CATEGORY_WIDTH = max(len(c.name) for c in LogCategory)
DETAIL_INDENT = " " * 11


class Logger:
    """
    Structured logger writing to a text stream.

    Args:
        min_level: Records below this level are dropped
        use_colors: ANSI colors (turn off when piping to a file)
        stream: Target stream; None means sys.stdout at write time
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True,
                 stream: Optional[TextIO] = None):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def enabled_for(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][0] >= LEVEL_STYLES[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def _headline(self, category: LogCategory, message: str, level: LogLevel) -> str:
        _, symbol, color = LEVEL_STYLES[level]
        stamp = datetime.now().strftime('[%H:%M:%S]')
        cat = self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE))
        return f"{stamp} {cat} {self._paint(symbol, color)} {self._paint(message, color)}"

    def _detail_lines(self, details: List[str]) -> List[str]:
        lines = []
        for i, detail in enumerate(details):
            branch = "└─" if i == len(details) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[List[str]] = None,
        **fields
    ):
        """
        Write one record.

        Args:
            category: Subsystem the record belongs to
            message: Headline text
            level: DEBUG, INFO, WARN or ERROR
            details: Free-form detail lines
            **fields: Rendered as "key: value" detail lines, in call order
        """
        if not self.enabled_for(level):
            return

        lines = [self._headline(category, message, level)]
        lines.extend(self._detail_lines(list(details or []) + [f"{k}: {v}" for k, v in fields.items()]))

        # A record is written in one call
        out = self.stream or sys.stdout
        out.write("\n".join(lines) + "\n")

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a default category; pass category=... to log elsewhere once"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True,
                     stream: Optional[TextIO] = None):
    """
    Reconfigure the shared logger in place.

    Bound loggers created at import time keep pointing at the same instance.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
