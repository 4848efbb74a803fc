"""
sharc - Diagnostic reporting
Severity levels and the error-report entry point used by the driver.
"""

import sys
from enum import IntEnum, auto
from typing import Optional, TextIO


class Level(IntEnum):
    """Diagnostic threshold, most severe first."""
    FATAL  = auto()
    ERROR  = auto()
    WARN   = auto()
    NOTE   = auto()
    SILENT = auto()

    @classmethod
    def from_name(cls, name: str) -> Optional["Level"]:
        """Return the level spelled by `name`, or None if it is not a level."""
        return _LEVEL_SPELLINGS.get(name)


_LEVEL_SPELLINGS = {
    "f": Level.FATAL,  "fatal":  Level.FATAL,
    "e": Level.ERROR,  "error":  Level.ERROR,
    "w": Level.WARN,   "warn":   Level.WARN,
    "n": Level.NOTE,   "note":   Level.NOTE,
    "s": Level.SILENT, "silent": Level.SILENT,
}

BOLD  = "\x1b[1m"
RED   = "\x1b[31m"
BLUE  = "\x1b[34m"
RESET = "\x1b[0m"


def report_error(title: str, note: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Write an argument-parser error report. The caller decides whether to exit."""
    out = stream or sys.stderr
    print(f"{BOLD}{RED}error[ArgumentParserError]{RESET}{BOLD}: {title}{RESET}", file=out)
    if note:
        print(f"  {note}", file=out)
