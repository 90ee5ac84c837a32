#!/usr/bin/env python3
"""
Formatters for optsift's stream and printer output.

A record is coloured by its level, unless the log call names a colour:
    printer.info("Positional: %s", val, extra={"colour": "green"})

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re
# ##-- end stdlib imports

# ##-- 3rd party imports
from sty import ef, fg, rs

# ##-- end 3rd party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from typing import Final

# isort: on
# ##-- end types

COLOURS : Final[dict[str|int, str]] = {
    logmod.DEBUG    : fg.grey,
    logmod.INFO     : fg.blue,
    logmod.WARNING  : fg.yellow,
    logmod.ERROR    : fg.red,
    logmod.CRITICAL : ef.bold + fg.red,
    "green"         : fg.green,
    "cyan"          : fg.cyan,
    "yellow"        : fg.yellow,
    "red"           : fg.red,
}
COLOUR_CODE_RE : Final[re.Pattern] = re.compile(r'\x1b\[([\d;]+)m?')

class ColourFormatter(logmod.Formatter):
    """ Brace style formatter that wraps each line in a colour.
    Unknown colour names fall back to the level's colour.
    Don't use for file handlers.
    """

    _default_fmt : ClassVar[str] = '{levelname:<8} : {message}'

    def __init__(self, *, fmt:None|str=None):
        super().__init__(fmt or self._default_fmt, style='{')

    def colour_for(self, record:logmod.LogRecord) -> str:
        match getattr(record, "colour", None):
            case str() as name if name in COLOURS:
                return COLOURS[name]
            case _:
                return COLOURS.get(record.levelno, "")

    def format(self, record:logmod.LogRecord) -> str:
        return self.colour_for(record) + super().format(record) + rs.all

class PlainFormatter(logmod.Formatter):
    """ Brace style formatter that removes any colour codes,
    including those already embedded in a message
    """

    _default_fmt : ClassVar[str] = '{asctime} | {levelname:<8} | {name} | {message}'

    def __init__(self, *, fmt:None|str=None):
        super().__init__(fmt or self._default_fmt, datefmt="%Y-%m-%d %H:%M:%S", style='{')

    def format(self, record:logmod.LogRecord) -> str:
        return COLOUR_CODE_RE.sub("", super().format(record))
