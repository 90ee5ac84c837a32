#!/usr/bin/env python3
"""
Toml controlled logging, eg:

[logging.stream]
level  = "INFO"
target = "stderr"
format = "{levelname:<8} : {message}"
colour = true

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import pathlib as pl
from collections.abc import Mapping
from sys import stderr, stdout
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ValidationError, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812
from optsift.errors import ConfigError
from optsift.utils.log_colour import ColourFormatter, PlainFormatter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, ClassVar, Final

if TYPE_CHECKING:
    from typing import Any

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TARGETS : Final[list[str]] = ["file", "stdout", "stderr", "pass"]

class LoggerSpec(BaseModel):
    """
      A Spec for toml defined logging control.
      Allows user to name a logger, set its level, format,
      colour, and where it logs to.

      When 'apply' is called, it gets the logger,
      and sets any relevant settings on it.
    """

    name                       : str
    disabled                   : bool                = False
    level                      : str|int             = logmod.WARNING
    format                     : str                 = "{levelname:<8} : {message}"
    colour                     : bool                = False
    target                     : None|str            = "stdout" # stdout | stderr | file | pass
    filename                   : str                 = "optsift.log"
    propagate                  : bool                = False

    RootName                   : ClassVar[str]       = "root"

    @staticmethod
    def build(data:Mapping, **kwargs:Any) -> LoggerSpec:
        as_dict = dict(data)
        as_dict.update(kwargs)
        return LoggerSpec.model_validate(as_dict)

    @field_validator("level")
    def _validate_level(cls, val):
        match val:
            case int():
                return val
            case str() if val.upper() in logmod.getLevelNamesMapping():
                return logmod.getLevelNamesMapping()[val.upper()]
            case _:
                raise ValueError("Unknown log level for LoggerSpec", val)

    @field_validator("target")
    def _validate_target(cls, val):
        match val:
            case None:
                return "stdout"
            case str() if val in TARGETS:
                return val
            case _:
                raise ValueError("Unknown target value for LoggerSpec", val)

    @ftz.cached_property
    def fullname(self) -> str:
        if self.name == LoggerSpec.RootName:
            return ""
        return self.name

    def _discriminate_handler(self) -> tuple[None|logmod.Handler, None|logmod.Formatter]:
        handler : logmod.Handler
        match self.target:
            case "pass":
                return None, None
            case "file":
                handler = logmod.FileHandler(pl.Path(self.filename), mode='w')
            case "stderr":
                handler = logmod.StreamHandler(stderr)
            case _:
                handler = logmod.StreamHandler(stdout)

        match self.colour:
            case True if not isinstance(handler, logmod.FileHandler):
                formatter = ColourFormatter(fmt=self.format)
            case _:
                formatter = PlainFormatter(fmt=self.format)

        return handler, formatter

    def apply(self) -> logmod.Logger:
        """ Apply this spec to the relevant logger, replacing its handlers """
        logger           = self.get()
        self.clear()
        logger.propagate = self.propagate
        logger.disabled  = self.disabled
        logger.setLevel(self.level)
        if self.disabled:
            return logger

        match self._discriminate_handler():
            case None, _:
                pass
            case handler, formatter:
                handler.setLevel(self.level)
                handler.setFormatter(formatter)
                logger.addHandler(handler)

        return logger

    def get(self) -> logmod.Logger:
        return logmod.getLogger(self.fullname or None)

    def clear(self) -> None:
        """ Clear the handlers for the logger referenced """
        logger = self.get()
        for h in logger.handlers[:]:
            logger.removeHandler(h)
            h.close()

    def set_level(self, level:int|str) -> None:
        match level:
            case str():
                level = logmod.getLevelNamesMapping().get(level.upper(), logmod.NOTSET)
            case int():
                pass
        logger = self.get()
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

def setup_logging(config:TomlGuard) -> tuple[LoggerSpec, LoggerSpec]:
    """ Configure the root stream logger and the printer from config.
    The printer replaces `print`, so output still goes through logging
    """
    stream_data  = config.on_fail({}).logging.stream()
    printer_data = config.on_fail({"level": "INFO", "format": "{message}"}).logging.printer()
    try:
        stream_spec  = LoggerSpec.build(stream_data, name=LoggerSpec.RootName)
        printer_spec = LoggerSpec.build(printer_data, name=API.PRINTER_NAME)
    except (ValidationError, TypeError, ValueError) as err:
        raise ConfigError("Bad logging config: %s", err) from err

    stream_spec.apply()
    printer_spec.apply()
    logging.debug("Logging Setup")
    return stream_spec, printer_spec
