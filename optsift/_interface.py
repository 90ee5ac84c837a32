#!/usr/bin/env python3
"""
Shared constants, enums and protocols for optsift.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
from typing import TYPE_CHECKING
# Protocols:
from typing import Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Final
    from optsift.structs import RawArguments, OptionRegistry, ClassifyResult

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
DEFAULT_PREFIX       : Final[str]       = "-"
PRINTER_NAME         : Final[str]       = "optsift._printer"
TOOL_PREFIX          : Final[str]       = "tool.optsift"
DEFAULT_LOAD_TARGETS : Final[list[str]] = ["optsift.toml", "pyproject.toml"]

UNRECOGNIZED_HEADER  : Final[str]       = "Unrecognized options:"
MISSING_VALUE_HEADER : Final[str]       = "Required values for options but given none:"
USAGE_HEADER         : Final[str]       = "Usage:"
ENTRY_INDENT         : Final[str]       = "\t"

# Body:

class ArgClass_e(enum.Enum):
    """ The classification of a single raw argument.
    Arguments only ever move from UNCLASSIFIED to OPTION.
    """
    UNCLASSIFIED = enum.auto()
    OPTION       = enum.auto()

class ExitCodes(enum.IntEnum):
    SUCCESS      = 0
    PYTHON_FAIL  = 1
    BAD_USAGE    = 2
    BAD_CONFIG   = 3

##--| Handlers

@runtime_checkable
class FlagHandler_p(Protocol):
    """ Called with the flag spelling that matched """

    def __call__(self, flag:str) -> None: ...

@runtime_checkable
class KeyHandler_p(Protocol):
    """ Called with the key spelling that matched, and the value that followed it """

    def __call__(self, key:str, value:str) -> None: ...

##--| Classifier

class Classifier_i(abc.ABC):
    """
    Walks a sequence of raw arguments, marks the option-like ones,
    dispatches to registered handlers, and reports misuse.
    """

    @abc.abstractmethod
    def classify(self, args:RawArguments, registry:OptionRegistry) -> ClassifyResult:
        pass
