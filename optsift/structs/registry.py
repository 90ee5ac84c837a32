#!/usr/bin/env python3
"""
The option spellings a classifier recognises, and the handlers they dispatch to.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Self
    from optsift._interface import FlagHandler_p, KeyHandler_p

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(eq=False)
class OptionRegistry:
    """ The option spellings a classifier can recognise.

    flags      : spelling -> handler(flag)
    keys       : spelling -> handler(key, value)
    exit_early : spellings that halt the invocation once seen
    usage      : spelling -> a one line description, for error and help messages

    A spelling should only be in one of flags/keys.
    That isn't enforced here, flags take precedence when classifying.
    """

    flags      : dict[str, FlagHandler_p] = field(default_factory=dict)
    keys       : dict[str, KeyHandler_p]  = field(default_factory=dict)
    exit_early : set[str]                 = field(default_factory=set)
    usage      : dict[str, str]           = field(default_factory=dict)

    def add_flag(self, spelling:str, handler:FlagHandler_p, *, usage:None|str=None, exit_early:bool=False) -> Self:
        self.flags[spelling] = handler
        self._add_extras(spelling, usage=usage, exit_early=exit_early)
        return self

    def add_key(self, spelling:str, handler:KeyHandler_p, *, usage:None|str=None, exit_early:bool=False) -> Self:
        self.keys[spelling] = handler
        self._add_extras(spelling, usage=usage, exit_early=exit_early)
        return self

    def _add_extras(self, spelling:str, *, usage:None|str, exit_early:bool) -> None:
        if usage is not None:
            self.usage[spelling] = usage
        if exit_early:
            self.exit_early.add(spelling)

    def __contains__(self, spelling:str) -> bool:
        return spelling in self.flags or spelling in self.keys

    def usage_line(self, spelling:str) -> None|str:
        match self.usage.get(spelling, None):
            case None:
                return None
            case str() as desc if spelling in self.keys:
                return f"{spelling} <value> : {desc}"
            case str() as desc:
                return f"{spelling} : {desc}"

    def usage_lines(self) -> list[str]:
        """ Every described option, flags before keys, sorted by spelling """
        ordered = sorted(self.flags) + sorted(x for x in self.keys if x not in self.flags)
        return [line for x in ordered if (line:=self.usage_line(x)) is not None]
