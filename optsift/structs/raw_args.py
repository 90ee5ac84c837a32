#!/usr/bin/env python3
"""
The owned sequence of raw cli arguments the classifier walks over.

Each RawArg knows its successor, so a key option can look ahead
for its value without index arithmetic.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field
# ##-- end stdlib imports

# ##-- 1st party imports
from optsift._interface import ArgClass_e

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(eq=False)
class RawArg:
    """ A single positional element of the command line """

    value          : str
    classification : ArgClass_e   = ArgClass_e.UNCLASSIFIED
    next           : None|RawArg  = field(default=None, repr=False)

    def is_unclassified(self) -> bool:
        return self.classification is ArgClass_e.UNCLASSIFIED

    def is_option(self) -> bool:
        return self.classification is ArgClass_e.OPTION

    def classify(self) -> None:
        self.classification = ArgClass_e.OPTION

class RawArguments:
    """ Owns the RawArgs of a single invocation, linked in order.

    >>> args = RawArguments(["build", "-v"])
    >>> args[0].next is args[1]
    True
    """

    def __init__(self, values:Iterable[str]):
        self._args : list[RawArg] = [RawArg(str(x)) for x in values]
        for curr, succ in zip(self._args, self._args[1:]):
            curr.next = succ

    def __iter__(self) -> Iterator[RawArg]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)

    def __getitem__(self, idx:int) -> RawArg:
        return self._args[idx]

    def __repr__(self) -> str:
        return "<RawArguments: {}>".format(" ".join(x.value for x in self._args))

    def unclassified(self) -> list[RawArg]:
        return [x for x in self._args if x.is_unclassified()]

    def options(self) -> list[RawArg]:
        return [x for x in self._args if x.is_option()]

    def positionals(self) -> list[str]:
        """ The values left over once options (and their values) are claimed """
        return [x.value for x in self.unclassified()]
