#!/usr/bin/env python3
"""
The usage report of a failed classification.

Holds the unrecognized options and the keys given no value, in the order seen,
and formats them into the message a cli prints before exiting.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict, Field, InstanceOf

# ##-- end 3rd party imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812
from optsift.structs.registry import OptionRegistry

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class UsageReport(BaseModel):
    """ Every misused option found in one classification pass.

    Built once, never modified.
    Equality only considers the misused spellings, not the registry they were checked against.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    unrecognized   : tuple[str, ...]                = ()
    missing_values : tuple[str, ...]                = ()
    registry       : None|InstanceOf[OptionRegistry] = Field(default=None, exclude=True, repr=False)

    def __eq__(self, other) -> bool:
        match other:
            case UsageReport():
                return (self.unrecognized, self.missing_values) == (other.unrecognized, other.missing_values)
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash((self.unrecognized, self.missing_values))

    def __str__(self) -> str:
        return self.message()

    def has_errors(self) -> bool:
        return bool(self.unrecognized) or bool(self.missing_values)

    def message(self) -> str:
        """ Format the misused options into a report, eg:

        Unrecognized options:
            --bogus
        Required values for options but given none:
            --config

        """
        message = []
        if bool(self.unrecognized):
            message.append(self._section(API.UNRECOGNIZED_HEADER, self.unrecognized))

        if bool(self.missing_values):
            message.append(self._section(API.MISSING_VALUE_HEADER, self.missing_values))

        return "".join(message)

    def usage_message(self) -> str:
        """ The message, with usage lines for the misused options the registry describes """
        if self.registry is None:
            return self.message()

        described = [line for x in self.unrecognized + self.missing_values
                     if (line:=self.registry.usage_line(x)) is not None]
        if not bool(described):
            return self.message()

        return self.message() + self._section(API.USAGE_HEADER, described)

    def _section(self, header:str, entries:tuple[str, ...]|list[str]) -> str:
        lines = [header]
        lines += [f"{API.ENTRY_INDENT}{x}" for x in entries]
        return "\n".join(lines) + "\n"
