#!/usr/bin/env python3
"""
The outcome of classifying a set of raw arguments.

Exactly one of Success, ExitEarly, or IncorrectUsage.
Match on the class to handle each::

    match result:
        case Success(): ...
        case ExitEarly(): ...
        case IncorrectUsage(report=report): ...

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import assert_never
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict

# ##-- end 3rd party imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812
from optsift.errors import OptionUsageError
from optsift.structs.report import UsageReport

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typing import Never

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Success(BaseModel):
    """ All options were recognised and given their values """
    model_config = ConfigDict(frozen=True)

class ExitEarly(BaseModel):
    """ An exit-early option (eg: --help) was passed. Takes precedence over any misuse. """
    model_config = ConfigDict(frozen=True)

class IncorrectUsage(BaseModel):
    """ Options were misused, see the report for which """
    model_config = ConfigDict(frozen=True)

    report : UsageReport

    def raise_error(self) -> Never:
        raise OptionUsageError(self.report)

ClassifyResult : TypeAlias = Success | ExitEarly | IncorrectUsage

def exit_code(result:ClassifyResult) -> API.ExitCodes:
    """ Map a result to the exit code an invocation should finish with """
    match result:
        case Success() | ExitEarly():
            return API.ExitCodes.SUCCESS
        case IncorrectUsage():
            return API.ExitCodes.BAD_USAGE
        case x:
            assert_never(x)
