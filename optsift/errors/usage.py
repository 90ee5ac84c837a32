#!/usr/bin/env python3
"""

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optsift.structs.report import UsageReport

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"OptionUsageError",

)
# ##-- end Generated Exports

import optsift._interface as API  # noqa: N812
from ._base import OptsiftError

class OptionUsageError(OptsiftError):
    """ Options were passed that weren't recognised, or keys were missing their values.
    Wraps the UsageReport that describes the misuse.
    """
    general_msg = "optsift Option Usage Failure:"
    exit_code   = API.ExitCodes.BAD_USAGE

    def __init__(self, report:UsageReport):
        super().__init__("%s", report.message())
        self.report = report
