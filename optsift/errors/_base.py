#!/usr/bin/env python3
"""
The root of optsift's errors.

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import ClassVar

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class OptsiftError(Exception):
    """
      Errors are raised with a %-style message, and its values:
      ConfigError("Bad prefix: %s", val)

      Each error family names the exit code an invocation ends with when it escapes.
    """
    general_msg : ClassVar[str]           = "optsift Failure:"
    exit_code   : ClassVar[API.ExitCodes] = API.ExitCodes.PYTHON_FAIL

    def __str__(self) -> str:
        match self.args:
            case [str() as fmt, *vals]:
                try:
                    return fmt % tuple(vals)
                except (TypeError, ValueError):
                    return " ".join(str(x) for x in self.args)
            case _:
                return " ".join(str(x) for x in self.args)
