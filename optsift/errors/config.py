#!/usr/bin/env python3
"""

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ConfigError",

)
# ##-- end Generated Exports

import optsift._interface as API  # noqa: N812
from ._base import OptsiftError

class ConfigError(OptsiftError):
    """ A config file could not be read, or held values of the wrong shape """
    general_msg = "optsift Config Failure:"
    exit_code   = API.ExitCodes.BAD_CONFIG
