#!/usr/bin/env python3
"""
These are the optsift specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import OptsiftError
from .config import ConfigError
from .usage import OptionUsageError

# ##-- end 1st party imports
