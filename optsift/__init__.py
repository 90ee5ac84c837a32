#!/usr/bin/env python3
"""
optsift : Sort raw cli arguments into recognised options, and the rest.

"""
# Imports:
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from ._interface import ArgClass_e, ExitCodes
from .structs import (RawArg, RawArguments, OptionRegistry, UsageReport,
                      Success, ExitEarly, IncorrectUsage, ClassifyResult, exit_code)
from .classifier import OptionClassifier, classify

try:
    __version__ = version("optsift")
except PackageNotFoundError:
    __version__ = "0.0.0"
