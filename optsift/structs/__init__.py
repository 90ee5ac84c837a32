#!/usr/bin/env python3
"""
The data classification works over:
raw arguments, the option registry, usage reports and results.
"""
# Imports:
from __future__ import annotations

from .raw_args import RawArg, RawArguments
from .registry import OptionRegistry
from .report import UsageReport
from .result import Success, ExitEarly, IncorrectUsage, ClassifyResult, exit_code
