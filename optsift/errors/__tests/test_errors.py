#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports

import pytest

import optsift._interface as API  # noqa: N812
import optsift.errors as oerrs
from optsift.structs import UsageReport

logging = logmod.root

class TestErrors:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_formatting(self):
        err = oerrs.OptsiftError("Bad value: %s : %s", "a", 2)
        assert(str(err) == "Bad value: a : 2")

    def test_formatting_mismatch(self):
        err = oerrs.OptsiftError("No slots", "a")
        assert(str(err) == "No slots a")

    def test_hierarchy(self):
        assert(issubclass(oerrs.ConfigError, oerrs.OptsiftError))
        assert(issubclass(oerrs.OptionUsageError, oerrs.OptsiftError))

    def test_usage_error(self):
        report = UsageReport(unrecognized=["--x"])
        err    = oerrs.OptionUsageError(report)
        assert(err.report is report)
        assert(str(err) == report.message())

    def test_non_string_args(self):
        assert(str(oerrs.OptsiftError(5, "a")) == "5 a")

    def test_exit_codes(self):
        assert(oerrs.OptsiftError.exit_code == API.ExitCodes.PYTHON_FAIL)
        assert(oerrs.ConfigError("bad").exit_code == API.ExitCodes.BAD_CONFIG)
        assert(oerrs.OptionUsageError(UsageReport()).exit_code == API.ExitCodes.BAD_USAGE)

    def test_general_msg(self):
        assert(oerrs.ConfigError.general_msg != oerrs.OptsiftError.general_msg)
        assert(oerrs.OptionUsageError.general_msg != oerrs.ConfigError.general_msg)
