#!/usr/bin/env python3
"""
The optsift cli runner.

Classifies its own arguments against a registry declared in config::

    [registry]
    flag_opts  = ["-v", "--help"]
    key_opts   = ["--config"]
    exit_early = ["--help"]

    [registry.usage]
    "--config" = "the config profile to use"

"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys

##-- logging
logging         = logmod.getLogger(__name__)
##-- end logging

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812
import optsift.errors as oerrs
from optsift import config as opt_config
from optsift.classifier import OptionClassifier
from optsift.structs import (ExitEarly, IncorrectUsage, OptionRegistry,
                             RawArguments, Success, exit_code)
from optsift.utils.log_config import setup_logging

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import assert_never

# isort: on
# ##-- end types

printer = logmod.getLogger(API.PRINTER_NAME)

def _report_flag(flag:str) -> None:
    printer.info("Flag: %s", flag)

def _report_key(key:str, value:str) -> None:
    printer.info("Key: %s = %s", key, value)

def _spellings(config:TomlGuard, name:str) -> list[str]:
    match getattr(config.on_fail([]).registry, name)():
        case [*xs] if all(isinstance(x, str) for x in xs):
            return list(xs)
        case x:
            raise oerrs.ConfigError("registry.%s must be a list of option spellings: %s", name, x)

def build_registry(config:TomlGuard) -> OptionRegistry:
    """ Build a registry whose handlers print what they are given """
    registry   = OptionRegistry()
    exit_early = set(_spellings(config, "exit_early"))
    match config.on_fail({}).registry.usage():
        case dict() | TomlGuard() as usage:
            usage = dict(usage)
        case x:
            raise oerrs.ConfigError("registry.usage must be a table: %s", x)

    for flag in _spellings(config, "flag_opts"):
        registry.add_flag(flag, _report_flag, usage=usage.get(flag, None), exit_early=flag in exit_early)

    for key in _spellings(config, "key_opts"):
        if key in registry:
            logging.warning("Option declared as both flag and key, the flag takes precedence: %s", key)
        registry.add_key(key, _report_key, usage=usage.get(key, None), exit_early=key in exit_early)

    return registry

def run(argv:list[str], *, config:None|TomlGuard=None) -> API.ExitCodes:
    """ Classify argv, report the outcome through the printer, and return the exit code """
    try:
        if config is None:
            config = opt_config.load()
        setup_logging(config)
        registry   = build_registry(config)
        classifier = OptionClassifier(config=config)
        args       = RawArguments(argv)
        result     = classifier.classify(args, registry)
    except oerrs.OptsiftError as err:
        logging.error("%s %s", err.general_msg, err)
        return err.exit_code
    except Exception as err:
        logging.error("Python Error: %s", err, exc_info=err)
        return API.ExitCodes.PYTHON_FAIL

    match result:
        case Success():
            for pos in args.positionals():
                printer.info("Positional: %s", pos, extra={"colour": "green"})
        case ExitEarly():
            for line in registry.usage_lines():
                printer.info(line, extra={"colour": "cyan"})
        case IncorrectUsage(report=report):
            printer.warning(report.usage_message(), extra={"colour": "red"})
        case x:
            assert_never(x)

    return exit_code(result)

def main():
    sys.exit(run(sys.argv[1:]))

if __name__ == "__main__":
    main()
