#!/usr/bin/env python3
"""
Sorts raw cli arguments into options, and everything else.

    {prog} [positional...] [-flag] [--key value] ...

A single pass over the option-like arguments (those starting with the prefix).
Flags fire their handler, keys consume the following argument as their value,
and anything the registry doesn't know is collected for the usage report.
Arguments that aren't claimed stay unclassified, for positional processing later.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812
from optsift import config as opt_config
from optsift.structs import (ExitEarly, IncorrectUsage, OptionRegistry,
                             RawArg, RawArguments, Success, UsageReport)

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from tomlguard import TomlGuard
    from optsift.structs import ClassifyResult

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class OptionClassifier(API.Classifier_i):
    """
    Classifies in place: option arguments, and the values keys consume,
    are marked as ArgClass_e.OPTION.

    Misuse is collected across the whole pass rather than failing on the first.
    An exit-early option doesn't stop the pass,
    every handler still fires, but it overrides any misuse in the result.
    """

    def __init__(self, *, prefix:None|str=None, config:None|TomlGuard=None):
        match prefix:
            case None:
                self.prefix = opt_config.option_prefix(opt_config.load() if config is None else config)
            case str():
                self.prefix = prefix

    def classify(self, args:RawArguments, registry:OptionRegistry) -> ClassifyResult:
        unrecognized : list[str] = []
        missing      : list[str] = []
        exit_early   : bool      = False
        candidates               = [x for x in args.unclassified() if self._is_option_like(x)]
        logging.debug("Classifying %s option candidates of %s args", len(candidates), len(args))

        for arg in candidates:
            arg.classify()
            spelling = arg.value
            if spelling in registry.flags:
                logging.debug("Flag: %s", spelling)
                registry.flags[spelling](spelling)
            elif spelling in registry.keys:
                match arg.next:
                    case RawArg() as val if self._is_value(val):
                        logging.debug("Key: %s = %s", spelling, val.value)
                        val.classify()
                        registry.keys[spelling](spelling, val.value)
                    case _:
                        logging.debug("Key Missing Value: %s", spelling)
                        missing.append(spelling)
            else:
                logging.debug("Unrecognized: %s", spelling)
                unrecognized.append(spelling)

            if spelling in registry.exit_early:
                logging.debug("Exit Early Triggered by: %s", spelling)
                exit_early = True

        ##--|
        result : ClassifyResult
        match exit_early:
            case True:
                result = ExitEarly()
            case False if bool(unrecognized) or bool(missing):
                report = UsageReport(unrecognized=unrecognized,
                                     missing_values=missing,
                                     registry=registry)
                result = IncorrectUsage(report=report)
            case False:
                result = Success()

        logging.info("Classification Result: %s", type(result).__name__)
        return result

    def _is_option_like(self, arg:RawArg) -> bool:
        return arg.value.startswith(self.prefix)

    def _is_value(self, arg:RawArg) -> bool:
        """ A key's value must be unclaimed, and not look like an option itself """
        return arg.is_unclassified() and not self._is_option_like(arg)

def classify(args:RawArguments|Iterable[str], registry:OptionRegistry, *, prefix:str=API.DEFAULT_PREFIX) -> ClassifyResult:
    """ Classify with the default prefix, wrapping plain strings as RawArguments """
    match args:
        case RawArguments():
            pass
        case _:
            args = RawArguments(args)

    return OptionClassifier(prefix=prefix).classify(args, registry)
