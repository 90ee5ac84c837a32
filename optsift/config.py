#!/usr/bin/env python3
"""
Loading toml config for optsift.

Reads the first existing file of the load targets,
(optsift.toml, then the [tool.optsift] table of pyproject.toml),
and wraps it in a TomlGuard, so values are read as::

    config.on_fail("-", str).settings.prefix()

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib
# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import optsift._interface as API  # noqa: N812
from optsift.errors import ConfigError

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def load(*targets:str|pl.Path) -> TomlGuard:
    """ Load the first existing target. No existing target gives an empty config """
    candidates = [pl.Path(x) for x in (targets or API.DEFAULT_LOAD_TARGETS)]
    for path in candidates:
        if not path.is_file():
            logging.debug("No config at: %s", path)
            continue

        logging.info("Loading config: %s", path)
        try:
            data = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as err:
            raise ConfigError("Failed to parse config file: %s : %s", path, err) from None

        if path.name == "pyproject.toml":
            data = _remove_prefix(data, API.TOOL_PREFIX)

        return TomlGuard(data)
    else:
        logging.info("No config found, using defaults")
        return TomlGuard({})

def _remove_prefix(data:dict[str, Any], prefix:str) -> dict[str, Any]:
    """ Descend into a dotted table prefix, eg: tool.optsift """
    for key in prefix.split("."):
        match data.get(key, None):
            case None:
                return {}
            case dict() as sub:
                data = sub
            case x:
                raise ConfigError("Config prefix is not a table: %s : %s", prefix, type(x))

    return data

def option_prefix(config:TomlGuard) -> str:
    match config.on_fail(API.DEFAULT_PREFIX).settings.prefix():
        case str() as prefix if bool(prefix):
            return prefix
        case x:
            raise ConfigError("settings.prefix must be a non-empty string: %s", x)
