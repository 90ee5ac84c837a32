#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports

import pytest
from tomlguard import TomlGuard

import optsift._interface as API  # noqa: N812
import optsift.errors as oerrs
from optsift import __main__ as opt_main
from optsift.utils import log_config

logging = logmod.root

@pytest.fixture(scope="function")
def config():
    return TomlGuard({
        "registry": {
            "flag_opts"  : ["-v", "--help"],
            "key_opts"   : ["--config"],
            "exit_early" : ["--help"],
            "usage"      : {"--config": "the profile to use", "-v": "be verbose"},
        },
    })

@pytest.fixture(autouse=True)
def no_log_setup(mocker):
    return mocker.patch("optsift.__main__.setup_logging")

class TestBuildRegistry:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_build(self, config):
        registry = opt_main.build_registry(config)
        assert(set(registry.flags) == {"-v", "--help"})
        assert(set(registry.keys) == {"--config"})
        assert(registry.exit_early == {"--help"})
        assert(registry.usage_line("-v") == "-v : be verbose")

    def test_build_empty(self):
        registry = opt_main.build_registry(TomlGuard({}))
        assert(not bool(registry.flags))
        assert(not bool(registry.keys))

class TestRun:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_logging_setup(self, config, no_log_setup):
        opt_main.run([], config=config)
        no_log_setup.assert_called_once_with(config)

    def test_success(self, config, caplog):
        with caplog.at_level(logmod.INFO):
            code = opt_main.run(["build", "-v", "--config", "debug"], config=config)

        assert(code == API.ExitCodes.SUCCESS)
        assert("Flag: -v" in caplog.messages)
        assert("Key: --config = debug" in caplog.messages)
        assert("Positional: build" in caplog.messages)

    def test_exit_early(self, config, caplog):
        with caplog.at_level(logmod.INFO):
            code = opt_main.run(["--help", "--bogus"], config=config)

        assert(code == API.ExitCodes.SUCCESS)
        assert("-v : be verbose" in caplog.messages)

    def test_bad_usage(self, config, caplog):
        with caplog.at_level(logmod.INFO):
            code = opt_main.run(["--bogus", "--config"], config=config)

        assert(code == API.ExitCodes.BAD_USAGE)
        assert("Unrecognized options:" in caplog.text)
        assert("--config <value> : the profile to use" in caplog.text)

    def test_bad_config(self, caplog):
        config = TomlGuard({"settings": {"prefix": ""}})
        code   = opt_main.run(["-v"], config=config)
        assert(code == API.ExitCodes.BAD_CONFIG)
        assert("optsift Config Failure:" in caplog.text)
        assert("settings.prefix" in caplog.text)

    def test_bad_log_level(self, no_log_setup, caplog):
        no_log_setup.side_effect = log_config.setup_logging
        config = TomlGuard({"logging": {"stream": {"level": "LOUD"}}})
        code   = opt_main.run(["-v"], config=config)
        assert(code == API.ExitCodes.BAD_CONFIG)
        assert("Bad logging config" in caplog.text)

    def test_bad_registry_list(self, caplog):
        config = TomlGuard({"registry": {"flag_opts": "-v"}})
        code   = opt_main.run(["-v"], config=config)
        assert(code == API.ExitCodes.BAD_CONFIG)
        assert("registry.flag_opts" in caplog.text)

    def test_bad_usage_table(self):
        config = TomlGuard({"registry": {"usage": ["-v"]}})
        assert(opt_main.run(["-v"], config=config) == API.ExitCodes.BAD_CONFIG)

    def test_handler_failure(self, config, mocker, caplog):
        mocker.patch("optsift.__main__._report_flag", side_effect=RuntimeError("handler broke"))
        code = opt_main.run(["-v"], config=config)
        assert(code == API.ExitCodes.PYTHON_FAIL)
        assert("handler broke" in caplog.text)

    def test_output_colours(self, config, caplog):
        with caplog.at_level(logmod.INFO):
            opt_main.run(["build"], config=config)

        match [x for x in caplog.records if x.getMessage() == "Positional: build"]:
            case [record]:
                assert(record.colour == "green")
            case x:
                assert(False), x

    def test_usage_colour(self, config, caplog):
        opt_main.run(["--bogus"], config=config)
        match [x for x in caplog.records if "Unrecognized options:" in x.getMessage()]:
            case [record]:
                assert(record.colour == "red")
            case x:
                assert(False), x

    def test_main_exits(self, mocker):
        mocker.patch("sys.argv", ["optsift", "--bogus"])
        run_mock = mocker.patch("optsift.__main__.run", return_value=API.ExitCodes.BAD_USAGE)
        with pytest.raises(SystemExit) as ctx:
            opt_main.main()

        run_mock.assert_called_once_with(["--bogus"])
        assert(ctx.value.code == API.ExitCodes.BAD_USAGE)

class TestBuildRegistryErrors:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_flag_and_key_collision_warns(self, caplog):
        config   = TomlGuard({"registry": {"flag_opts": ["-x"], "key_opts": ["-x"]}})
        registry = opt_main.build_registry(config)
        assert("-x" in registry.flags)
        assert("-x" in registry.keys)
        assert("both flag and key" in caplog.text)

    def test_non_string_spelling(self):
        config = TomlGuard({"registry": {"key_opts": ["--config", 5]}})
        with pytest.raises(oerrs.ConfigError):
            opt_main.build_registry(config)
