"""
Tests for the interpreter bootstrap.
"""

import logging
import sys

import pytest

from qtkit.core.exceptions import InterpreterError
from qtkit.core.process import CommandResult
from qtkit.install.python_env import (
    ensure_python,
    get_python_version,
    parse_python_version,
)


class TestParsePythonVersion:
    def test_full_version(self):
        assert parse_python_version("Python 3.11.7") == (3, 11, 7)

    def test_two_components(self):
        assert parse_python_version("Python 3.12") == (3, 12, 0)

    def test_prerelease(self):
        assert parse_python_version("Python 3.13.0rc1") == (3, 13, 0)

    def test_prerelease_digits_after_suffix_ignored(self):
        assert parse_python_version("Python 3.14.2b13") == (3, 14, 2)
        assert parse_python_version("Python 3.12.10+") == (3, 12, 10)

    def test_garbage(self):
        with pytest.raises(InterpreterError, match="Unexpected"):
            parse_python_version("command not found")


class TestGetPythonVersion:
    def test_current_interpreter_not_spawned(self, fake_runner):
        version = get_python_version(sys.executable, fake_runner)

        assert version == tuple(sys.version_info[:3])
        assert fake_runner.calls == []

    def test_other_interpreter(self, make_runner):
        runner = make_runner({"--version": CommandResult([], 0, stdout="Python 3.8.10")})

        assert get_python_version("/opt/py38/bin/python", runner) == (3, 8, 10)

    def test_python2_prints_to_stderr(self, make_runner):
        runner = make_runner({"--version": CommandResult([], 0, stderr="Python 2.7.18")})

        assert get_python_version("python2", runner) == (2, 7, 18)

    def test_failure(self, make_runner):
        runner = make_runner({"--version": CommandResult([], 127)})

        with pytest.raises(InterpreterError, match="exit code 127"):
            get_python_version("nopython", runner)


class TestEnsurePython:
    def test_current_interpreter_ok(self, caplog):
        with caplog.at_level(logging.INFO):
            info = ensure_python()

        assert info.executable == sys.executable
        assert "Successfully setup Python" in caplog.text

    def test_too_old(self, make_runner):
        runner = make_runner({"--version": CommandResult([], 0, stderr="Python 2.7.18")})

        with pytest.raises(InterpreterError, match="too old"):
            ensure_python("python2", runner=runner)

    def test_custom_minimum(self, make_runner):
        runner = make_runner({"--version": CommandResult([], 0, stdout="Python 3.7.3")})

        with pytest.raises(InterpreterError, match="need 3.8"):
            ensure_python("python3.7", min_version=(3, 8), runner=runner)

    def test_version_string(self, make_runner):
        runner = make_runner({"--version": CommandResult([], 0, stdout="Python 3.10.4")})

        assert ensure_python("py", runner=runner).version_string == "3.10.4"
