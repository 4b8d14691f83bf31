"""
Tests for the aqtinstall wrapper.
"""

import pytest

from qtkit.core.exceptions import InstallError
from qtkit.core.process import CommandResult
from qtkit.install.aqt import AqtInstaller

PY = "/usr/bin/python3"


class TestAqtInstaller:
    """Tests for AqtInstaller."""

    def test_list_qt_captures(self, make_runner):
        runner = make_runner({"list-qt": CommandResult([], 0, stdout="6.2.4")})
        installer = AqtInstaller(PY, runner)

        result = installer.list_qt(["linux", "desktop", "--spec", "6.2", "--latest"])

        assert result.stdout == "6.2.4"
        assert runner.calls == [
            [PY, "-m", "aqt", "list-qt", "linux", "desktop", "--spec", "6.2", "--latest"]
        ]

    def test_list_qt_failure_not_raised(self, make_runner):
        runner = make_runner({"list-qt": CommandResult([], 1)})

        result = AqtInstaller(PY, runner).list_qt(["linux", "desktop"])

        assert result.returncode == 1

    def test_install_qt(self, fake_runner):
        AqtInstaller(PY, fake_runner).install_qt(["linux", "desktop", "6.2.4"])

        assert fake_runner.calls == [
            [PY, "-m", "aqt", "install-qt", "linux", "desktop", "6.2.4"]
        ]

    def test_install_qt_failure(self, make_runner):
        runner = make_runner({"install-qt": CommandResult([], 2)})

        with pytest.raises(InstallError, match="exit code 2"):
            AqtInstaller(PY, runner).install_qt(["linux", "desktop", "6.2.4"])

    def test_install_tool_failure(self, make_runner):
        runner = make_runner({"install-tool": CommandResult([], 1)})

        with pytest.raises(InstallError, match="aqt install-tool"):
            AqtInstaller(PY, runner).install_tool(["linux", "desktop", "tools_ifw"])

    def test_bootstrap_commands(self, fake_runner):
        AqtInstaller(PY, fake_runner).bootstrap("==3.1.*", ">=0.20")

        assert fake_runner.commands() == [
            f"{PY} -m pip install setuptools wheel",
            f"{PY} -m pip install py7zr>=0.20",
            f"{PY} -m pip install aqtinstall==3.1.*",
        ]

    def test_bootstrap_unpinned(self, fake_runner):
        AqtInstaller(PY, fake_runner).bootstrap("", "")

        assert fake_runner.calls[1][-1] == "py7zr"
        assert fake_runner.calls[2][-1] == "aqtinstall"

    def test_bootstrap_stops_at_first_failure(self, make_runner):
        runner = make_runner({"py7zr": CommandResult([], 1)})

        with pytest.raises(InstallError, match="py7zr"):
            AqtInstaller(PY, runner).bootstrap()

        assert not any("aqtinstall" in c for c in runner.commands())

    def test_defaults_to_current_interpreter(self):
        import sys

        assert AqtInstaller().python == sys.executable
