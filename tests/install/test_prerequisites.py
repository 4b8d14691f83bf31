"""
Tests for OS prerequisite installation.
"""

import pytest

from qtkit.core.exceptions import ConfigurationError, PrerequisiteError
from qtkit.core.process import CommandResult
from qtkit.install.prerequisites import (
    APT_PACKAGES,
    apt_commands,
    install_archiver,
    install_prerequisites,
)


class TestAptCommands:
    def test_sudo_policy(self):
        commands = apt_commands("true")

        assert commands[0] == ["sudo", "apt-get", "update"]
        assert commands[1][:3] == ["sudo", "apt-get", "install"]
        assert commands[1][-1] == "-y"
        assert set(APT_PACKAGES) <= set(commands[1])

    def test_nosudo_policy(self):
        commands = apt_commands("nosudo")

        assert commands[0] == ["apt-get", "update"]
        assert all("sudo" not in c for c in commands)

    def test_false_policy(self):
        assert apt_commands("false") == []

    def test_invalid_policy(self):
        with pytest.raises(ConfigurationError, match="install-deps"):
            apt_commands("maybe")


class TestInstallPrerequisites:
    def test_linux_runs_apt(self, fake_runner):
        install_prerequisites("true", "linux", fake_runner)

        assert fake_runner.commands()[0] == "sudo apt-get update"
        assert len(fake_runner.calls) == 2

    @pytest.mark.parametrize("runner_os", ["windows", "mac"])
    def test_other_runners_skip(self, fake_runner, runner_os):
        install_prerequisites("true", runner_os, fake_runner)

        assert fake_runner.calls == []

    def test_false_skips(self, fake_runner):
        install_prerequisites("false", "linux", fake_runner)

        assert fake_runner.calls == []

    def test_failure_raises_and_stops(self, make_runner):
        runner = make_runner({"update": CommandResult([], 100)})

        with pytest.raises(PrerequisiteError, match="apt-get update"):
            install_prerequisites("nosudo", "linux", runner)

        assert len(runner.calls) == 1


class TestInstallArchiver:
    def test_mac_installs_p7zip(self, fake_runner):
        install_archiver("mac", fake_runner)

        assert fake_runner.commands() == ["brew install p7zip"]

    def test_linux_noop(self, fake_runner):
        install_archiver("linux", fake_runner)

        assert fake_runner.calls == []

    def test_brew_failure(self, make_runner):
        runner = make_runner({"brew": CommandResult([], 127)})

        with pytest.raises(PrerequisiteError):
            install_archiver("mac", runner)
