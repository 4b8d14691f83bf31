"""
aqtinstall integration.

Wraps the `aqt` command line (run as `<python> -m aqt`) and the pip commands
needed to make it available on a fresh runner.
"""

import logging
import sys
from typing import List, Optional, Sequence

from ..core.exceptions import InstallError
from ..core.process import CommandResult, CommandRunner, format_command

logger = logging.getLogger(__name__)

DEFAULT_AQT_VERSION = "==3.1.*"
DEFAULT_PY7ZR_VERSION = ""


class AqtInstaller:
    """Thin wrapper around the aqtinstall CLI."""

    def __init__(
        self, python: Optional[str] = None, runner: Optional[CommandRunner] = None
    ):
        """
        Args:
            python: Interpreter used to run pip and aqt (default: current interpreter)
            runner: Command runner (default: CommandRunner())
        """
        self.python = python or sys.executable
        self.runner = runner or CommandRunner()

    def _aqt(self, subcommand: str, args: Sequence[str]) -> List[str]:
        return [self.python, "-m", "aqt", subcommand, *args]

    def _pip(self, *packages: str) -> List[str]:
        return [self.python, "-m", "pip", "install", *packages]

    def _check(self, result: CommandResult, what: str) -> CommandResult:
        if not result.ok:
            raise InstallError(
                f"{what} failed with exit code {result.returncode}\n"
                f"Command: {format_command(result.args)}"
            )
        return result

    def list_qt(self, args: Sequence[str]) -> CommandResult:
        """
        Run `aqt list-qt` and capture its output.

        The result is returned unchecked; callers decide what a failure means.
        """
        return self.runner.run(self._aqt("list-qt", args), capture=True)

    def install_qt(self, args: Sequence[str]) -> None:
        """Run `aqt install-qt` with a prepared argument vector."""
        self._check(self.runner.run(self._aqt("install-qt", args)), "aqt install-qt")

    def install_tool(self, args: Sequence[str]) -> None:
        """Run `aqt install-tool` with a prepared argument vector."""
        self._check(
            self.runner.run(self._aqt("install-tool", args)), "aqt install-tool"
        )

    def bootstrap(
        self,
        aqt_version: str = DEFAULT_AQT_VERSION,
        py7zr_version: str = DEFAULT_PY7ZR_VERSION,
    ) -> None:
        """
        Install aqtinstall and its archive backend with pip.

        Args:
            aqt_version: Requirement suffix for aqtinstall (e.g. '==3.1.*', '>=3')
            py7zr_version: Requirement suffix for py7zr, empty for any version
        """
        logger.info("Installing aqtinstall")
        steps = [
            (self._pip("setuptools", "wheel"), "pip install setuptools wheel"),
            (self._pip(f"py7zr{py7zr_version}"), "pip install py7zr"),
            (self._pip(f"aqtinstall{aqt_version}"), "pip install aqtinstall"),
        ]
        for argv, what in steps:
            self._check(self.runner.run(argv), what)
