"""
External command execution.

All collaborators (aqt, pip, apt-get, brew) go through CommandRunner so that
tests can substitute a fake runner and so every command is logged the same way.
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of an external command."""

    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def format_command(args: Sequence[str]) -> str:
    """Render an argument vector as a copy-pasteable shell command."""
    return " ".join(shlex.quote(str(a)) for a in args)


class CommandRunner:
    """Runs external commands sequentially, without timeouts."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        """
        Args:
            env: Environment for child processes (default: inherit)
        """
        self.env = dict(env) if env is not None else None

    def run(self, args: Sequence[str], capture: bool = False) -> CommandResult:
        """
        Run a command to completion.

        Args:
            args: Command and arguments
            capture: Capture stdout/stderr instead of streaming them to the console

        Returns:
            CommandResult with trimmed stdout when captured. A missing
            executable is reported as return code 127.
        """
        argv = [str(a) for a in args]
        logger.info(f"[command]{format_command(argv)}")

        try:
            if capture:
                completed = subprocess.run(
                    argv, capture_output=True, text=True, env=self.env
                )
            else:
                completed = subprocess.run(argv, env=self.env)
        except FileNotFoundError as e:
            logger.debug(f"Executable not found: {e}")
            return CommandResult(args=argv, returncode=127, stderr=str(e))

        stdout = (completed.stdout or "").strip() if capture else ""
        stderr = (completed.stderr or "").strip() if capture else ""
        if stderr:
            logger.debug(stderr)

        return CommandResult(
            args=argv, returncode=completed.returncode, stdout=stdout, stderr=stderr
        )
