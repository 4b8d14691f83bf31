"""
Interpreter bootstrap for aqtinstall.

aqtinstall needs Python 3.6 or newer. The interpreter that will run pip and
aqt is probed once at the start of a run and its version is logged.
"""

import logging
import re
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.exceptions import InterpreterError
from ..core.process import CommandRunner

logger = logging.getLogger(__name__)

MIN_PYTHON = (3, 6)


@dataclass
class PythonInfo:
    """A probed Python interpreter."""

    executable: str
    version: Tuple[int, int, int]

    @property
    def version_string(self) -> str:
        return ".".join(str(part) for part in self.version)


def parse_python_version(output: str) -> Tuple[int, int, int]:
    """
    Parse the output of `python --version`.

    Example:
        >>> parse_python_version("Python 3.11.7")
        (3, 11, 7)
    """
    if not output.startswith("Python "):
        raise InterpreterError(f"Unexpected version output: {output!r}")

    parts = output.split()[1].split(".")
    if len(parts) < 3:
        parts += ["0"] * (3 - len(parts))

    try:
        # Keep the leading digits of a pre-release patch such as "0rc1"
        match = re.match(r"\d+", parts[2])
        patch = match.group(0) if match else "0"
        return (int(parts[0]), int(parts[1]), int(patch))
    except ValueError as e:
        raise InterpreterError(f"Failed to parse Python version: {output!r}") from e


def get_python_version(
    python: str, runner: Optional[CommandRunner] = None
) -> Tuple[int, int, int]:
    """Version of `python`, without spawning a process for the running interpreter."""
    if python == sys.executable:
        return tuple(sys.version_info[:3])

    result = (runner or CommandRunner()).run([python, "--version"], capture=True)
    if not result.ok:
        raise InterpreterError(
            f"Failed to run {python} --version (exit code {result.returncode})"
        )
    # Python 2 printed its version on stderr
    return parse_python_version(result.stdout or result.stderr)


def ensure_python(
    python: Optional[str] = None,
    min_version: Tuple[int, int] = MIN_PYTHON,
    runner: Optional[CommandRunner] = None,
) -> PythonInfo:
    """
    Check that the interpreter used for aqt is recent enough.

    Raises:
        InterpreterError: If the interpreter cannot be run or is too old
    """
    executable = python or sys.executable
    version = get_python_version(executable, runner)

    if version[:2] < tuple(min_version):
        wanted = ".".join(str(v) for v in min_version)
        raise InterpreterError(
            f"Python {version[0]}.{version[1]} at {executable} is too old "
            f"(need {wanted}+)"
        )

    info = PythonInfo(executable=executable, version=version)
    logger.info(f"Successfully setup Python ({info.version_string})")
    return info
