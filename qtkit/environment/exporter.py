"""
Applying environment mutations.

Exporters are the only place where computed EnvMutations touch the outside
world: the current process environment and, on GitHub Actions, the
GITHUB_ENV / GITHUB_PATH files read by subsequent workflow steps.
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Iterable, List, MutableMapping, Optional

from ..core.exceptions import ConfigurationError, ExportError
from .projector import EnvMutation, EnvOp

logger = logging.getLogger(__name__)

SHELLS = ("sh", "powershell")


class ProcessExporter:
    """Apply mutations to a process environment mapping."""

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self.environ = environ if environ is not None else os.environ

    def export_variable(self, name: str, value: str) -> None:
        self.environ[name] = value

    def add_path(self, path: str) -> None:
        current = self.environ.get("PATH")
        self.environ["PATH"] = f"{path}{os.pathsep}{current}" if current else path

    def apply(self, mutations: Iterable[EnvMutation]) -> None:
        """Apply mutations in order."""
        for mutation in mutations:
            logger.debug(f"Exporting {mutation}")
            if mutation.op is EnvOp.PREPEND_PATH:
                self.add_path(mutation.value)
            else:
                self.export_variable(mutation.name, mutation.value)


class GitHubActionsExporter(ProcessExporter):
    """
    Export variables for later steps of a GitHub Actions job.

    Every change is also mirrored into the process environment so commands
    run later by this process see it.
    """

    def __init__(
        self,
        env_file: Path,
        path_file: Optional[Path] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ):
        super().__init__(environ)
        self.env_file = Path(env_file)
        self.path_file = Path(path_file) if path_file else None

    def _append(self, file: Path, text: str) -> None:
        try:
            with open(file, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise ExportError(f"Failed to write {file}: {e}") from e

    def export_variable(self, name: str, value: str) -> None:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ExportError(f"Delimiter collision while exporting {name}")
        self._append(self.env_file, f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        super().export_variable(name, value)

    def add_path(self, path: str) -> None:
        if self.path_file is None:
            raise ExportError("GITHUB_PATH is not set; cannot add to PATH")
        self._append(self.path_file, f"{path}\n")
        super().add_path(path)


def select_exporter(
    environ: Optional[MutableMapping[str, str]] = None,
) -> ProcessExporter:
    """Choose the GitHub Actions exporter when running inside a workflow."""
    environ = environ if environ is not None else os.environ

    env_file = environ.get("GITHUB_ENV")
    if environ.get("GITHUB_ACTIONS") == "true" and env_file:
        path_file = environ.get("GITHUB_PATH")
        logger.debug(f"Exporting to GitHub Actions files {env_file}, {path_file}")
        return GitHubActionsExporter(
            Path(env_file), Path(path_file) if path_file else None, environ
        )

    return ProcessExporter(environ)


def _quote_sh(value: str) -> str:
    return "'" + value.replace("'", "'\"'\"'") + "'"


def _quote_ps(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def render_shell(mutations: Iterable[EnvMutation], shell: str = "sh") -> str:
    """
    Render mutations as shell commands.

    Example:
        eval "$(qtkit env --shell sh)"
    """
    if shell not in SHELLS:
        raise ConfigurationError(
            f"Unsupported shell '{shell}'. Expected one of: {', '.join(SHELLS)}"
        )

    lines: List[str] = []
    for mutation in mutations:
        if shell == "sh":
            if mutation.op is EnvOp.PREPEND_PATH:
                lines.append(f'export PATH={_quote_sh(mutation.value)}:"$PATH"')
            else:
                lines.append(f"export {mutation.name}={_quote_sh(mutation.value)}")
        else:
            if mutation.op is EnvOp.PREPEND_PATH:
                lines.append(
                    f"$env:PATH = {_quote_ps(mutation.value)} + "
                    f"[IO.Path]::PathSeparator + $env:PATH"
                )
            else:
                lines.append(f"$env:{mutation.name} = {_quote_ps(mutation.value)}")

    return "\n".join(lines)
