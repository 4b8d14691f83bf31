"""
End-to-end Qt setup.

Runs the steps of a setup strictly in sequence; the first failing step
raises and nothing after it runs:

1. interpreter check (optional)
2. Linux system prerequisites
3. aqtinstall bootstrap and `aqt install-qt` / `aqt install-tool` (skipped for cached runs)
4. environment projection and export (only IQTA_TOOLS for tools-only runs)
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, MutableMapping, Optional

from .config.inputs import SetupInputs
from .core.exceptions import InstallError, ToolInstallError
from .core.platform import PlatformTriple, default_host
from .core.process import CommandRunner
from .environment.exporter import ProcessExporter, select_exporter
from .environment.projector import (
    EnvMutation,
    compute_variables,
    locate_qt_path,
    tools_variables,
)
from .install.aqt import AqtInstaller
from .install.prerequisites import install_archiver, install_prerequisites
from .install.python_env import ensure_python
from .install.resolver import InstallRequest, default_arch, resolve_version

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """What a setup run did."""

    version: str
    arch: str = ""
    install_args: List[str] = field(default_factory=list)
    installed_tools: List[str] = field(default_factory=list)
    qt_path: Optional[Path] = None
    mutations: List[EnvMutation] = field(default_factory=list)


class SetupPipeline:
    """Orchestrates one Qt setup run."""

    def __init__(
        self,
        inputs: SetupInputs,
        runner: Optional[CommandRunner] = None,
        installer: Optional[AqtInstaller] = None,
        exporter: Optional[ProcessExporter] = None,
        runner_os: Optional[str] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ):
        """
        Args:
            inputs: Validated setup inputs
            runner: Command runner shared by all collaborators
            installer: aqtinstall wrapper (default: built from inputs.python)
            exporter: Where mutations are applied (default: chosen from environ)
            runner_os: OS of the machine running the setup (default: detected)
            environ: Environment to read and update (default: os.environ)
        """
        self.inputs = inputs
        self.runner = runner or CommandRunner()
        self.installer = installer or AqtInstaller(inputs.python, self.runner)
        self.environ = environ if environ is not None else os.environ
        self.exporter = exporter or select_exporter(self.environ)
        self.runner_os = runner_os or default_host()

    def resolve(self) -> str:
        return resolve_version(
            self.inputs.version, self.inputs.host, self.inputs.target, self.installer
        )

    def build_request(self, version: str) -> InstallRequest:
        """Install request for a resolved version, filling in the default arch."""
        inputs = self.inputs
        arch = inputs.arch or default_arch(inputs.host, version) or ""
        return InstallRequest(
            triple=PlatformTriple(inputs.host, inputs.target, arch),
            version=version,
            output_dir=inputs.install_root,
            modules=inputs.module_list,
            extra_args=inputs.extra_args,
            tools=inputs.tool_list,
            tools_only=inputs.tools_only,
        )

    def install_tools(self, request: InstallRequest) -> List[str]:
        """
        Install every requested tool, one after the other.

        All tools are attempted; failures are raised together at the end.
        """
        installed = []
        failures = []
        for tool in request.tools:
            logger.info(f"Installing tool {tool}")
            try:
                self.installer.install_tool(request.tool_args(tool))
            except InstallError as e:
                logger.error(f"Tool {tool} failed: {e}")
                failures.append((str(tool), str(e)))
            else:
                installed.append(str(tool))

        if failures:
            raise ToolInstallError(failures)
        return installed

    def install(self, result: SetupResult) -> None:
        inputs = self.inputs

        install_archiver(self.runner_os, self.runner)
        self.installer.bootstrap(inputs.aqt_version, inputs.py7zr_version)

        request = self.build_request(self.resolve())
        result.version = request.version
        result.arch = request.triple.arch
        result.install_args = request.install_args()

        if not request.tools_only:
            logger.info(f"Installing Qt {request.version} ({request.triple})")
            self.installer.install_qt(result.install_args)

        result.installed_tools = self.install_tools(request)

    def project(self, result: SetupResult) -> None:
        inputs = self.inputs
        if inputs.tools_only:
            # No Qt tree to locate; only the tools directory is exported
            result.mutations = tools_variables(inputs.install_root)
            self.exporter.apply(result.mutations)
            logger.info(f"Tools available under {inputs.install_root}")
            return

        result.qt_path = locate_qt_path(inputs.install_root, result.version)
        result.mutations = compute_variables(
            result.qt_path,
            inputs.install_root,
            result.version,
            self.runner_os,
            bool(inputs.tools),
            self.environ,
        )
        self.exporter.apply(result.mutations)
        logger.info(f"Qt {result.version} available at {result.qt_path}")

    def run(self) -> SetupResult:
        """
        Execute the setup.

        Raises:
            QtKitError: From whichever step failed first
        """
        inputs = self.inputs

        if inputs.setup_python:
            ensure_python(inputs.python, runner=self.runner)

        install_prerequisites(inputs.install_deps, self.runner_os, self.runner)

        result = SetupResult(version="")
        if not inputs.cached:
            self.install(result)

        if inputs.set_env:
            # Resolved again after installing; list-qt answers the same question
            result.version = self.resolve()
            self.project(result)

        return result
