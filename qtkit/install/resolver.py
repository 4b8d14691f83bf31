"""
Qt version and architecture resolution.

Maps a loose version specifier onto a concrete Qt release (by asking
`aqt list-qt`), picks a default architecture when none was requested and
builds the positional argument vectors aqtinstall expects.

Example:
    installer = AqtInstaller()
    version = resolve_version("6.2", "linux", "desktop", installer)
    triple = PlatformTriple("windows", "desktop")
    triple.arch = default_arch(triple.host, version) or ""
    args = build_install_args(triple, version, ["qtcharts"], Path("/ci/Qt"))
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.exceptions import ResolutionError
from ..core.platform import PlatformTriple
from ..core.version import version_ge, version_lt

logger = logging.getLogger(__name__)

LATEST_LTS = "latest-LTS"

# Qt series the "latest-LTS" sentinel currently stands for
LTS_SERIES = "6.2"


def split_words(text: Optional[str]) -> List[str]:
    """Split a space-delimited input into tokens, ignoring repeated blanks."""
    if not text:
        return []
    return text.split()


def expand_spec(spec: Optional[str]) -> str:
    """Replace the latest-LTS sentinel (or an empty spec) with the LTS series."""
    if not spec or spec == LATEST_LTS:
        return LTS_SERIES
    return spec


def list_qt_args(spec: str, host: str, target: str) -> List[str]:
    """Arguments for `aqt list-qt` that select the newest release matching `spec`."""
    return [host, target, "--spec", expand_spec(spec), "--latest"]


def resolve_version(spec: str, host: str, target: str, installer) -> str:
    """
    Resolve a SimpleSpec to the newest matching Qt version.

    If `spec` is already an exact version, aqt returns it when it exists.

    Args:
        spec: Version specifier ('6.2', '>=5.15,<6', '5.15.2', 'latest-LTS')
        host: Host OS name
        target: Target name
        installer: Object with a `list_qt(args)` method returning a CommandResult

    Returns:
        Exact version string, e.g. '6.2.4'

    Raises:
        ResolutionError: If the lookup exits non-zero or does not print
            exactly one version
    """
    result = installer.list_qt(list_qt_args(spec, host, target))

    if result.returncode != 0:
        raise ResolutionError(spec, f"aqt list-qt exited with {result.returncode}")

    version = result.stdout.strip()
    if not version:
        raise ResolutionError(spec, "aqt list-qt returned no matching version")
    if len(version.splitlines()) > 1:
        raise ResolutionError(
            spec, f"aqt list-qt returned more than one line: {result.stdout!r}"
        )

    logger.debug(f"Resolved '{spec}' for {host}/{target} to {version}")
    return version


def default_arch(host: str, version: str) -> Optional[str]:
    """
    Architecture to install when the user did not choose one.

    The windows checks run in this order: 2019 toolchain first, then the
    older toolchains from oldest to newest.

    Returns:
        Architecture name, or None when aqt can infer it for the host
    """
    if host == "windows":
        if version_ge(version, "5.15.0"):
            return "win64_msvc2019_64"
        elif version_lt(version, "5.6.0"):
            return "win64_msvc2013_64"
        elif version_lt(version, "5.9.0"):
            return "win64_msvc2015_64"
        else:
            return "win64_msvc2017_64"
    elif host == "android":
        return "android_armv7"
    return None


@dataclass
class ToolSpec:
    """A tool requested as 'name[,variant]'."""

    name: str
    variant: str = ""

    @classmethod
    def parse(cls, token: str) -> "ToolSpec":
        """
        Parse a single tool token.

        Example:
            >>> ToolSpec.parse("tools_ifw,qt.tools.ifw.43")
            ToolSpec(name='tools_ifw', variant='qt.tools.ifw.43')
        """
        elements = token.split(",")
        variant = elements[-1] if len(elements) > 1 else ""
        return cls(name=elements[0], variant=variant)

    def __str__(self) -> str:
        return f"{self.name},{self.variant}" if self.variant else self.name


def parse_tools(text: Optional[str]) -> List[ToolSpec]:
    """Parse a space-delimited list of tool tokens."""
    return [ToolSpec.parse(token) for token in split_words(text)]


def output_args(output_dir: Path, extra_args: Sequence[str] = ()) -> List[str]:
    """The `-O <dir>` pair followed by verbatim extra arguments."""
    return ["-O", str(output_dir), *extra_args]


def build_install_args(
    triple: PlatformTriple,
    version: str,
    modules: Sequence[str],
    output_dir: Path,
    extra_args: Sequence[str] = (),
) -> List[str]:
    """
    Build the positional argument vector for `aqt install-qt`.

    Order matters: host, target, version, [arch], [-m modules...], -O dir, extra.
    """
    args = [triple.host, triple.target, version]

    if triple.arch and triple.arch_required():
        args.append(triple.arch)

    if modules:
        args.append("-m")
        args.extend(modules)

    args.extend(output_args(output_dir, extra_args))
    return args


def build_tool_args(
    host: str,
    target: str,
    tool: ToolSpec,
    output_dir: Path,
    extra_args: Sequence[str] = (),
) -> List[str]:
    """Build the argument vector for `aqt install-tool`."""
    args = [host, target, tool.name]
    if tool.variant:
        args.append(tool.variant)
    args.extend(output_args(output_dir, extra_args))
    return args


@dataclass
class InstallRequest:
    """Everything needed to invoke the installer for one Qt release."""

    triple: PlatformTriple
    version: str
    output_dir: Path
    modules: List[str] = field(default_factory=list)
    extra_args: List[str] = field(default_factory=list)
    tools: List[ToolSpec] = field(default_factory=list)
    tools_only: bool = False

    def install_args(self) -> List[str]:
        return build_install_args(
            self.triple, self.version, self.modules, self.output_dir, self.extra_args
        )

    def tool_args(self, tool: ToolSpec) -> List[str]:
        return build_tool_args(
            self.triple.host,
            self.triple.target,
            tool,
            self.output_dir,
            self.extra_args,
        )
