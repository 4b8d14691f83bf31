"""
Projection of an installed Qt tree onto build environment variables.

compute_variables() is pure: it returns the list of changes to make and
never touches os.environ. Applying the changes is the exporter's job.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional

from ..core.exceptions import GlobMismatchError
from ..core.version import version_dir, version_lt

logger = logging.getLogger(__name__)


class EnvOp(Enum):
    """How an EnvMutation is applied."""

    SET = "set"
    APPEND_COLON = "append"
    PREPEND_PATH = "path"


@dataclass(frozen=True)
class EnvMutation:
    """
    A single change to the build environment.

    For APPEND_COLON the value already contains the previous contents, so
    every non-path mutation can be applied as a plain assignment.
    """

    name: str
    op: EnvOp
    value: str

    def __str__(self) -> str:
        if self.op is EnvOp.PREPEND_PATH:
            return f"PATH += {self.value}"
        return f"{self.name}={self.value}"


def _posix(path) -> str:
    return Path(path).as_posix()


def locate_qt_path(install_root: Path, version: str) -> Path:
    """
    Find the installed Qt directory for a version.

    aqtinstall nests the tree one level below the version directory
    (e.g. Qt/6.2.4/gcc_64), and that segment depends on the architecture.

    Raises:
        GlobMismatchError: If there is not exactly one candidate directory
    """
    search_dir = Path(install_root) / version_dir(version)
    matches = (
        sorted(p for p in search_dir.glob("*") if p.is_dir())
        if search_dir.is_dir()
        else []
    )

    if len(matches) != 1:
        raise GlobMismatchError(search_dir, matches)

    logger.debug(f"Found Qt installation at {matches[0]}")
    return matches[0]


def _append(name: str, addition: str, environ: Mapping[str, str]) -> EnvMutation:
    existing = environ.get(name)
    if existing:
        return EnvMutation(name, EnvOp.APPEND_COLON, f"{existing}:{addition}")
    return EnvMutation(name, EnvOp.SET, addition)


def tools_variables(install_root: Path) -> List[EnvMutation]:
    """Variables for tools installed under `install_root`, with or without Qt."""
    return [EnvMutation("IQTA_TOOLS", EnvOp.SET, f"{_posix(install_root)}/Tools")]


def compute_variables(
    qt_path: Path,
    install_root: Path,
    version: str,
    host: str,
    tools_requested: bool,
    environ: Optional[Mapping[str, str]] = None,
) -> List[EnvMutation]:
    """
    Compute the environment for an installed Qt.

    Args:
        qt_path: Installed Qt directory (output of locate_qt_path)
        install_root: Directory passed to aqt with -O
        version: Resolved Qt version
        host: OS of the runner ('windows', 'mac', 'linux')
        tools_requested: Whether any tools were requested
        environ: Current environment, used for the colon-separated search paths

    Returns:
        Ordered list of mutations
    """
    environ = environ if environ is not None else {}
    qt = _posix(qt_path)
    mutations = []

    if tools_requested:
        mutations.extend(tools_variables(install_root))

    if host == "linux":
        mutations.append(_append("LD_LIBRARY_PATH", f"{qt}/lib", environ))

    if host != "windows":
        mutations.append(_append("PKG_CONFIG_PATH", f"{qt}/lib/pkgconfig", environ))

    if version_lt(version, "6.0.0"):
        # Qt5_Dir is a misspelling kept for workflows that still read it
        mutations.append(EnvMutation("Qt5_Dir", EnvOp.SET, qt))
        mutations.append(EnvMutation("Qt5_DIR", EnvOp.SET, qt))
    else:
        mutations.append(EnvMutation("Qt6_DIR", EnvOp.SET, qt))

    mutations.append(EnvMutation("QT_PLUGIN_PATH", EnvOp.SET, f"{qt}/plugins"))
    mutations.append(EnvMutation("QML2_IMPORT_PATH", EnvOp.SET, f"{qt}/qml"))
    mutations.append(EnvMutation("PATH", EnvOp.PREPEND_PATH, f"{qt}/bin"))

    return mutations


def project_environment(
    install_root: Path,
    version: str,
    host: str,
    tools_requested: bool,
    environ: Optional[Mapping[str, str]] = None,
) -> List[EnvMutation]:
    """Locate the installed Qt and compute its environment in one step."""
    qt_path = locate_qt_path(install_root, version)
    return compute_variables(
        qt_path, install_root, version, host, tools_requested, environ
    )
