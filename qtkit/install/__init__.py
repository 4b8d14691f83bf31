"""
Qt installation: version resolution and the external tools it drives.
"""

from .resolver import (
    LATEST_LTS,
    ToolSpec,
    InstallRequest,
    resolve_version,
    default_arch,
    build_install_args,
    build_tool_args,
    parse_tools,
    split_words,
)
from .aqt import AqtInstaller
from .prerequisites import install_prerequisites, install_archiver
from .python_env import ensure_python, PythonInfo

__all__ = [
    "LATEST_LTS",
    "ToolSpec",
    "InstallRequest",
    "resolve_version",
    "default_arch",
    "build_install_args",
    "build_tool_args",
    "parse_tools",
    "split_words",
    "AqtInstaller",
    "install_prerequisites",
    "install_archiver",
    "ensure_python",
    "PythonInfo",
]
