"""
Core functionality for qtkit.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    PlatformTriple,
    default_host,
    SUPPORTED_HOSTS,
    DEFAULT_TARGET,
)

from .version import (
    parse_version,
    version_lt,
    version_ge,
    version_dir,
)

from .process import (
    CommandRunner,
    CommandResult,
    format_command,
)

from .exceptions import (
    QtKitError,
    ConfigurationError,
    ResolutionError,
    InvalidVersionError,
    InstallError,
    ToolInstallError,
    PrerequisiteError,
    InterpreterError,
    GlobMismatchError,
    ExportError,
)

__all__ = [
    "PlatformTriple",
    "default_host",
    "SUPPORTED_HOSTS",
    "DEFAULT_TARGET",
    "parse_version",
    "version_lt",
    "version_ge",
    "version_dir",
    "CommandRunner",
    "CommandResult",
    "format_command",
    "QtKitError",
    "ConfigurationError",
    "ResolutionError",
    "InvalidVersionError",
    "InstallError",
    "ToolInstallError",
    "PrerequisiteError",
    "InterpreterError",
    "GlobMismatchError",
    "ExportError",
]
