"""
Centralized exception hierarchy for qtkit.

Every failure that should abort a setup run derives from QtKitError so the
CLI can report it in one place.
"""

from typing import List, Tuple


# ============================================================================
# Base Exceptions
# ============================================================================


class QtKitError(Exception):
    """Base exception for all qtkit errors."""

    pass


class ConfigurationError(QtKitError):
    """Raised when inputs or configuration files are invalid."""

    pass


# ============================================================================
# Resolution Exceptions
# ============================================================================


class ResolutionError(QtKitError):
    """Raised when a version specifier cannot be resolved to a Qt release."""

    def __init__(self, spec: str, detail: str = ""):
        self.spec = spec
        msg = f"Failed to resolve Qt version from SimpleSpec '{spec}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class InvalidVersionError(QtKitError):
    """Invalid version format."""

    pass


# ============================================================================
# Installation Exceptions
# ============================================================================


class InstallError(QtKitError):
    """Raised when the installer (or pip) exits with a non-zero status."""

    pass


class ToolInstallError(InstallError):
    """Raised after all requested tools ran and at least one failed."""

    def __init__(self, failures: List[Tuple[str, str]]):
        self.failures = failures
        names = ", ".join(name for name, _ in failures)
        details = "\n".join(f"  {name}: {reason}" for name, reason in failures)
        super().__init__(f"Failed to install tool(s): {names}\n{details}")


class PrerequisiteError(QtKitError):
    """Raised when OS build prerequisites cannot be installed."""

    pass


class InterpreterError(QtKitError):
    """Raised when a suitable Python interpreter is not available."""

    pass


# ============================================================================
# Environment Exceptions
# ============================================================================


class GlobMismatchError(QtKitError):
    """Raised when the installed Qt directory cannot be identified uniquely."""

    def __init__(self, search_dir, matches):
        self.search_dir = search_dir
        self.matches = list(matches)
        if not self.matches:
            msg = f"No Qt installation found under {search_dir}"
        else:
            found = ", ".join(str(m) for m in self.matches)
            msg = (
                f"Expected exactly one Qt installation under {search_dir}, "
                f"found {len(self.matches)}: {found}"
            )
        super().__init__(msg)


class ExportError(QtKitError):
    """Raised when environment changes cannot be written for later CI steps."""

    pass
