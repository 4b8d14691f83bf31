"""
Platform handling for qtkit.

This module maps the running operating system onto the host names understood
by aqtinstall and describes the (host, target, arch) triple an installation
is made for.

Usage:
    from qtkit.core.platform import PlatformTriple, default_host

    triple = PlatformTriple(host=default_host(), target="desktop")
    if triple.arch_required():
        ...
"""

import platform
from dataclasses import dataclass

from .exceptions import ConfigurationError

# Hosts accepted by `aqt install-qt`
SUPPORTED_HOSTS = ("windows", "mac", "linux", "android", "ios")

DEFAULT_TARGET = "desktop"

# Architectures that must always be passed explicitly to the installer
_EXPLICIT_ARCH_HOSTS = ("windows", "android")
_EXPLICIT_ARCH_TARGETS = ("android",)
_EXPLICIT_ARCHES = ("wasm_32",)


def default_host() -> str:
    """
    Detect the host name for the running operating system.

    Returns:
        'windows', 'mac' or 'linux'. Any OS that is neither Windows nor
        macOS is reported as 'linux'.

    Example:
        >>> default_host()  # on an Ubuntu runner
        'linux'
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "darwin":
        return "mac"
    else:
        return "linux"


@dataclass
class PlatformTriple:
    """
    The platform a Qt installation is requested for.

    Attributes:
        host: Host OS the SDK runs on ('windows', 'mac', 'linux', 'android', 'ios')
        target: Deployment target category ('desktop', 'android', 'ios', 'wasm')
        arch: Architecture name (e.g. 'win64_msvc2019_64'), empty if not chosen
    """

    host: str
    target: str = DEFAULT_TARGET
    arch: str = ""

    def __post_init__(self):
        if self.host not in SUPPORTED_HOSTS:
            raise ConfigurationError(
                f"Unsupported host '{self.host}'. "
                f"Expected one of: {', '.join(SUPPORTED_HOSTS)}"
            )
        if not self.target:
            self.target = DEFAULT_TARGET
        if self.arch is None:
            self.arch = ""

    def arch_required(self) -> bool:
        """
        Whether the installer expects the architecture as a positional argument.

        aqtinstall infers the architecture for mac, linux and ios desktop
        installs, so it is only passed for windows/android hosts, android
        targets and the wasm_32 architecture.
        """
        return (
            self.host in _EXPLICIT_ARCH_HOSTS
            or self.target in _EXPLICIT_ARCH_TARGETS
            or self.arch in _EXPLICIT_ARCHES
        )

    def __str__(self) -> str:
        parts = [self.host, self.target]
        if self.arch:
            parts.append(self.arch)
        return "/".join(parts)
