"""
Native build prerequisites for Qt on CI runners.

Qt's Linux binaries expect a set of X11/XCB and OpenGL libraries that are not
present on stock Ubuntu images, and aqtinstall needs 7-Zip on macOS.
"""

import logging
from typing import List, Optional

from ..core.exceptions import ConfigurationError, PrerequisiteError
from ..core.process import CommandRunner, format_command

logger = logging.getLogger(__name__)

INSTALL_DEPS_POLICIES = ("true", "nosudo", "false")

APT_PACKAGES = [
    "build-essential",
    "libgl1-mesa-dev",
    "libxkbcommon-x11-0",
    "libpulse-dev",
    "libxcb-util1",
    "libxcb-glx0",
    "libxcb-icccm4",
    "libxcb-image0",
    "libxcb-keysyms1",
    "libxcb-randr0",
    "libxcb-render-util0",
    "libxcb-render0",
    "libxcb-shape0",
    "libxcb-shm0",
    "libxcb-sync1",
    "libxcb-xfixes0",
    "libxcb-xinerama0",
    "libxcb1",
]


def apt_commands(policy: str) -> List[List[str]]:
    """
    Commands that install the Linux prerequisites under a given policy.

    Args:
        policy: 'true' (use sudo), 'nosudo' (run as is) or 'false' (skip)

    Returns:
        List of argument vectors, empty when the policy is 'false'
    """
    if policy not in INSTALL_DEPS_POLICIES:
        raise ConfigurationError(
            f"Invalid install-deps value '{policy}'. "
            f"Expected one of: {', '.join(INSTALL_DEPS_POLICIES)}"
        )

    if policy == "false":
        return []

    prefix = ["sudo"] if policy == "true" else []
    return [
        prefix + ["apt-get", "update"],
        prefix + ["apt-get", "install", *APT_PACKAGES, "-y"],
    ]


def _run_all(commands: List[List[str]], runner: CommandRunner) -> None:
    for argv in commands:
        result = runner.run(argv)
        if not result.ok:
            raise PrerequisiteError(
                f"Command failed with exit code {result.returncode}: "
                f"{format_command(argv)}"
            )


def install_prerequisites(
    policy: str, runner_os: str, runner: Optional[CommandRunner] = None
) -> None:
    """Install the Linux system libraries Qt needs; no-op on other runners."""
    if runner_os != "linux":
        logger.debug(f"No system prerequisites needed on {runner_os}")
        return

    commands = apt_commands(policy)
    if not commands:
        logger.info("Skipping system dependency installation (install-deps: false)")
        return

    _run_all(commands, runner or CommandRunner())


def install_archiver(runner_os: str, runner: Optional[CommandRunner] = None) -> None:
    """Install 7-Zip on macOS, where it is not part of the runner image."""
    if runner_os != "mac":
        return
    _run_all([["brew", "install", "p7zip"]], runner or CommandRunner())
