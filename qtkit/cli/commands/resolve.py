"""
Resolve command implementation.

Prints the exact Qt version and architecture a setup run would use.
"""

import logging

from qtkit.cli.utils import load_command_inputs
from qtkit.install.aqt import AqtInstaller
from qtkit.install.resolver import default_arch, resolve_version

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    inputs = load_command_inputs(args)
    installer = AqtInstaller(inputs.python)

    version = resolve_version(inputs.version, inputs.host, inputs.target, installer)
    arch = inputs.arch or default_arch(inputs.host, version) or ""

    print(f"version={version}")
    print(f"arch={arch}")
    return 0
