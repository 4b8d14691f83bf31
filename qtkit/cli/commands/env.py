"""
Env command implementation.

Computes the environment of an already installed Qt. By default the
variables are printed as shell commands:

    eval "$(qtkit env --qt-version 6.2)"
"""

import logging
import os

from qtkit.cli.utils import load_command_inputs
from qtkit.core.platform import default_host
from qtkit.environment.exporter import render_shell, select_exporter
from qtkit.environment.projector import project_environment
from qtkit.install.aqt import AqtInstaller
from qtkit.install.resolver import resolve_version

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the env command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    inputs = load_command_inputs(args)
    installer = AqtInstaller(inputs.python)

    version = resolve_version(inputs.version, inputs.host, inputs.target, installer)
    mutations = project_environment(
        inputs.install_root, version, default_host(), bool(inputs.tools), os.environ
    )

    if args.apply:
        select_exporter().apply(mutations)
        logger.info(f"Exported {len(mutations)} variable(s) for Qt {version}")
    else:
        print(render_shell(mutations, args.shell))
    return 0
