"""
Setup command implementation.

Installs Qt with aqtinstall and exports its environment.
"""

import logging

from qtkit.cli.utils import format_success_message, load_command_inputs
from qtkit.pipeline import SetupPipeline

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the setup command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    inputs = load_command_inputs(args)
    result = SetupPipeline(inputs).run()

    details = {"Version": result.version, "Install root": inputs.install_root}
    if result.arch:
        details["Architecture"] = result.arch
    if result.installed_tools:
        details["Tools"] = " ".join(result.installed_tools)
    if result.qt_path:
        details["Qt path"] = result.qt_path
    if result.mutations:
        details["Variables"] = len(result.mutations)

    print(format_success_message("Qt setup complete", details))
    return 0
