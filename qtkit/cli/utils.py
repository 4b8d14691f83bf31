"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
import os
import sys
from typing import Any, Dict, Optional

from qtkit.config.inputs import SetupInputs, load_inputs

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================

# argparse dest -> input name
_ARG_INPUTS = {
    "dir": "dir",
    "qt_version": "version",
    "host": "host",
    "target": "target",
    "arch": "arch",
    "modules": "modules",
    "extra": "extra",
    "tools": "tools",
    "set_env": "set-env",
    "cached": "cached",
    "install_deps": "install-deps",
    "tools_only": "tools-only",
    "aqtversion": "aqtversion",
    "py7zrversion": "py7zrversion",
    "setup_python": "setup-python",
    "python": "python",
}


def collect_overrides(args) -> Dict[str, Any]:
    """
    Extract input overrides from parsed arguments.

    Only options the command defines and the user actually passed are returned.
    """
    overrides = {}
    for dest, name in _ARG_INPUTS.items():
        value = getattr(args, dest, None)
        if value is not None:
            overrides[name] = value
    return overrides


def load_command_inputs(args) -> SetupInputs:
    """Build SetupInputs from CLI options, INPUT_* variables and the config file."""
    return load_inputs(
        collect_overrides(args), config_file=getattr(args, "config", None)
    )


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_success_message(
    title: str,
    details: Dict[str, Any],
    width: int = 70,
) -> str:
    """
    Format a standardized success message.

    Args:
        title: Success message title
        details: Key-value pairs to display
        width: Width of message box

    Returns:
        Formatted message string
    """
    lines = []
    lines.append("=" * width)
    lines.append(title)
    lines.append("=" * width)
    lines.append("")

    for key, value in details.items():
        lines.append(f"{key}: {value}")

    lines.append("")
    return "\n".join(lines)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def report_failure(message: str):
    """
    Report a failed run.

    Inside GitHub Actions an error annotation is emitted so the message
    shows up on the workflow summary.
    """
    logger.debug("Run failed", exc_info=True)
    if os.environ.get("GITHUB_ACTIONS") == "true":
        first, _, rest = message.partition("\n")
        # Annotations are single-line; the remaining lines go to stderr
        print(f"::error::{first}")
        if rest:
            print(rest, file=sys.stderr)
    else:
        print_error(message)
