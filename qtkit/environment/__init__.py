"""
Build environment projection for installed Qt trees.
"""

from .projector import (
    EnvOp,
    EnvMutation,
    locate_qt_path,
    compute_variables,
    project_environment,
    tools_variables,
)
from .exporter import (
    ProcessExporter,
    GitHubActionsExporter,
    select_exporter,
    render_shell,
)

__all__ = [
    "EnvOp",
    "EnvMutation",
    "locate_qt_path",
    "compute_variables",
    "project_environment",
    "tools_variables",
    "ProcessExporter",
    "GitHubActionsExporter",
    "select_exporter",
    "render_shell",
]
