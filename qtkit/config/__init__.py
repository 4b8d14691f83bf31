"""
Configuration management for qtkit.

Provides loading and validation of setup inputs from the command line,
GitHub Actions input variables and qtkit.yaml.
"""

from .inputs import (
    SetupInputs,
    load_inputs,
    load_config_file,
    read_action_inputs,
    parse_bool,
    INPUT_NAMES,
    DEFAULT_CONFIG_FILE,
)

__all__ = [
    "SetupInputs",
    "load_inputs",
    "load_config_file",
    "read_action_inputs",
    "parse_bool",
    "INPUT_NAMES",
    "DEFAULT_CONFIG_FILE",
]
