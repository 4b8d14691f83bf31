"""Setup inputs for qtkit.

Inputs come from four layers, highest precedence first:

1. command-line options,
2. GitHub Actions inputs (``INPUT_<NAME>`` environment variables),
3. a ``qtkit.yaml`` file using the same input names as keys,
4. built-in defaults.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..core.exceptions import ConfigurationError
from ..core.platform import DEFAULT_TARGET, PlatformTriple, default_host
from ..install.aqt import DEFAULT_AQT_VERSION, DEFAULT_PY7ZR_VERSION
from ..install.prerequisites import INSTALL_DEPS_POLICIES
from ..install.resolver import LATEST_LTS, ToolSpec, parse_tools, split_words

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "qtkit.yaml"

# Input name -> SetupInputs field
INPUT_NAMES = {
    "dir": "dir",
    "version": "version",
    "host": "host",
    "target": "target",
    "arch": "arch",
    "modules": "modules",
    "extra": "extra",
    "tools": "tools",
    "set-env": "set_env",
    "cached": "cached",
    "install-deps": "install_deps",
    "tools-only": "tools_only",
    "aqtversion": "aqt_version",
    "py7zrversion": "py7zr_version",
    "setup-python": "setup_python",
    "python": "python",
}

_BOOL_FIELDS = ("set_env", "cached", "tools_only", "setup_python")


@dataclass
class SetupInputs:
    """Validated inputs for one setup run."""

    dir: str = ""
    version: str = LATEST_LTS
    host: str = ""
    target: str = DEFAULT_TARGET
    arch: str = ""
    modules: str = ""
    extra: str = ""
    tools: str = ""
    set_env: bool = True
    cached: bool = False
    install_deps: str = "true"
    tools_only: bool = False
    aqt_version: str = DEFAULT_AQT_VERSION
    py7zr_version: str = DEFAULT_PY7ZR_VERSION
    setup_python: bool = True
    python: str = ""

    def __post_init__(self):
        if not self.host:
            self.host = default_host()
        if not self.target:
            self.target = DEFAULT_TARGET
        if not self.version:
            self.version = LATEST_LTS
        if not self.python:
            self.python = sys.executable
        if self.install_deps not in INSTALL_DEPS_POLICIES:
            raise ConfigurationError(
                f"Invalid install-deps value '{self.install_deps}'. "
                f"Expected one of: {', '.join(INSTALL_DEPS_POLICIES)}"
            )
        # Validates the host
        PlatformTriple(self.host, self.target, self.arch)

    @property
    def install_root(self) -> Path:
        """Directory Qt is installed into: '<dir>/Qt'."""
        base = self.dir or os.environ.get("RUNNER_WORKSPACE") or os.getcwd()
        return Path(base) / "Qt"

    @property
    def module_list(self) -> List[str]:
        return split_words(self.modules)

    @property
    def extra_args(self) -> List[str]:
        return split_words(self.extra)

    @property
    def tool_list(self) -> List[ToolSpec]:
        return parse_tools(self.tools)


def parse_bool(name: str, value: Any) -> bool:
    """Parse a 'true'/'false' input, accepting real booleans from YAML."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ConfigurationError(
        f"Input '{name}' must be 'true' or 'false', got '{value}'"
    )


def _normalize(field_name: str, value: Any) -> Any:
    if field_name in _BOOL_FIELDS:
        return parse_bool(field_name, value)
    if isinstance(value, bool):
        # YAML turns `install-deps: true` into a bool
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value).strip()


def load_config_file(config_file: Optional[Path]) -> Dict[str, Any]:
    """
    Load input values from a YAML file.

    Returns:
        Mapping of input name to value; empty if the file does not exist

    Raises:
        ConfigurationError: If the YAML is invalid or not a mapping
    """
    if config_file is None or not config_file.exists():
        return {}

    logger.debug(f"Loading inputs from {config_file}")
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file} must contain a mapping of inputs")

    unknown = sorted(set(data) - set(INPUT_NAMES))
    if unknown:
        raise ConfigurationError(
            f"Unknown input(s) in {config_file}: {', '.join(unknown)}"
        )
    return data


def read_action_inputs(environ: Mapping[str, str]) -> Dict[str, str]:
    """
    Read GitHub Actions inputs from the environment.

    The runner exposes input 'set-env' as INPUT_SET-ENV. Empty values are
    treated as unset.
    """
    values = {}
    for name in INPUT_NAMES:
        key = "INPUT_" + name.replace(" ", "_").upper()
        value = environ.get(key, "").strip()
        if value:
            values[name] = value
    return values


def load_inputs(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_file: Optional[Path] = None,
) -> SetupInputs:
    """
    Merge all input layers into SetupInputs.

    Args:
        overrides: Values from the command line, keyed by input name; None means unset
        environ: Environment to read INPUT_* variables from (default: os.environ)
        config_file: YAML file (default: ./qtkit.yaml if present)

    Raises:
        ConfigurationError: If any value is invalid
    """
    environ = environ if environ is not None else os.environ
    if config_file is None:
        config_file = Path.cwd() / DEFAULT_CONFIG_FILE
    elif not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    merged: Dict[str, Any] = {}
    merged.update(load_config_file(config_file))
    merged.update(read_action_inputs(environ))
    for name, value in (overrides or {}).items():
        if value is not None:
            merged[name] = value

    kwargs = {}
    for name, value in merged.items():
        if name not in INPUT_NAMES:
            raise ConfigurationError(f"Unknown input: {name}")
        field_name = INPUT_NAMES[name]
        kwargs[field_name] = _normalize(field_name, value)

    return SetupInputs(**kwargs)
