"""
Pytest configuration and shared fixtures for qtkit tests.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from qtkit.core.process import CommandResult


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that run aqtinstall against the network",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


class FakeRunner:
    """
    Records commands instead of running them.

    `responses` maps a substring of the rendered command to the result to
    return; the first matching key wins. Unmatched commands succeed.
    """

    def __init__(self, responses: Optional[Dict[str, CommandResult]] = None):
        self.responses = responses or {}
        self.calls: List[List[str]] = []

    def run(self, args, capture=False) -> CommandResult:
        argv = [str(a) for a in args]
        self.calls.append(argv)
        rendered = " ".join(argv)
        for key, result in self.responses.items():
            if key in rendered:
                return CommandResult(
                    args=argv,
                    returncode=result.returncode,
                    stdout=result.stdout,
                    stderr=result.stderr,
                )
        return CommandResult(args=argv, returncode=0)

    def commands(self) -> List[str]:
        return [" ".join(call) for call in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Command runner that records commands and succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for FakeRunner with canned responses."""
    return FakeRunner


@pytest.fixture
def make_qt_tree(tmp_path: Path):
    """Create an aqtinstall-like layout: <root>/Qt/<version_dir>/<arch>/bin."""

    def _make(version_dir: str, *arches: str) -> Path:
        install_root = tmp_path / "Qt"
        for arch in arches or ("gcc_64",):
            (install_root / version_dir / arch / "bin").mkdir(parents=True)
        return install_root

    return _make


@pytest.fixture(autouse=True)
def isolated_ci_environment(monkeypatch, tmp_path):
    """Hide the real CI environment (GitHub Actions inputs, env files) from tests."""
    for key in list(os.environ):
        if key.startswith("INPUT_") or key.startswith("GITHUB_"):
            monkeypatch.delenv(key, raising=False)
    for key in ("RUNNER_WORKSPACE", "LD_LIBRARY_PATH", "PKG_CONFIG_PATH"):
        monkeypatch.delenv(key, raising=False)
    # Keep ./qtkit.yaml of the checkout out of the tests
    monkeypatch.chdir(tmp_path)
    yield
