"""
qtkit CLI argument parser.

This module implements the command-line interface for qtkit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from qtkit import __version__ as _fallback_version
from qtkit.core.exceptions import QtKitError
from qtkit.core.platform import SUPPORTED_HOSTS
from qtkit.install.prerequisites import INSTALL_DEPS_POLICIES

# Get version from installed package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("qtkit")
except PackageNotFoundError:
    __version__ = _fallback_version

logger = logging.getLogger(__name__)

BOOL_CHOICES = ["true", "false"]


class CLI:
    """qtkit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="qtkit",
            description="qtkit - Install Qt on CI runners with aqtinstall",
            epilog='Use "qtkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"qtkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to inputs file (default: ./qtkit.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_setup_command(subparsers)
        self._add_resolve_command(subparsers)
        self._add_env_command(subparsers)

        return parser

    def _add_qt_options(self, parser):
        """Options that select which Qt is meant."""
        parser.add_argument(
            "--qt-version",
            "--version",
            dest="qt_version",
            metavar="SPEC",
            help="Version or SimpleSpec, e.g. 6.2, 5.15.2, '>=5.15,<6' (default: latest-LTS)",
        )
        parser.add_argument(
            "--host",
            choices=list(SUPPORTED_HOSTS),
            metavar="HOST",
            help="Host OS (windows|mac|linux|android|ios) [default: this machine]",
        )
        parser.add_argument(
            "--target",
            metavar="TARGET",
            help="Target (desktop, android, ios, wasm) [default: desktop]",
        )
        parser.add_argument(
            "--python",
            metavar="PATH",
            help="Interpreter used to run pip and aqt (default: this interpreter)",
        )

    def _add_setup_command(self, subparsers):
        """Add 'setup' subcommand."""
        parser = subparsers.add_parser(
            "setup",
            help="Install Qt and export its environment",
            description="Resolve, install and export a Qt release",
        )
        self._add_qt_options(parser)
        parser.add_argument("--dir", metavar="DIR", help="Base directory for Qt")
        parser.add_argument(
            "--arch", metavar="ARCH", help="Architecture (e.g. win64_msvc2019_64)"
        )
        parser.add_argument(
            "--modules", metavar="LIST", help="Space-separated extra modules"
        )
        parser.add_argument(
            "--extra", metavar="ARGS", help="Extra arguments passed to aqt verbatim"
        )
        parser.add_argument(
            "--tools", metavar="LIST", help="Space-separated 'name[,variant]' tools"
        )
        parser.add_argument(
            "--set-env",
            choices=BOOL_CHOICES,
            metavar="BOOL",
            help="Export Qt environment variables [default: true]",
        )
        parser.add_argument(
            "--cached",
            action="store_const",
            const="true",
            help="Qt is already installed (restored from a cache); only export",
        )
        parser.add_argument(
            "--install-deps",
            choices=list(INSTALL_DEPS_POLICIES),
            metavar="POLICY",
            help="Install Linux prerequisites (true|nosudo|false) [default: true]",
        )
        parser.add_argument(
            "--tools-only",
            action="store_const",
            const="true",
            help="Only install the requested tools, not Qt itself",
        )
        parser.add_argument(
            "--aqtversion", metavar="PIN", help="aqtinstall requirement, e.g. '==3.1.*'"
        )
        parser.add_argument(
            "--py7zrversion", metavar="PIN", help="py7zr requirement, e.g. '>=0.20'"
        )
        parser.add_argument(
            "--setup-python",
            choices=BOOL_CHOICES,
            metavar="BOOL",
            help="Check the interpreter before installing [default: true]",
        )

    def _add_resolve_command(self, subparsers):
        """Add 'resolve' subcommand."""
        parser = subparsers.add_parser(
            "resolve",
            help="Resolve a version specifier",
            description="Print the Qt version and architecture a setup would install",
        )
        self._add_qt_options(parser)
        parser.add_argument(
            "--arch", metavar="ARCH", help="Architecture override"
        )

    def _add_env_command(self, subparsers):
        """Add 'env' subcommand."""
        parser = subparsers.add_parser(
            "env",
            help="Print or apply the environment of an installed Qt",
            description="Compute the environment variables for an installed Qt",
        )
        self._add_qt_options(parser)
        parser.add_argument("--dir", metavar="DIR", help="Base directory for Qt")
        parser.add_argument(
            "--tools", metavar="LIST", help="Tools that were installed"
        )
        parser.add_argument(
            "--shell",
            choices=["sh", "powershell"],
            default="sh",
            metavar="SHELL",
            help="Output syntax (sh|powershell) [default: sh]",
        )
        parser.add_argument(
            "--apply",
            action="store_true",
            help="Export the variables (GitHub Actions) instead of printing them",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except QtKitError as e:
            from qtkit.cli.utils import report_failure

            report_failure(str(e))
            return 1
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "setup": "qtkit.cli.commands.setup",
            "resolve": "qtkit.cli.commands.resolve",
            "env": "qtkit.cli.commands.env",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
