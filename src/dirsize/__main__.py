"""Application entry point and CLI for dirsize.

This module implements the main entry point for the dirsize shell,
providing CLI argument parsing, configuration loading, logging setup, tree
construction and the interactive loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, TextIO

from dirsize.core.config import (
    DEFAULT_CONFIG_PATH,
    ConfigurationError,
    MainConfig,
    load_main_config,
)
from dirsize.core.seed import TreeDefinitionError, build_demo_tree, load_tree_file
from dirsize.core.shell import Shell, ShellSession
from dirsize.core.tree import DirectoryNode
from dirsize.utils.logging import configure_logging

__all__ = ["main", "run"]

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    CLI Arguments:
        --config, -c: Path to configuration file
        --tree, -t: Path to YAML tree definition
        --log-level: Override log level from config
        --no-banner: Suppress the welcome banner
    """
    parser = argparse.ArgumentParser(
        prog="dirsize",
        description="Navigate an in-memory directory tree and compute directory sizes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dirsize
  dirsize --tree trees/home.yaml
  dirsize --config dirsize.yaml --log-level DEBUG
        """,
    )

    _ = parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH} if present)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--tree",
        "-t",
        type=Path,
        default=None,
        help="YAML tree definition to load instead of the demo tree (overrides config)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration",
        metavar="LEVEL",
    )

    _ = parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the welcome banner",
    )

    return parser


def resolve_config(config_path: Path | None) -> MainConfig:
    """Load configuration from an explicit path, the default file, or defaults.

    Args:
        config_path: Path given on the command line, if any

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If an explicit or default file is invalid
    """
    if config_path is not None:
        return load_main_config(config_path)
    if DEFAULT_CONFIG_PATH.is_file():
        return load_main_config(DEFAULT_CONFIG_PATH)
    return MainConfig()


def load_tree(tree_path: Path | None) -> DirectoryNode:
    """Load the tree from a definition file, or build the demo tree.

    Raises:
        TreeDefinitionError: If the definition file is invalid
    """
    if tree_path is not None:
        return load_tree_file(tree_path)
    return build_demo_tree()


def run(
    *,
    config: MainConfig,
    tree_path: Path | None = None,
    banner: bool = True,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Build the tree and run the interactive shell to completion.

    Args:
        config: Validated configuration
        tree_path: Tree definition file (overrides config)
        banner: Print the welcome banner (combined with config)
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)

    Raises:
        TreeDefinitionError: If the tree definition is invalid
    """
    logger = logging.getLogger(__name__)

    root = load_tree(tree_path or config.tree.seed_file)
    logger.info("Tree ready", extra={"total_bytes": root.get_size()})

    session = ShellSession(
        root=root,
        stdin=stdin if stdin is not None else sys.stdin,
        stdout=stdout if stdout is not None else sys.stdout,
        root_alias=config.shell.root_alias,
    )
    Shell(session, banner=banner and config.shell.banner).run()


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point for the dirsize shell.

    Exit Codes:
        0: Normal termination ('exit', end of input, Ctrl+C)
        1: Configuration or tree definition error
    """
    args = build_parser().parse_args(argv)

    # Extract args with type annotations at the argparse boundary
    config_path_arg: Path | None = args.config  # pyright: ignore[reportAny]  # argparse boundary
    tree_path_arg: Path | None = args.tree  # pyright: ignore[reportAny]  # argparse boundary
    log_level_arg: str | None = args.log_level  # pyright: ignore[reportAny]  # argparse boundary
    no_banner_arg: bool = args.no_banner  # pyright: ignore[reportAny]  # argparse boundary

    try:
        config = resolve_config(config_path_arg)

        if log_level_arg is not None:
            config.application.log_level = log_level_arg

        configure_logging(
            log_level=config.application.log_level,
            log_file=config.application.log_file,
        )

        run(config=config, tree_path=tree_path_arg, banner=not no_banner_arg)

    except ConfigurationError as exc:
        print(f"Configuration error:\n{exc}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    except TreeDefinitionError as exc:
        print(f"Tree definition error:\n{exc}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    except KeyboardInterrupt:
        print("\nGoodbye!", file=sys.stderr)
        sys.exit(EXIT_SUCCESS)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
