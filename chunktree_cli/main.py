"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m chunktree_cli build <file> [--leaf-size N] [--algorithm A] [--order ORDER] [--json]
    python -m chunktree_cli diff <old> <new> [--leaf-size N] [--algorithm A] [--json]
    python -m chunktree_cli config --init
    python -m chunktree_cli config --show

Environment Variables:
    CHUNKTREE_LEAF_SIZE         Bytes per chunk (default: 1024)
    CHUNKTREE_ALGORITHM         hashlib algorithm (default: sha256)
    CHUNKTREE_LOG_LEVEL         Log level (default: WARNING)
    CHUNKTREE_LOG_FILE          Optional log file
    CHUNKTREE_OUTPUT_FORMAT     human or json (default: human)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from chunktree import __version__
from chunktree.schemas.errors import ChunkTreeException
from chunktree_cli.commands import build, diff
from chunktree_cli.config import get_default_config_template, load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_tree_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--leaf-size", "-s",
        type=int,
        default=None,
        help="Bytes per chunk (overrides config)",
    )
    parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help="hashlib algorithm name, e.g. sha256, sha3_256, blake2b (overrides config)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chunktree",
        description="Build content hash trees over files and diff them chunk by chunk.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./chunktree.json or ~/.config/chunktree/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Build a tree over a file and print its summary",
        description="Chunk a file, build its hash tree and print root digest and shape.",
    )
    build_parser.add_argument(
        "path",
        type=str,
        help="File to build the tree over",
    )
    build_parser.add_argument(
        "--order",
        type=str,
        choices=["pre", "in", "post", build.LEVEL_ORDER],
        default=None,
        help="Also list every node in this traversal order",
    )
    _add_tree_options(build_parser)
    build_parser.set_defaults(func=build.build_cmd)

    # --- diff command ---
    diff_parser = subparsers.add_parser(
        "diff",
        help="Report chunks that differ between two files",
        description="Build trees over both files with the same settings and list differing leaves.",
    )
    diff_parser.add_argument(
        "old_path",
        type=str,
        help="Reference file",
    )
    diff_parser.add_argument(
        "new_path",
        type=str,
        help="File compared against the reference",
    )
    _add_tree_options(diff_parser)
    diff_parser.set_defaults(func=diff.diff_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="chunktree.json",
        help="Path for config file (default: chunktree.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (CHUNKTREE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(asdict(args.cli_config), indent=2))
        return EXIT_SUCCESS

    print("Usage: chunktree config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=trees differ)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (ChunkTreeException, OSError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
