"""
CLI Diff Command

Build trees over two files with the same settings and report which
chunks of the new file differ from the old one.

Usage:
    chunktree diff old.bin new.bin [--leaf-size N] [--algorithm A] [--json]

Exit codes:
    0  trees are equal
    1  error (unreadable file, bad settings, incongruent trees)
    2  trees differ
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from chunktree.merkle import MerkleTreeBuilder, compare_trees
from chunktree.schemas.errors import ChunkTreeException
from chunktree.schemas.reports import LeafDiffReport
from chunktree_cli.commands.build import print_error


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_TREES_DIFFER = 2


def format_report(old_path: str, new_path: str, report: LeafDiffReport, leaf_size: int) -> str:
    lines = [
        f"Old:     {old_path}  {report.old_root}",
        f"New:     {new_path}  {report.new_root}",
    ]
    if report.equal:
        lines.append("Trees are equal.")
        return "\n".join(lines)

    lines.append(f"{report.changed_count} of {report.leaf_count} leaves differ:")
    for change in report.changes:
        if change.is_padding:
            where = "padding"
        else:
            start = change.index * leaf_size
            where = f"bytes [{start}:{start + change.content_length})"
        lines.append(
            f"  leaf {change.index:>6}  {where:<24} {change.old_digest[:14]} -> {change.new_digest[:14]}"
        )
    return "\n".join(lines)


def diff_cmd(args: Namespace) -> int:
    """Handle diff command."""
    as_json = args.json or args.cli_config.default_output_format == "json"

    try:
        tree_config = args.cli_config.tree_config(args.leaf_size, args.algorithm)
        builder = MerkleTreeBuilder(tree_config)
        old_root = builder.build_file(Path(args.old_path))
        new_root = builder.build_file(Path(args.new_path))
        report = compare_trees(old_root, new_root)
        logger.debug(f"Diff {args.old_path} -> {args.new_path}: {report.changed_count} changed leaves")
    except ChunkTreeException as e:
        print_error(e, as_json)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if as_json:
        data = {
            "old": args.old_path,
            "new": args.new_path,
            "report": report.model_dump(),
        }
        print(json.dumps(data, indent=2))
    else:
        print(format_report(args.old_path, args.new_path, report, tree_config.leaf_size))

    return EXIT_SUCCESS if report.equal else EXIT_TREES_DIFFER
