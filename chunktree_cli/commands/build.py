"""
CLI Build Command

Build a tree over a file and print its summary, optionally with a traversal.

Usage:
    chunktree build data.bin [--leaf-size N] [--algorithm A] [--order pre|in|post|level] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from chunktree.crypto.hashing import to_hex
from chunktree.merkle import MerkleTreeBuilder, Node, TraversalOrder
from chunktree.schemas.errors import ChunkTreeException
from chunktree.schemas.reports import NodeView, TreeSummary


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1

LEVEL_ORDER = "level"


def node_view(node: Node) -> NodeView:
    return NodeView(
        digest=to_hex(node.digest),
        is_leaf=node.is_leaf,
        is_padding=node.is_padding,
        content_length=len(node.raw_content),
    )


def traverse(root: Node, order: str) -> list[Node]:
    """Nodes of root in the named order; "level" means breadth-first."""
    if order == LEVEL_ORDER:
        return root.breadth_first()
    return root.depth_first(TraversalOrder.coerce(order))


def print_error(exc: ChunkTreeException, as_json: bool) -> None:
    if as_json:
        print(json.dumps(exc.to_error_model().model_dump(), indent=2))
    else:
        print(f"Error: {exc.message}", file=sys.stderr)


def format_summary(path: str, summary: TreeSummary) -> str:
    lines = [
        f"File:        {path}",
        f"Root:        {summary.root_digest}",
        f"Algorithm:   {summary.algorithm}",
        f"Leaf size:   {summary.leaf_size}",
        f"Height:      {summary.height}",
        f"Nodes:       {summary.node_count}",
        f"Leaves:      {summary.leaf_count} ({summary.chunk_count} chunks, {summary.padding_count} padding)",
    ]
    return "\n".join(lines)


def build_cmd(args: Namespace) -> int:
    """Handle build command."""
    as_json = args.json or args.cli_config.default_output_format == "json"

    try:
        tree_config = args.cli_config.tree_config(args.leaf_size, args.algorithm)
        builder = MerkleTreeBuilder(tree_config)
        root = builder.build_file(Path(args.path))
        summary = builder.summarize(root)
        logger.debug(f"Built tree for {args.path}: root={summary.root_digest}")
    except ChunkTreeException as e:
        print_error(e, as_json)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    nodes = traverse(root, args.order) if args.order else []

    if as_json:
        data = {"file": args.path, "summary": summary.model_dump()}
        if args.order:
            data["order"] = args.order
            data["nodes"] = [node_view(n).model_dump() for n in nodes]
        print(json.dumps(data, indent=2))
    else:
        print(format_summary(args.path, summary))
        if args.order:
            print(f"\n{args.order} order:")
            for node in nodes:
                print(f"  {node.summary()}")

    return EXIT_SUCCESS
