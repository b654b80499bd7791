"""
CLI command modules.
"""

from chunktree_cli.commands import build, diff

__all__ = ["build", "diff"]
