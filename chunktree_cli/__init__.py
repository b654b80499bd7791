"""
chunktree CLI

Command-line interface over the chunktree library.

Usage:
    python -m chunktree_cli build data.bin --leaf-size 4096
    python -m chunktree_cli diff old.bin new.bin --json
"""
