"""
Runtime Configuration Module

Provides configuration loading and management for tree construction.
"""

from .runtime import (
    DEFAULT_LEAF_SIZE,
    TreeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "DEFAULT_LEAF_SIZE",
    "TreeConfig",
    "get_default_config",
    "set_default_config",
]
