"""
Runtime Configuration

Central configuration for tree construction: chunk size and hash algorithm.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from chunktree.crypto.hashing import DEFAULT_ALGORITHM, get_hash_function
from chunktree.schemas.errors import ConfigLoadException, InvalidConfigurationException

load_dotenv()


DEFAULT_LEAF_SIZE = 1024


@dataclass
class TreeConfig:
    """
    Configuration for building trees.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    leaf_size: int = DEFAULT_LEAF_SIZE
    algorithm: str = DEFAULT_ALGORITHM
    extra: dict[str, Any] = field(default_factory=dict)

    def validate(self) -> "TreeConfig":
        """
        Check leaf_size and algorithm.

        Raises:
            InvalidConfigurationException: If either setting is unusable
        """
        from chunktree.merkle.chunker import validate_leaf_size

        validate_leaf_size(self.leaf_size)
        get_hash_function(self.algorithm)
        return self

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - CHUNKTREE_LEAF_SIZE: Bytes per chunk (positive integer)
        - CHUNKTREE_ALGORITHM: hashlib algorithm name
        """
        overrides: dict[str, Any] = {}

        raw_leaf_size = os.getenv("CHUNKTREE_LEAF_SIZE")
        if raw_leaf_size:
            try:
                overrides["leaf_size"] = int(raw_leaf_size)
            except ValueError as e:
                raise InvalidConfigurationException(
                    f"CHUNKTREE_LEAF_SIZE must be an integer, got {raw_leaf_size!r}",
                    field="leaf_size",
                ) from e

        if os.getenv("CHUNKTREE_ALGORITHM"):
            overrides["algorithm"] = os.getenv("CHUNKTREE_ALGORITHM")

        return overrides

    @classmethod
    def from_env(cls) -> "TreeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TreeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadException(f"Invalid YAML in {path}: {e}", path=str(path)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadException(
                f"Expected a mapping at the top of {path}, got {type(data).__name__}",
                path=str(path),
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TreeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(
            leaf_size=data.get("leaf_size", DEFAULT_LEAF_SIZE),
            algorithm=data.get("algorithm", DEFAULT_ALGORITHM),
            extra=data.get("extra", {}) or {},
        )

    def with_env_overrides(self) -> "TreeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "leaf_size": self.leaf_size,
            "algorithm": self.algorithm,
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[TreeConfig] = None


def get_default_config() -> TreeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = TreeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[TreeConfig]) -> None:
    """Set the default runtime configuration (None resets to env-derived defaults)."""
    global _default_config
    _default_config = config
