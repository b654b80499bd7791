"""
CLI Configuration

Configuration management for the chunktree CLI.
Supports environment variables and JSON configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from chunktree.config import DEFAULT_LEAF_SIZE, TreeConfig
from chunktree.crypto.hashing import DEFAULT_ALGORITHM
from chunktree.schemas.errors import ConfigLoadException


# Environment variable prefix
ENV_PREFIX = "CHUNKTREE_"


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Tree settings
    leaf_size: int = DEFAULT_LEAF_SIZE
    algorithm: str = DEFAULT_ALGORITHM

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"

    def tree_config(
        self,
        leaf_size: int | None = None,
        algorithm: str | None = None,
    ) -> TreeConfig:
        """Tree settings with per-command overrides applied, validated."""
        return TreeConfig(
            leaf_size=leaf_size if leaf_size is not None else self.leaf_size,
            algorithm=algorithm or self.algorithm,
        ).validate()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigLoadException(f"{name} must be an integer, got {raw!r}") from e


def load_config_from_env(config: CLIConfig | None = None) -> CLIConfig:
    """Overlay environment variables onto config (or onto defaults)."""
    config = config or CLIConfig()

    config.leaf_size = _env_int(f"{ENV_PREFIX}LEAF_SIZE", config.leaf_size)
    if os.getenv(f"{ENV_PREFIX}ALGORITHM"):
        config.algorithm = os.getenv(f"{ENV_PREFIX}ALGORITHM", config.algorithm)

    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.log_level)
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")

    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = os.getenv(
            f"{ENV_PREFIX}OUTPUT_FORMAT", config.default_output_format
        )

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigLoadException(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigLoadException(f"Expected a JSON object in {path}", path=str(path))

    config = CLIConfig()
    config.leaf_size = data.get("leaf_size", config.leaf_size)
    config.algorithm = data.get("algorithm", config.algorithm)
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)
    config.default_output_format = data.get(
        "default_output_format", config.default_output_format
    )
    return config


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "chunktree.json",
            Path.cwd() / ".chunktree.json",
            Path.home() / ".config" / "chunktree" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    return load_config_from_env(config)


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "leaf_size": 1024,
  "algorithm": "sha256",
  "log_level": "WARNING",
  "log_file": null,
  "default_output_format": "human"
}
"""
