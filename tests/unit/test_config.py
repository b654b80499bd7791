"""
Runtime Configuration Unit Tests
Tests for chunktree/config/runtime.py
"""
import pytest

from chunktree.config import (
    DEFAULT_LEAF_SIZE,
    TreeConfig,
    get_default_config,
    set_default_config,
)
from chunktree.schemas.errors import (
    ConfigLoadException,
    ErrorCodes,
    InvalidConfigurationException,
)


class TestTreeConfig:
    """Tests for TreeConfig construction."""

    def test_defaults(self):
        config = TreeConfig()
        assert config.leaf_size == DEFAULT_LEAF_SIZE == 1024
        assert config.algorithm == "sha256"
        assert config.extra == {}

    def test_from_dict_partial(self):
        config = TreeConfig.from_dict({"leaf_size": 16})
        assert config.leaf_size == 16
        assert config.algorithm == "sha256"

    def test_to_dict(self):
        config = TreeConfig(leaf_size=8, algorithm="blake2b", extra={"note": "x"})
        assert config.to_dict() == {"leaf_size": 8, "algorithm": "blake2b", "extra": {"note": "x"}}
        assert TreeConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()

    def test_validate_returns_self(self):
        config = TreeConfig(leaf_size=4)
        assert config.validate() is config

    @pytest.mark.parametrize("leaf_size", [0, -1, True, "4"])
    def test_validate_bad_leaf_size(self, leaf_size):
        with pytest.raises(InvalidConfigurationException) as exc_info:
            TreeConfig(leaf_size=leaf_size).validate()
        assert exc_info.value.details["field"] == "leaf_size"

    def test_validate_bad_algorithm(self):
        with pytest.raises(InvalidConfigurationException):
            TreeConfig(algorithm="not-a-hash").validate()


class TestEnvConfig:
    """Tests for environment overrides."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHUNKTREE_LEAF_SIZE", "64")
        monkeypatch.setenv("CHUNKTREE_ALGORITHM", "sha512")

        config = TreeConfig.from_env()
        assert config.leaf_size == 64
        assert config.algorithm == "sha512"

    def test_from_env_without_vars(self):
        assert TreeConfig.from_env().to_dict() == TreeConfig().to_dict()

    def test_bad_env_leaf_size(self, monkeypatch):
        monkeypatch.setenv("CHUNKTREE_LEAF_SIZE", "big")

        with pytest.raises(InvalidConfigurationException) as exc_info:
            TreeConfig.from_env()
        assert exc_info.value.code == ErrorCodes.INVALID_CONFIGURATION

    def test_with_env_overrides(self, monkeypatch):
        base = TreeConfig(leaf_size=8, algorithm="md5")
        assert base.with_env_overrides() is base

        monkeypatch.setenv("CHUNKTREE_LEAF_SIZE", "32")
        updated = base.with_env_overrides()

        assert updated is not base
        assert updated.leaf_size == 32
        assert updated.algorithm == "md5"
        assert base.leaf_size == 8


class TestYamlConfig:
    """Tests for TreeConfig.from_yaml()."""

    def test_load(self, tmp_path):
        path = tmp_path / "tree.yaml"
        path.write_text("leaf_size: 256\nalgorithm: sha3_256\n")

        config = TreeConfig.from_yaml(path)
        assert config.leaf_size == 256
        assert config.algorithm == "sha3_256"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert TreeConfig.from_yaml(path).to_dict() == TreeConfig().to_dict()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TreeConfig.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("leaf_size: [1, 2\n")

        with pytest.raises(ConfigLoadException) as exc_info:
            TreeConfig.from_yaml(path)
        assert exc_info.value.code == ErrorCodes.CONFIG_LOAD_ERROR

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigLoadException):
            TreeConfig.from_yaml(path)


class TestDefaultConfig:
    """Tests for the process-wide default config."""

    def test_cached(self):
        assert get_default_config() is get_default_config()

    def test_set_and_reset(self, monkeypatch):
        custom = TreeConfig(leaf_size=3)
        set_default_config(custom)
        assert get_default_config() is custom

        monkeypatch.setenv("CHUNKTREE_LEAF_SIZE", "5")
        set_default_config(None)
        assert get_default_config().leaf_size == 5
