"""
Error Taxonomy Unit Tests
Tests for chunktree/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from chunktree.schemas.errors import (
    ChunkTreeError,
    ChunkTreeException,
    ConfigLoadException,
    ErrorCodes,
    HashFailureException,
    IncongruentTreesException,
    InvalidConfigurationException,
)


class TestExceptions:
    """Tests for exception subclasses."""

    def test_invalid_configuration(self):
        err = InvalidConfigurationException("leaf_size must be positive", field="leaf_size")

        assert isinstance(err, ChunkTreeException)
        assert err.code == ErrorCodes.INVALID_CONFIGURATION
        assert err.details == {"field": "leaf_size"}
        assert err.retryable is False
        assert str(err) == "leaf_size must be positive"

    def test_incongruent_trees_keeps_zero_height(self):
        err = IncongruentTreesException("mismatch", left_height=3, right_height=0)

        assert err.code == ErrorCodes.INCONGRUENT_TREES
        assert err.details == {"left_height": 3, "right_height": 0}

    def test_hash_failure(self):
        err = HashFailureException("boom", algorithm="sha256")

        assert err.code == ErrorCodes.HASH_FAILURE
        assert err.details["algorithm"] == "sha256"

    def test_config_load(self):
        err = ConfigLoadException("bad file", path="/tmp/x.json")

        assert err.code == ErrorCodes.CONFIG_LOAD_ERROR
        assert err.details["path"] == "/tmp/x.json"

    def test_repr(self):
        err = InvalidConfigurationException("empty")
        assert repr(err) == "InvalidConfigurationException(code='INVALID_CONFIGURATION', message='empty')"


class TestErrorModel:
    """Tests for the pydantic error model."""

    def test_exception_to_model(self):
        err = IncongruentTreesException("mismatch", left_height=3, right_height=2)
        model = err.to_error_model()

        assert isinstance(model, ChunkTreeError)
        assert model.model_dump() == {
            "code": ErrorCodes.INCONGRUENT_TREES,
            "message": "mismatch",
            "details": {"left_height": 3, "right_height": 2},
            "retryable": False,
        }

    def test_model_to_exception(self):
        model = ChunkTreeError(code=ErrorCodes.HASH_FAILURE, message="down")
        exc = model.to_exception()

        assert isinstance(exc, ChunkTreeException)
        assert exc.code == ErrorCodes.HASH_FAILURE
        assert exc.details == {}

    def test_model_forbids_extra_fields(self):
        with pytest.raises(ValidationError):
            ChunkTreeError(code="X", message="y", unexpected=True)
