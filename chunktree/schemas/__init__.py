"""
Schemas: error taxonomy and read-only report models.
"""

from .errors import (
    ErrorCodes,
    ChunkTreeError,
    ChunkTreeException,
    InvalidConfigurationException,
    IncongruentTreesException,
    HashFailureException,
    ConfigLoadException,
)
from .reports import (
    NodeView,
    TreeSummary,
    LeafChange,
    LeafDiffReport,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "ChunkTreeError",
    "ChunkTreeException",
    "InvalidConfigurationException",
    "IncongruentTreesException",
    "HashFailureException",
    "ConfigLoadException",
    # Reports
    "NodeView",
    "TreeSummary",
    "LeafChange",
    "LeafDiffReport",
]
