"""
Schemas - Reports
File: reports.py

Purpose: Read-only summaries of built trees and their diffs, used for
CLI output and logging. These are views, not a persistence format: a
tree cannot be rebuilt from them.
"""

from pydantic import BaseModel, ConfigDict, Field


class NodeView(BaseModel):
    """Flat view of a single node."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    digest: str = Field(..., description="0x-prefixed hex digest")
    is_leaf: bool = Field(...)
    is_padding: bool = Field(default=False)
    content_length: int = Field(default=0, ge=0, description="Bytes of raw content (leaves only)")


class TreeSummary(BaseModel):
    """Shape and identity of a built tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_digest: str = Field(..., description="0x-prefixed hex root digest")
    algorithm: str = Field(...)
    leaf_size: int = Field(..., gt=0)
    height: int = Field(..., ge=1)
    node_count: int = Field(..., ge=1)
    leaf_count: int = Field(..., ge=1, description="Leaves at maximum depth, padding included")
    chunk_count: int = Field(..., ge=1, description="Leaves holding real content")
    padding_count: int = Field(default=0, ge=0)


class LeafChange(BaseModel):
    """One leaf position whose digest differs between two trees."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(..., ge=0, description="Zero-based leaf position, left to right")
    old_digest: str = Field(...)
    new_digest: str = Field(...)
    is_padding: bool = Field(default=False, description="Whether the new leaf is padding")
    content_length: int = Field(default=0, ge=0, description="Bytes of the new leaf's content")


class LeafDiffReport(BaseModel):
    """Result of comparing two congruent trees."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    equal: bool = Field(...)
    height: int = Field(..., ge=1)
    leaf_count: int = Field(..., ge=1)
    old_root: str = Field(...)
    new_root: str = Field(...)
    changes: list[LeafChange] = Field(default_factory=list)

    @property
    def changed_count(self) -> int:
        return len(self.changes)
