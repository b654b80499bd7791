"""
Chunker
Splits raw content into ordered fixed-size chunks.

Chunks are never padded here; balancing an odd leaf count is the
builder's job. The last chunk holds the remainder and may be shorter.
"""
from __future__ import annotations

from chunktree.schemas.errors import InvalidConfigurationException


def validate_leaf_size(leaf_size: int) -> int:
    """
    Check that leaf_size is a positive integer.

    Raises:
        InvalidConfigurationException: If leaf_size is not a positive int
    """
    # bool is an int subclass; True would silently mean 1
    if isinstance(leaf_size, bool) or not isinstance(leaf_size, int):
        raise InvalidConfigurationException(
            f"leaf_size must be an integer, got {type(leaf_size).__name__}",
            field="leaf_size",
        )
    if leaf_size <= 0:
        raise InvalidConfigurationException(
            f"leaf_size must be positive, got {leaf_size}",
            field="leaf_size",
        )
    return leaf_size


def _as_bytes(content: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    raise InvalidConfigurationException(
        f"content must be bytes or str, got {type(content).__name__}",
        field="content",
    )


def count_chunks(content_length: int, leaf_size: int) -> int:
    """
    Number of chunks content of the given length splits into.

    Example:
        >>> count_chunks(8, 2), count_chunks(7, 2), count_chunks(1, 4)
        (4, 4, 1)
    """
    validate_leaf_size(leaf_size)
    if content_length < 0:
        raise InvalidConfigurationException(
            f"content_length must be non-negative, got {content_length}",
            field="content",
        )
    return -(-content_length // leaf_size)


def chunk_content(
    content: bytes | bytearray | memoryview | str,
    leaf_size: int,
) -> list[bytes]:
    """
    Split content into chunks of leaf_size bytes.

    Text content is encoded as UTF-8 before splitting.

    Args:
        content: Content to split (must be non-empty)
        leaf_size: Maximum bytes per chunk (must be positive)

    Returns:
        Chunks in content order; every chunk is leaf_size long except
        possibly the last

    Raises:
        InvalidConfigurationException: If content is empty or leaf_size is invalid

    Example:
        >>> chunk_content(b"ABCDEFG", 2)
        [b'AB', b'CD', b'EF', b'G']
    """
    validate_leaf_size(leaf_size)
    data = _as_bytes(content)
    if len(data) == 0:
        raise InvalidConfigurationException(
            "content is empty; nothing to chunk",
            field="content",
        )

    return [data[i:i + leaf_size] for i in range(0, len(data), leaf_size)]


__all__ = [
    "validate_leaf_size",
    "count_chunks",
    "chunk_content",
]
