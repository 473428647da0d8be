"""WAD archive reading."""

from .compression import decompress_chunk
from .hashing import hash_path
from .header import WADChunk, WADCompressionType, WADHeader
from .reader import WADReader

__all__ = [
    "WADReader",
    "WADHeader",
    "WADChunk",
    "WADCompressionType",
    "decompress_chunk",
    "hash_path",
]
