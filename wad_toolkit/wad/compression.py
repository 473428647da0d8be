"""Chunk decompression.

Dispatches a chunk's stored bytes to the codec named by its compression type.
Zstd failures are tolerated: the stored bytes come back unchanged so that
callers scanning many chunks can keep going.
"""

import logging
import zlib
from typing import Union

import zstandard as zstd

from ..errors import CorruptChunkError, UnknownCodecError, UnsupportedCodecError
from .header import WADCompressionType

logger = logging.getLogger(__name__)

# zlib window bits for gzip framing
GZIP_WBITS = 16 + zlib.MAX_WBITS


def decompress_chunk(
    data: bytes,
    compression_type: Union[WADCompressionType, int],
    decompressed_size: int = 0,
) -> bytes:
    """Decompress the stored bytes of a chunk.

    Args:
        data: Stored (compressed) chunk bytes
        compression_type: Codec from the chunk table
        decompressed_size: Expected output size, checked for Zstd (0 skips the check)

    Returns:
        Decompressed bytes (or ``data`` itself if Zstd decoding failed)
    """
    if compression_type == WADCompressionType.RAW:
        return bytes(data)

    if compression_type == WADCompressionType.GZIP:
        try:
            return zlib.decompress(data, GZIP_WBITS)
        except zlib.error as e:
            raise CorruptChunkError(f"Gzip decompression failed: {e}") from e

    if compression_type in (WADCompressionType.ZSTD, WADCompressionType.ZSTD_CHUNKED):
        try:
            result = _decompress_zstd(bytes(data))
        except zstd.ZstdError as e:
            logger.warning("Zstd decompression failed, keeping stored bytes: %s", e)
            return bytes(data)

        # Truncated frames decode short without raising
        if decompressed_size and len(result) != decompressed_size:
            logger.warning(
                "Zstd output is %d bytes, expected %d, keeping stored bytes",
                len(result),
                decompressed_size,
            )
            return bytes(data)
        return result

    if compression_type == WADCompressionType.SATELLITE:
        raise UnsupportedCodecError("Satellite compression is not supported")

    raise UnknownCodecError(int(compression_type))


def _decompress_zstd(data: bytes) -> bytes:
    """Decompress one or more concatenated Zstd frames."""
    dctx = zstd.ZstdDecompressor()
    with dctx.stream_reader(data, read_across_frames=True) as reader:
        return reader.read()
