"""WAD header and chunk table structures."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

# WAD magic bytes
WAD_MAGIC = b"RW"

# Signature/padding region between the version bytes and the checksum
V3_PADDING_SIZE = 256
LEGACY_PADDING_SIZE = 83

# hash(8) + offset(4) + compressed(4) + decompressed(4) + type(1) + duplicated(1) + subchunk start(2)
BASE_RECORD_SIZE = 24
CHECKSUM_SIZE = 8


class WADCompressionType(IntEnum):
    """Codec stored in the low nibble of a chunk's type byte."""

    RAW = 0
    GZIP = 1
    SATELLITE = 2  # Reference to an external file, not implemented
    ZSTD = 3
    ZSTD_CHUNKED = 4  # Zstd frames split into subchunks


_KNOWN_CODECS = {codec.value for codec in WADCompressionType}


def padding_size(version_major: int) -> int:
    return V3_PADDING_SIZE if version_major >= 3 else LEGACY_PADDING_SIZE


def has_checksum(version_major: int) -> bool:
    return version_major >= 2


@dataclass
class WADHeader:
    """WAD archive header."""

    magic: bytes  # 2 bytes: "RW"
    version_major: int  # 1 byte
    version_minor: int  # 1 byte
    checksum: int  # 8 bytes, v2+ only (0 otherwise)
    chunk_count: int  # 4 bytes

    @property
    def is_valid(self) -> bool:
        return self.magic == WAD_MAGIC

    @property
    def version(self) -> str:
        return f"{self.version_major}.{self.version_minor}"

    @property
    def size(self) -> int:
        """Total header size in bytes, up to the first chunk record."""
        size = 4 + padding_size(self.version_major) + 4
        if has_checksum(self.version_major):
            size += CHECKSUM_SIZE
        return size

    @property
    def record_size(self) -> int:
        """Size of one chunk table record for this version."""
        if has_checksum(self.version_major):
            return BASE_RECORD_SIZE + CHECKSUM_SIZE
        return BASE_RECORD_SIZE


@dataclass
class WADChunk:
    """WAD chunk table entry.

    ``data`` and ``extension`` start empty and are filled once, through
    :meth:`attach_payload`, after the chunk has been decoded.
    """

    index: int  # Position in the chunk table
    path_hash: str  # 16-char lowercase hex of the 64-bit path hash
    offset: int  # 4 bytes
    compressed_size: int  # 4 bytes
    decompressed_size: int  # 4 bytes
    compression_type: Union[WADCompressionType, int]  # Low nibble of the type byte
    subchunk_count: int  # High nibble of the type byte
    duplicated: bool  # 1 byte
    subchunk_start: int  # 2 bytes
    checksum: int = 0  # 8 bytes, v2+ only

    # Filled after decoding
    data: Optional[bytes] = None
    extension: Optional[str] = None

    @property
    def end(self) -> int:
        return self.offset + self.compressed_size

    @property
    def codec_name(self) -> str:
        if isinstance(self.compression_type, WADCompressionType):
            return self.compression_type.name.lower()
        return f"unknown({self.compression_type})"

    def attach_payload(self, data: bytes, extension: Optional[str] = None) -> None:
        """Cache decoded bytes and a detected extension.

        Each field is written at most once; later calls leave set fields alone.
        """
        if self.data is None:
            self.data = data
        if self.extension is None and extension:
            self.extension = extension


def split_type_byte(value: int) -> Tuple[Union[WADCompressionType, int], int]:
    """Split a chunk type byte into (compression type, subchunk count).

    Unknown codec nibbles are returned as plain ints.
    """
    codec = value & 0x0F
    if codec in _KNOWN_CODECS:
        codec = WADCompressionType(codec)
    return codec, value >> 4
