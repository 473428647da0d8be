"""Exceptions raised while decoding WAD archives."""


class WADError(ValueError):
    """Base class for WAD decoding errors."""


class BadMagicError(WADError):
    """The archive does not start with the WAD magic."""


class TruncatedError(WADError):
    """The archive ends before a header, table or chunk region is complete."""


class ChunkDecodeError(WADError):
    """A single chunk could not be decoded. Other chunks remain readable."""


class UnknownCodecError(ChunkDecodeError):
    """The chunk's compression nibble is not a known codec."""

    def __init__(self, tag: int):
        super().__init__(f"Unknown compression type: {tag}")
        self.tag = tag


class UnsupportedCodecError(ChunkDecodeError):
    """The chunk uses a known codec that this decoder does not implement."""


class CorruptChunkError(ChunkDecodeError):
    """The chunk's compressed stream is malformed."""
