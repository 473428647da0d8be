"""Shared builders for synthetic WAD archives and TEX payloads."""

import gzip
import struct

import pytest
import xxhash
import zstandard as zstd

RAW, GZIP, SATELLITE, ZSTD, ZSTD_CHUNKED = range(5)


def path_hash(path: str) -> int:
    return xxhash.xxh64_intdigest(path.lower().encode("utf-8"))


def create_tex(width: int, height: int, fmt: int = 1, body: bytes = b"\xCD" * 32, ascii_only: bool = False) -> bytes:
    """Create a TEX payload: magic, width, height, unknown byte, format, body."""
    magic = b"TEX\x01" if ascii_only else b"TEX\x00"
    return magic + struct.pack("<HHBB", width, height, 0, fmt) + body


def _store(data: bytes, codec: int) -> bytes:
    if codec == GZIP:
        return gzip.compress(data)
    if codec in (ZSTD, ZSTD_CHUNKED):
        return zstd.ZstdCompressor().compress(data)
    return data


def create_wad(entries, version_major: int = 3, version_minor: int = 0, checksum: int = 0) -> bytes:
    """Create a WAD archive.

    Each entry is a dict with ``hash`` (int or virtual path), ``data`` (decoded
    payload) and optional ``codec``, ``stored`` (override stored bytes),
    ``subchunk_count``, ``duplicated``, ``subchunk_start`` and ``checksum``.
    """
    has_checksum = version_major >= 2
    padding = 256 if version_major >= 3 else 83

    header = b"RW" + bytes([version_major, version_minor]) + b"\x00" * padding
    if has_checksum:
        header += struct.pack("<Q", checksum)
    header += struct.pack("<I", len(entries))

    record_size = 32 if has_checksum else 24
    offset = len(header) + record_size * len(entries)

    records = b""
    blobs = b""
    for entry in entries:
        codec = entry.get("codec", RAW)
        data = entry["data"]
        stored = entry.get("stored", _store(data, codec))
        h = entry["hash"]
        if isinstance(h, str):
            h = path_hash(h)

        records += struct.pack(
            "<QIIIBBH",
            h,
            offset,
            len(stored),
            len(data),
            (entry.get("subchunk_count", 0) << 4) | codec,
            1 if entry.get("duplicated") else 0,
            entry.get("subchunk_start", 0),
        )
        if has_checksum:
            records += struct.pack("<Q", entry.get("checksum", 0))

        blobs += stored
        offset += len(stored)

    return header + records + blobs


@pytest.fixture
def make_wad():
    return create_wad


@pytest.fixture
def make_tex():
    return create_tex
