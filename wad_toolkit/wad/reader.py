"""WAD archive reader and extractor."""

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

from ..errors import BadMagicError, ChunkDecodeError, TruncatedError
from ..formats.magic import guess_extension
from ..formats.tex import is_tex_data
from ..utils.binary import BinaryReader
from .compression import decompress_chunk
from .hashing import hash_path
from .header import (
    WAD_MAGIC,
    WADChunk,
    WADHeader,
    has_checksum,
    padding_size,
    split_type_byte,
)

logger = logging.getLogger(__name__)


class WADReader:
    """Reader for WAD archives held in memory.

    The header and chunk table are parsed on construction. Chunk payloads are
    only decompressed on request.
    """

    def __init__(self, data: Union[bytes, Path]):
        if isinstance(data, Path):
            data = data.read_bytes()
        self._data = bytes(data)
        self._header: Optional[WADHeader] = None
        self._chunks: List[WADChunk] = []
        self._parse()

    def _parse(self) -> None:
        reader = BinaryReader(self._data)
        self._read_header(reader)
        self._read_chunk_table(reader)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def header(self) -> WADHeader:
        if not self._header:
            raise RuntimeError("Archive not parsed")
        return self._header

    @property
    def chunks(self) -> List[WADChunk]:
        return self._chunks

    def _read_header(self, reader: BinaryReader) -> None:
        """Read the version-dependent WAD header."""
        try:
            magic = reader.read_bytes(2)
            if magic != WAD_MAGIC:
                raise BadMagicError(f"Invalid WAD magic: {magic!r}, expected {WAD_MAGIC!r}")

            version_major = reader.read_u8()
            version_minor = reader.read_u8()

            # Signature region (v3+) or legacy ECDSA padding
            reader.skip(padding_size(version_major))

            checksum = 0
            if has_checksum(version_major):
                checksum = reader.read_u64()

            chunk_count = reader.read_u32()
        except EOFError as e:
            raise TruncatedError(f"WAD header truncated: {e}") from e

        self._header = WADHeader(
            magic=magic,
            version_major=version_major,
            version_minor=version_minor,
            checksum=checksum,
            chunk_count=chunk_count,
        )
        logger.debug(
            "WAD v%s with %d chunks", self._header.version, self._header.chunk_count
        )

    def _read_chunk_table(self, reader: BinaryReader) -> None:
        """Read the chunk table that follows the header."""
        header = self._header
        table_size = header.chunk_count * header.record_size
        if reader.remaining() < table_size:
            raise TruncatedError(
                f"Chunk table needs {table_size} bytes, {reader.remaining()} remaining"
            )

        read_checksum = has_checksum(header.version_major)
        archive_size = len(self._data)

        for index in range(header.chunk_count):
            path_hash = f"{reader.read_u64():016x}"
            offset = reader.read_u32()
            compressed_size = reader.read_u32()
            decompressed_size = reader.read_u32()
            compression_type, subchunk_count = split_type_byte(reader.read_u8())
            duplicated = reader.read_u8() != 0
            subchunk_start = reader.read_u16()
            checksum = reader.read_u64() if read_checksum else 0

            if offset + compressed_size > archive_size:
                raise TruncatedError(
                    f"Chunk {index} ({path_hash}) ends at {offset + compressed_size}, "
                    f"archive is {archive_size} bytes"
                )

            self._chunks.append(
                WADChunk(
                    index=index,
                    path_hash=path_hash,
                    offset=offset,
                    compressed_size=compressed_size,
                    decompressed_size=decompressed_size,
                    compression_type=compression_type,
                    subchunk_count=subchunk_count,
                    duplicated=duplicated,
                    subchunk_start=subchunk_start,
                    checksum=checksum,
                )
            )

    def read_raw(self, chunk: WADChunk) -> bytes:
        """Return the stored (still compressed) bytes of a chunk."""
        return self._data[chunk.offset : chunk.end]

    def extract_chunk(self, chunk: WADChunk) -> bytes:
        """Extract and decompress data for a single chunk."""
        return decompress_chunk(
            self.read_raw(chunk), chunk.compression_type, chunk.decompressed_size
        )

    def get_chunk_by_hash(self, path_hash: str) -> Optional[WADChunk]:
        """Find a chunk by its hex path hash."""
        path_hash = path_hash.lower()
        for chunk in self._chunks:
            if chunk.path_hash == path_hash:
                return chunk
        return None

    def get_chunk_by_path(self, path: str) -> Optional[WADChunk]:
        """Find a chunk by its virtual path."""
        return self.get_chunk_by_hash(hash_path(path))

    def find_texture_chunks(self) -> List[WADChunk]:
        """Decode every chunk and return those holding TEX payloads.

        Matching chunks keep their decoded bytes. Chunks that fail to decode
        are skipped.
        """
        textures = []
        for chunk in self._chunks:
            try:
                data = chunk.data if chunk.data is not None else self.extract_chunk(chunk)
            except ChunkDecodeError as e:
                logger.warning("Failed to extract chunk %s: %s", chunk.path_hash, e)
                continue

            if is_tex_data(data):
                chunk.attach_payload(data, "tex")
                textures.append(chunk)
        return textures

    def extract_all(
        self,
        output_dir: Path,
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
    ) -> Iterator[Tuple[WADChunk, Path]]:
        """Extract all chunks to the output directory.

        Files are named ``<path hash>.<extension>``. Chunks that cannot be
        decoded are logged and skipped.

        Yields (chunk, output_path) for each extracted chunk.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        for chunk in self._chunks:
            if progress_callback:
                progress_callback(chunk.index, len(self._chunks), chunk.path_hash)

            try:
                data = self.extract_chunk(chunk)
            except ChunkDecodeError as e:
                logger.warning("Skipping chunk %s: %s", chunk.path_hash, e)
                continue

            output_path = output_dir / f"{chunk.path_hash}.{guess_extension(data)}"
            output_path.write_bytes(data)

            yield chunk, output_path

    @classmethod
    def from_file(cls, path: Path) -> "WADReader":
        """Load a WAD archive from a file."""
        return cls(Path(path))

    def __repr__(self) -> str:
        if self._header:
            return f"WADReader(version={self._header.version}, chunks={len(self._chunks)})"
        return "WADReader(invalid)"
