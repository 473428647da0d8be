"""Write located texture payloads to disk for external conversion."""

import logging
from pathlib import Path
from typing import Optional

from ..wad.header import WADChunk
from .locator import ChunkSource

logger = logging.getLogger(__name__)


def extract_tex_file(
    chunk: WADChunk,
    output_dir: Path,
    reader: Optional[ChunkSource] = None,
) -> Path:
    """Write a chunk's decoded payload to ``output_dir``.

    Args:
        chunk: Chunk returned by the locator (``data`` already filled)
        output_dir: Scratch directory for the extracted file
        reader: Reader used to decode the chunk if it holds no data yet

    Returns:
        Path of the written ``texture_<hash>.<ext>`` file
    """
    if chunk.data is None:
        if reader is None:
            raise ValueError(f"Chunk {chunk.path_hash} has no decoded data")
        chunk.attach_payload(reader.extract_chunk(chunk))

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / f"texture_{chunk.path_hash}.{chunk.extension or 'tex'}"
    output_path.write_bytes(chunk.data)
    logger.info("Extracted %s (%d bytes)", output_path, len(chunk.data))

    return output_path
