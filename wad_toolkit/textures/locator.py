"""Loading-screen portrait locator.

Finds the chunk holding a champion's loading-screen portrait inside a skin
WAD. Two strategies are tried in order:

1. Path hash prediction: candidate paths are built from the champion name,
   hashed, and looked up in the chunk table. Only a matching chunk is decoded.
2. Content sniffing: every chunk is decoded and the first TEX payload with
   the portrait dimensions (308x560) is selected.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from ..errors import ChunkDecodeError
from ..formats.magic import DDS_MAGIC
from ..formats.tex import TexHeader, is_tex_data
from ..wad.hashing import hash_path
from ..wad.header import WADChunk

logger = logging.getLogger(__name__)

# Champion loading-screen portrait size
LOADSCREEN_SIZE = (308, 560)

DEFAULT_PATH_TEMPLATES = (
    "assets/characters/{name}/skins/base/{name}loadscreen.tex",
    "assets/characters/{name}/skins/base/{name}loadscreen.dds",
    "assets/characters/{name}/skins/skin01/{name}loadscreen.tex",
    "assets/characters/{name}/skins/skin01/{name}loadscreen.dds",
)

# Templates also tried with the lowercased champion name
DEFAULT_LOWERCASE_TEMPLATES = DEFAULT_PATH_TEMPLATES[:2]


class ChunkSource(Protocol):
    """Anything that can decode a chunk, usually a WADReader."""

    def extract_chunk(self, chunk: WADChunk) -> bytes:
        ...


@dataclass
class LocatorConfig:
    """Tunables for LoadScreenLocator."""

    target_width: int = LOADSCREEN_SIZE[0]
    target_height: int = LOADSCREEN_SIZE[1]
    path_templates: Tuple[str, ...] = DEFAULT_PATH_TEMPLATES
    lowercase_templates: Tuple[str, ...] = DEFAULT_LOWERCASE_TEMPLATES
    # Threads for the content scan; 1 scans sequentially and stops at the first match
    workers: int = 1
    extra_paths: List[str] = field(default_factory=list)


def payload_extension(data: bytes) -> Optional[str]:
    """Return "tex" or "dds" for recognized texture payloads, else None."""
    if is_tex_data(data):
        return "tex"
    if data.startswith(DDS_MAGIC):
        return "dds"
    return None


class LoadScreenLocator:
    """Find the loading-screen portrait chunk of a WAD archive."""

    def __init__(
        self,
        source: ChunkSource,
        chunks: Optional[List[WADChunk]] = None,
        config: Optional[LocatorConfig] = None,
    ):
        self.source = source
        self.chunks = chunks if chunks is not None else list(source.chunks)
        self.config = config or LocatorConfig()

    @property
    def target_size(self) -> Tuple[int, int]:
        return self.config.target_width, self.config.target_height

    def candidate_paths(self, champion: str) -> List[str]:
        """Build the predicted portrait paths for a champion name."""
        paths = [t.format(name=champion) for t in self.config.path_templates]
        lowered = champion.lower()
        paths.extend(t.format(name=lowered) for t in self.config.lowercase_templates)
        paths.extend(self.config.extra_paths)

        # Hashing is case-insensitive, so the lowercase variants may repeat
        seen = set()
        unique = []
        for path in paths:
            key = path.lower()
            if key not in seen:
                seen.add(key)
                unique.append(path)
        return unique

    def locate(self, champion: Optional[str] = None) -> Optional[WADChunk]:
        """Find the portrait chunk.

        Args:
            champion: Optional champion name used to predict the portrait path

        Returns:
            The matching chunk with ``data`` and ``extension`` filled, or None
            if the archive has no portrait
        """
        if champion:
            chunk = self.locate_by_hash(champion)
            if chunk is not None:
                return chunk
            logger.info("No predicted path matched for %s, scanning chunks", champion)

        return self.locate_by_content()

    def locate_by_hash(self, champion: str) -> Optional[WADChunk]:
        """Look up predicted portrait paths in the chunk table."""
        by_hash: Dict[str, WADChunk] = {}
        for chunk in self.chunks:
            by_hash.setdefault(chunk.path_hash, chunk)

        for path in self.candidate_paths(champion):
            path_hash = hash_path(path)
            chunk = by_hash.get(path_hash)
            if chunk is None:
                continue

            logger.info("Found loading screen by path hash: %s (%s)", path, path_hash)
            try:
                data = self._decode(chunk)
            except ChunkDecodeError as e:
                logger.warning("Failed to extract chunk for path %s: %s", path, e)
                continue

            extension = payload_extension(data)
            if extension is None:
                logger.warning("Chunk %s for path %s is not a texture", path_hash, path)
                continue

            chunk.attach_payload(data, extension)
            return chunk

        return None

    def locate_by_content(self) -> Optional[WADChunk]:
        """Scan decoded chunks for the first TEX payload at the target size."""
        texture_sizes = []
        for result in self._inspect_all(self.chunks):
            if result is None:
                continue

            chunk, data, header = result
            texture_sizes.append(f"{header.width}x{header.height}")
            if header.size == self.target_size:
                logger.info("Found loading screen %s by size %r", chunk.path_hash, header)
                chunk.attach_payload(data, "tex")
                return chunk

        logger.info(
            "No %dx%d texture among %d TEX chunks (%s)",
            self.config.target_width,
            self.config.target_height,
            len(texture_sizes),
            ", ".join(texture_sizes) or "none",
        )
        return None

    def _inspect_all(
        self, chunks: List[WADChunk]
    ) -> Iterable[Optional[Tuple[WADChunk, bytes, TexHeader]]]:
        if self.config.workers <= 1:
            yield from map(self._inspect, chunks)
            return

        # Submit a bounded window at a time so an early match stops decoding.
        # Results come back in table order; cache writes stay on this thread.
        window = self.config.workers * 2
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            for start in range(0, len(chunks), window):
                yield from executor.map(self._inspect, chunks[start : start + window])

    def _inspect(self, chunk: WADChunk) -> Optional[Tuple[WADChunk, bytes, TexHeader]]:
        """Decode a chunk and read its TEX header, if it has one."""
        try:
            data = self._decode(chunk)
        except ChunkDecodeError as e:
            logger.warning("Failed to process chunk %s: %s", chunk.path_hash, e)
            return None

        header = TexHeader.from_bytes(data)
        if header is None:
            return None

        logger.debug("TEX chunk %s: %r", chunk.path_hash, header)
        return chunk, data, header

    def _decode(self, chunk: WADChunk) -> bytes:
        if chunk.data is not None:
            return chunk.data
        return self.source.extract_chunk(chunk)
