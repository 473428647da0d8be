"""Path hashing for WAD chunk identifiers.

WAD archives address chunks by the XXH64 (seed 0) of the lowercased virtual
path instead of the path itself. The hex form matches ``WADChunk.path_hash``.
"""

import xxhash


def hash_path(path: str) -> str:
    """Return the 16-char lowercase hex path hash of ``path``."""
    return xxhash.xxh64(path.lower().encode("utf-8"), seed=0).hexdigest()


def hash_path_int(path: str) -> int:
    """Return the path hash as the integer stored in the chunk table."""
    return xxhash.xxh64_intdigest(path.lower().encode("utf-8"), seed=0)
