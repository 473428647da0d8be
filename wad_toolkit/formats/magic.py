"""File type detection for decoded chunk payloads."""

from .tex import is_tex_data

DDS_MAGIC = b"DDS "

# (prefix, extension), checked in order
_SIGNATURES = [
    (DDS_MAGIC, "dds"),
    (b"\x89PNG", "png"),
    (b"PROP", "bin"),
    (b"PTCH", "bin"),
    (b"r3d2Mesh", "scb"),
    (b"r3d2sklt", "skl"),
    (b"[Obj", "sco"),
    (b"OggS", "ogg"),
]

# Skinned mesh files start with this u32 (little-endian 0x00112233)
SKN_MAGIC = b"\x33\x22\x11\x00"


def guess_extension(data: bytes, default: str = "bin") -> str:
    """Guess a file extension from the leading bytes of a payload."""
    if is_tex_data(data):
        return "tex"
    for prefix, extension in _SIGNATURES:
        if data.startswith(prefix):
            return extension
    if data[:4] == SKN_MAGIC:
        return "skn"
    return default
