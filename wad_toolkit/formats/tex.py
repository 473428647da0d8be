"""TEX texture format header.

TEX is the texture container embedded in WAD archives. Key characteristics:
- Magic: "TEX\\0" (0x00584554 little-endian) at offset 0
- Width and height as little-endian u16 at offsets 4 and 6
- Pixel format byte at offset 9
- Pixel data follows the header and is handed to external converters
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.binary import read_u16_le, read_u32_le

TEX_MAGIC = 0x00584554
TEX_ASCII_PREFIX = b"TEX"

# magic(4) + width(2) + height(2) + unknown(1) + format(1)
TEX_HEADER_SIZE = 10


def is_tex_data(data: bytes) -> bool:
    """Check whether a decoded payload starts with the TEX signature.

    Encoders differ in what follows the three ASCII letters, so either the
    full 32-bit magic or the "TEX" prefix is accepted.
    """
    if len(data) < 4:
        return False
    if read_u32_le(data, 0) == TEX_MAGIC:
        return True
    return data[:3] == TEX_ASCII_PREFIX


@dataclass
class TexHeader:
    """Dimensions and pixel format of a TEX payload."""

    width: int
    height: int
    format: int

    @property
    def size(self):
        return self.width, self.height

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional["TexHeader"]:
        """Read the header, or return None for non-TEX or short payloads."""
        if not is_tex_data(data) or len(data) < TEX_HEADER_SIZE:
            return None
        return cls(
            width=read_u16_le(data, 4),
            height=read_u16_le(data, 6),
            format=data[9],
        )

    def __repr__(self) -> str:
        return f"TexHeader({self.width}x{self.height}, format=0x{self.format:02X})"
