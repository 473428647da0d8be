"""Asset format helpers for WAD payloads."""

from .magic import guess_extension
from .tex import TexHeader, is_tex_data

__all__ = ["TexHeader", "is_tex_data", "guess_extension"]
