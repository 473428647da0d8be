"""WAD Toolkit - read skin WAD archives and extract loading-screen textures."""

__version__ = "0.1.0"
