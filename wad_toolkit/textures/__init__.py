"""Loading-screen texture location and extraction."""

from .extractor import extract_tex_file
from .locator import LOADSCREEN_SIZE, LoadScreenLocator, LocatorConfig

__all__ = ["LoadScreenLocator", "LocatorConfig", "LOADSCREEN_SIZE", "extract_tex_file"]
