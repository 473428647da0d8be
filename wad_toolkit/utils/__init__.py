"""Shared helpers."""

from .binary import BinaryReader

__all__ = ["BinaryReader"]
