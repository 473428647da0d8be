"""Tests for binary utilities."""

import pytest

from wad_toolkit.utils.binary import BinaryReader, read_u16_le, read_u32_le


class TestBinaryReader:
    """Tests for BinaryReader class."""

    def test_read_u8(self):
        reader = BinaryReader(b"\x42")
        assert reader.read_u8() == 0x42

    def test_read_u16_little_endian(self):
        reader = BinaryReader(b"\x34\x12")
        assert reader.read_u16() == 0x1234

    def test_read_u32_little_endian(self):
        reader = BinaryReader(b"\x78\x56\x34\x12")
        assert reader.read_u32() == 0x12345678

    def test_read_u64_little_endian(self):
        reader = BinaryReader(b"\xF0\xDE\xBC\x9A\x78\x56\x34\x12")
        assert reader.read_u64() == 0x123456789ABCDEF0

    def test_tell(self):
        reader = BinaryReader(b"\x00\x01\x02\x03\x04\x05")
        assert reader.tell() == 0
        reader.read_u16()
        assert reader.tell() == 2

    def test_skip(self):
        reader = BinaryReader(b"\x00\x01\x02\x03\x04\x05")
        reader.skip(4)
        assert reader.read_u8() == 0x04

    def test_skip_past_end(self):
        reader = BinaryReader(b"\x00\x01")
        with pytest.raises(EOFError):
            reader.skip(3)
        assert reader.tell() == 0

    def test_remaining(self):
        reader = BinaryReader(b"\x00\x01\x02\x03\x04\x05")
        assert reader.remaining() == 6
        reader.read_u32()
        assert reader.remaining() == 2

    def test_eof_error(self):
        reader = BinaryReader(b"\x00\x01")
        with pytest.raises(EOFError):
            reader.read_bytes(10)


class TestHelpers:
    def test_read_u16_le(self):
        assert read_u16_le(b"\x00\x34\x01", 1) == 0x0134

    def test_read_u32_le(self):
        assert read_u32_le(b"TEX\x00") == 0x00584554
