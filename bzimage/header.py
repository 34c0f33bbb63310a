from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from typing import BinaryIO

from .constants import CHECKSUM_SIZE, HEADER_SIZE, MAGIC, U32_MAX, U64_MAX, VERSION
from .errors import InvalidMagic, IOFailure, TruncatedHeader
from . import hashutil


# Image header (fixed 64 bytes)
# struct: <4s I I Q Q 32s I
#  - magic[4] "DMNZ"
#  - version u32
#  - reserved1 u32
#  - uncompressed_size u64
#  - compressed_size u64
#  - checksum[32] (SHA-256 of the compressed payload)
#  - reserved2 u32
_HEADER_STRUCT = struct.Struct("<4sIIQQ32sI")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")

assert _HEADER_STRUCT.size == HEADER_SIZE


@dataclass(frozen=True)
class BzImageHeader:
    magic: bytes
    version: int
    reserved1: int
    uncompressed_size: int
    compressed_size: int
    checksum: bytes
    reserved2: int

    def __post_init__(self) -> None:
        # own the byte fields so no caller buffer is aliased
        object.__setattr__(self, "magic", bytes(self.magic))
        object.__setattr__(self, "checksum", bytes(self.checksum))
        if len(self.magic) != len(MAGIC):
            raise ValueError("magic must be 4 bytes")
        if len(self.checksum) != CHECKSUM_SIZE:
            raise ValueError("checksum must be 32 bytes")
        for name in ("version", "reserved1", "reserved2"):
            _check_range(name, getattr(self, name), U32_MAX)
        for name in ("uncompressed_size", "compressed_size"):
            _check_range(name, getattr(self, name), U64_MAX)

    @classmethod
    def new(cls, uncompressed_size: int, compressed_size: int, checksum: bytes) -> "BzImageHeader":
        return cls(
            magic=MAGIC,
            version=VERSION,
            reserved1=0,
            uncompressed_size=uncompressed_size,
            compressed_size=compressed_size,
            checksum=checksum,
            reserved2=0,
        )

    @staticmethod
    def size() -> int:
        return HEADER_SIZE

    def magic_copy(self) -> bytes:
        return bytes(self.magic)

    def checksum_copy(self) -> bytes:
        return bytes(self.checksum)

    def pack(self) -> bytes:
        return _HEADER_STRUCT.pack(
            self.magic,
            self.version,
            self.reserved1,
            self.uncompressed_size,
            self.compressed_size,
            self.checksum,
            self.reserved2,
        )

    def write_to(self, f: BinaryIO) -> int:
        data = self.pack()
        try:
            f.write(data)
        except OSError as exc:
            raise IOFailure(f"writing header bytes: {exc}") from exc
        return len(data)

    @classmethod
    def read_from(cls, f: BinaryIO) -> "BzImageHeader":
        """Parse a header from the current position of ``f``.

        Each field is read on its own so a short stream fails at the first
        field that cannot be filled, and nothing partially decoded escapes.
        The version is returned as found; it is not compared to VERSION.
        """
        magic = _read_field(f, len(MAGIC), "magic")
        if magic != MAGIC:
            raise InvalidMagic(magic)
        (version,) = _U32.unpack(_read_field(f, _U32.size, "version"))
        (reserved1,) = _U32.unpack(_read_field(f, _U32.size, "reserved1"))
        (uncompressed_size,) = _U64.unpack(_read_field(f, _U64.size, "uncompressed_size"))
        (compressed_size,) = _U64.unpack(_read_field(f, _U64.size, "compressed_size"))
        checksum = _read_field(f, CHECKSUM_SIZE, "checksum")
        (reserved2,) = _U32.unpack(_read_field(f, _U32.size, "reserved2"))
        return cls(
            magic=magic,
            version=version,
            reserved1=reserved1,
            uncompressed_size=uncompressed_size,
            compressed_size=compressed_size,
            checksum=checksum,
            reserved2=reserved2,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "BzImageHeader":
        return cls.read_from(io.BytesIO(data))

    def validate_checksum(self, compressed: bytes) -> bool:
        return hashutil.verify(self, compressed)


def encode(header: BzImageHeader) -> bytes:
    return header.pack()


def decode(f: BinaryIO) -> BzImageHeader:
    return BzImageHeader.read_from(f)


def _check_range(name: str, value: int, upper: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an int")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} out of range: {value}")


def _read_field(f: BinaryIO, n: int, field: str) -> bytes:
    buf = bytearray()
    while len(buf) < n:
        try:
            b = f.read(n - len(buf))
        except OSError as exc:
            raise IOFailure(f"reading {field}: {exc}") from exc
        if not b:
            raise TruncatedHeader(field, n, len(buf))
        buf += b
    return bytes(buf)
