"""
bzimage — compressed image container with integrity metadata.

An image is a fixed 64-byte little-endian header followed immediately by a
gzip-compressed payload:

- magic "DMNZ", format version, uncompressed and compressed sizes
- SHA-256 checksum of the compressed payload bytes
- two reserved u32 fields that round-trip unchanged

The read path is strictly linear: header.decode -> framing.read_payload ->
hashutil.verify -> codec.decompress. image.read_image runs all four stages
and applies a ReadOptions policy; the individual stages stay available for
callers that need their own policy.

The checksum detects accidental corruption only. It is not a signature.
"""

from .constants import HEADER_SIZE, MAGIC, VERSION
from .errors import (
    BzImageError,
    ChecksumMismatch,
    DecompressionError,
    DecompressionFailure,
    InvalidMagic,
    IOFailure,
    SizeMismatch,
    Truncated,
    TruncatedHeader,
    TruncatedPayload,
    UnsupportedVersion,
)
from .header import BzImageHeader, decode, encode
from .framing import read_header_and_payload, read_payload, write_payload
from .hashutil import compute, verify
from .codec import compress, decompress
from .image import (
    ReadOptions,
    build_header,
    load_image,
    pack_image,
    read_image,
    save_image,
    unpack_image,
    write_image,
)

__version__ = "0.1"

__all__ = [
    "HEADER_SIZE",
    "MAGIC",
    "VERSION",
    "BzImageError",
    "ChecksumMismatch",
    "DecompressionError",
    "DecompressionFailure",
    "InvalidMagic",
    "IOFailure",
    "SizeMismatch",
    "Truncated",
    "TruncatedHeader",
    "TruncatedPayload",
    "UnsupportedVersion",
    "BzImageHeader",
    "decode",
    "encode",
    "read_header_and_payload",
    "read_payload",
    "write_payload",
    "compute",
    "verify",
    "compress",
    "decompress",
    "ReadOptions",
    "build_header",
    "load_image",
    "pack_image",
    "read_image",
    "save_image",
    "unpack_image",
    "write_image",
]
