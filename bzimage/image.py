from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Tuple, Union

from . import codec, hashutil
from .constants import DEFAULT_COMPRESS_LEVEL, VERSION
from .errors import ChecksumMismatch, IOFailure, SizeMismatch, UnsupportedVersion
from .framing import read_header_and_payload, write_header_and_payload
from .header import BzImageHeader


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ReadOptions:
    """Policy applied by read_image on top of the framing stages.

    verify_checksum: raise ChecksumMismatch when the payload digest differs.
    enforce_version: raise UnsupportedVersion for any version other than VERSION.
    check_uncompressed_size: raise SizeMismatch when the inflated length
        differs from the header's uncompressed_size.
    """

    verify_checksum: bool = True
    enforce_version: bool = False
    check_uncompressed_size: bool = False


DEFAULT_READ_OPTIONS = ReadOptions()


def check_version(header: BzImageHeader) -> None:
    if header.version != VERSION:
        raise UnsupportedVersion(header.version, VERSION)


def check_uncompressed_size(header: BzImageHeader, payload: bytes) -> None:
    if len(payload) != header.uncompressed_size:
        raise SizeMismatch(header.uncompressed_size, len(payload))


def build_header(payload: bytes, compressed: bytes) -> BzImageHeader:
    return BzImageHeader.new(
        uncompressed_size=len(payload),
        compressed_size=len(compressed),
        checksum=hashutil.compute(compressed),
    )


def write_image(f: BinaryIO, payload: bytes, *, level: int = DEFAULT_COMPRESS_LEVEL) -> BzImageHeader:
    """Compress ``payload`` and write header plus compressed bytes to ``f``."""
    compressed = codec.compress(payload, level)
    header = build_header(payload, compressed)
    write_header_and_payload(f, header, compressed)
    logger.debug("wrote image: %d bytes -> %d compressed", header.uncompressed_size, header.compressed_size)
    return header


def pack_image(payload: bytes, *, level: int = DEFAULT_COMPRESS_LEVEL) -> bytes:
    buf = io.BytesIO()
    write_image(buf, payload, level=level)
    return buf.getvalue()


def read_image(f: BinaryIO, *, options: ReadOptions = DEFAULT_READ_OPTIONS) -> Tuple[BzImageHeader, bytes]:
    """Run the full read path: decode, frame, verify, decompress.

    Returns the header and the original (uncompressed) payload.
    """
    header, compressed = read_header_and_payload(f)
    if options.enforce_version:
        check_version(header)
    elif header.version != VERSION:
        logger.warning("accepting image with header version %d (current is %d)", header.version, VERSION)
    if options.verify_checksum and not hashutil.verify(header, compressed):
        raise ChecksumMismatch(header.checksum_copy(), hashutil.compute(compressed))
    payload = codec.decompress(compressed)
    if options.check_uncompressed_size:
        check_uncompressed_size(header, payload)
    logger.debug("read image: %d compressed -> %d bytes", len(compressed), len(payload))
    return header, payload


def unpack_image(data: bytes, *, options: ReadOptions = DEFAULT_READ_OPTIONS) -> Tuple[BzImageHeader, bytes]:
    return read_image(io.BytesIO(data), options=options)


def save_image(path: PathLike, payload: bytes, *, level: int = DEFAULT_COMPRESS_LEVEL) -> BzImageHeader:
    try:
        with open(path, "wb") as fh:
            return write_image(fh, payload, level=level)
    except IOFailure:
        raise
    except OSError as exc:
        raise IOFailure(f"writing image {path}: {exc}") from exc


def load_image(path: PathLike, *, options: ReadOptions = DEFAULT_READ_OPTIONS) -> Tuple[BzImageHeader, bytes]:
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise IOFailure(f"opening image {path}: {exc}") from exc
    with fh:
        return read_image(fh, options=options)
