from __future__ import annotations

import logging
from typing import BinaryIO, Tuple

from .constants import READ_CHUNK_SIZE
from .errors import IOFailure, TruncatedPayload
from .header import BzImageHeader


logger = logging.getLogger(__name__)


def read_exact(f: BinaryIO, n: int) -> bytes:
    buf = bytearray()
    while len(buf) < n:
        try:
            b = f.read(min(n - len(buf), READ_CHUNK_SIZE))
        except OSError as exc:
            raise IOFailure(f"reading compressed payload: {exc}") from exc
        if not b:
            raise TruncatedPayload(n, len(buf))
        buf += b
    return bytes(buf)


def read_payload(f: BinaryIO, header: BzImageHeader) -> bytes:
    """Read the ``compressed_size`` bytes that follow the header in ``f``."""
    return read_exact(f, header.compressed_size)


def write_payload(f: BinaryIO, compressed: bytes) -> int:
    # The header must already have been written immediately before this.
    try:
        f.write(compressed)
    except OSError as exc:
        raise IOFailure(f"writing compressed payload: {exc}") from exc
    return len(compressed)


def read_header_and_payload(f: BinaryIO) -> Tuple[BzImageHeader, bytes]:
    """Read a header and the compressed payload that follows it.

    No checksum verification or decompression happens here; callers are
    expected to run hashutil.verify and codec.decompress on the result.
    """
    header = BzImageHeader.read_from(f)
    compressed = read_payload(f, header)
    logger.debug("framed payload of %d bytes (version %d)", len(compressed), header.version)
    return header, compressed


def read_header_and_payload_at(f: BinaryIO, offset: int) -> Tuple[BzImageHeader, bytes]:
    try:
        f.seek(offset)
    except OSError as exc:
        raise IOFailure(f"seeking to image at offset {offset}: {exc}") from exc
    return read_header_and_payload(f)


def write_header_and_payload(f: BinaryIO, header: BzImageHeader, compressed: bytes) -> int:
    if len(compressed) != header.compressed_size:
        raise ValueError(
            f"payload length {len(compressed)} does not match header compressed_size {header.compressed_size}"
        )
    written = header.write_to(f)
    written += write_payload(f, compressed)
    return written
