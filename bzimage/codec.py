from __future__ import annotations

import gzip
import zlib

from .constants import DEFAULT_COMPRESS_LEVEL, GZIP_MTIME
from .errors import DecompressionFailure


def compress(data: bytes, level: int = DEFAULT_COMPRESS_LEVEL) -> bytes:
    if not 0 <= level <= 9:
        raise ValueError(f"gzip level must be in 0..9, got {level}")
    return gzip.compress(data, compresslevel=level, mtime=GZIP_MTIME)


def decompress(compressed: bytes) -> bytes:
    """Inflate a complete gzip stream.

    The result is not compared against the header's uncompressed_size here;
    see image.check_uncompressed_size for that.
    """
    if not compressed:
        raise DecompressionFailure("empty gzip stream")
    try:
        return gzip.decompress(compressed)
    except (OSError, EOFError, zlib.error) as exc:
        # gzip.BadGzipFile is an OSError; a cut-off stream surfaces as EOFError
        raise DecompressionFailure(f"gzip decompression failed: {exc}") from exc
