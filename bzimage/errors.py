from __future__ import annotations

from typing import Optional


class BzImageError(Exception):
    """Base class for bzimage-specific errors."""


# Header related
class InvalidMagic(BzImageError):
    def __init__(self, found: bytes):
        super().__init__(f"invalid magic: {found!r}")
        self.found = found


class UnsupportedVersion(BzImageError):
    def __init__(self, version: int, supported: int):
        super().__init__(f"unsupported header version {version} (supported: {supported})")
        self.version = version
        self.supported = supported


# Truncation
class Truncated(BzImageError, EOFError):
    pass


class TruncatedHeader(Truncated):
    def __init__(self, field: str, expected: int, actual: int):
        super().__init__(f"truncated header while reading {field}: expected {expected} bytes, got {actual}")
        self.field = field
        self.expected = expected
        self.actual = actual


class TruncatedPayload(Truncated):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"truncated payload: expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


# Payload integrity
class ChecksumMismatch(BzImageError):
    def __init__(self, expected: bytes, actual: Optional[bytes] = None):
        super().__init__("payload checksum mismatch; data corrupted")
        self.expected = expected
        self.actual = actual


class SizeMismatch(BzImageError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"decompressed length {actual} does not match header uncompressed_size {expected}")
        self.expected = expected
        self.actual = actual


class DecompressionFailure(BzImageError):
    pass


DecompressionError = DecompressionFailure


# Stream
class IOFailure(BzImageError, OSError):
    pass
