from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .header import BzImageHeader


def compute(data: bytes) -> bytes:
    """SHA-256 over the exact bytes given (the compressed payload)."""
    return hashlib.sha256(data).digest()


def verify(header: "BzImageHeader", compressed: bytes) -> bool:
    """Recompute the payload digest and compare it with the header checksum.

    A mismatch is reported as False, never raised; escalating it is the
    caller's decision. The comparison is a corruption check and is not
    constant time.
    """
    return compute(compressed) == header.checksum_copy()
