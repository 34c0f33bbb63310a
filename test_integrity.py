from __future__ import annotations

import gzip
import hashlib
import os
import unittest

from bzimage.codec import compress, decompress
from bzimage.errors import DecompressionError, DecompressionFailure
from bzimage.hashutil import compute, verify
from bzimage.header import BzImageHeader


class ChecksumTests(unittest.TestCase):
    def test_compute_is_sha256(self):
        data = os.urandom(777)
        self.assertEqual(hashlib.sha256(data).digest(), compute(data))
        self.assertEqual(32, len(compute(b"")))

    def test_verify_matches(self):
        compressed = compress(b"somedata")
        hdr = BzImageHeader.new(8, len(compressed), compute(compressed))
        self.assertTrue(verify(hdr, compressed))
        self.assertTrue(hdr.validate_checksum(compressed))

    def test_checksum_covers_compressed_not_uncompressed(self):
        payload = b"somedata" * 10
        compressed = compress(payload)
        hdr = BzImageHeader.new(len(payload), len(compressed), compute(compressed))
        self.assertFalse(verify(hdr, payload))

    def test_every_single_bit_flip_detected(self):
        compressed = compress(b"unit test payload")
        hdr = BzImageHeader.new(17, len(compressed), compute(compressed))
        before = hdr.pack()
        for i in range(len(compressed)):
            for bit in range(8):
                corrupted = bytearray(compressed)
                corrupted[i] ^= 1 << bit
                self.assertFalse(verify(hdr, bytes(corrupted)), msg=f"byte {i} bit {bit}")
        self.assertEqual(before, hdr.pack())

    def test_length_change_detected(self):
        compressed = compress(b"abc")
        hdr = BzImageHeader.new(3, len(compressed), compute(compressed))
        self.assertFalse(verify(hdr, compressed[:-1]))
        self.assertFalse(verify(hdr, compressed + b"\x00"))


class CodecTests(unittest.TestCase):
    def test_roundtrip(self):
        for payload in (b"", b"a", os.urandom(4096), b"hello world\n" * 500):
            self.assertEqual(payload, decompress(compress(payload)))

    def test_output_is_gzip_and_deterministic(self):
        data = b"deterministic" * 20
        out = compress(data)
        self.assertEqual(b"\x1f\x8b", out[:2])
        self.assertEqual(out, compress(data))

    def test_accepts_any_standard_gzip(self):
        data = b"from another encoder"
        self.assertEqual(data, decompress(gzip.compress(data, compresslevel=1, mtime=1234567)))

    def test_level_validated(self):
        with self.assertRaises(ValueError):
            compress(b"x", level=10)
        with self.assertRaises(ValueError):
            compress(b"x", level=-1)

    def test_malformed_stream(self):
        with self.assertRaises(DecompressionFailure):
            decompress(b"this is not gzip at all")

    def test_truncated_stream(self):
        out = compress(b"some payload that compresses" * 10)
        with self.assertRaises(DecompressionFailure) as ctx:
            decompress(out[:-6])
        self.assertIsNotNone(ctx.exception.__cause__)

    def test_empty_stream(self):
        with self.assertRaises(DecompressionFailure):
            decompress(b"")

    def test_error_alias(self):
        self.assertIs(DecompressionError, DecompressionFailure)


if __name__ == "__main__":
    unittest.main()
