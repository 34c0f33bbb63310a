# Magic and version
MAGIC = b"DMNZ"  # 4 bytes: "DMNZ"
VERSION = 1

HEADER_SIZE = 64
CHECKSUM_SIZE = 32  # SHA-256

# Header layout (little endian), offsets in bytes
OFF_MAGIC = 0
OFF_VERSION = 4
OFF_RESERVED1 = 8
OFF_UNCOMPRESSED_SIZE = 12
OFF_COMPRESSED_SIZE = 20
OFF_CHECKSUM = 28
OFF_RESERVED2 = 60

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF


# Write-side defaults
DEFAULT_COMPRESS_LEVEL = 9
GZIP_MTIME = 0  # fixed so identical payloads pack to identical bytes

# Payload reads are issued in pieces of at most this size
READ_CHUNK_SIZE = 1_048_576  # 1 MiB
