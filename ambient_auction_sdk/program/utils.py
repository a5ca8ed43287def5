"""Utility functions for the Ambient auction program module."""

import struct

from Crypto.Hash import SHA256

from .errors import InvalidArgumentError


def sha256(*parts: bytes) -> bytes:
    """Compute the SHA-256 hash of the concatenation of parts.

    Matches the runtime's `hashv`, which hashes a list of byte slices
    as if they were one contiguous buffer.
    """
    h = SHA256.new()
    for part in parts:
        h.update(part)
    return h.digest()


def encode_u8(value: int) -> bytes:
    """Encode an unsigned 8-bit integer.

    Raises:
        ValueError: If value is out of range [0, 255]
    """
    if not 0 <= value <= 255:
        raise ValueError(f"u8 value out of range: {value} (must be 0-255)")
    return struct.pack("<B", value)


def encode_u16(value: int) -> bytes:
    """Encode an unsigned 16-bit integer (little-endian).

    Raises:
        ValueError: If value is out of range [0, 65535]
    """
    if not 0 <= value <= 65535:
        raise ValueError(f"u16 value out of range: {value} (must be 0-65535)")
    return struct.pack("<H", value)


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer (little-endian).

    Raises:
        ValueError: If value is out of range [0, 2^64-1]
    """
    if not 0 <= value <= 18446744073709551615:
        raise ValueError(f"u64 value out of range: {value} (must be 0-18446744073709551615)")
    return struct.pack("<Q", value)


def encode_bool(value: bool) -> bytes:
    """Encode a boolean as a single byte."""
    return b"\x01" if value else b"\x00"


def decode_u16(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 16-bit integer (little-endian)."""
    return struct.unpack_from("<H", data, offset)[0]


def decode_u64(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 64-bit integer (little-endian)."""
    return struct.unpack_from("<Q", data, offset)[0]


def encode_fixed_bytes(value: bytes, size: int, name: str) -> bytes:
    """Check that a byte array has exactly `size` bytes and return it.

    Raises:
        InvalidArgumentError: If the length differs
    """
    value = bytes(value)
    if len(value) != size:
        raise InvalidArgumentError(
            name, f"expected {size} bytes, got {len(value)}"
        )
    return value
