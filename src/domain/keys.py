"""
Public key helpers.

Keys are 32 raw bytes internally and base58 strings at the edges
(configuration, logs), matching how ledger tooling prints them.
"""

from __future__ import annotations

import base58

KEY_LENGTH = 32

SYSTEM_PROGRAM_ID = bytes(KEY_LENGTH)


def decode_key(value: str) -> bytes:
    """
    Decode a base58 public key.

    Raises:
        ValueError: If the string is not base58 or not 32 bytes long.
    """
    try:
        raw = base58.b58decode(value)
    except ValueError as e:
        raise ValueError(f"Invalid base58 key '{value}': {e}") from e
    if len(raw) != KEY_LENGTH:
        raise ValueError(f"Key '{value}' decodes to {len(raw)} bytes, expected {KEY_LENGTH}")
    return raw


def encode_key(raw: bytes) -> str:
    return base58.b58encode(raw).decode("ascii")


def require_key(raw: bytes, name: str = "key") -> bytes:
    if not isinstance(raw, bytes | bytearray) or len(raw) != KEY_LENGTH:
        raise ValueError(f"{name} must be {KEY_LENGTH} raw bytes")
    return bytes(raw)
