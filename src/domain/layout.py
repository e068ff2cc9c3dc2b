"""
Favorites record layout.

Persisted layout (little-endian, Borsh):

    [8 discriminator][8 number][4 len + <=50 color][4 count + <=5 x (4 len + <=50 hobby)]

Accounts are allocated at the worst-case size (SPACE) and the record is
written zero-padded to fill it, so the buffer never shrinks or grows.
"""

from __future__ import annotations

import hashlib
import struct

from src.domain.entities import FavoritesRecord
from src.domain.errors import DiscriminatorMismatch, NotInitialized, RecordCorrupted

MAX_COLOR_BYTES = 50
MAX_HOBBIES = 5
MAX_HOBBY_BYTES = 50
U64_MAX = 2**64 - 1

DISCRIMINATOR_SIZE = 8
_LEN_PREFIX = 4

# 8 + 8 + (4 + 50) + 4 + 5 * (4 + 50) = 344
SPACE = (
    DISCRIMINATOR_SIZE
    + 8
    + (_LEN_PREFIX + MAX_COLOR_BYTES)
    + _LEN_PREFIX
    + MAX_HOBBIES * (_LEN_PREFIX + MAX_HOBBY_BYTES)
)


def _discriminator(namespace: str, name: str) -> bytes:
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


ACCOUNT_DISCRIMINATOR = _discriminator("account", "Favorites")
SET_FAVORITES_DISCRIMINATOR = _discriminator("global", "set_favorites")
GET_FAVORITES_DISCRIMINATOR = _discriminator("global", "get_favorites")


# --- Borsh primitives ---


def _pack_str(value: str) -> bytes:
    raw = value.encode("utf-8")
    return struct.pack("<I", len(raw)) + raw


def _pack_fields(number: int, color: str, hobbies: list[str]) -> bytes:
    out = bytearray(struct.pack("<Q", number))
    out += _pack_str(color)
    out += struct.pack("<I", len(hobbies))
    for hobby in hobbies:
        out += _pack_str(hobby)
    return bytes(out)


class _Reader:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = data
        self._offset = offset

    def take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            raise RecordCorrupted(f"unexpected end of data at offset {self._offset}")
        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def u32(self) -> int:
        return int(struct.unpack("<I", self.take(4))[0])

    def u64(self) -> int:
        return int(struct.unpack("<Q", self.take(8))[0])

    def string(self, max_bytes: int) -> str:
        length = self.u32()
        if length > max_bytes:
            raise RecordCorrupted(f"string of {length} bytes exceeds {max_bytes}")
        try:
            return self.take(length).decode("utf-8")
        except UnicodeDecodeError as e:
            raise RecordCorrupted(f"invalid utf-8: {e}") from e


# --- Record codec ---


def encode_record(record: FavoritesRecord) -> bytes:
    """
    Serialize a record into a full SPACE-sized account buffer.

    The record must already have passed validation.
    """
    body = ACCOUNT_DISCRIMINATOR + _pack_fields(record.number, record.color, record.hobbies)
    if len(body) > SPACE:
        raise RecordCorrupted(f"encoded record is {len(body)} bytes, capacity is {SPACE}")
    return body + bytes(SPACE - len(body))


def decode_record(data: bytes, address: str = "") -> FavoritesRecord:
    """
    Deserialize a record from an account buffer.

    Raises:
        NotInitialized: Buffer empty or discriminator still zeroed.
        DiscriminatorMismatch: Buffer holds some other account type.
        RecordCorrupted: Fields do not fit the layout.
    """
    if len(data) < DISCRIMINATOR_SIZE or data[:DISCRIMINATOR_SIZE] == bytes(DISCRIMINATOR_SIZE):
        raise NotInitialized(address)
    if data[:DISCRIMINATOR_SIZE] != ACCOUNT_DISCRIMINATOR:
        raise DiscriminatorMismatch()

    reader = _Reader(data, DISCRIMINATOR_SIZE)
    number = reader.u64()
    color = reader.string(MAX_COLOR_BYTES)
    count = reader.u32()
    if count > MAX_HOBBIES:
        raise RecordCorrupted(f"{count} hobbies exceeds {MAX_HOBBIES}")
    hobbies = [reader.string(MAX_HOBBY_BYTES) for _ in range(count)]
    return FavoritesRecord(number=number, color=color, hobbies=hobbies)


# --- Instruction data (the bytes an owner signs) ---


def set_favorites_instruction(number: int, color: str, hobbies: list[str]) -> bytes:
    return SET_FAVORITES_DISCRIMINATOR + _pack_fields(number, color, hobbies)


def get_favorites_instruction() -> bytes:
    return GET_FAVORITES_DISCRIMINATOR
