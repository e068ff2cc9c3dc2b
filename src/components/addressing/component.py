"""
Addressing component - program-derived record addresses.

A program-derived address is a SHA-256 digest of the seeds, a bump byte
and the program id that does NOT decode to an Ed25519 curve point. No
private key exists for such an address, so only the program can act on it.

Invariants:
- I1: derivation is a pure function of (seeds, program_id)
- I2: the bump is the largest value in 255..1 giving an off-curve address
- I3: the same function locates and allocates a record
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from functools import lru_cache

from src.domain.keys import KEY_LENGTH, require_key

from .models import AddressDerivationError, DerivedAddress

MAX_SEEDS = 16
MAX_SEED_LEN = 32
PDA_MARKER = b"ProgramDerivedAddress"

# Edwards25519 field prime and curve constant d = -121665/121666
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


def is_on_curve(point: bytes) -> bool:
    """
    Check whether 32 bytes decompress to an Edwards25519 point.

    The high bit carries the sign of x and is ignored. A y-coordinate is
    valid when (y^2 - 1) / (d*y^2 + 1) is a square modulo p; the denominator
    is never zero because -1/d is not a square.
    """
    if len(point) != KEY_LENGTH:
        raise AddressDerivationError(f"point must be {KEY_LENGTH} bytes")
    y = int.from_bytes(point, "little") & ((1 << 255) - 1)
    y %= _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    ratio = u * pow(v, _P - 2, _P) % _P
    return ratio == 0 or pow(ratio, (_P - 1) // 2, _P) == 1


def _check_seeds(seeds: Sequence[bytes]) -> None:
    if len(seeds) > MAX_SEEDS:
        raise AddressDerivationError(f"at most {MAX_SEEDS} seeds allowed, got {len(seeds)}")
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise AddressDerivationError(
                f"seed of {len(seed)} bytes exceeds the {MAX_SEED_LEN}-byte limit"
            )


def create_program_address(seeds: Sequence[bytes], program_id: bytes) -> bytes:
    """
    Hash seeds and program id into an address.

    Raises:
        AddressDerivationError: Seeds are malformed or the result is on the curve.
    """
    _check_seeds(seeds)
    require_key(program_id, "program_id")

    address = _hash_seeds(seeds, program_id)
    if is_on_curve(address):
        raise AddressDerivationError("derived address lies on the ed25519 curve")
    return address


def _hash_seeds(seeds: Sequence[bytes], program_id: bytes) -> bytes:
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    hasher.update(program_id)
    hasher.update(PDA_MARKER)
    return hasher.digest()


def find_program_address(seeds: Sequence[bytes], program_id: bytes) -> DerivedAddress:
    """
    Find the canonical program-derived address for seeds.

    Tries bump 255 down to 1 and returns the first off-curve result. One
    seed slot is taken by the bump, so at most MAX_SEEDS - 1 seeds are allowed.
    """
    if len(seeds) > MAX_SEEDS - 1:
        raise AddressDerivationError(f"at most {MAX_SEEDS - 1} seeds allowed with a bump")
    _check_seeds(seeds)
    require_key(program_id, "program_id")

    for bump in range(255, 0, -1):
        address = _hash_seeds([*seeds, bytes([bump])], program_id)
        if not is_on_curve(address):
            return DerivedAddress(address=address, bump=bump)
    raise AddressDerivationError("Unable to find a viable program address bump seed")


@lru_cache(maxsize=4096)
def derive_favorites_address(seed: bytes, owner: bytes, program_id: bytes) -> DerivedAddress:
    """Address of owner's favorites record: seeds [seed, owner] under program_id."""
    require_key(owner, "owner")
    return find_program_address([seed, owner], program_id)


def verify_address(expected: DerivedAddress, supplied: bytes | None) -> bool:
    """True when no address was supplied or it equals the derived one."""
    return supplied is None or bytes(supplied) == expected.address
