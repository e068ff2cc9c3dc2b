"""
Addressing component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.keys import encode_key


@dataclass(frozen=True)
class DerivedAddress:
    """Program-derived address and the bump seed that produced it."""

    address: bytes
    bump: int

    def __str__(self) -> str:
        return encode_key(self.address)


class AddressDerivationError(Exception):
    """Seeds are malformed or no off-curve address exists for them."""
