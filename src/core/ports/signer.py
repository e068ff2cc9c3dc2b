"""
Signer Interface.

Proves that a request was authorised by the holder of an owner key.
"""

from __future__ import annotations

from typing import Protocol


class SignerPort(Protocol):
    def is_signer(self, owner: bytes, message: bytes, signature: bytes) -> bool:
        """True when `signature` is owner's valid signature over `message`."""
        ...
