"""
Favorites component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.core.ports.accounts import AccountStorePort
from src.core.ports.signer import SignerPort
from src.rules.models import RentRules


class ProgramConfigPort(Protocol):
    """Port for the program namespace and rent settings."""

    @property
    def program_id(self) -> bytes:
        """Program id owning every favorites account."""
        ...

    @property
    def seed(self) -> bytes:
        """Fixed namespace seed mixed into every record address."""
        ...

    @property
    def rent(self) -> RentRules:
        """Rent policy for first-write allocation."""
        ...


__all__ = ["AccountStorePort", "ProgramConfigPort", "SignerPort"]
