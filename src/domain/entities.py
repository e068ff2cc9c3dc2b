from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Account:
    """
    A ledger account: a byte buffer at an address, controlled by `owner`.

    Wallets are owned by the system program; favorites records are owned by
    the program that derived their address.
    """

    address: bytes
    owner: bytes
    lamports: int
    data: bytes = b""

    def with_lamports(self, lamports: int) -> Account:
        return Account(address=self.address, owner=self.owner, lamports=lamports, data=self.data)

    def with_data(self, data: bytes) -> Account:
        return Account(address=self.address, owner=self.owner, lamports=self.lamports, data=data)


@dataclass(frozen=True)
class FavoritesRecord:
    """One owner's favorites. Decoded fresh on every read."""

    number: int
    color: str
    hobbies: list[str] = field(default_factory=list)
