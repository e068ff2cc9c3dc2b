"""
Account Store Interface.

Protocol-based interface for the ledger's account storage.
Implementations: in-memory (tests, embedding), SQLite.

Invariants:
- One account per address; the address is the only key
- Writes inside transaction() commit together or not at all
- Transactions touching the same address never interleave
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities import Account


class AccountStorePort(Protocol):
    """
    Transactional account storage keyed by address.

    Callers wrap every request in transaction(); the store commits when the
    block exits normally and rolls back when it raises.
    """

    def get(self, address: bytes) -> Account | None:
        """Get the account at address, or None if nothing is stored there."""
        ...

    def put(self, account: Account) -> None:
        """Create or replace the account at account.address."""
        ...

    def transaction(self) -> AbstractContextManager[None]:
        """
        Open an atomic, isolated unit of work.

        Nested calls join the outer transaction.
        """
        ...


class AccountStoreError(Exception):
    """Base class for account store errors."""


class StoreClosedError(AccountStoreError):
    """Raised when the store is used after close()."""

    def __init__(self) -> None:
        super().__init__("Account store is closed")
