"""
In-Memory Account Store Adapter.

Implements AccountStorePort with a dict guarded by a re-entrant lock.
A transaction snapshots the dict on entry and restores it if the block
raises, so a failed request leaves no trace.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from src.core.ports.accounts import StoreClosedError
from src.domain.entities import Account
from src.domain.keys import SYSTEM_PROGRAM_ID


class InMemoryAccountStore:
    """Account store held in process memory."""

    def __init__(self, accounts: list[Account] | None = None) -> None:
        self._accounts: dict[bytes, Account] = {}
        self._lock = threading.RLock()
        self._depth = 0
        self._closed = False
        for account in accounts or []:
            self._accounts[account.address] = account

    def _check_open(self) -> None:
        if self._closed:
            raise StoreClosedError()

    def get(self, address: bytes) -> Account | None:
        self._check_open()
        with self._lock:
            return self._accounts.get(bytes(address))

    def put(self, account: Account) -> None:
        self._check_open()
        with self._lock:
            self._accounts[bytes(account.address)] = account

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self._check_open()
        with self._lock:
            snapshot = dict(self._accounts) if self._depth == 0 else None
            self._depth += 1
            try:
                yield
            except BaseException:
                if snapshot is not None:
                    self._accounts = snapshot
                raise
            finally:
                self._depth -= 1

    def fund(self, address: bytes, lamports: int) -> Account:
        """Credit lamports to a wallet, creating it if needed."""
        with self._lock:
            current = self._accounts.get(bytes(address))
            if current is None:
                current = Account(address=bytes(address), owner=SYSTEM_PROGRAM_ID, lamports=0)
            funded = current.with_lamports(current.lamports + lamports)
            self._accounts[funded.address] = funded
            return funded

    def __len__(self) -> int:
        return len(self._accounts)

    def close(self) -> None:
        self._closed = True
