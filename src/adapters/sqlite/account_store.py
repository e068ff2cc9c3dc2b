"""
SQLite Account Store Adapter.

Implements AccountStorePort on a single `accounts` table.
Schema is created by SQLiteMigrator (migrations/001_accounts.sql).

Invariants:
- A transaction holds the database write lock (BEGIN IMMEDIATE) from start
  to commit, so requests never interleave
- Each thread gets its own connection; nested transactions join the outer one
"""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from src.core.ports.accounts import AccountStoreError
from src.domain.entities import Account


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteAccountStore:
    """SQLite implementation of AccountStorePort."""

    def __init__(self, db_path: str, *, timeout: float = 5.0) -> None:
        self.db_path = db_path
        self._timeout = timeout
        self._local = threading.local()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, timeout=self._timeout, isolation_level=None)
        conn.row_factory = dict_factory
        return conn

    def _active(self) -> sqlite3.Connection | None:
        return getattr(self._local, "conn", None)

    @contextmanager
    def _conn(self) -> Iterator[sqlite3.Connection]:
        """Yield the transaction's connection, or a short-lived autocommit one."""
        active = self._active()
        if active is not None:
            yield active
            return
        conn = self._connect()
        try:
            yield conn
        finally:
            conn.close()

    def get(self, address: bytes) -> Account | None:
        with self._conn() as conn:
            row = conn.execute(
                "SELECT address, owner, lamports, data FROM accounts WHERE address = ?",
                (bytes(address),),
            ).fetchone()
        return self._map_row(row) if row else None

    def put(self, account: Account) -> None:
        with self._conn() as conn:
            conn.execute(
                """
                INSERT INTO accounts (address, owner, lamports, data, updated_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(address) DO UPDATE SET
                    owner=excluded.owner,
                    lamports=excluded.lamports,
                    data=excluded.data,
                    updated_at=excluded.updated_at
                """,
                (
                    bytes(account.address),
                    bytes(account.owner),
                    account.lamports,
                    bytes(account.data),
                    datetime.now(UTC).isoformat(),
                ),
            )

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self._active() is not None:
            yield
            return

        conn = self._connect()
        try:
            conn.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            conn.close()
            raise AccountStoreError(f"Could not start transaction: {e}") from e

        self._local.conn = conn
        try:
            yield
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        else:
            conn.execute("COMMIT")
        finally:
            self._local.conn = None
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Account:
        return Account(
            address=bytes(row["address"]),
            owner=bytes(row["owner"]),
            lamports=int(row["lamports"]),
            data=bytes(row["data"]),
        )
