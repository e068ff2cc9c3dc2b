"""
SQLite account store integration tests.

Runs the real migrations into a temporary database.
"""

import sqlite3
import threading

import pytest

from src.adapters.sqlite.account_store import SQLiteAccountStore
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.components.favorites import FavoritesService
from src.domain.entities import Account, FavoritesRecord

ADDR = b"\x01" * 32
OWNER = b"\x02" * 32


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test.db")


@pytest.fixture
def sqlite_store(db_path, project_root):
    SQLiteMigrator(db_path, str(project_root / "migrations")).run_migrations()
    return SQLiteAccountStore(db_path)


def _account(lamports=10, data=b"") -> Account:
    return Account(address=ADDR, owner=OWNER, lamports=lamports, data=data)


class TestReadWrite:
    def test_missing_is_none(self, sqlite_store):
        assert sqlite_store.get(ADDR) is None

    def test_put_then_get(self, sqlite_store):
        sqlite_store.put(_account(data=b"\x00\x01\x02"))

        assert sqlite_store.get(ADDR) == _account(data=b"\x00\x01\x02")

    def test_upsert(self, sqlite_store, db_path):
        sqlite_store.put(_account(lamports=1))
        sqlite_store.put(_account(lamports=2, data=b"x"))

        assert sqlite_store.get(ADDR) == _account(lamports=2, data=b"x")
        conn = sqlite3.connect(db_path)
        assert conn.execute("SELECT count(*) FROM accounts").fetchone()[0] == 1
        conn.close()

    def test_empty_data_round_trips(self, sqlite_store):
        sqlite_store.put(_account(data=b""))

        assert sqlite_store.get(ADDR).data == b""


class TestTransaction:
    def test_commit(self, sqlite_store, db_path):
        with sqlite_store.transaction():
            sqlite_store.put(_account())

        # Visible to a fresh store on the same file
        assert SQLiteAccountStore(db_path).get(ADDR) == _account()

    def test_rollback(self, sqlite_store):
        sqlite_store.put(_account(lamports=5))

        with pytest.raises(RuntimeError):
            with sqlite_store.transaction():
                sqlite_store.put(_account(lamports=99))
                raise RuntimeError("boom")

        assert sqlite_store.get(ADDR).lamports == 5

    def test_nested_joins_outer(self, sqlite_store):
        with pytest.raises(RuntimeError):
            with sqlite_store.transaction():
                with sqlite_store.transaction():
                    sqlite_store.put(_account())
                raise RuntimeError("outer fails")

        assert sqlite_store.get(ADDR) is None

    def test_reads_inside_transaction_see_writes(self, sqlite_store):
        with sqlite_store.transaction():
            sqlite_store.put(_account(lamports=7))
            assert sqlite_store.get(ADDR).lamports == 7


class TestFavoritesOnSqlite:
    def test_service_round_trip(self, sqlite_store, signer, config, make_wallet):
        wallet = make_wallet(lamports=0)
        sqlite_store.put(
            Account(address=wallet.owner, owner=bytes(32), lamports=2_000_000_000)
        )
        service = FavoritesService(sqlite_store, signer, config)

        service.set_favorites(wallet.owner, 3, "blue", ["go"], wallet.sign_set(3, "blue", ["go"]))
        record = service.get_favorites(wallet.owner, wallet.sign_get())

        assert record == FavoritesRecord(number=3, color="blue", hobbies=["go"])
        assert sqlite_store.get(wallet.owner).lamports == 2_000_000_000 - 3_285_120

    def test_concurrent_writers_serialize(self, sqlite_store, signer, config, make_wallet):
        """Parallel writes from one owner all land and rent is charged once."""
        wallet = make_wallet(lamports=0)
        sqlite_store.put(
            Account(address=wallet.owner, owner=bytes(32), lamports=2_000_000_000)
        )
        service = FavoritesService(sqlite_store, signer, config)
        errors: list[Exception] = []

        def write(n: int) -> None:
            try:
                service.set_favorites(
                    wallet.owner, n, "c", [], wallet.sign_set(n, "c", [])
                )
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=write, args=(n,)) for n in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert sqlite_store.get(wallet.owner).lamports == 2_000_000_000 - 3_285_120
        assert service.get_favorites(wallet.owner, wallet.sign_get()).number in range(5)
