from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from src.adapters.auth.ed25519 import Ed25519Signer
from src.adapters.memory_store import InMemoryAccountStore
from src.adapters.sqlite.account_store import SQLiteAccountStore
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.components.favorites import FavoritesService, create_favorites_service
from src.core.ports.accounts import AccountStorePort
from src.core.ports.signer import SignerPort
from src.rules.loader import load_rules
from src.rules.models import LoggingRules, Rules, StorageRules

logger = logging.getLogger(__name__)


def configure_logging(rules: LoggingRules) -> None:
    logging.basicConfig(level=getattr(logging, rules.level), format=rules.format)


def build_store(storage: StorageRules, base_dir: Path) -> AccountStorePort:
    if storage.backend == "memory":
        return InMemoryAccountStore()

    db_path = base_dir / storage.db_path
    migrator = SQLiteMigrator(str(db_path), str(base_dir / storage.migrations_dir))
    applied = migrator.run_migrations()
    if applied:
        logger.info("Applied %d migration(s) to %s", len(applied), db_path)
    return SQLiteAccountStore(str(db_path))


@dataclass
class FavoritesContext:
    favorites_service: FavoritesService
    store: AccountStorePort
    signer: SignerPort
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        *,
        base_dir: Path | None = None,
        store: AccountStorePort | None = None,
        signer: SignerPort | None = None,
    ) -> FavoritesContext:
        base_dir = base_dir or Path.cwd()
        if store is None:
            store = build_store(rules.storage, base_dir)
        if signer is None:
            signer = Ed25519Signer()
        service = create_favorites_service(store, signer, rules)
        logger.info(
            "Favorites program %s ready (%s store)", rules.program.program_id, rules.storage.backend
        )
        return cls(favorites_service=service, store=store, signer=signer, rules=rules)

    @classmethod
    def from_rules_file(cls, path: Path) -> FavoritesContext:
        rules = load_rules(path)
        configure_logging(rules.logging)
        return cls.create(rules, base_dir=path.resolve().parent)
