from collections.abc import Callable
from pathlib import Path

import pytest
from nacl.signing import SigningKey

from src.adapters.auth.ed25519 import Ed25519Signer, sign
from src.adapters.memory_store import InMemoryAccountStore
from src.components.favorites import FavoritesConfig, FavoritesService
from src.domain.keys import decode_key
from src.domain.layout import get_favorites_instruction, set_favorites_instruction

PROJECT_ROOT = Path(__file__).parent.parent
PROGRAM_ID = "BYBFmxjHn48LVAjKfo7dX6kPTw62HNPTktMqnpNeeiHu"
LAMPORTS_PER_SOL = 1_000_000_000


class Wallet:
    """A test user: a signing key plus helpers to sign favorites requests."""

    def __init__(self, key: SigningKey) -> None:
        self.key = key
        self.owner = bytes(key.verify_key)

    def sign_set(self, number: int, color: str, hobbies: list[str]) -> bytes:
        return sign(self.key, set_favorites_instruction(number, color, hobbies))

    def sign_get(self) -> bytes:
        return sign(self.key, get_favorites_instruction())


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def program_id() -> bytes:
    return decode_key(PROGRAM_ID)


@pytest.fixture
def config(program_id: bytes) -> FavoritesConfig:
    return FavoritesConfig(program_id=program_id)


@pytest.fixture
def store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture
def signer() -> Ed25519Signer:
    return Ed25519Signer()


@pytest.fixture
def service(
    store: InMemoryAccountStore, signer: Ed25519Signer, config: FavoritesConfig
) -> FavoritesService:
    return FavoritesService(store, signer, config)


@pytest.fixture
def make_wallet(store: InMemoryAccountStore) -> Callable[..., Wallet]:
    """Create a wallet funded with 2 SOL (like a fresh test validator account)."""

    def _make(lamports: int = 2 * LAMPORTS_PER_SOL) -> Wallet:
        wallet = Wallet(SigningKey.generate())
        if lamports:
            store.fund(wallet.owner, lamports)
        return wallet

    return _make


@pytest.fixture
def wallet(make_wallet: Callable[..., Wallet]) -> Wallet:
    return make_wallet()
