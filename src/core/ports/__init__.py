# favorites-registry: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.accounts import AccountStoreError, AccountStorePort, StoreClosedError
from src.core.ports.signer import SignerPort

__all__ = [
    "AccountStoreError",
    "AccountStorePort",
    "SignerPort",
    "StoreClosedError",
]
