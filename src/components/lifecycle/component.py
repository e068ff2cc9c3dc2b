"""
Lifecycle component - allocate a record account on first write.

Invariants:
- I1: an address is allocated at most once; later calls reuse the account
- I2: allocation is exactly `space` bytes, charged to the payer
- I3: an existing account is never resized
- I4: must run inside the caller's store transaction
"""

from __future__ import annotations

import logging

from src.core.ports.accounts import AccountStorePort
from src.domain.entities import Account
from src.domain.errors import AccountOwnedByWrongProgram, AccountTooSmall, InsufficientFunds
from src.domain.keys import SYSTEM_PROGRAM_ID, encode_key
from src.rules.models import RentRules

from .models import InitOutcome

logger = logging.getLogger(__name__)


def _is_unallocated(account: Account | None) -> bool:
    # Lamports may be sent to an address before it is allocated
    return account is None or (account.owner == SYSTEM_PROGRAM_ID and not account.data)


def init_if_needed(
    store: AccountStorePort,
    *,
    address: bytes,
    payer: bytes,
    program_id: bytes,
    space: int,
    rent: RentRules,
) -> InitOutcome:
    """
    Return the account at address, allocating it if absent.

    Allocation tops the address up to the rent-exempt minimum for `space`
    bytes from the payer's balance, assigns it to program_id and zero-fills
    the data.

    Raises:
        InsufficientFunds: Payer missing or short of the rent.
        AccountOwnedByWrongProgram: Address is held by another program.
        AccountTooSmall: Existing account cannot hold `space` bytes.
    """
    existing = store.get(address)

    if not _is_unallocated(existing):
        assert existing is not None
        if existing.owner != program_id:
            raise AccountOwnedByWrongProgram(encode_key(address))
        if len(existing.data) < space:
            raise AccountTooSmall(encode_key(address), len(existing.data), space)
        return InitOutcome(account=existing, created=False)

    prefunded = existing.lamports if existing else 0
    required = max(0, rent.minimum_balance(space) - prefunded)

    payer_account = store.get(payer)
    available = payer_account.lamports if payer_account else 0
    if available < required:
        raise InsufficientFunds(encode_key(payer), required, available)

    if payer_account is not None and required:
        store.put(payer_account.with_lamports(available - required))
    account = Account(
        address=address,
        owner=program_id,
        lamports=prefunded + required,
        data=bytes(space),
    )
    store.put(account)

    logger.debug(
        "Allocated %d bytes at %s (rent %d lamports paid by %s)",
        space,
        encode_key(address),
        required,
        encode_key(payer),
    )
    return InitOutcome(account=account, created=True, rent_paid=required)
