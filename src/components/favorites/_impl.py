"""
FavoritesService - per-owner favorites records.

Key behaviors:
- The record address is recomputed from (seed, owner, program id) on every
  request and compared with any address the caller supplied
- The owner must sign the instruction data before anything else runs
- The candidate record is fully validated before the store is touched
- The first write allocates the account (owner pays rent); later writes
  overwrite the whole record in place
- Reads return a freshly decoded record, never shared state

State machine (per owner):
- Absent --set--> Initialized --set--> Initialized
- Absent --get--> NOT_INITIALIZED
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from src.components.addressing import DerivedAddress, derive_favorites_address, verify_address
from src.components.lifecycle import InitOutcome, init_if_needed
from src.core.ports.accounts import AccountStorePort
from src.core.ports.signer import SignerPort
from src.domain.entities import FavoritesRecord
from src.domain.errors import (
    AccountOwnedByWrongProgram,
    AddressMismatch,
    NotInitialized,
    SignatureVerificationFailed,
    ValidationFailed,
)
from src.domain.keys import SYSTEM_PROGRAM_ID, encode_key, require_key
from src.domain.layout import (
    SPACE,
    decode_record,
    encode_record,
    get_favorites_instruction,
    set_favorites_instruction,
)
from src.domain.validation import check_encodable, check_limits
from src.rules.models import RentRules, Rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FavoritesConfig:
    """Program namespace and rent settings."""

    program_id: bytes
    seed: bytes = b"solana_business_card"
    rent: RentRules = field(default_factory=RentRules)

    @classmethod
    def from_rules(cls, rules: Rules) -> FavoritesConfig:
        return cls(
            program_id=rules.program.program_id_bytes,
            seed=rules.program.seed_bytes,
            rent=rules.rent,
        )


class FavoritesService:
    """
    Favorites read/write service.

    Provides:
    - set_favorites: authenticate, derive, validate, allocate-if-absent, overwrite
    - get_favorites: authenticate, derive, require initialized, decode
    - address_of: the record address for an owner
    """

    def __init__(
        self,
        store: AccountStorePort,
        signer: SignerPort,
        config: FavoritesConfig,
    ) -> None:
        self._store = store
        self._signer = signer
        self._config = config

    def address_of(self, owner: bytes) -> DerivedAddress:
        owner = require_key(owner, "owner")
        return derive_favorites_address(self._config.seed, owner, self._config.program_id)

    def _authenticate(self, owner: bytes, message: bytes, signature: bytes) -> None:
        if not self._signer.is_signer(owner, message, signature):
            raise SignatureVerificationFailed(encode_key(owner))

    def _locate(self, owner: bytes, supplied: bytes | None) -> DerivedAddress:
        derived = self.address_of(owner)
        if not verify_address(derived, supplied):
            assert supplied is not None
            raise AddressMismatch(str(derived), encode_key(bytes(supplied)))
        return derived

    def set_favorites(
        self,
        owner: bytes,
        number: int,
        color: str,
        hobbies: list[str],
        signature: bytes,
        address: bytes | None = None,
    ) -> InitOutcome:
        """
        Write owner's favorites, replacing any previous record.

        Raises:
            FavoritesError: Any failure; nothing is written.
        """
        owner = require_key(owner, "owner")

        # The signed instruction needs a u64 number and UTF-8 text
        encoding_errors = check_encodable(number, color, hobbies)
        if encoding_errors:
            raise ValidationFailed(encoding_errors)

        self._authenticate(owner, set_favorites_instruction(number, color, hobbies), signature)
        derived = self._locate(owner, address)

        errors = check_limits(color, hobbies)
        if errors:
            raise ValidationFailed(errors)

        record = FavoritesRecord(number=number, color=color, hobbies=list(hobbies))

        with self._store.transaction():
            outcome = init_if_needed(
                self._store,
                address=derived.address,
                payer=owner,
                program_id=self._config.program_id,
                space=SPACE,
                rent=self._config.rent,
            )
            capacity = len(outcome.account.data)
            data = encode_record(record) + bytes(capacity - SPACE)
            written = outcome.account.with_data(data)
            self._store.put(written)

        logger.info(
            "User %s's favorite number is %d, favorite color is: %s, hobbies are: %s",
            encode_key(owner),
            number,
            color,
            hobbies,
        )
        return replace(outcome, account=written)

    def get_favorites(
        self,
        owner: bytes,
        signature: bytes,
        address: bytes | None = None,
    ) -> FavoritesRecord:
        """
        Read owner's favorites.

        Raises:
            NotInitialized: Owner never wrote favorites.
            FavoritesError: Any other failure.
        """
        owner = require_key(owner, "owner")
        self._authenticate(owner, get_favorites_instruction(), signature)
        derived = self._locate(owner, address)

        with self._store.transaction():
            account = self._store.get(derived.address)

        if account is None or (account.owner == SYSTEM_PROGRAM_ID and not account.data):
            raise NotInitialized(str(derived))
        if account.owner != self._config.program_id:
            raise AccountOwnedByWrongProgram(str(derived))

        record = decode_record(account.data, str(derived))
        logger.info("Read favorites for %s", encode_key(owner))
        return record


# --- Factory ---


def create_favorites_service(
    store: AccountStorePort,
    signer: SignerPort,
    rules: Rules,
) -> FavoritesService:
    """
    Create a favorites service from loaded rules.

    Args:
        store: Account store
        signer: Signature verifier
        rules: Loaded rules (program id, seed, rent)

    Returns:
        Configured FavoritesService
    """
    return FavoritesService(store, signer, FavoritesConfig.from_rules(rules))
