"""
Favorites error types.

Every failure aborts the whole request. Component entry points turn these
into FavoritesValidationError items on the output; services let them
propagate so the surrounding store transaction rolls back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    COLOR_TOO_LONG = "COLOR_TOO_LONG"
    TOO_MANY_HOBBIES = "TOO_MANY_HOBBIES"
    HOBBY_TOO_LONG = "HOBBY_TOO_LONG"
    NUMBER_OUT_OF_RANGE = "NUMBER_OUT_OF_RANGE"
    ADDRESS_MISMATCH = "ADDRESS_MISMATCH"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    DISCRIMINATOR_MISMATCH = "DISCRIMINATOR_MISMATCH"
    RECORD_CORRUPTED = "RECORD_CORRUPTED"
    SIGNATURE_VERIFICATION_FAILED = "SIGNATURE_VERIFICATION_FAILED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    ACCOUNT_OWNED_BY_WRONG_PROGRAM = "ACCOUNT_OWNED_BY_WRONG_PROGRAM"
    ACCOUNT_TOO_SMALL = "ACCOUNT_TOO_SMALL"
    INVALID_TEXT = "INVALID_TEXT"


@dataclass(frozen=True)
class FavoritesValidationError:
    """Error item reported to the caller."""

    code: str
    message: str
    field: str | None = None


class FavoritesError(Exception):
    """Base favorites error."""

    code: ErrorCode
    field: str | None = None

    def to_errors(self) -> list[FavoritesValidationError]:
        return [FavoritesValidationError(code=self.code, message=str(self), field=self.field)]


class ValidationFailed(FavoritesError):
    """One or more candidate fields broke the record limits."""

    def __init__(self, errors: list[FavoritesValidationError]) -> None:
        self.errors = errors
        self.code = ErrorCode(errors[0].code)
        super().__init__("; ".join(e.message for e in errors))

    def to_errors(self) -> list[FavoritesValidationError]:
        return list(self.errors)


class AddressMismatch(FavoritesError):
    code = ErrorCode.ADDRESS_MISMATCH
    field = "address"

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"A seeds constraint was violated: expected {expected}, got {actual}")


class NotInitialized(FavoritesError):
    code = ErrorCode.NOT_INITIALIZED
    field = "address"

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Favorites account {address} is not initialized")


class DiscriminatorMismatch(FavoritesError):
    code = ErrorCode.DISCRIMINATOR_MISMATCH

    def __init__(self) -> None:
        super().__init__("Account discriminator did not match what was expected")


class RecordCorrupted(FavoritesError):
    code = ErrorCode.RECORD_CORRUPTED

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to deserialize favorites record: {reason}")


class SignatureVerificationFailed(FavoritesError):
    code = ErrorCode.SIGNATURE_VERIFICATION_FAILED
    field = "owner"

    def __init__(self, owner: str) -> None:
        self.owner = owner
        super().__init__(f"Signature verification failed for {owner}")


class InsufficientFunds(FavoritesError):
    code = ErrorCode.INSUFFICIENT_FUNDS
    field = "owner"

    def __init__(self, payer: str, required: int, available: int) -> None:
        self.payer = payer
        self.required = required
        self.available = available
        super().__init__(
            f"Payer {payer} has {available} lamports, {required} needed for rent exemption"
        )


class AccountOwnedByWrongProgram(FavoritesError):
    code = ErrorCode.ACCOUNT_OWNED_BY_WRONG_PROGRAM
    field = "address"

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Account {address} is owned by a different program")


class AccountTooSmall(FavoritesError):
    code = ErrorCode.ACCOUNT_TOO_SMALL
    field = "address"

    def __init__(self, address: str, size: int, required: int) -> None:
        self.address = address
        self.size = size
        self.required = required
        super().__init__(f"Account {address} holds {size} bytes, {required} required")
