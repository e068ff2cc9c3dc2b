"""
Favorites component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import FavoritesRecord
from src.domain.errors import FavoritesValidationError


@dataclass(frozen=True)
class SetFavoritesInput:
    """
    Input for writing an owner's favorites.

    `signature` is the owner's signature over the set_favorites instruction
    data. `address`, when given, must equal the derived record address.
    """

    owner: bytes
    number: int
    color: str
    hobbies: list[str]
    signature: bytes
    address: bytes | None = None


@dataclass(frozen=True)
class GetFavoritesInput:
    """Input for reading an owner's favorites."""

    owner: bytes
    signature: bytes
    address: bytes | None = None


@dataclass(frozen=True)
class SetFavoritesOutput:
    """Output from writing favorites."""

    address: str | None = None
    created: bool = False
    errors: list[FavoritesValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class GetFavoritesOutput:
    """Output from reading favorites."""

    record: FavoritesRecord | None = None
    errors: list[FavoritesValidationError] = field(default_factory=list)
    success: bool = True
