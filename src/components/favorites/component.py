"""
Favorites component - per-owner favorites records.

Handles favorites writes (lazy allocation, full overwrite) and reads.

Invariants:
- I1: one record per owner, at the address derived from (seed, owner, program)
- I2: a failed request leaves stored state untouched
- I3: writes replace the whole record; no field merging
- I4: reads return an independent copy
"""

from __future__ import annotations

import logging

from src.domain.errors import FavoritesError
from src.domain.keys import encode_key

from ._impl import FavoritesConfig, FavoritesService
from .models import (
    GetFavoritesInput,
    GetFavoritesOutput,
    SetFavoritesInput,
    SetFavoritesOutput,
)
from .ports import AccountStorePort, ProgramConfigPort, SignerPort

logger = logging.getLogger(__name__)


def _create_service(
    store: AccountStorePort,
    signer: SignerPort,
    config: ProgramConfigPort,
) -> FavoritesService:
    """Create favorites service from ports."""
    return FavoritesService(
        store=store,
        signer=signer,
        config=FavoritesConfig(
            program_id=config.program_id,
            seed=config.seed,
            rent=config.rent,
        ),
    )


# --- Component Entry Points ---


def run_set(
    inp: SetFavoritesInput,
    *,
    store: AccountStorePort,
    signer: SignerPort,
    config: ProgramConfigPort,
) -> SetFavoritesOutput:
    """
    Write an owner's favorites.

    Args:
        inp: Owner, new values, signature and optional record address.
        store: Account store port.
        signer: Signature verifier port.
        config: Program namespace and rent settings.

    Returns:
        SetFavoritesOutput with the record address or errors.
    """
    service = _create_service(store, signer, config)

    try:
        outcome = service.set_favorites(
            owner=inp.owner,
            number=inp.number,
            color=inp.color,
            hobbies=inp.hobbies,
            signature=inp.signature,
            address=inp.address,
        )
    except FavoritesError as e:
        logger.warning("set_favorites rejected for %s: %s", encode_key(inp.owner), e)
        return SetFavoritesOutput(errors=e.to_errors(), success=False)

    return SetFavoritesOutput(
        address=encode_key(outcome.account.address),
        created=outcome.created,
        errors=[],
        success=True,
    )


def run_get(
    inp: GetFavoritesInput,
    *,
    store: AccountStorePort,
    signer: SignerPort,
    config: ProgramConfigPort,
) -> GetFavoritesOutput:
    """
    Read an owner's favorites.

    Args:
        inp: Owner, signature and optional record address.
        store: Account store port.
        signer: Signature verifier port.
        config: Program namespace and rent settings.

    Returns:
        GetFavoritesOutput with the record or errors.
    """
    service = _create_service(store, signer, config)

    try:
        record = service.get_favorites(
            owner=inp.owner,
            signature=inp.signature,
            address=inp.address,
        )
    except FavoritesError as e:
        logger.warning("get_favorites rejected for %s: %s", encode_key(inp.owner), e)
        return GetFavoritesOutput(errors=e.to_errors(), success=False)

    return GetFavoritesOutput(record=record, errors=[], success=True)


def run(
    inp: SetFavoritesInput | GetFavoritesInput,
    *,
    store: AccountStorePort,
    signer: SignerPort,
    config: ProgramConfigPort,
) -> SetFavoritesOutput | GetFavoritesOutput:
    """
    Main entry point for the favorites component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SetFavoritesInput):
        return run_set(inp, store=store, signer=signer, config=config)
    elif isinstance(inp, GetFavoritesInput):
        return run_get(inp, store=store, signer=signer, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
