"""
Favorites component - per-owner favorites records.
"""

from ._impl import (
    FavoritesConfig,
    FavoritesService,
    create_favorites_service,
)
from .component import (
    run,
    run_get,
    run_set,
)
from .models import (
    GetFavoritesInput,
    GetFavoritesOutput,
    SetFavoritesInput,
    SetFavoritesOutput,
)
from .ports import AccountStorePort, ProgramConfigPort, SignerPort

__all__ = [
    # Entry points
    "run",
    "run_get",
    "run_set",
    # Input models
    "GetFavoritesInput",
    "SetFavoritesInput",
    # Output models
    "GetFavoritesOutput",
    "SetFavoritesOutput",
    # Ports
    "AccountStorePort",
    "ProgramConfigPort",
    "SignerPort",
    # _impl re-exports
    "FavoritesConfig",
    "FavoritesService",
    "create_favorites_service",
]
