"""
Addressing component - program-derived record addresses.
"""

from .component import (
    MAX_SEED_LEN,
    MAX_SEEDS,
    create_program_address,
    derive_favorites_address,
    find_program_address,
    is_on_curve,
    verify_address,
)
from .models import AddressDerivationError, DerivedAddress

__all__ = [
    # Entry points
    "create_program_address",
    "derive_favorites_address",
    "find_program_address",
    "is_on_curve",
    "verify_address",
    # Models
    "AddressDerivationError",
    "DerivedAddress",
    # Constants
    "MAX_SEEDS",
    "MAX_SEED_LEN",
]
