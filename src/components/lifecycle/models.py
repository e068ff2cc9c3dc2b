"""
Lifecycle component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Account


@dataclass(frozen=True)
class InitOutcome:
    """Account backing a record address after init-if-needed."""

    account: Account
    created: bool
    rent_paid: int = 0
