"""
Lifecycle component - allocate a record account on first write.
"""

from .component import init_if_needed
from .models import InitOutcome

__all__ = [
    "init_if_needed",
    "InitOutcome",
]
