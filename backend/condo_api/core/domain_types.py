"""Domain Types: identifier aliases and the known listing statuses.

Invariants:
    - CondoId and ListingId are caller-assigned integers, never generated
    - TypeId is a string scoped to one condo's types
    - ListingStatus lists observed values only; status fields stay free-form strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CondoId = NewType("CondoId", int)
ListingId = NewType("ListingId", int)
TypeId = NewType("TypeId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ListingStatus(str, Enum):
    """Statuses seen in seed data. Not a closed set."""
    FOR_SALE = "available-for-sale"
    FOR_RENT = "available-for-rent"
