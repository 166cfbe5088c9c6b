"""Validation Rules: referential and uniqueness checks run before a mutation.

Invariants:
    - Pure checks: they read the store and raise, never mutate
    - Listing checks run in order: condo exists -> type exists -> id unused
    - Callers hold store.lock across validate + mutate
"""

from condo_api.core.entity_store import EntityStore
from condo_api.core.errors import (
    DuplicateCondoError,
    DuplicateListingError,
    UnknownCondoError,
    UnknownTypeError,
)
from condo_api.schemas.condo import Condo
from condo_api.schemas.listing import Listing


def validate_condo_create(candidate: Condo, store: EntityStore) -> None:
    """Reject a condo whose id or name is already taken."""
    if store.has_condo_id(candidate.condo_id) or store.has_condo_name(
        candidate.condo_name,
    ):
        raise DuplicateCondoError(candidate.condo_id, candidate.condo_name)


def validate_listing_create(candidate: Listing, store: EntityStore) -> None:
    _check_listing_references(candidate, store)
    if store.has_listing_id(candidate.listing_id):
        raise DuplicateListingError(candidate.listing_id)


def validate_listing_replace(candidate: Listing, store: EntityStore) -> None:
    """Same reference checks as create; the id is the one being replaced."""
    _check_listing_references(candidate, store)


def _check_listing_references(candidate: Listing, store: EntityStore) -> None:
    condo = store.find_condo(candidate.condo_id)
    if condo is None:
        raise UnknownCondoError(candidate.condo_id)
    if not condo.has_type(candidate.type_id):
        raise UnknownTypeError(candidate.condo_id, candidate.type_id)
