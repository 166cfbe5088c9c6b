"""Mutation Operations: create, replace and delete condos and listings.

Invariants:
    - Validation and the write happen under one store.lock acquisition
    - A failed validation leaves the store untouched
    - Deletes are idempotent and return every remaining record in store order
    - Deleting a condo never touches its listings (no cascade)
"""

from condo_api.core.domain_types import CondoId, ListingId
from condo_api.core.entity_store import EntityStore
from condo_api.core.errors import NotFoundError
from condo_api.core.validation import (
    validate_condo_create,
    validate_listing_create,
    validate_listing_replace,
)
from condo_api.schemas.condo import Condo
from condo_api.schemas.listing import Listing


def create_listing(store: EntityStore, listing: Listing) -> Listing:
    with store.lock:
        validate_listing_create(listing, store)
        return store.add_listing(listing)


def replace_listing(
    store: EntityStore, listing_id: ListingId, listing: Listing,
) -> Listing:
    """Full-record replacement. The path id overrides any id in the payload."""
    candidate = listing.model_copy(update={"listing_id": listing_id})
    with store.lock:
        if not store.has_listing_id(listing_id):
            raise NotFoundError("Listing not found")
        validate_listing_replace(candidate, store)
        return store.replace_listing(candidate)


def delete_listing(store: EntityStore, listing_id: ListingId) -> list[Listing]:
    with store.lock:
        store.remove_listing(listing_id)
        return store.listings()


def create_condo(store: EntityStore, condo: Condo) -> Condo:
    with store.lock:
        validate_condo_create(condo, store)
        return store.add_condo(condo)


def delete_condo(store: EntityStore, condo_id: CondoId) -> list[Condo]:
    with store.lock:
        store.remove_condo(condo_id)
        return store.condos()
