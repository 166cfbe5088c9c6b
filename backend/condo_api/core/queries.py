"""Query Operations: read-only views over the entity store.

Invariants:
    - Results are fresh lists in store order; the store is never mutated
    - listings_by_status returns [] for no match; the condo-scoped filters
      raise NotFoundError instead
    - listing_detail returns None for no match (the route answers with an empty body)
"""

from condo_api.core.domain_types import CondoId, ListingId, TypeId
from condo_api.core.entity_store import EntityStore
from condo_api.core.errors import InvalidParameterError, NotFoundError
from condo_api.schemas.condo import Condo
from condo_api.schemas.listing import Listing


def list_condos(store: EntityStore) -> list[Condo]:
    return store.condos()


def list_listings(store: EntityStore) -> list[Listing]:
    return store.listings()


def get_condo(store: EntityStore, condo_id: CondoId) -> Condo:
    condo = store.find_condo(condo_id)
    if condo is None:
        raise NotFoundError("Condo not found")
    return condo


def get_listing(store: EntityStore, listing_id: ListingId) -> Listing:
    listing = store.find_listing(listing_id)
    if listing is None:
        raise NotFoundError("Listing not found")
    return listing


def listings_by_condo(store: EntityStore, condo_id: CondoId) -> list[Listing]:
    found = store.select_listings(lambda listing: listing.condo_id == condo_id)
    if not found:
        raise NotFoundError("No listings found for the specified Condo ID")
    return found


def listings_by_status(store: EntityStore, status: str) -> list[Listing]:
    """Exact, case-sensitive status match. Empty result is not an error."""
    if not status:
        raise InvalidParameterError.status()
    return store.select_listings(lambda listing: listing.status == status)


def listings_by_condo_and_status(
    store: EntityStore, condo_id: CondoId, status: str,
) -> list[Listing]:
    if not status:
        raise InvalidParameterError.status()
    found = store.select_listings(
        lambda listing: listing.condo_id == condo_id and listing.status == status,
    )
    if not found:
        raise NotFoundError(
            "No listings found for the specified Status in Condo Listings.",
        )
    return found


def listings_by_condo_and_type(
    store: EntityStore, condo_id: CondoId, type_id: TypeId,
) -> list[Listing]:
    if not type_id:
        raise InvalidParameterError.type_id()
    found = store.select_listings(
        lambda listing: listing.condo_id == condo_id and listing.type_id == type_id,
    )
    if not found:
        raise NotFoundError(
            "No listings found for the specified Type in Condo Listings.",
        )
    return found


def listing_detail(
    store: EntityStore, condo_id: CondoId, listing_id: ListingId,
) -> Listing | None:
    listing = store.find_listing(listing_id)
    if listing is None or listing.condo_id != condo_id:
        return None
    return listing
