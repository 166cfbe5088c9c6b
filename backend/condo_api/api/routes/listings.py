"""Listing Routes: listing collection, filters, detail and mutations.

Invariants:
    - /listings/status/{status} answers 200 with [] when nothing matches;
      every condo-scoped filter answers 404 instead
    - /condos/{condo_id}/listings/{listing_id} answers 200 with an empty body
      when no listing matches
    - PUT replaces the whole record; the path id wins over the payload's listingId
"""

import logging

from fastapi import APIRouter, Depends, Response
from fastapi import status as http_status

from condo_api.api.dependencies import get_store
from condo_api.api.params import (
    IntSegment,
    listing_payload,
    listing_replacement,
)
from condo_api.core import mutations, queries
from condo_api.core.entity_store import EntityStore
from condo_api.schemas.listing import Listing

logger = logging.getLogger(__name__)
router = APIRouter(tags=["listings"])


# ─── Collection & filters ───────────────────────────────────────

@router.get("/listings", response_model=list[Listing])
def list_listings(store: EntityStore = Depends(get_store)):
    return queries.list_listings(store)


@router.get("/listings/status/{status}", response_model=list[Listing])
def listings_by_status(status: str, store: EntityStore = Depends(get_store)):
    return queries.listings_by_status(store, status)


@router.get("/condos/{condo_id}/listings", response_model=list[Listing])
def listings_by_condo(condo_id: IntSegment, store: EntityStore = Depends(get_store)):
    return queries.listings_by_condo(store, condo_id)


@router.get("/condos/{condo_id}/type/{type_id}", response_model=list[Listing])
def listings_by_condo_and_type(
    condo_id: IntSegment, type_id: str, store: EntityStore = Depends(get_store),
):
    return queries.listings_by_condo_and_type(store, condo_id, type_id)


@router.get(
    "/condos/{condo_id}/listings/status/{status}",
    response_model=list[Listing],
)
def listings_by_condo_and_status(
    condo_id: IntSegment, status: str, store: EntityStore = Depends(get_store),
):
    return queries.listings_by_condo_and_status(store, condo_id, status)


# ─── Single records ─────────────────────────────────────────────

@router.get("/condos/{condo_id}/listings/{listing_id}", response_model=Listing)
def listing_detail(
    condo_id: IntSegment,
    listing_id: IntSegment,
    store: EntityStore = Depends(get_store),
):
    listing = queries.listing_detail(store, condo_id, listing_id)
    if listing is None:
        return Response(status_code=http_status.HTTP_200_OK, media_type="application/json")
    return listing


@router.get("/listings/{listing_id}", response_model=Listing)
def get_listing(listing_id: IntSegment, store: EntityStore = Depends(get_store)):
    return queries.get_listing(store, listing_id)


# ─── Mutations ──────────────────────────────────────────────────

@router.post(
    "/listings", response_model=Listing, status_code=http_status.HTTP_201_CREATED,
)
def create_listing(
    listing: Listing = Depends(listing_payload),
    store: EntityStore = Depends(get_store),
):
    created = mutations.create_listing(store, listing)
    logger.info(
        f"Listing {created.listing_id} created",
        extra={"listing_id": created.listing_id, "condo_id": created.condo_id},
    )
    return created


@router.put("/listings/{listing_id}", response_model=Listing)
def replace_listing(
    listing_id: IntSegment,
    listing: Listing = Depends(listing_replacement),
    store: EntityStore = Depends(get_store),
):
    replaced = mutations.replace_listing(store, listing_id, listing)
    logger.info(
        f"Listing {listing_id} replaced",
        extra={"listing_id": listing_id, "condo_id": replaced.condo_id},
    )
    return replaced


@router.delete("/listings/{listing_id}", response_model=list[Listing])
def delete_listing(listing_id: IntSegment, store: EntityStore = Depends(get_store)):
    remaining = mutations.delete_listing(store, listing_id)
    logger.info(
        f"Listing {listing_id} delete requested",
        extra={"listing_id": listing_id, "remaining": len(remaining)},
    )
    return remaining
