"""Condo Routes: list, fetch, create and delete condos.

Invariants:
    - POST returns 201 with the stored record
    - DELETE is idempotent and returns every remaining condo (no cascade to listings)
"""

import logging

from fastapi import APIRouter, Depends, status

from condo_api.api.dependencies import get_store
from condo_api.api.params import IntSegment, condo_payload
from condo_api.core import mutations, queries
from condo_api.core.entity_store import EntityStore
from condo_api.schemas.condo import Condo

logger = logging.getLogger(__name__)
router = APIRouter(tags=["condos"])


@router.get("/condos", response_model=list[Condo])
def list_condos(store: EntityStore = Depends(get_store)):
    return queries.list_condos(store)


@router.get("/condos/{condo_id}", response_model=Condo)
def get_condo(condo_id: IntSegment, store: EntityStore = Depends(get_store)):
    return queries.get_condo(store, condo_id)


@router.post(
    "/condos", response_model=Condo, status_code=status.HTTP_201_CREATED,
)
def create_condo(
    condo: Condo = Depends(condo_payload),
    store: EntityStore = Depends(get_store),
):
    created = mutations.create_condo(store, condo)
    logger.info(
        f"Condo {created.condo_id} ({created.condo_name!r}) created",
        extra={"condo_id": created.condo_id},
    )
    return created


@router.delete("/condos/{condo_id}", response_model=list[Condo])
def delete_condo(condo_id: IntSegment, store: EntityStore = Depends(get_store)):
    remaining = mutations.delete_condo(store, condo_id)
    logger.info(
        f"Condo {condo_id} delete requested",
        extra={"condo_id": condo_id, "remaining": len(remaining)},
    )
    return remaining
