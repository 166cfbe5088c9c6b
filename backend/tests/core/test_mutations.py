"""Mutation Operations: create, replace, delete, and atomicity under threads.

Tests cover:
    - Successful creates append exactly one record
    - Failed creates leave the store unchanged
    - Deletes are idempotent and never cascade
    - replace_listing semantics (path id wins, 404 on unknown id)
    - Concurrent creates with the same id: exactly one wins
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from condo_api.core import mutations
from condo_api.core.errors import (
    DuplicateCondoError,
    DuplicateListingError,
    NotFoundError,
    UnknownCondoError,
    UnknownTypeError,
)
from condo_api.schemas.condo import Condo, TypeOfRoom
from condo_api.schemas.listing import Listing


def _lakeside() -> Condo:
    return Condo(
        condo_id=3, condo_name="Lakeside", address="1 Lake Rd", city="Laketown",
        facilities="Dock", description="By the lake.",
        types=[TypeOfRoom(type_id="LK1", type_name="Studio", description="Studio.")],
    )


def test_create_condo_appends_exactly_one_equal_record(store):
    condo = _lakeside()
    created = mutations.create_condo(store, condo)
    assert created == condo
    matches = [c for c in store.condos() if c == condo]
    assert len(matches) == 1
    assert [c.condo_id for c in store.condos()] == [1, 2, 3]


@pytest.mark.parametrize("condo_id, name", [(1, "Fresh Name"), (3, "Ocean Breeze")])
def test_duplicate_condo_never_mutates(store, condo_id, name):
    before = store.condos()
    with pytest.raises(DuplicateCondoError):
        mutations.create_condo(store, Condo(condo_id=condo_id, condo_name=name))
    assert store.condos() == before


def test_create_listing_appends(store):
    listing = Listing(listing_id=5, condo_id=1, type_id="SP1", price=1, status="x")
    assert mutations.create_listing(store, listing) == listing
    assert store.listing_count == 5
    assert store.listings()[-1].listing_id == 5


@pytest.mark.parametrize(
    "listing, error",
    [
        (Listing(listing_id=5, condo_id=7, type_id="SP1"), UnknownCondoError),
        (Listing(listing_id=5, condo_id=1, type_id="XX"), UnknownTypeError),
        (Listing(listing_id=4, condo_id=1, type_id="SP1"), DuplicateListingError),
    ],
)
def test_rejected_listing_never_mutates(store, listing, error):
    before = store.listings()
    with pytest.raises(error):
        mutations.create_listing(store, listing)
    assert store.listings() == before


def test_delete_listing_returns_remaining_in_order(store):
    remaining = mutations.delete_listing(store, 2)
    assert [x.listing_id for x in remaining] == [1, 3, 4]


def test_delete_absent_listing_is_noop(store):
    before = store.listings()
    assert mutations.delete_listing(store, 99) == before


def test_delete_condo_does_not_cascade(store):
    remaining = mutations.delete_condo(store, 1)
    assert [c.condo_id for c in remaining] == [2]
    assert [x.condo_id for x in store.listings()] == [1, 1, 2, 2]


def test_delete_absent_condo_is_noop(store):
    assert len(mutations.delete_condo(store, 99)) == 2


def test_deleted_condo_name_can_be_reused(store):
    mutations.delete_condo(store, 2)
    mutations.create_condo(store, Condo(condo_id=8, condo_name="Ocean Breeze"))
    assert store.find_condo(8).condo_name == "Ocean Breeze"


def test_create_listing_for_deleted_condo_fails(store):
    mutations.delete_condo(store, 2)
    with pytest.raises(UnknownCondoError):
        mutations.create_listing(store, Listing(listing_id=6, condo_id=2, type_id="OB1-ov"))


def test_replace_listing_uses_path_id(store):
    replaced = mutations.replace_listing(
        store, 1, Listing(listing_id=77, condo_id=1, type_id="SP2", price=10, status="sold"),
    )
    assert replaced.listing_id == 1
    assert not store.has_listing_id(77)
    assert store.find_listing(1).status == "sold"


def test_replace_unknown_listing_not_found(store):
    with pytest.raises(NotFoundError):
        mutations.replace_listing(store, 99, Listing(condo_id=1, type_id="SP1"))


def test_replace_listing_rejects_bad_type(store):
    with pytest.raises(UnknownTypeError):
        mutations.replace_listing(store, 1, Listing(condo_id=1, type_id="OB1-ov"))
    assert store.find_listing(1).type_id == "SP1"


def test_concurrent_creates_with_same_id_only_one_wins(store):
    def attempt(price: int) -> bool:
        try:
            mutations.create_listing(
                store, Listing(listing_id=50, condo_id=1, type_id="SP1", price=price),
            )
            return True
        except DuplicateListingError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(32)))

    assert results.count(True) == 1
    assert store.listing_count == 5
