"""Entity Store: in-memory, insertion-ordered condo and listing collections.

Invariants:
    - condo_id unique across condos, listing_id unique across listings,
      condo_name unique across condos (enforced by validation before add_*)
    - Iteration order is insertion order; replacing a listing keeps its position
    - Readers never receive live records, only copies
    - Every public method takes self.lock; callers hold it across
      validate-then-mutate sequences so the pair is atomic

Design Decisions:
    - Records held in dicts keyed by id, plus a condo_name -> condo_id index
    - threading.RLock (routes are sync and run in the FastAPI threadpool); the lock
      is re-entered by store methods called while a mutation holds it
    - One store per application instance (see main.create_app), no module globals
"""

import threading
from typing import Callable, Iterable

from condo_api.core.domain_types import CondoId, ListingId
from condo_api.schemas.condo import Condo
from condo_api.schemas.listing import Listing


class EntityStore:
    """Owns every Condo and Listing record for one running application."""

    def __init__(
        self,
        condos: Iterable[Condo] = (),
        listings: Iterable[Listing] = (),
    ):
        self.lock = threading.RLock()
        self._condos: dict[CondoId, Condo] = {}
        self._condo_names: dict[str, CondoId] = {}
        self._listings: dict[ListingId, Listing] = {}
        for condo in condos:
            self.add_condo(condo)
        for listing in listings:
            self.add_listing(listing)

    @classmethod
    def seeded(cls) -> "EntityStore":
        """Build a store holding the fixed sample data served at startup."""
        from condo_api.core.seed_data import seed_condos, seed_listings

        return cls(seed_condos(), seed_listings())

    # ─── Reads ───────────────────────────────────────────────────

    def condos(self) -> list[Condo]:
        with self.lock:
            return [c.model_copy(deep=True) for c in self._condos.values()]

    def listings(self) -> list[Listing]:
        return self.select_listings(lambda _: True)

    def select_listings(self, predicate: Callable[[Listing], bool]) -> list[Listing]:
        """Copies of every listing matching predicate, in store order."""
        with self.lock:
            return [
                listing.model_copy()
                for listing in self._listings.values()
                if predicate(listing)
            ]

    def find_condo(self, condo_id: CondoId) -> Condo | None:
        with self.lock:
            condo = self._condos.get(condo_id)
            return condo.model_copy(deep=True) if condo is not None else None

    def find_listing(self, listing_id: ListingId) -> Listing | None:
        with self.lock:
            listing = self._listings.get(listing_id)
            return listing.model_copy() if listing is not None else None

    def has_condo_id(self, condo_id: CondoId) -> bool:
        with self.lock:
            return condo_id in self._condos

    def has_condo_name(self, condo_name: str) -> bool:
        with self.lock:
            return condo_name in self._condo_names

    def has_listing_id(self, listing_id: ListingId) -> bool:
        with self.lock:
            return listing_id in self._listings

    @property
    def condo_count(self) -> int:
        with self.lock:
            return len(self._condos)

    @property
    def listing_count(self) -> int:
        with self.lock:
            return len(self._listings)

    # ─── Writes (no rule checks; see core/validation.py) ─────────

    def add_condo(self, condo: Condo) -> Condo:
        with self.lock:
            stored = condo.model_copy(deep=True)
            self._condos[stored.condo_id] = stored
            self._condo_names[stored.condo_name] = stored.condo_id
            return stored.model_copy(deep=True)

    def add_listing(self, listing: Listing) -> Listing:
        with self.lock:
            stored = listing.model_copy()
            self._listings[stored.listing_id] = stored
            return stored.model_copy()

    def replace_listing(self, listing: Listing) -> Listing:
        """Overwrite an existing listing in place (same key keeps dict position)."""
        with self.lock:
            if listing.listing_id not in self._listings:
                raise KeyError(listing.listing_id)
            stored = listing.model_copy()
            self._listings[stored.listing_id] = stored
            return stored.model_copy()

    def remove_condo(self, condo_id: CondoId) -> bool:
        with self.lock:
            condo = self._condos.pop(condo_id, None)
            if condo is None:
                return False
            if self._condo_names.get(condo.condo_name) == condo_id:
                del self._condo_names[condo.condo_name]
            return True

    def remove_listing(self, listing_id: ListingId) -> bool:
        with self.lock:
            return self._listings.pop(listing_id, None) is not None
