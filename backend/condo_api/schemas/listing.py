"""Listing Schema: a sellable or rentable unit inside a condo.

Invariants:
    - condoId/typeId are foreign keys checked only at create/replace time
    - status is free-form; see core.domain_types.ListingStatus for known values
"""

from pydantic import StrictInt, StrictStr

from condo_api.schemas.base import CamelModel


class Listing(CamelModel):
    listing_id: StrictInt = 0
    condo_id: StrictInt = 0
    type_id: StrictStr = ""
    price: StrictInt = 0
    description: StrictStr = ""
    status: StrictStr = ""
