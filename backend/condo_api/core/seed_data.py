"""Seed Data: the fixed sample condos and listings loaded at startup.

Functions return fresh objects on every call so stores never share records.
"""

from condo_api.core.domain_types import ListingStatus
from condo_api.schemas.condo import Condo, TypeOfRoom
from condo_api.schemas.listing import Listing


def seed_condos() -> list[Condo]:
    return [
        Condo(
            condo_id=1,
            condo_name="Sunset Plaza",
            address="123 Sunshine Blvd",
            city="Sunnyville",
            facilities="Pool, Gym, Parking",
            description="A luxurious condo with all amenities.",
            types=[
                TypeOfRoom(type_id="SP1", type_name="1 Bedroom", description="One bedroom condo."),
                TypeOfRoom(type_id="SP2", type_name="2 Bedroom", description="Two bedroom condo."),
            ],
        ),
        Condo(
            condo_id=2,
            condo_name="Ocean Breeze",
            address="456 Ocean View",
            city="Beach City",
            facilities="Pool, Sauna, Parking",
            description="Condo with stunning ocean views.",
            types=[
                TypeOfRoom(
                    type_id="OB1-ov", type_name="1 Bedroom",
                    description="One bedroom condo with ocean view.",
                ),
                TypeOfRoom(
                    type_id="OB2-ov", type_name="2 Bedroom",
                    description="Two bedroom condo with ocean view.",
                ),
            ],
        ),
    ]


def seed_listings() -> list[Listing]:
    return [
        Listing(
            listing_id=1, condo_id=1, type_id="SP1", price=300000,
            description="Beautiful one bedroom condo in Sunset Plaza.",
            status=ListingStatus.FOR_SALE.value,
        ),
        Listing(
            listing_id=2, condo_id=1, type_id="SP2", price=450000,
            description="Spacious two bedroom condo in Sunset Plaza.",
            status=ListingStatus.FOR_RENT.value,
        ),
        Listing(
            listing_id=3, condo_id=2, type_id="OB1-ov", price=350000,
            description="Cozy one bedroom condo in Ocean Breeze.",
            status=ListingStatus.FOR_SALE.value,
        ),
        Listing(
            listing_id=4, condo_id=2, type_id="OB2-ov", price=500000,
            description="Luxurious two bedroom condo in Ocean Breeze.",
            status=ListingStatus.FOR_RENT.value,
        ),
    ]
