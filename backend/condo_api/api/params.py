"""Request Parameters: integer path segments and JSON bodies.

Invariants:
    - An id segment is an optional sign followed by ASCII digits, within
      signed 64-bit range; anything else ("1.0", " 1", "1_0", "0x1") fails
      validation and surfaces as InvalidParameterError
    - Bodies are decoded as JSON whatever the Content-Type header says;
      undecodable or wrongly shaped input raises InvalidPayloadError
"""

import re
from typing import Annotated, TypeVar

from fastapi import Request
from pydantic import BaseModel, BeforeValidator, ValidationError

from condo_api.core.errors import InvalidPayloadError
from condo_api.schemas.condo import Condo
from condo_api.schemas.listing import Listing

_INT_SEGMENT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_int_segment(value: object) -> int:
    """Signed ASCII decimal only; int() alone would accept " 1" and "1_0"."""
    if not isinstance(value, str) or not _INT_SEGMENT.fullmatch(value):
        raise ValueError("path segment is not an integer")
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError("path segment is out of integer range")
    return number


IntSegment = Annotated[int, BeforeValidator(parse_int_segment)]


def decode_payload(model: type[ModelT], raw: bytes) -> ModelT:
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidPayloadError() from e


async def condo_payload(request: Request) -> Condo:
    return decode_payload(Condo, await request.body())


async def listing_payload(request: Request) -> Listing:
    return decode_payload(Listing, await request.body())


async def listing_replacement(listing_id: IntSegment, request: Request) -> Listing:
    """Body for PUT /listings/{listing_id}; a bad id is reported before a bad body."""
    return decode_payload(Listing, await request.body())
