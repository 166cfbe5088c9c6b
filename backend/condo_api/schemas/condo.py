"""Condo Schemas: a condo record and the room types it owns.

Invariants:
    - Condo.types keeps caller order; typeId is expected unique within it
    - facilities stays a single delimited string on the wire

Design Decisions:
    - Strict scalar types: "5" is not accepted where an integer is expected
    - Every field has a zero-value default, so partial payloads still decode
"""

from pydantic import Field, StrictInt, StrictStr

from condo_api.schemas.base import CamelModel


class TypeOfRoom(CamelModel):
    """Room-type definition scoped to one condo."""
    type_id: StrictStr = ""
    type_name: StrictStr = ""
    description: StrictStr = ""


class Condo(CamelModel):
    """Condo record as stored and returned by the API."""
    condo_id: StrictInt = 0
    condo_name: StrictStr = ""
    address: StrictStr = ""
    city: StrictStr = ""
    facilities: StrictStr = ""
    description: StrictStr = ""
    types: list[TypeOfRoom] = Field(default_factory=list)

    def has_type(self, type_id: str) -> bool:
        return any(t.type_id == type_id for t in self.types)

    def facility_list(self) -> list[str]:
        """Split the comma-delimited facilities string into trimmed names."""
        return [f.strip() for f in self.facilities.split(",") if f.strip()]
