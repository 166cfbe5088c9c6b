"""Schemas: pydantic models for condos, room types and listings.

Invariants:
    - Wire format is camelCase; Python attributes are snake_case
    - Missing fields decode to zero values, wrong JSON types are rejected
"""
