"""Condo Listings API: in-memory condo and listing CRUD service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
