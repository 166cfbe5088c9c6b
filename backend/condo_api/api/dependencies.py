"""Request Dependencies: store access and the shared-secret request gate.

Invariants:
    - The store and settings live on app.state; one pair per create_app() call
    - require_api_key compares X-API-Key against settings.api_key in constant time
    - guard_mutations lets safe methods through and gates writes only when
      settings.protect_mutations is on
"""

import secrets

from fastapi import Header, Request

from condo_api.config import Settings
from condo_api.core.entity_store import EntityStore
from condo_api.core.errors import ForbiddenError

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_api_key(
    request: Request,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> None:
    """Reject the request with 403 unless X-API-Key matches the configured key."""
    expected = get_app_settings(request).api_key
    if x_api_key is None or not secrets.compare_digest(
        x_api_key.encode("utf-8"), expected.encode("utf-8"),
    ):
        raise ForbiddenError()


def guard_mutations(
    request: Request,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> None:
    if request.method in SAFE_METHODS:
        return
    if not get_app_settings(request).protect_mutations:
        return
    require_api_key(request, x_api_key)
