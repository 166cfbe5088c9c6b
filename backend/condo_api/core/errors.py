"""Error Hierarchy: typed exceptions for every request-level failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - message is the exact plain-text body returned to the client
    - Core operations raise these; only api/error_handlers.py turns them into responses

Design Decisions:
    - Single hierarchy with CondoApiError base: one FastAPI handler catches all
    - Messages are short fixed strings; detail goes to the log via to_log_extra()
"""

from enum import Enum

from condo_api.core.domain_types import CondoId, ListingId, TypeId


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHORIZATION = "authorization"
    INTERNAL = "internal"


class CondoApiError(Exception):
    """Base exception for all condo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        return {"error_code": self.code, "category": self.category.value}


# ─── Input Errors (400) ─────────────────────────────────────────

class InvalidPayloadError(CondoApiError):
    """Request body is not valid JSON or does not fit the expected shape."""
    def __init__(self, message: str = "Invalid request payload"):
        super().__init__(message, "INVALID_PAYLOAD", ErrorCategory.VALIDATION, 400)


class InvalidParameterError(CondoApiError):
    """Path segment missing, empty, or not an integer where one is expected."""
    def __init__(self, parameter: str, message: str):
        super().__init__(message, "INVALID_PARAMETER", ErrorCategory.VALIDATION, 400)
        self.parameter = parameter

    @classmethod
    def condo_id(cls) -> "InvalidParameterError":
        return cls("condoId", "Invalid Condo ID")

    @classmethod
    def listing_id(cls) -> "InvalidParameterError":
        return cls("listingId", "Invalid Listing ID")

    @classmethod
    def status(cls) -> "InvalidParameterError":
        return cls("status", "Invalid status parameter")

    @classmethod
    def type_id(cls) -> "InvalidParameterError":
        return cls("type", "Invalid type parameter")


# ─── Validation Rule Errors (400) ───────────────────────────────

class UnknownCondoError(CondoApiError):
    """Listing references a condo that does not exist."""
    def __init__(self, condo_id: CondoId):
        super().__init__(
            "Invalid Condo ID", "UNKNOWN_CONDO", ErrorCategory.BUSINESS_RULE, 400,
        )
        self.condo_id = condo_id


class UnknownTypeError(CondoApiError):
    """Listing references a room type its condo does not define."""
    def __init__(self, condo_id: CondoId, type_id: TypeId):
        super().__init__(
            "Invalid Type ID", "UNKNOWN_TYPE", ErrorCategory.BUSINESS_RULE, 400,
        )
        self.condo_id = condo_id
        self.type_id = type_id


class DuplicateListingError(CondoApiError):
    """A listing with the same listingId already exists."""
    def __init__(self, listing_id: ListingId):
        super().__init__(
            "Listing ID already exists", "DUPLICATE_LISTING", ErrorCategory.CONFLICT, 400,
        )
        self.listing_id = listing_id


class DuplicateCondoError(CondoApiError):
    """A condo with the same condoId or condoName already exists."""
    def __init__(self, condo_id: CondoId, condo_name: str):
        super().__init__(
            "Condo already exists", "DUPLICATE_CONDO", ErrorCategory.CONFLICT, 400,
        )
        self.condo_id = condo_id
        self.condo_name = condo_name


# ─── Lookup / Access Errors ─────────────────────────────────────

class NotFoundError(CondoApiError):
    """A query that requires results produced none."""
    def __init__(self, message: str):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )


class ForbiddenError(CondoApiError):
    """Missing or wrong X-API-Key on a gated route."""
    def __init__(self):
        super().__init__(
            "Forbidden", "FORBIDDEN", ErrorCategory.AUTHORIZATION, 403,
        )
