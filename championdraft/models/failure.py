"""
Failure Classification: Known Errors and Their Explanations.

Every error the draft core raises on purpose is a KnownError subclass.
The HTTP layer converts them to a FailureDetail body with the error's
status code; anything else is an unknown failure.

Error taxonomy:
- InputError: caller supplied values the algorithms cannot work with
- DecodeError: a draft token could not be parsed
- CatalogUnavailableError: the champion catalog could not be fetched

Shortfalls while drafting are NOT errors. They are reported as data
(ShortfallWarning) alongside the drafted champions.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    MALFORMED_TOKEN = "malformed_token"

    # Resource failures
    UNKNOWN_CHAMPION = "unknown_champion"

    # Service failures
    CATALOG_UNAVAILABLE = "catalog_unavailable"

    # Unknown
    UNKNOWN = "unknown"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InputError(KnownError):
    """
    Raised when inputs make a draft computation undefined.

    Examples: apportioning against a catalog with no tagged champions,
    a negative pool size, or a negative quota.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=message,
            detail=detail,
            suggestion="Check the pool size and category quotas.",
            status_code=400,
        )


class DecodeError(KnownError):
    """
    Raised when a draft token is malformed.

    Only the outer structure of a token can fail. Keys that do not
    resolve against the catalog are reported as missing slots instead.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            kind=FailureKind.MALFORMED_TOKEN,
            message="The draft link is invalid or damaged.",
            detail=reason,
            suggestion="Ask for a fresh draft link.",
            status_code=400,
        )


class CatalogUnavailableError(KnownError):
    """Raised when the champion catalog cannot be fetched or parsed."""

    def __init__(self, detail: str):
        super().__init__(
            kind=FailureKind.CATALOG_UNAVAILABLE,
            message="Champion data is currently unavailable.",
            detail=detail,
            suggestion="Try again in a few minutes.",
            status_code=503,
        )
