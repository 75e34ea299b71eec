"""
Failure classification for deck data errors.

Every failure raised while reading or resolving a deck list is a
KnownError: the system knows exactly which line or reference was at
fault, and the caller decides how to present it.

There is no partial success. A failed parse or resolve returns nothing.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"


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
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail for presentation."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class DeckDataError(KnownError):
    """
    Base exception for deck list failures.

    This is a HARD FAILURE - the whole read or resolve is rejected.
    """


class DeckSyntaxError(DeckDataError):
    """Raised when a line fails the entry grammar or the card reference grammar."""

    def __init__(self, text: str, reason: str = "Invalid syntax"):
        self.text = text
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"{reason}: {text}",
            detail=text,
            suggestion="Each card line must look like '4 Card Name (SET) 123'.",
        )


class UnrecognizedCardError(DeckDataError):
    """Raised when a syntactically valid card reference has no match in the catalog."""

    def __init__(self, entry: object):
        self.entry = entry
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Unrecognized Arena card: {entry}",
            detail=str(entry),
            suggestion="Check that card names match exactly. Re-export from Arena if needed.",
        )
